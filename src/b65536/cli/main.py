"""Main CLI entry point for b65536."""

from __future__ import annotations

import argparse
import base64
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .. import __version__, get_decoder, get_encoder
from ..exceptions import B65536Error
from ..utils import encoded_length, encoded_size
from .config import CliConfig

logger = logging.getLogger(__name__)


def setup_logging(level: int) -> None:
    """Configure logging for the command-line tool.

    Args:
        level: Numeric logging level
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _optional_path(value: Optional[str]) -> Optional[Path]:
    if value is None or value == "-":
        return None
    return Path(value)


def _read_input(path: Optional[Path]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def _write_output(path: Optional[Path], data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    path.write_bytes(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b65536",
        description="b65536: Base65536 binary-to-text encoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  b65536 encode photo.jpg -o photo.txt   Encode a file
  b65536 decode photo.txt -o photo.jpg   Decode a file
  echo -n hello | b65536 encode          Encode stdin
  b65536 info photo.jpg                  Compare encoded sizes

For more information, see: https://github.com/qntm/base65536
        """,
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"b65536 {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("encode", "Encode binary input to Base65536 text"),
        ("decode", "Decode Base65536 text to binary output"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", nargs="?", metavar="FILE", help="Input file (default: stdin)")
        sub.add_argument("-o", "--output", metavar="FILE", help="Output file (default: stdout)")

    info = subparsers.add_parser("info", help="Show encoded sizes for binary input")
    info.add_argument("input", nargs="?", metavar="FILE", help="Input file (default: stdin)")

    return parser


def run(config: CliConfig) -> int:
    """Execute a command described by ``config``.

    Returns:
        Exit code (0 for success)
    """
    data = _read_input(config.input_path)
    logger.info("%s: read %d bytes", config.command, len(data))

    if config.command == "encode":
        _write_output(config.output_path, get_encoder().encode_to_bytes(data))
    elif config.command == "decode":
        _write_output(config.output_path, get_decoder().decode(data))
    else:
        b64_size = len(base64.b64encode(data))
        print(f"Input size:        {len(data)} bytes")
        print(f"Base65536 length:  {encoded_length(len(data))} characters")
        print(f"Base65536 UTF-8:   {encoded_size(data)} bytes")
        print(f"Base64 length:     {b64_size} characters")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the b65536 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = CliConfig(
            command=args.command,
            input_path=_optional_path(args.input),
            output_path=_optional_path(getattr(args, "output", None)),
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.numeric_log_level)

    try:
        return run(config)
    except (B65536Error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
