"""Configuration for the b65536 command-line tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

COMMANDS = ("encode", "decode", "info")


@dataclass
class CliConfig:
    """Settings collected from the command line.

    Attributes:
        command: One of ``encode``, ``decode`` or ``info``
        input_path: File to read, or None for stdin
        output_path: File to write, or None for stdout
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    command: str
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.command not in COMMANDS:
            raise ValueError(f"command must be one of {', '.join(COMMANDS)}, got {self.command}")

        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Invalid log level: {self.log_level}")

        if self.command == "info" and self.output_path is not None:
            raise ValueError("info does not write an output file")

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
