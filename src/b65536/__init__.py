"""b65536: Base65536 binary-to-text encoding

A Python implementation of Base65536, which packs two bytes into each Unicode
code point. The output is denser than base64 wherever text length is counted
in characters (tweets, JSON string fields, chat messages).

Compatible with: https://github.com/qntm/base65536

Key Features:
- Bit-exact code table, interoperable with other Base65536 implementations
- Strict decoding: every code point is validated
- Buffer-bounded variants that never partially write
- Stateless, thread-safe shared encoder and decoder

Quick Start:
    >>> from b65536 import encode, decode
    >>>
    >>> text = encode(b"hello world")
    >>> text
    '驨ꍬ啯𒁷ꍲᕤ'
    >>> decode(text)
    b'hello world'

For more information, see: https://github.com/qntm/base65536
"""

from __future__ import annotations

from .codec import CODE_TABLE, PAD, CodeTable, Decoder, Encoder, build_code_table
from .exceptions import B65536Error, CapacityError, ErrorKind, InvalidEncodingError
from .utils import encoded_length, encoded_size

__version__ = "0.1.0"

_ENCODER = Encoder(CODE_TABLE)
_DECODER = Decoder(CODE_TABLE)


def get_encoder() -> Encoder:
    """Return the shared Encoder instance."""
    return _ENCODER


def get_decoder() -> Decoder:
    """Return the shared Decoder instance."""
    return _DECODER


def encode(src: bytes | bytearray | memoryview) -> str:
    """Encode bytes to Base65536 text using the shared encoder."""
    return _ENCODER.encode(src)


def encode_to_bytes(src: bytes | bytearray | memoryview) -> bytes:
    """Encode bytes to UTF-8 Base65536 text using the shared encoder."""
    return _ENCODER.encode_to_bytes(src)


def encode_into(src: bytes | bytearray | memoryview, dst: bytearray | memoryview) -> int:
    """Encode bytes into ``dst`` using the shared encoder."""
    return _ENCODER.encode_into(src, dst)


def decode(src: str | bytes | bytearray | memoryview) -> bytes:
    """Decode Base65536 text using the shared decoder."""
    return _DECODER.decode(src)


def decode_into(src: str | bytes | bytearray | memoryview, dst: bytearray | memoryview) -> int:
    """Decode Base65536 text into ``dst`` using the shared decoder."""
    return _DECODER.decode_into(src, dst)


def decoded_length(src: str | bytes | bytearray | memoryview) -> int:
    """Return the decoded size of Base65536 text using the shared decoder."""
    return _DECODER.decoded_length(src)


__all__ = [
    # Core API
    "encode",
    "encode_to_bytes",
    "encode_into",
    "decode",
    "decode_into",
    "decoded_length",
    "get_encoder",
    "get_decoder",
    # Codec
    "Encoder",
    "Decoder",
    "CodeTable",
    "build_code_table",
    "CODE_TABLE",
    "PAD",
    # Exceptions
    "B65536Error",
    "CapacityError",
    "InvalidEncodingError",
    "ErrorKind",
    # Sizing
    "encoded_length",
    "encoded_size",
    # Version
    "__version__",
]
