"""Base65536 codec.

This module provides the code table and the encoder/decoder that pack two
bytes into each Unicode code point.
"""

from __future__ import annotations

from .decoder import Decoder
from .encoder import Encoder
from .table import CODE_TABLE, FORWARD_BASES, PAD, CodeTable, build_code_table

__all__ = [
    "Encoder",
    "Decoder",
    "CodeTable",
    "build_code_table",
    "CODE_TABLE",
    "FORWARD_BASES",
    "PAD",
]
