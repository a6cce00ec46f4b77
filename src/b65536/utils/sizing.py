"""Encoded and decoded size calculation.

This module provides functions to calculate Base65536 output sizes without
building the output.
"""

from __future__ import annotations

from ..codec.table import CODE_TABLE

_BMP_LIMIT = 0x10000


def encoded_length(num_bytes: int) -> int:
    """Calculate the number of code points needed to encode ``num_bytes`` bytes.

    Args:
        num_bytes: Input size in bytes

    Returns:
        Number of code points (two bytes per code point, rounded up)

    Raises:
        ValueError: If num_bytes is negative

    Example:
        >>> encoded_length(11)
        6
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
    return (num_bytes + 1) // 2


def encoded_size(src: bytes | bytearray | memoryview) -> int:
    """Calculate the UTF-8 size in bytes of the Base65536 encoding of ``src``.

    Code points below U+10000 take three UTF-8 bytes, the rest take four.
    The padding block is always in the BMP.

    Args:
        src: Bytes-like object that would be encoded

    Returns:
        Size of ``encode_to_bytes(src)`` in bytes
    """
    data = bytes(src)
    forward = CODE_TABLE.forward

    size = 0
    for i in range(1, len(data), 2):
        size += 3 if forward[data[i]] < _BMP_LIMIT else 4
    if len(data) % 2:
        size += 3
    return size


def decoded_length(src: str | bytes | bytearray | memoryview) -> int:
    """Calculate the decoded size in bytes of Base65536 text.

    Args:
        src: Base65536 text, or its UTF-8 bytes

    Returns:
        Number of bytes the text decodes to

    Raises:
        InvalidEncodingError: If the final code point is not valid Base65536
    """
    # Import here to avoid circular dependency
    from .. import get_decoder

    return get_decoder().decoded_length(src)
