"""Base65536 encoder.

This module provides the Encoder class that converts arbitrary bytes into
Base65536 text, two input bytes per code point.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import CapacityError
from .table import CODE_TABLE, CodeTable

logger = logging.getLogger(__name__)


class Encoder:
    """Encodes bytes using the Base65536 scheme.

    Encoders hold no per-call state and are safe to share between threads.
    Use ``b65536.get_encoder()`` to obtain the shared instance.

    Example:
        >>> encoder = Encoder()
        >>> encoder.encode(b"hello world")
        '驨ꍬ啯𒁷ꍲᕤ'
    """

    def __init__(self, table: CodeTable = CODE_TABLE) -> None:
        self._table = table

    @property
    def table(self) -> CodeTable:
        return self._table

    def encode(self, src: bytes | bytearray | memoryview) -> str:
        """Encode bytes to a Base65536 string.

        Each pair ``(most, least)`` becomes ``forward[least] + most``. A lone
        trailing byte becomes ``pad + most``.

        Args:
            src: Bytes-like object to encode

        Returns:
            Encoded text (empty for empty input)
        """
        data = bytes(src)
        forward = self._table.forward
        length = len(data)

        code_points = [forward[data[i + 1]] + data[i] for i in range(0, length - 1, 2)]
        if length % 2:
            code_points.append(self._table.pad + data[-1])

        return "".join(map(chr, code_points))

    def encode_to_bytes(self, src: bytes | bytearray | memoryview) -> bytes:
        """Encode bytes to Base65536 text in UTF-8 form.

        Args:
            src: Bytes-like object to encode

        Returns:
            UTF-8 bytes of the encoded text
        """
        return self.encode(src).encode("utf-8")

    def encode_into(self, src: bytes | bytearray | memoryview, dst: bytearray | memoryview) -> int:
        """Encode bytes and write the UTF-8 result into ``dst`` from offset 0.

        The full result is computed before anything is written. If ``dst`` is
        too small, nothing is written.

        Args:
            src: Bytes-like object to encode
            dst: Writable buffer receiving the UTF-8 text

        Returns:
            Number of bytes written to ``dst``

        Raises:
            CapacityError: If ``dst`` cannot hold the encoded result
        """
        result = self.encode_to_bytes(src)
        if len(dst) < len(result):
            logger.debug("encode_into: need %d bytes, buffer has %d", len(result), len(dst))
            raise CapacityError(len(result), len(dst))

        dst[: len(result)] = result
        return len(result)

    def wrap(self, stream: Any) -> Any:
        """Wrap an output stream for incremental encoding.

        Not yet implemented.

        Raises:
            NotImplementedError: Always
        """
        raise NotImplementedError("Stream encoding is not yet implemented")
