"""Base65536 decoder.

This module provides the Decoder class that converts Base65536 text back to
bytes, validating every code point against the code table.
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import CapacityError, InvalidEncodingError
from .table import CODE_TABLE, CodeTable

logger = logging.getLogger(__name__)

_LOW_BYTE_MASK = 0xFF


class Decoder:
    """Decodes Base65536 text to bytes.

    Decoders hold no per-call state and are safe to share between threads.
    Use ``b65536.get_decoder()`` to obtain the shared instance.

    Example:
        >>> decoder = Decoder()
        >>> decoder.decode("驨ꍬ啯𒁷ꍲᕤ")
        b'hello world'
    """

    def __init__(self, table: CodeTable = CODE_TABLE) -> None:
        self._table = table

    @property
    def table(self) -> CodeTable:
        return self._table

    def decoded_length(self, src: str | bytes | bytearray | memoryview) -> int:
        """Calculate the decoded size in bytes without decoding.

        Only the final code point is inspected: a padded final unit carries
        one byte, every other unit carries two.

        Args:
            src: Base65536 text, or its UTF-8 bytes

        Returns:
            Number of bytes ``decode(src)`` would produce

        Raises:
            InvalidEncodingError: If the input is not UTF-8 or its final
                code point is not in the code table
        """
        return self._decoded_length(self._as_text(src))

    def decode(self, src: str | bytes | bytearray | memoryview) -> bytes:
        """Decode Base65536 text to bytes.

        Args:
            src: Base65536 text, or its UTF-8 bytes

        Returns:
            Decoded bytes (empty for empty input)

        Raises:
            InvalidEncodingError: If the input is not valid Base65536
        """
        return self._decode_text(self._as_text(src))

    def decode_into(
        self, src: str | bytes | bytearray | memoryview, dst: bytearray | memoryview
    ) -> int:
        """Decode Base65536 text and write the bytes into ``dst`` from offset 0.

        The required size is checked before decoding. Nothing is written to
        ``dst`` unless the whole input decodes successfully.

        Args:
            src: Base65536 text, or its UTF-8 bytes
            dst: Writable buffer receiving the decoded bytes

        Returns:
            Number of bytes written to ``dst``

        Raises:
            CapacityError: If ``dst`` cannot hold the decoded result
            InvalidEncodingError: If the input is not valid Base65536
        """
        text = self._as_text(src)
        required = self._decoded_length(text)
        if len(dst) < required:
            logger.debug("decode_into: need %d bytes, buffer has %d", required, len(dst))
            raise CapacityError(required, len(dst))

        result = self._decode_text(text)
        dst[:required] = result
        return required

    def wrap(self, stream: Any) -> Any:
        """Wrap an input stream for incremental decoding.

        Not yet implemented.

        Raises:
            NotImplementedError: Always
        """
        raise NotImplementedError("Stream decoding is not yet implemented")

    @staticmethod
    def _as_text(src: str | bytes | bytearray | memoryview) -> str:
        if isinstance(src, str):
            return src
        try:
            return bytes(src).decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug("Rejected non-UTF-8 input: %s", e)
            raise InvalidEncodingError(f"Input is not valid UTF-8: {e}") from e

    def _decoded_length(self, text: str) -> int:
        if not text:
            return 0

        last = len(text) - 1
        code_point = ord(text[last])
        block = code_point - (code_point & _LOW_BYTE_MASK)

        if self._table.is_pad(block):
            return len(text) * 2 - 1
        if self._table.lookup(block) is None:
            logger.debug("Rejected final code point %#x at %d", code_point, last)
            raise InvalidEncodingError(position=last, code_point=code_point)
        return len(text) * 2

    def _decode_text(self, text: str) -> bytes:
        buffer = bytearray(self._decoded_length(text))
        last = len(text) - 1
        reverse = self._table.reverse

        for index, char in enumerate(text):
            code_point = ord(char)
            most_byte = code_point & _LOW_BYTE_MASK
            block = code_point - most_byte

            if self._table.is_pad(block):
                if index != last:
                    logger.debug("Rejected padding at %d of %d", index, len(text))
                    raise InvalidEncodingError(
                        f"Base65536 sequence continued after final byte at {index}",
                        position=index,
                        code_point=code_point,
                    )
                buffer[index * 2] = most_byte
                continue

            least_byte = reverse.get(block)
            if least_byte is None:
                logger.debug("Rejected code point %#x at %d", code_point, index)
                raise InvalidEncodingError(position=index, code_point=code_point)

            buffer[index * 2] = most_byte
            buffer[index * 2 + 1] = least_byte

        return bytes(buffer)
