"""Exception hierarchy for b65536.

All exceptions inherit from B65536Error. Each concrete error also carries a
``kind`` tag, so callers can branch on ``err.kind`` instead of on the class.
"""

from __future__ import annotations

import enum
from typing import ClassVar


class ErrorKind(enum.Enum):
    """The two ways a Base65536 operation can fail."""

    CAPACITY = "capacity"
    INVALID_ENCODING = "invalid_encoding"


class B65536Error(Exception):
    """Base exception for all b65536 errors."""

    kind: ClassVar[ErrorKind]


class CapacityError(B65536Error):
    """Raised when a destination buffer is smaller than the result.

    Nothing is written to the destination when this is raised.

    Attributes:
        required: Number of bytes the operation needs to write
        actual: Capacity of the buffer that was supplied
    """

    kind = ErrorKind.CAPACITY

    def __init__(self, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"Expected buffer length was {required} or more, but actually {actual}."
        )


class InvalidEncodingError(B65536Error):
    """Raised when input text could not have been produced by the encoder.

    Examples:
        - A code point whose block is not in the code table
        - The padding block appearing before the final position
        - Byte input that is not valid UTF-8

    Attributes:
        position: Index of the offending code point, or None for whole-input errors
        code_point: The offending code point, or None for whole-input errors
    """

    kind = ErrorKind.INVALID_ENCODING

    def __init__(
        self,
        message: str | None = None,
        *,
        position: int | None = None,
        code_point: int | None = None,
    ) -> None:
        self.position = position
        self.code_point = code_point
        if message is None:
            message = f"Unknown code point at {position}: {code_point}"
        super().__init__(message)
