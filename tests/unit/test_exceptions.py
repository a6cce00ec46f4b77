"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from b65536 import B65536Error, CapacityError, ErrorKind, InvalidEncodingError, decode, decode_into


def test_error_kinds() -> None:
    assert {kind.value for kind in ErrorKind} == {"capacity", "invalid_encoding"}
    assert CapacityError.kind is ErrorKind.CAPACITY
    assert InvalidEncodingError.kind is ErrorKind.INVALID_ENCODING


def test_common_base() -> None:
    assert issubclass(CapacityError, B65536Error)
    assert issubclass(InvalidEncodingError, B65536Error)


def test_default_message() -> None:
    err = InvalidEncodingError(position=3, code_point=0x41)
    assert str(err) == "Unknown code point at 3: 65"


def test_custom_message() -> None:
    err = InvalidEncodingError("bad padding", position=0, code_point=0x1500)
    assert str(err) == "bad padding"
    assert err.code_point == 0x1500


@pytest.mark.parametrize(
    ("call", "expected_kind"),
    [
        (lambda: decode("A"), ErrorKind.INVALID_ENCODING),
        (lambda: decode_into("\u3500", bytearray(1)), ErrorKind.CAPACITY),
    ],
)
def test_dispatch_on_kind(call, expected_kind: ErrorKind) -> None:
    """Callers can branch on err.kind without matching subclasses."""
    with pytest.raises(B65536Error) as excinfo:
        call()
    assert excinfo.value.kind is expected_kind
