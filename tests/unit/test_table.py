"""Unit tests for the code table."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from b65536.codec.table import CODE_TABLE, FORWARD_BASES, PAD, build_code_table


class TestForwardTable:
    """Test the published table contents."""

    def test_size(self) -> None:
        assert len(FORWARD_BASES) == 256

    def test_endpoints(self) -> None:
        assert FORWARD_BASES[0] == 0x3400
        assert FORWARD_BASES[1] == 0x3500
        assert FORWARD_BASES[255] == 0x28500

    def test_skips_reserved_blocks(self) -> None:
        """Blocks 0x4D00, 0x9F00 and 0xA000 are not part of the table."""
        assert FORWARD_BASES[24] == 0x4C00
        assert FORWARD_BASES[25] == 0x4E00
        assert 0x4D00 not in FORWARD_BASES
        assert 0x9F00 not in FORWARD_BASES
        assert 0xA000 not in FORWARD_BASES

    def test_bases_are_aligned_and_distinct(self) -> None:
        assert all(base % 256 == 0 for base in FORWARD_BASES)
        assert len(set(FORWARD_BASES)) == 256

    def test_pad(self) -> None:
        assert PAD == 5376
        assert CODE_TABLE.pad == PAD
        assert PAD not in FORWARD_BASES


class TestReverseTable:
    """Test the derived reverse mapping."""

    def test_reverse_is_inverse(self) -> None:
        for byte, base in enumerate(CODE_TABLE.forward):
            assert CODE_TABLE.reverse[base] == byte
        assert len(CODE_TABLE.reverse) == 256

    def test_pad_not_in_reverse(self) -> None:
        assert PAD not in CODE_TABLE.reverse
        assert CODE_TABLE.lookup(PAD) is None
        assert CODE_TABLE.is_pad(PAD)

    def test_lookup_miss(self) -> None:
        assert CODE_TABLE.lookup(0) is None
        assert CODE_TABLE.lookup(0x4D00) is None

    def test_reverse_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CODE_TABLE.reverse[0] = 1  # type: ignore[index]


class TestTableImmutability:
    """Test that tables cannot be changed after construction."""

    def test_fields_frozen(self) -> None:
        with pytest.raises(ValidationError):
            CODE_TABLE.pad = 0x1600  # type: ignore[misc]

    def test_default_build_matches_shared_table(self) -> None:
        table = build_code_table()
        assert table.forward == CODE_TABLE.forward
        assert table.pad == CODE_TABLE.pad
        assert dict(table.reverse) == dict(CODE_TABLE.reverse)


class TestTableValidation:
    """Test that broken tables are rejected at construction."""

    def test_wrong_length(self) -> None:
        with pytest.raises(ValidationError, match="256 entries"):
            build_code_table(forward=FORWARD_BASES[:255])

    def test_duplicate_base(self) -> None:
        forward = (FORWARD_BASES[1],) + FORWARD_BASES[1:]
        with pytest.raises(ValidationError, match="duplicate"):
            build_code_table(forward=forward)

    def test_misaligned_base(self) -> None:
        forward = (0x3401,) + FORWARD_BASES[1:]
        with pytest.raises(ValidationError, match="multiple of 256"):
            build_code_table(forward=forward)

    def test_surrogate_block(self) -> None:
        forward = (0xD800,) + FORWARD_BASES[1:]
        with pytest.raises(ValidationError, match="surrogate"):
            build_code_table(forward=forward)

    @pytest.mark.parametrize("base", [0xFD00, 0xFF00, 0x1FF00])
    def test_noncharacter_block(self, base: int) -> None:
        forward = (base,) + FORWARD_BASES[1:]
        with pytest.raises(ValidationError, match="noncharacters"):
            build_code_table(forward=forward)

    def test_out_of_range_block(self) -> None:
        forward = (0x110000,) + FORWARD_BASES[1:]
        with pytest.raises(ValidationError, match="U\\+10FFFF"):
            build_code_table(forward=forward)

    def test_pad_collision(self) -> None:
        with pytest.raises(ValidationError, match="collides"):
            build_code_table(pad=FORWARD_BASES[7])

    def test_alternate_table_accepted(self) -> None:
        table = build_code_table(forward=tuple(reversed(FORWARD_BASES)), pad=0x1600)
        assert table.reverse[0x28500] == 0
        assert table.pad == 0x1600
