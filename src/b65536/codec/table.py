"""The Base65536 code table.

Each byte value 0-255 maps to a 256-aligned block of Unicode code points.
A pair of input bytes ``(most, least)`` is encoded as ``forward[least] + most``.
An odd trailing byte is encoded as ``PAD + most``.

The table is a fixed external contract shared with every other Base65536
implementation and must not be edited.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

PAD = 0x1500

BLOCK_SIZE = 256
MAX_CODE_POINT = 0x10FFFF

# fmt: off
FORWARD_BASES: tuple[int, ...] = (
    0x3400, 0x3500, 0x3600, 0x3700, 0x3800, 0x3900, 0x3A00, 0x3B00,
    0x3C00, 0x3D00, 0x3E00, 0x3F00, 0x4000, 0x4100, 0x4200, 0x4300,
    0x4400, 0x4500, 0x4600, 0x4700, 0x4800, 0x4900, 0x4A00, 0x4B00,
    0x4C00, 0x4E00, 0x4F00, 0x5000, 0x5100, 0x5200, 0x5300, 0x5400,
    0x5500, 0x5600, 0x5700, 0x5800, 0x5900, 0x5A00, 0x5B00, 0x5C00,
    0x5D00, 0x5E00, 0x5F00, 0x6000, 0x6100, 0x6200, 0x6300, 0x6400,
    0x6500, 0x6600, 0x6700, 0x6800, 0x6900, 0x6A00, 0x6B00, 0x6C00,
    0x6D00, 0x6E00, 0x6F00, 0x7000, 0x7100, 0x7200, 0x7300, 0x7400,
    0x7500, 0x7600, 0x7700, 0x7800, 0x7900, 0x7A00, 0x7B00, 0x7C00,
    0x7D00, 0x7E00, 0x7F00, 0x8000, 0x8100, 0x8200, 0x8300, 0x8400,
    0x8500, 0x8600, 0x8700, 0x8800, 0x8900, 0x8A00, 0x8B00, 0x8C00,
    0x8D00, 0x8E00, 0x8F00, 0x9000, 0x9100, 0x9200, 0x9300, 0x9400,
    0x9500, 0x9600, 0x9700, 0x9800, 0x9900, 0x9A00, 0x9B00, 0x9C00,
    0x9D00, 0x9E00, 0xA100, 0xA200, 0xA300, 0xA500, 0x10600, 0x12000,
    0x12100, 0x12200, 0x13000, 0x13100, 0x13200, 0x13300, 0x14400, 0x14500,
    0x16800, 0x16900, 0x20000, 0x20100, 0x20200, 0x20300, 0x20400, 0x20500,
    0x20600, 0x20700, 0x20800, 0x20900, 0x20A00, 0x20B00, 0x20C00, 0x20D00,
    0x20E00, 0x20F00, 0x21000, 0x21100, 0x21200, 0x21300, 0x21400, 0x21500,
    0x21600, 0x21700, 0x21800, 0x21900, 0x21A00, 0x21B00, 0x21C00, 0x21D00,
    0x21E00, 0x21F00, 0x22000, 0x22100, 0x22200, 0x22300, 0x22400, 0x22500,
    0x22600, 0x22700, 0x22800, 0x22900, 0x22A00, 0x22B00, 0x22C00, 0x22D00,
    0x22E00, 0x22F00, 0x23000, 0x23100, 0x23200, 0x23300, 0x23400, 0x23500,
    0x23600, 0x23700, 0x23800, 0x23900, 0x23A00, 0x23B00, 0x23C00, 0x23D00,
    0x23E00, 0x23F00, 0x24000, 0x24100, 0x24200, 0x24300, 0x24400, 0x24500,
    0x24600, 0x24700, 0x24800, 0x24900, 0x24A00, 0x24B00, 0x24C00, 0x24D00,
    0x24E00, 0x24F00, 0x25000, 0x25100, 0x25200, 0x25300, 0x25400, 0x25500,
    0x25600, 0x25700, 0x25800, 0x25900, 0x25A00, 0x25B00, 0x25C00, 0x25D00,
    0x25E00, 0x25F00, 0x26000, 0x26100, 0x26200, 0x26300, 0x26400, 0x26500,
    0x26600, 0x26700, 0x26800, 0x26900, 0x26A00, 0x26B00, 0x26C00, 0x26D00,
    0x26E00, 0x26F00, 0x27000, 0x27100, 0x27200, 0x27300, 0x27400, 0x27500,
    0x27600, 0x27700, 0x27800, 0x27900, 0x27A00, 0x27B00, 0x27C00, 0x27D00,
    0x27E00, 0x27F00, 0x28000, 0x28100, 0x28200, 0x28300, 0x28400, 0x28500,
)
# fmt: on


def _check_block(base: int) -> int:
    """Validate that ``base..base+255`` is a usable block of scalar values.

    Raises:
        ValueError: If the block is misaligned, out of range, or overlaps
            surrogates or noncharacters
    """
    if base < 0 or base % BLOCK_SIZE != 0:
        raise ValueError(f"Block base {base:#x} is not a non-negative multiple of {BLOCK_SIZE}")
    if base + BLOCK_SIZE - 1 > MAX_CODE_POINT:
        raise ValueError(f"Block {base:#x} extends past U+10FFFF")
    if 0xD800 <= base <= 0xDF00:
        raise ValueError(f"Block {base:#x} overlaps the surrogate range")
    # U+FDD0..U+FDEF and U+nFFFE/U+nFFFF
    if base == 0xFD00 or (base & 0xFFFF) == 0xFF00:
        raise ValueError(f"Block {base:#x} contains noncharacters")
    return base


class CodeTable(BaseModel):
    """Immutable bijection between byte values and code point blocks.

    Construction validates every invariant of the table; a table that fails
    validation raises ``pydantic.ValidationError`` and is never usable.

    Attributes:
        forward: 256 block bases indexed by byte value
        pad: Block base marking a lone trailing byte
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    forward: tuple[int, ...]
    pad: int = PAD

    _reverse: Mapping[int, int] = PrivateAttr(default_factory=dict)

    @field_validator("forward")
    @classmethod
    def _validate_forward(cls, forward: tuple[int, ...]) -> tuple[int, ...]:
        if len(forward) != BLOCK_SIZE:
            raise ValueError(f"forward must have {BLOCK_SIZE} entries, got {len(forward)}")
        for base in forward:
            _check_block(base)
        if len(set(forward)) != len(forward):
            raise ValueError("forward contains duplicate block bases")
        return forward

    @field_validator("pad")
    @classmethod
    def _validate_pad(cls, pad: int) -> int:
        return _check_block(pad)

    @model_validator(mode="after")
    def _validate_pad_distinct(self) -> CodeTable:
        if self.pad in self.forward:
            raise ValueError(f"pad {self.pad:#x} collides with a forward block")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._reverse = MappingProxyType({base: byte for byte, base in enumerate(self.forward)})

    @property
    def reverse(self) -> Mapping[int, int]:
        """Read-only mapping from block base to byte value (pad excluded)."""
        return self._reverse

    def lookup(self, block: int) -> int | None:
        """Return the byte value for a block base, or None if unknown."""
        return self._reverse.get(block)

    def is_pad(self, block: int) -> bool:
        return block == self.pad


def build_code_table(forward: tuple[int, ...] = FORWARD_BASES, pad: int = PAD) -> CodeTable:
    """Build and validate a code table.

    Args:
        forward: Block bases indexed by byte value
        pad: Padding block base

    Returns:
        Validated, immutable CodeTable

    Raises:
        pydantic.ValidationError: If the table breaks any invariant
    """
    return CodeTable(forward=forward, pad=pad)


CODE_TABLE = build_code_table()
