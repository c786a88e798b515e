"""
Byte <-> variation selector mapping.

Every byte value has exactly one variation selector codepoint. Bytes 0-15
map onto the standard selectors VS1-VS16 (U+FE00..U+FE0F) and bytes 16-255
map onto the supplementary selectors VS17-VS256 (U+E0100..U+E01EF).
"""

from typing import Union

RANGE_A_START = 0xFE00
RANGE_A_END = 0xFE0F
RANGE_B_START = 0xE0100
RANGE_B_END = 0xE01EF
RANGE_B_OFFSET = 16


class NotAVariationSelector(ValueError):
    """Raised when a codepoint lies outside both selector ranges."""

    def __init__(self, codepoint: int):
        self.codepoint = codepoint
        super().__init__(f"U+{codepoint:04X} is not a variation selector")


def _codepoint(ch: Union[str, int]) -> int:
    if isinstance(ch, int):
        return ch
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)}")
    return ord(ch)


def byte_to_selector(b: int) -> str:
    """Map a byte value to its variation selector.

    Args:
        b: Integer in 0..255

    Returns:
        A one-character string holding the selector codepoint
    """
    if not 0 <= b <= 0xFF:
        raise ValueError(f"byte value out of range: {b}")
    if b < RANGE_B_OFFSET:
        return chr(RANGE_A_START + b)
    return chr(RANGE_B_START + (b - RANGE_B_OFFSET))


def selector_to_byte(ch: Union[str, int]) -> int:
    """Map a variation selector back to the byte it encodes.

    Args:
        ch: A one-character string or an integer codepoint

    Returns:
        The byte value in 0..255

    Raises:
        NotAVariationSelector: If ``ch`` is outside both selector ranges
    """
    cp = _codepoint(ch)
    if RANGE_A_START <= cp <= RANGE_A_END:
        return cp - RANGE_A_START
    if RANGE_B_START <= cp <= RANGE_B_END:
        return cp - RANGE_B_START + RANGE_B_OFFSET
    raise NotAVariationSelector(cp)
