from __future__ import annotations

from typing import Final, Iterable

BRAILLE_RANGE_START: Final[int] = 0x2800
BRAILLE_RANGE_END: Final[int] = 0x28FF

# Standard braille numbering:
#  1 4
#  2 5
#  3 6
#  7 8
dot_bit_mapping: Final[dict[int, int]] = {
    1: 1 << 0,  # ⠁
    2: 1 << 1,  # ⠂
    3: 1 << 2,  # ⠄
    4: 1 << 3,  # ⠈
    5: 1 << 4,  # ⠐
    6: 1 << 5,  # ⠠
    7: 1 << 6,  # ⡀
    8: 1 << 7,  # ⢀
}

braille_table_str: Final[str] = "".join(
    chr(BRAILLE_RANGE_START + i) for i in range(BRAILLE_RANGE_END - BRAILLE_RANGE_START + 1)
)

BLANK_CELL: Final[str] = braille_table_str[0]


def dots_to_mask(dots: Iterable[int]) -> int:
    """Return the 8-bit mask for the given dot numbers.

    Bits are OR-ed together, so the order of the dots and any repeats don't
    change the result.

    Raises:
        ValueError: If a dot number is outside of 1..8.
    """
    mask = 0
    for dot in dots:
        try:
            mask |= dot_bit_mapping[dot]
        except KeyError:
            raise ValueError(f"Invalid dot number {dot!r}, must be in 1..8") from None
    return mask


def dots_to_braille(dots: Iterable[int]) -> str:
    """Return the Unicode braille character with the given dots raised.

    Examples:
        >>> dots_to_braille({1, 2})
        '⠃'

        >>> dots_to_braille([])
        '⠀'
    """
    return braille_table_str[dots_to_mask(dots)]


def braille_to_dots(char: str) -> frozenset[int]:
    """Return the dot numbers raised in a Unicode braille character.

    Examples:
        >>> sorted(braille_to_dots("⠓"))
        [1, 2, 5]
    """
    if len(char) != 1 or not BRAILLE_RANGE_START <= ord(char) <= BRAILLE_RANGE_END:
        raise ValueError(f"Not a braille pattern character: {char!r}")

    mask = ord(char) - BRAILLE_RANGE_START
    return frozenset(dot for dot, bit in dot_bit_mapping.items() if mask & bit)
