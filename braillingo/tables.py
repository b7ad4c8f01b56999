"""Per-script lookup tables from a single character to its raised dots.

All tables are read-only views, built once at import time.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

CAPITAL_INDICATOR: Final[frozenset[int]] = frozenset({6})
NUMBER_INDICATOR: Final[frozenset[int]] = frozenset({3, 4, 5, 6})
UNRECOGNIZED_DOTS: Final[frozenset[int]] = frozenset({2, 6})


def _freeze(table: dict[str, tuple[int, ...]]) -> Mapping[str, frozenset[int]]:
    return MappingProxyType({char: frozenset(dots) for char, dots in table.items()})


_korean = {
    # Consonants
    "ㄱ": (1, 4),
    "ㄴ": (1, 4, 5),
    "ㄷ": (2, 4),
    "ㄹ": (5,),
    "ㅁ": (1, 5),
    "ㅂ": (1, 2),
    "ㅅ": (6,),
    "ㅇ": (1, 2, 4, 5, 6),
    "ㅈ": (4,),
    "ㅊ": (5, 6),
    "ㅋ": (1, 2, 5),
    "ㅌ": (1, 2, 5, 6),
    "ㅍ": (1, 4, 5, 6),
    "ㅎ": (2, 5, 6),
    # Vowels
    "ㅏ": (1, 2, 6),
    "ㅑ": (3, 4, 5),
    "ㅓ": (2, 3, 4),
    "ㅕ": (1, 3, 6),
    "ㅗ": (1, 3, 6),
    "ㅛ": (3, 4, 6),
    "ㅜ": (1, 3, 4),
    "ㅠ": (1, 3, 4, 6),
    "ㅡ": (2, 4, 6),
    "ㅣ": (1, 3, 5),
    # A few precomposed syllables; there's no jamo decomposition
    "안": (1, 2, 4, 5, 6),
    "녕": (1, 4, 5, 1, 2, 6),
    "하": (2, 5, 6, 1, 2, 6),
    "세": (6, 2, 3, 4),
    "요": (3, 4, 6),
}

_english_letters = {
    "a": (1,),
    "b": (1, 2),
    "c": (1, 4),
    "d": (1, 4, 5),
    "e": (1, 5),
    "f": (1, 2, 4),
    "g": (1, 2, 4, 5),
    "h": (1, 2, 5),
    "i": (2, 4),
    "j": (2, 4, 5),
    "k": (1, 3),
    "l": (1, 2, 3),
    "m": (1, 3, 4),
    "n": (1, 3, 4, 5),
    "o": (1, 3, 5),
    "p": (1, 2, 3, 4),
    "q": (1, 2, 3, 4, 5),
    "r": (1, 2, 3, 5),
    "s": (2, 3, 4),
    "t": (2, 3, 4, 5),
    "u": (1, 3, 6),
    "v": (1, 2, 3, 6),
    "w": (2, 4, 5, 6),
    "x": (1, 3, 4, 6),
    "y": (1, 3, 4, 5, 6),
    "z": (1, 3, 5, 6),
}

# Digits reuse the shapes of a..j, "1" being "a" and "0" being "j"
_digit_letters = dict(zip("1234567890", "abcdefghij"))

_japanese = {
    # Hiragana
    "あ": (1,),
    "い": (1, 2),
    "う": (1, 4),
    "え": (1, 2, 4),
    "お": (2, 4),
    "か": (1, 6),
    "き": (1, 2, 6),
    "く": (1, 4, 6),
    "け": (1, 2, 4, 6),
    "こ": (2, 4, 6),
    "さ": (1, 5, 6),
    "し": (1, 2, 5, 6),
    "す": (1, 4, 5, 6),
    "せ": (1, 2, 4, 5, 6),
    "そ": (2, 4, 5, 6),
    "た": (1, 3, 6),
    "ち": (1, 2, 3, 6),
    "つ": (1, 3, 4, 6),
    "て": (1, 2, 3, 4, 6),
    "と": (2, 3, 4, 6),
    "な": (1, 3, 5, 6),
    "に": (1, 2, 3, 5, 6),
    "ぬ": (1, 3, 4, 5, 6),
    "ね": (1, 2, 3, 4, 5, 6),
    "の": (2, 3, 4, 5, 6),
    "は": (1, 3),
    "ひ": (1, 2, 3),
    "ふ": (1, 3, 4),
    "へ": (1, 2, 3, 4),
    "ほ": (2, 3, 4),
    "ま": (1, 3, 5),
    "み": (1, 2, 3, 5),
    "む": (1, 3, 4, 5),
    "め": (1, 2, 3, 4, 5),
    "も": (2, 3, 4, 5),
    "や": (3, 4),
    "ゆ": (3, 4, 6),
    "よ": (3, 4, 5),
    "ら": (1, 5),
    "り": (1, 2, 5),
    "る": (1, 4, 5),
    "れ": (1, 2, 4, 5),
    "ろ": (2, 4, 5),
    "わ": (3,),
    "ん": (3, 5, 6),
    # Katakana
    "ア": (1,),
    "イ": (1, 2),
    "ウ": (1, 4),
    "エ": (1, 2, 4),
    "オ": (2, 4),
    "カ": (1, 6),
    "キ": (1, 2, 6),
    "ク": (1, 4, 6),
    "ケ": (1, 2, 4, 6),
    "コ": (2, 4, 6),
}

_punctuation = {
    ".": (2, 5, 6),
    ",": (2,),
    "?": (2, 6),
    "!": (2, 3, 5),
    ":": (2, 5),
    ";": (2, 3),
    "-": (3, 6),
    "(": (2, 3, 6),
    ")": (3, 5, 6),
    '"': (2, 3, 6),
    "'": (3,),
}

KOREAN_TABLE: Final[Mapping[str, frozenset[int]]] = _freeze(_korean)

# Uppercase letters and digits fold their indicator into the same cell as the
# base shape, e.g. "A" is {6, 1} rather than the two cells {6} {1}.
ENGLISH_TABLE: Final[Mapping[str, frozenset[int]]] = MappingProxyType(
    {
        **{letter: frozenset(dots) for letter, dots in _english_letters.items()},
        **{
            letter.upper(): CAPITAL_INDICATOR | frozenset(dots)
            for letter, dots in _english_letters.items()
        },
        **{
            digit: NUMBER_INDICATOR | frozenset(_english_letters[letter])
            for digit, letter in _digit_letters.items()
        },
    }
)

JAPANESE_TABLE: Final[Mapping[str, frozenset[int]]] = _freeze(_japanese)

PUNCTUATION_TABLE: Final[Mapping[str, frozenset[int]]] = _freeze(_punctuation)

__all__ = (
    "CAPITAL_INDICATOR",
    "NUMBER_INDICATOR",
    "UNRECOGNIZED_DOTS",
    "KOREAN_TABLE",
    "ENGLISH_TABLE",
    "JAPANESE_TABLE",
    "PUNCTUATION_TABLE",
)
