from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterable, Mapping

from braillingo.base import dots_to_braille
from braillingo.tables import (
    ENGLISH_TABLE,
    JAPANESE_TABLE,
    KOREAN_TABLE,
    PUNCTUATION_TABLE,
    UNRECOGNIZED_DOTS,
)

_re_korean: Final = re.compile(r"[\uAC00-\uD7A3]")
_re_japanese: Final = re.compile(r"[\u3040-\u309F\u30A0-\u30FF]")
_re_english: Final = re.compile(r"[a-zA-Z]")
_re_english_char: Final = re.compile(r"[a-zA-Z0-9]")

_BLANKS: Final[frozenset[str]] = frozenset({" ", "\t"})


class Language(str, Enum):
    KOREAN = "korean"
    ENGLISH = "english"
    JAPANESE = "japanese"
    MIXED = "mixed"


@dataclass(frozen=True)
class BrailleRecord:
    """The braille cell for a single source character.

    `code_point` is the braille character for `dots`, except for blanks: spaces
    and tabs become a plain space and newlines stay a newline, so that the
    joined code points keep the line structure of the source text.

    `recognized` is False only for characters that no table could map, which
    are given the "?" cell (dots 2-6) instead.
    """

    character: str
    code_point: str
    dots: frozenset[int] = field(default_factory=frozenset)
    recognized: bool = True

    @property
    def is_blank(self) -> bool:
        return not self.dots


def detect_language(text: str) -> Language:
    """Return which of the supported scripts appear in the text.

    This only checks for presence, not frequency: a single Latin letter in a
    long Korean text makes it MIXED. Text with none of the scripts (digits,
    punctuation, ...) is ENGLISH.

    Examples:
        >>> detect_language("안녕하세요")
        <Language.KOREAN: 'korean'>

        >>> detect_language("Hello 안녕")
        <Language.MIXED: 'mixed'>
    """
    found = {
        Language.KOREAN: _re_korean.search(text) is not None,
        Language.JAPANESE: _re_japanese.search(text) is not None,
        Language.ENGLISH: _re_english.search(text) is not None,
    }
    present = [language for language, is_present in found.items() if is_present]

    if len(present) > 1:
        return Language.MIXED
    if present:
        return present[0]
    return Language.ENGLISH


def _table_for(char: str) -> Mapping[str, frozenset[int]]:
    if _re_korean.match(char):
        return KOREAN_TABLE
    if _re_japanese.match(char):
        return JAPANESE_TABLE
    if _re_english_char.match(char):
        return ENGLISH_TABLE
    return PUNCTUATION_TABLE


def convert_char(char: str) -> BrailleRecord:
    """Convert a single character into its braille record.

    Never raises: characters missing from the table of their script get the
    unrecognized cell.
    """
    if char in _BLANKS:
        return BrailleRecord(char, " ")
    if char == "\n":
        return BrailleRecord(char, "\n")

    dots = _table_for(char).get(char)
    if dots is None:
        return BrailleRecord(
            char, dots_to_braille(UNRECOGNIZED_DOTS), UNRECOGNIZED_DOTS, recognized=False
        )
    return BrailleRecord(char, dots_to_braille(dots), dots)


def convert_to_braille(
    text: str,
    language: Language | str | None = None,
) -> list[BrailleRecord]:
    """Convert text into a list of braille records, one per character.

    Args:
        text: The text to convert.
        language: The language the text is in. Each character is still looked
            up by its own script, so this has no effect on the result; it's
            validated and otherwise ignored.

    Returns:
        A list with one record per character of `text`, in the same order.

    Examples:
        >>> to_braille_str(convert_to_braille("Hello!"))
        '⠳⠑⠇⠇⠕⠖'
    """
    if language is not None:
        _validate_language(language)

    return [convert_char(char) for char in text]


def _validate_language(language: Language | str) -> Language:
    try:
        language = Language(language)
    except ValueError:
        raise ValueError(f"Unknown language {language!r}") from None
    if language is Language.MIXED:
        raise ValueError("Can't convert with language 'mixed', pick a single language")
    return language


def to_braille_str(text_or_records: str | Iterable[BrailleRecord]) -> str:
    """Return the braille text for a string, or for already converted records."""
    if isinstance(text_or_records, str):
        text_or_records = convert_to_braille(text_or_records)
    return "".join(record.code_point for record in text_or_records)


def unrecognized(records: Iterable[BrailleRecord]) -> list[BrailleRecord]:
    """Return the records for characters that fell back to the unrecognized cell."""
    return [record for record in records if not record.recognized]


def describe_record(record: BrailleRecord) -> str:
    """Return a short human readable description of a record.

    Examples:
        >>> describe_record(convert_char("h"))
        "'h': dots 1-2-5 (⠓)"

        >>> describe_record(convert_char(" "))
        "' ': blank"
    """
    if record.is_blank:
        return f"{record.character!r}: blank"

    dots = "-".join(map(str, sorted(record.dots)))
    prefix = "" if record.recognized else "unrecognized, "
    return f"{record.character!r}: {prefix}dots {dots} ({record.code_point})"


__all__ = (
    "Language",
    "BrailleRecord",
    "detect_language",
    "convert_char",
    "convert_to_braille",
    "to_braille_str",
    "unrecognized",
    "describe_record",
)
