from braillingo.base import (
    BLANK_CELL,
    BRAILLE_RANGE_END,
    BRAILLE_RANGE_START,
    braille_table_str,
    braille_to_dots,
    dot_bit_mapping,
    dots_to_braille,
    dots_to_mask,
)
from braillingo.encoder import (
    BrailleRecord,
    Language,
    convert_char,
    convert_to_braille,
    describe_record,
    detect_language,
    to_braille_str,
    unrecognized,
)
from braillingo.tables import (
    CAPITAL_INDICATOR,
    ENGLISH_TABLE,
    JAPANESE_TABLE,
    KOREAN_TABLE,
    NUMBER_INDICATOR,
    PUNCTUATION_TABLE,
    UNRECOGNIZED_DOTS,
)
