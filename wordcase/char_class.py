"""ASCII character classification used by the segmenter."""

from enum import Enum

WHITESPACE = " \t\n\r\f\v"
SEPARATORS = frozenset(WHITESPACE + "-_")


class CharClass(Enum):
    """Coarse class of a single character."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SEPARATOR = "separator"
    OTHER = "other"


def classify_char(ch: str) -> CharClass:
    """Classify one character. Anything outside ASCII is OTHER."""
    if ch in SEPARATORS:
        return CharClass.SEPARATOR
    if "a" <= ch <= "z":
        return CharClass.LOWER
    if "A" <= ch <= "Z":
        return CharClass.UPPER
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    return CharClass.OTHER
