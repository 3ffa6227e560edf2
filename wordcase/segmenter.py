"""Logic for splitting text into word tokens."""

from enum import Enum

from wordcase.char_class import CharClass, classify_char


class SegmentMode(Enum):
    """Which boundaries the segmenter honours besides explicit separators."""

    PLAIN_SPLIT = "plain"
    CAMEL_AWARE = "camel"
    CAMEL_SIMPLE = "camel-simple"


def segment(text: str, mode: SegmentMode = SegmentMode.PLAIN_SPLIT) -> list[str]:
    """Split text into non-empty tokens in a single left-to-right pass.

    Runs of separators (whitespace, '-' and '_') always delimit tokens. In
    CAMEL_AWARE mode an implicit boundary is also placed:

    1. between a lowercase letter or digit and a following uppercase letter
       ("camelCase" -> "camel", "Case");
    2. before the last capital of an uppercase run when it starts a
       Titlecase word ("HTMLParser" -> "HTML", "Parser").

    CAMEL_SIMPLE only splits a lowercase letter from a following capital, so
    acronyms and digits stay glued ("HTMLParser" and "v2Beta" are one token).

    Tokens keep their original characters and casing.
    """
    classes = [classify_char(ch) for ch in text]

    tokens: list[str] = []
    start: int | None = None
    for i, cls in enumerate(classes):
        if cls is CharClass.SEPARATOR:
            if start is not None:
                tokens.append(text[start:i])
                start = None
            continue
        if start is None:
            start = i
            continue
        if mode is not SegmentMode.PLAIN_SPLIT and _is_camel_boundary(
            classes, i, mode
        ):
            tokens.append(text[start:i])
            start = i

    if start is not None:
        tokens.append(text[start:])
    return tokens


def _is_camel_boundary(classes: list[CharClass], i: int, mode: SegmentMode) -> bool:
    """Return True if a word starts at position i inside a non-separator run."""
    if classes[i] is not CharClass.UPPER:
        return False
    prev = classes[i - 1]
    if mode is SegmentMode.CAMEL_SIMPLE:
        return prev is CharClass.LOWER
    if prev in (CharClass.LOWER, CharClass.DIGIT):
        return True
    # Acronym followed by a Titlecase word: split before the word's capital
    return (
        prev is CharClass.UPPER
        and i + 1 < len(classes)
        and classes[i + 1] is CharClass.LOWER
    )
