"""Public case conversion functions."""

import logging

from wordcase.case_policy import CasePolicy
from wordcase.char_class import WHITESPACE
from wordcase.invalid_input_type import InvalidInputType
from wordcase.recaser import recase
from wordcase.segmenter import SegmentMode, segment

logger = logging.getLogger(__name__)

_SEGMENT_MODES = {
    CasePolicy.CAMEL: SegmentMode.PLAIN_SPLIT,
    CasePolicy.KEBAB: SegmentMode.CAMEL_AWARE,
    CasePolicy.DOT: SegmentMode.PLAIN_SPLIT,
}


def _convert(
    func_name: str,
    value: object,
    policy: CasePolicy,
    mode: SegmentMode | None = None,
) -> str:
    if not isinstance(value, str):
        raise InvalidInputType(func_name, value)

    # Only separator whitespace is trimmed; other characters are word content
    trimmed = value.strip(WHITESPACE)
    if not trimmed:
        return ""

    tokens = segment(trimmed, mode or _SEGMENT_MODES[policy])
    logger.debug("%s: %r -> %s", func_name, value, tokens)
    return recase(tokens, policy)


def to_camel_case(value: object) -> str:
    """Convert a string to lowerCamelCase.

    Words are split on whitespace, '-' and '_' only. The first word is
    lowercased; later words are capitalized, and all-caps words are folded
    ("WORLD" -> "World") while mixed-case words keep their inner capitals
    ("MixED" stays "MixED"). Other punctuation is kept.

    Raises:
        InvalidInputType: if value is not a string.
    """
    return _convert("to_camel_case", value, CasePolicy.CAMEL)


def to_kebab_case(value: object) -> str:
    """Convert a string to kebab-case, splitting camelCase and acronyms too.

    Raises:
        InvalidInputType: if value is not a string.
    """
    return _convert("to_kebab_case", value, CasePolicy.KEBAB)


def to_simple_kebab_case(value: object) -> str:
    """Convert a string to kebab-case splitting only lowercase-to-capital.

    Acronym runs and digits are not split: "HTMLParser" -> "htmlparser",
    "myHTTPServer" -> "my-httpserver".

    Raises:
        InvalidInputType: if value is not a string.
    """
    return _convert(
        "to_simple_kebab_case", value, CasePolicy.KEBAB, SegmentMode.CAMEL_SIMPLE
    )


def to_dot_case(value: object) -> str:
    """Convert a string to dot.case (lowercase words joined by '.').

    Raises:
        InvalidInputType: if value is not a string.
    """
    return _convert("to_dot_case", value, CasePolicy.DOT)


_CONVERTERS = {
    CasePolicy.CAMEL: to_camel_case,
    CasePolicy.KEBAB: to_kebab_case,
    CasePolicy.DOT: to_dot_case,
}


def convert(value: object, policy: "CasePolicy | str") -> str:
    """Convert value with the conversion matching policy (enum or name)."""
    return _CONVERTERS[CasePolicy.from_name(policy)](value)
