"""Logic for joining word tokens under a casing policy."""

from wordcase.case_policy import CasePolicy

_JOINERS = {
    CasePolicy.KEBAB: "-",
    CasePolicy.DOT: ".",
}


def recase(tokens: list[str], policy: CasePolicy) -> str:
    """Join tokens into a single string following the given policy.

    CAMEL lowercases the first token and capitalizes the rest; KEBAB and DOT
    lowercase every token and join with '-' or '.'. No tokens gives "".
    """
    if not tokens:
        return ""

    if policy is CasePolicy.CAMEL:
        head, *rest = tokens
        return head.lower() + "".join(_capitalize(token) for token in rest)

    return _JOINERS[policy].join(token.lower() for token in tokens)


def _capitalize(token: str) -> str:
    """Uppercase the first character; fold the rest only for all-caps words.

    "WORLD" -> "World", while "MixED" keeps its inner capitals.
    """
    rest = token[1:]
    if token.isupper():
        rest = rest.lower()
    return token[:1].upper() + rest
