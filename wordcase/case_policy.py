"""Target casing conventions."""

from enum import Enum


class CasePolicy(Enum):
    """How a token sequence is joined back into a single string."""

    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"

    @classmethod
    def from_name(cls, name: "str | CasePolicy") -> "CasePolicy":
        """Resolve a policy from its name (case-insensitive) or return it as-is."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            msg = f"Unknown case policy {name!r} (expected one of: {choices})"
            raise ValueError(msg) from None
