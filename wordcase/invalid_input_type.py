"""Error raised when a conversion receives something other than a string."""


class InvalidInputType(TypeError):
    """Raised when a case conversion is called with a non-string value."""

    def __init__(self, func_name: str, value: object) -> None:
        """Record the offending function and the type it received."""
        self.func_name = func_name
        self.received_type = type(value).__name__
        super().__init__(
            f"{func_name}: expected a string input, got {self.received_type}"
        )
