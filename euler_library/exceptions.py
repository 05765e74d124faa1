"""Errors raised by the numeric helpers."""


class DomainError(ValueError):
    """Input falls outside the domain a function is defined over."""

    def __init__(self, func: str, value, expected: str):
        self.func = func
        self.value = value
        self.expected = expected
        super().__init__(f"{func}() expects {expected}, got {value!r}")
