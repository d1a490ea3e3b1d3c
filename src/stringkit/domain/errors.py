"""Domain-layer error definitions."""


class StringkitError(Exception):
    """Base class for stringkit errors."""


class AutomatonFrozenError(StringkitError):
    """Raised when a pattern is inserted into an automaton that is already frozen."""

    def __init__(self, pattern: str) -> None:
        super().__init__(
            f"Cannot insert pattern {pattern!r}: the automaton is frozen."
        )
        self.pattern = pattern
