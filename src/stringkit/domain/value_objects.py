"""Module including value objects used across the domain layer."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """Half-open ``[start, stop)`` interval locating one pattern occurrence.

    Positions are code-point indices into the scanned text, so
    ``text[span.start:span.stop]`` is the matched pattern.
    """

    start: int
    stop: int

    def overlaps(self, other: "MatchSpan") -> bool:
        """Return True if the two spans share at least one position."""
        return self.start < other.stop and other.start < self.stop
