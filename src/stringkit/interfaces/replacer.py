"""Interface for multi-pattern string replacers.

A Replacer owns an immutable pattern → replacement mapping and rewrites text
by substituting every non-overlapping occurrence of a pattern with its
replacement. Implementations must be safe to call concurrently from several
threads and must never mutate state during :meth:`Replacer.replace`.
"""

import abc
from collections.abc import Mapping

from stringkit.domain.value_objects import MatchSpan


class Replacer(abc.ABC):
    """Contract for a multi-pattern string replacer."""

    _mapping: Mapping[str, str]

    @abc.abstractmethod
    def replace(self, text: str) -> str:
        """Return ``text`` with every pattern occurrence replaced.

        Args:
            text: Input text. It is never modified.

        Returns:
            A new string. Text containing no pattern is returned unchanged.
        """

    @abc.abstractmethod
    def find(self, text: str) -> list[MatchSpan]:
        """Return the spans a single replacement pass over ``text`` would rewrite.

        The spans are non-overlapping and ordered by start position.
        """

    @property
    def mapping(self) -> Mapping[str, str]:
        """Return a read-only view of the pattern → replacement mapping."""
        return self._mapping
