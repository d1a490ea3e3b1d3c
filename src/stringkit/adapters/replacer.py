"""Aho-Corasick backed Replacer implementation.

The automaton is compiled once from the mapping keys when the replacer is
created. Each call to :meth:`AhoCorasickReplacer.replace` then runs up to
``REPLACE_PASSES`` scan-and-rewrite passes, so a replacement that forms a new
pattern together with its neighbours (``"AB"→"C"`` followed by ``"CD"→"E"``
on ``"ABD"``) is picked up by the following pass. Deeper cascades are left
partially resolved.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from stringkit.config import REPLACE_PASSES
from stringkit.domain.automaton import Automaton
from stringkit.domain.resolver import rewrite, select_spans
from stringkit.domain.value_objects import MatchSpan
from stringkit.interfaces import replacer

logger = logging.getLogger(__name__)


class AhoCorasickReplacer(replacer.Replacer):
    """Replacer that scans with a frozen Aho-Corasick automaton."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._mapping = MappingProxyType(dict(mapping))
        self._automaton = Automaton.from_patterns(self._mapping)

    def find(self, text: str) -> list[MatchSpan]:
        return select_spans(self._automaton.iter_find(text))

    def replace(self, text: str) -> str:
        for n in range(1, REPLACE_PASSES + 1):
            spans = self.find(text)
            if not spans:
                break
            logger.debug("Pass %d replaced %d span(s)", n, len(spans))
            text = rewrite(text, spans, self._mapping)
        return text


def new_replacer(mapping: Mapping[str, str]) -> replacer.Replacer:
    """Create a Replacer for ``mapping``.

    Args:
        mapping: Pattern → replacement pairs. Empty patterns are ignored and
            an empty mapping yields a replacer that returns its input as is.

    Returns:
        A ready-to-use Replacer. Later changes to ``mapping`` do not affect it.
    """
    return AhoCorasickReplacer(mapping)
