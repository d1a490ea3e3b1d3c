"""Aho-Corasick automaton over literal patterns.

The trie is stored as a flat arena of :class:`TrieNode` records addressed by
integer id. Child edges and failure links are ids into that arena, so the
structure holds no object cycles and can be shared read-only between threads
once frozen.

Construction happens in two phases:

1. :meth:`Automaton.insert` extends the trie one code point at a time.
2. :meth:`Automaton.build` assigns failure links breadth-first.

:meth:`Automaton.from_patterns` runs both phases and freezes the result.
Scanning (:meth:`Automaton.find`) keeps all of its state in local variables.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from stringkit.domain.errors import AutomatonFrozenError
from stringkit.domain.value_objects import MatchSpan

logger = logging.getLogger(__name__)

ROOT = 0


@dataclass(slots=True)
class TrieNode:
    """One state of the automaton.

    Attributes:
        depth: Length of the path from the root to this node.
        children: Outgoing edges keyed by code point, valued by node id.
        fail: Id of the node for the longest proper suffix of this node's path
            that is also a path in the trie.
        end: True iff this node's path is exactly one inserted pattern.
    """

    depth: int
    children: dict[str, int] = field(default_factory=dict)
    fail: int = ROOT
    end: bool = False


class Automaton:
    """Multi-pattern matcher built from a fixed set of literal strings."""

    def __init__(self) -> None:
        self._nodes: list[TrieNode] = [TrieNode(depth=0)]
        self._frozen = False

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> Automaton:
        """Build and freeze an automaton for ``patterns``.

        Patterns are inserted in sorted order so node ids do not depend on
        the iteration order of the caller's collection.
        """
        automaton = cls()
        for pattern in sorted(set(patterns)):
            automaton.insert(pattern)
        automaton.build()
        automaton.freeze()
        logger.debug("Built automaton with %d nodes", automaton.node_count)
        return automaton

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def insert(self, pattern: str) -> None:
        """Add ``pattern`` to the trie.

        Empty patterns are ignored and inserting the same pattern twice leaves
        the trie unchanged.

        Raises:
            AutomatonFrozenError: If the automaton has been frozen.
        """
        if self._frozen:
            raise AutomatonFrozenError(pattern)
        if not pattern:
            return

        current = ROOT
        for char in pattern:
            node = self._nodes[current]
            child = node.children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode(depth=node.depth + 1))
                node.children[char] = child
            current = child
        self._nodes[current].end = True

    def build(self) -> None:
        """Assign failure links to every node, breadth first.

        Links are recomputed from the current trie shape, so calling this
        more than once yields the same result.
        """
        nodes = self._nodes
        queue: deque[int] = deque()
        for child in nodes[ROOT].children.values():
            nodes[child].fail = ROOT
            queue.append(child)

        while queue:
            parent = queue.popleft()
            for char, child in nodes[parent].children.items():
                queue.append(child)
                fail = nodes[parent].fail
                while char not in nodes[fail].children and fail != ROOT:
                    fail = nodes[fail].fail
                nodes[child].fail = nodes[fail].children.get(char, ROOT)

    def freeze(self) -> None:
        """Reject any further insertions."""
        self._frozen = True

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        """Return True once the automaton no longer accepts patterns."""
        return self._frozen

    @property
    def node_count(self) -> int:
        """Number of nodes in the arena, root included."""
        return len(self._nodes)

    def node(self, node_id: int) -> TrieNode:
        """Return the node stored under ``node_id``."""
        return self._nodes[node_id]

    def __contains__(self, pattern: object) -> bool:
        if not isinstance(pattern, str) or not pattern:
            return False
        current = ROOT
        for char in pattern:
            child = self._nodes[current].children.get(char)
            if child is None:
                return False
            current = child
        return self._nodes[current].end

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def iter_find(self, text: str) -> Iterator[MatchSpan]:
        """Yield every pattern occurrence in ``text``.

        Spans come out ordered by increasing ``stop``; for a given end
        position the longest match is yielded first. Overlapping and nested
        occurrences are all reported.
        """
        nodes = self._nodes
        state = ROOT
        for i, char in enumerate(text):
            while char not in nodes[state].children and state != ROOT:
                state = nodes[state].fail
            state = nodes[state].children.get(char, ROOT)

            hit = state
            while hit != ROOT:
                node = nodes[hit]
                if node.end:
                    yield MatchSpan(start=i + 1 - node.depth, stop=i + 1)
                hit = node.fail

    def find(self, text: str) -> list[MatchSpan]:
        """Return every pattern occurrence in ``text`` (see :meth:`iter_find`)."""
        return list(self.iter_find(text))
