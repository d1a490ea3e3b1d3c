"""Conflict resolution for overlapping matches.

A scan reports every occurrence of every pattern, so spans may overlap or
nest. These helpers reduce such a list to a left-to-right selection of
non-overlapping spans and rewrite the text from that selection.
"""

from collections.abc import Iterable, Mapping

from stringkit.domain.value_objects import MatchSpan


def _priority(span: MatchSpan) -> tuple[int, int]:
    # earliest start first, then the longest match at that start
    return span.start, -span.stop


def select_spans(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
    """Pick the non-overlapping spans a rewrite pass will replace.

    Spans are ordered by start position, longer spans first on ties, and
    accepted greedily: a span is skipped when it overlaps the previously
    accepted span. Spans must be non-empty.

    Args:
        spans: Occurrences in any order, possibly overlapping.

    Returns:
        The accepted spans in increasing start order.
    """
    accepted: list[MatchSpan] = []
    for span in sorted(spans, key=_priority):
        if accepted and span.overlaps(accepted[-1]):
            continue
        accepted.append(span)
    return accepted


def rewrite(text: str, spans: Iterable[MatchSpan], mapping: Mapping[str, str]) -> str:
    """Replace each span of ``text`` with the mapped value of its substring.

    Args:
        text: The text the spans were found in.
        spans: Non-overlapping spans in increasing start order, as returned
            by :func:`select_spans`.
        mapping: Pattern to replacement lookup. Every span must cover a key.

    Returns:
        The rewritten text. Text outside the spans is copied verbatim.
    """
    parts: list[str] = []
    cursor = 0
    for span in spans:
        parts.append(text[cursor : span.start])
        parts.append(mapping[text[span.start : span.stop]])
        cursor = span.stop
    parts.append(text[cursor:])
    return "".join(parts)
