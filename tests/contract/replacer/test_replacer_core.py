"""Contract tests for Replacer implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stringkit.domain.value_objects import MatchSpan

if TYPE_CHECKING:
    from .conftest import ReplacerFactory

# pylint: disable=magic-value-comparison


# ============================================================================
#                               Boundaries
# ============================================================================


def test_empty_mapping_passes_text_through(make_replacer: ReplacerFactory) -> None:
    """A replacer without patterns returns its input unchanged."""
    replacer = make_replacer({})
    assert replacer.replace("anything at all") == "anything at all"
    assert replacer.replace("") == ""
    assert not replacer.find("anything")


def test_empty_text(make_replacer: ReplacerFactory) -> None:
    """Empty input gives empty output."""
    assert make_replacer({"a": "b"}).replace("") == ""


def test_text_without_patterns_is_unchanged(make_replacer: ReplacerFactory) -> None:
    """Absent patterns contribute nothing."""
    assert make_replacer({"cat": "dog"}).replace("a cow and a hen") == "a cow and a hen"


def test_text_equal_to_pattern(make_replacer: ReplacerFactory) -> None:
    """Text that is exactly a pattern becomes its replacement."""
    assert make_replacer({"hello": "bye"}).replace("hello") == "bye"


def test_input_is_not_mutated(make_replacer: ReplacerFactory) -> None:
    """replace() returns a new value and leaves the argument alone."""
    text = "cat"
    result = make_replacer({"cat": "dog"}).replace(text)
    assert text == "cat"
    assert result == "dog"


# ============================================================================
#                               Replacement rules
# ============================================================================


def test_every_occurrence_is_replaced(make_replacer: ReplacerFactory) -> None:
    """All non-overlapping occurrences are rewritten in one call."""
    replacer = make_replacer({"colour": "color", "grey": "gray"})
    assert (
        replacer.replace("grey colour, grey-ish colour")
        == "gray color, gray-ish color"
    )


def test_longest_match_wins_at_same_start(make_replacer: ReplacerFactory) -> None:
    """With 'a' and 'ab' both matching at 0, 'ab' is used."""
    assert make_replacer({"a": "X", "ab": "Y"}).replace("ab") == "Y"


def test_earliest_match_wins_over_later_overlap(make_replacer: ReplacerFactory) -> None:
    """An earlier match blocks a later overlapping one."""
    assert make_replacer({"ab": "1", "bc": "2"}).replace("abc") == "1c"


def test_nested_suffix_match_is_dropped(make_replacer: ReplacerFactory) -> None:
    """'he' inside 'she' is not replaced separately."""
    replacer = make_replacer({"he": "HE", "she": "SHE"})
    assert replacer.replace("she said he") == "SHE said HE"


def test_empty_replacement_deletes(make_replacer: ReplacerFactory) -> None:
    """Mapping to the empty string removes the pattern."""
    assert make_replacer({" ": ""}).replace("a b c") == "abc"


def test_unicode_patterns(make_replacer: ReplacerFactory) -> None:
    """Patterns and text are handled per code point."""
    replacer = make_replacer({"日本": "Japan", "ü": "ue"})
    assert replacer.replace("Müller in 日本") == "Mueller in Japan"


def test_find_reports_positions(make_replacer: ReplacerFactory) -> None:
    """find() returns the non-overlapping spans in start order."""
    replacer = make_replacer({"a": "X", "ab": "Y", "b": "Z"})
    assert replacer.find("abab b") == [MatchSpan(0, 2), MatchSpan(2, 4), MatchSpan(5, 6)]


# ============================================================================
#                               Passes
# ============================================================================


def test_second_pass_resolves_cascade(make_replacer: ReplacerFactory) -> None:
    """'AB'→'C' then 'CD'→'E' turns 'ABD' into 'E'."""
    assert make_replacer({"AB": "C", "CD": "E"}).replace("ABD") == "E"


def test_third_pass_is_never_run(make_replacer: ReplacerFactory) -> None:
    """A cascade needing three passes is left partially resolved."""
    replacer = make_replacer({"a": "b", "b": "c", "c": "d"})
    assert replacer.replace("a") == "c"


def test_self_replacement_terminates(make_replacer: ReplacerFactory) -> None:
    """A pattern mapped to text containing itself still returns."""
    assert make_replacer({"a": "aa"}).replace("a") == "aaaa"


def test_identity_replacement(make_replacer: ReplacerFactory) -> None:
    """Replacing a pattern with itself is harmless."""
    assert make_replacer({"same": "same"}).replace("the same") == "the same"


# ============================================================================
#                               Determinism
# ============================================================================


@pytest.mark.parametrize(
    "mapping",
    [
        {"he": "1", "she": "2", "his": "3", "hers": "4"},
        {"hers": "4", "his": "3", "she": "2", "he": "1"},
        {"his": "3", "he": "1", "hers": "4", "she": "2"},
    ],
    ids=["forward", "reversed", "shuffled"],
)
def test_output_independent_of_mapping_order(
    make_replacer: ReplacerFactory, mapping: dict[str, str]
) -> None:
    """The same pattern map in any insertion order gives the same output."""
    assert make_replacer(mapping).replace("ushers and his hershey") == "u2rs and 3 41y"


def test_repeated_calls_agree(make_replacer: ReplacerFactory) -> None:
    """The same input always produces the same output."""
    replacer = make_replacer({"AB": "C", "CD": "E", "x": "y"})
    results = {replacer.replace("xABDx ABD") for _ in range(50)}
    assert results == {"yEy E"}
