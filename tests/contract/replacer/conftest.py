"""Fixtures for Replacer contract tests."""

from collections.abc import Callable, Mapping

import pytest

from stringkit.adapters.replacer import AhoCorasickReplacer
from stringkit.interfaces.replacer import Replacer

ReplacerFactory = Callable[[Mapping[str, str]], Replacer]


@pytest.fixture(params=["aho_corasick"])
def make_replacer(request: pytest.FixtureRequest) -> ReplacerFactory:
    """Return a factory building a Replacer of the requested backend.

    Supported params:
      - `"aho_corasick"` → AhoCorasickReplacer

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "aho_corasick":
            return AhoCorasickReplacer
        case _:
            raise ValueError(f"unknown replacer type: {request.param}")
