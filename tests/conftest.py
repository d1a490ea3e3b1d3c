"""Global pytest configuration for stringkit.

Tests are marked by the top-level directory they live in (``unit``,
``contract``, ``e2e``) unless they already carry that mark, so suites can be
selected with ``-m``.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = ("unit", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default directory mark to every collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        marker_name = path.relative_to(TESTS_ROOT).parts[0]
        if marker_name not in DIRECTORY_MARKERS:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
