"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log records at every
level, fixtures to register it on the `stringkit` group, a CliRunner, and an
isolated filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from stringkit.entrypoints.cli.main import stringkit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project and a third-party logger."""
    logger = logging.getLogger("stringkit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for one test."""
    stringkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(stringkit, "log-demo")


@pytest.fixture
def runner(monkeypatch):
    """Return a CliRunner with no mapping file configured in the environment."""
    monkeypatch.delenv("STRINGKIT_MAPPING_FILE", raising=False)
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
