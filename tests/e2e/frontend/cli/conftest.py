"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, a CliRunner whose store and flight-recorder file live in the
current directory, and an isolated filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from examportal.entrypoints.cli.main import examportal

# pylint: disable=redefined-outer-name

STORE_FILE = "store.json"
LOG_FILE = "examportal.log"


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'examportal.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("examportal.demo")
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
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    examportal.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(examportal, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner using a JSON store and log file in the working directory."""
    return CliRunner(
        env={
            "EXAMPORTAL_STORE_URL": STORE_FILE,
            "EXAMPORTAL_LOG_PATH": LOG_FILE,
            "EXAMPORTAL_STORE_NAMESPACE": None,
            "EXAMPORTAL_LOGGER_LEVELS": None,
        }
    )


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner, fs):
    """Invoke the top-level command with arguments, in the isolated filesystem."""

    def run(*args: str, **kwargs):
        return runner.invoke(examportal, list(args), **kwargs)

    return run
