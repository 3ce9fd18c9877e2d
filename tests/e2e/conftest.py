"""Default marks and fixtures for tests under `tests/e2e/`.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, and run tests within
an isolated filesystem.
"""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import click
import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from helperkit.entrypoints.cli.main import helperkit
from tests.conftest import add_default_marker

# pylint: disable=unused-argument, redefined-outer-name

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    add_default_marker(E2E_ROOT, "e2e", items)


@click.command()
def log_demo():
    """Emit DEBUG to CRITICAL messages on 'helperkit.demo' and a third-party logger."""
    logger = logging.getLogger("helperkit.demo")
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


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root handlers and logger levels the CLI installs."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name in ("httpx", "httpcore", "some.thirdparty"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `helperkit` for the duration of a test."""
    helperkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(helperkit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects of the CLI to a temporary directory."""
    with runner.isolated_filesystem():
        yield
