"""Fixtures and test helpers for end-to-end CLI tests.

Provides test modules for the ``shocktest run`` command to load, plus
fixtures to obtain a CliRunner and run tests within an isolated filesystem.
Test modules are written into the isolated filesystem and loaded by path.
"""

from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


LOG_CASES = '''
import logging

from shocktest import goodweather


@goodweather
def emits_logs():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("demo.cases")
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
'''

PASSING_CASES = """
from shocktest import badweather, expect_eq, goodweather


@goodweather
def addition():
    expect_eq(1 + 1, 2)


@badweather
def division_by_zero():
    1 / 0
"""

FAILING_CASES = """
from shocktest import badweather, expect_eq, goodweather


@goodweather
def wrong_sum():
    expect_eq(1 + 1, 3)


@badweather
def nothing_raised():
    pass


@goodweather
def still_runs():
    pass
"""


def write_module(name: str, source: str) -> str:
    """Write a test module into the current directory and return its path."""
    path = Path(name)
    path.write_text(dedent(source), encoding="utf-8")
    return str(path)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner.

    Uses runner.isolated_filesystem() to ensure filesystem side-effects are
    confined to the test.
    """
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def log_cases(fs):
    """Path of a test module whose single case emits log records."""
    return write_module("log_cases.py", LOG_CASES)


@pytest.fixture
def passing_cases(fs):
    """Path of a test module whose cases all pass."""
    return write_module("passing_cases.py", PASSING_CASES)


@pytest.fixture
def failing_cases(fs):
    """Path of a test module with two failing cases and one passing case."""
    return write_module("failing_cases.py", FAILING_CASES)


@pytest.fixture
def module_writer(fs):
    """Return a callable writing a named test module into the isolated filesystem."""
    return write_module
