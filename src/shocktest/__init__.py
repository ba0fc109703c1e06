"""SHOCKTEST

A minimal, embeddable unit-testing harness. Test modules register "good
weather" cases (expected to complete) and "bad weather" cases (expected to
raise); the runner executes them in registration order, classifies each
outcome against its polarity, and returns the failure count. The companion
`shocktest.mock` module substitutes mockable callables for the duration of
a scope and restores them on every exit path.
"""

__version__ = "0.2.0"

# pylint: disable=wrong-import-position
from shocktest.assertions import (
    assert_eq,
    assert_gt,
    assert_true,
    expect_eq,
    expect_false,
    expect_ge,
    expect_gt,
    expect_ne,
    expect_no_throw,
    expect_throw,
    expect_throw_msg,
    expect_true,
    fail,
)
from shocktest.capture import capture_stream, expect_stderr, expect_stdout
from shocktest.errors import ExpectationFailed
from shocktest.mock import (
    MockSlot,
    OverrideGuard,
    declare_mock,
    mock_call,
    mock_override,
    mockable,
)
from shocktest.registry import (
    badweather,
    case,
    clear,
    default_registry,
    goodweather,
    register_test,
)
from shocktest.runner import exit_status, main, run_all

__all__ = [
    "__version__",
    "ExpectationFailed",
    "MockSlot",
    "OverrideGuard",
    "assert_eq",
    "assert_gt",
    "assert_true",
    "badweather",
    "capture_stream",
    "case",
    "clear",
    "declare_mock",
    "default_registry",
    "exit_status",
    "expect_eq",
    "expect_false",
    "expect_ge",
    "expect_gt",
    "expect_ne",
    "expect_no_throw",
    "expect_stderr",
    "expect_stdout",
    "expect_throw",
    "expect_throw_msg",
    "expect_true",
    "fail",
    "goodweather",
    "main",
    "mock_call",
    "mock_override",
    "mockable",
    "register_test",
    "run_all",
]
