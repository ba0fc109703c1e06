"""Assertion helpers for test bodies.

Every helper raises `ExpectationFailed` with a descriptive message when its
expectation does not hold, and returns normally otherwise. The runner picks
the failure up at the case boundary, so a failed expectation ends the current
case only.

Values are passed as arguments, so each side is evaluated exactly once by the
caller regardless of the outcome. The ``expect_*`` and ``assert_*`` families
behave the same; the prefix only changes the message.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from shocktest.errors import ExpectationFailed

T = TypeVar("T")


def fail(message: str) -> NoReturn:
    """Fail the current case with `message`."""
    raise ExpectationFailed(message)


def _check_true(prefix: str, value: object, expr: str | None) -> None:
    if not value:
        fail(f"{prefix} failed: {expr if expr is not None else repr(value)}")


def expect_true(value: object, expr: str | None = None) -> None:
    """Expect `value` to be truthy.

    Args:
        value: The evaluated condition.
        expr: Optional source text of the condition, used in the message.
    """
    _check_true("EXPECT_TRUE", value, expr)


def expect_false(value: object, expr: str | None = None) -> None:
    """Expect `value` to be falsy."""
    if value:
        shown = expr if expr is not None else repr(value)
        fail(f"EXPECT_FALSE failed: {shown} evaluated to true")


def expect_eq(a: object, b: object) -> None:
    """Expect ``a == b``."""
    if a != b:
        fail(f"EXPECT_EQ failed: {a!r} != {b!r}")


def expect_ne(a: object, b: object) -> None:
    """Expect ``a != b``."""
    if a == b:
        fail(f"EXPECT_NE failed: {a!r} == {b!r}")


def expect_ge(a: Any, b: Any) -> None:
    """Expect ``a >= b``."""
    if not a >= b:
        fail(f"EXPECT_GE failed: {a!r} < {b!r}")


def expect_gt(a: Any, b: Any) -> None:
    """Expect ``a > b``."""
    if not a > b:
        fail(f"EXPECT_GT failed: {a!r} is not greater than {b!r}")


def assert_true(value: object, expr: str | None = None) -> None:
    """Require `value` to be truthy."""
    _check_true("ASSERT_TRUE", value, expr)


def assert_eq(a: object, b: object) -> None:
    """Require ``a == b``."""
    if a != b:
        fail(f"ASSERT_EQ failed: {a!r} != {b!r}")


def assert_gt(a: Any, b: Any) -> None:
    """Require ``a > b``."""
    if not a > b:
        fail(f"ASSERT_GT failed: {a!r} <= {b!r}")


# ============================================================================
#                           Raise checks
# ============================================================================


def expect_no_throw(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``fn(*args, **kwargs)`` and expect it not to raise.

    Returns:
        Whatever `fn` returned.
    """
    try:
        return fn(*args, **kwargs)
    except KeyboardInterrupt:
        raise
    except Exception as exc:  # pylint: disable=broad-except
        raise ExpectationFailed(f"Unexpected exception thrown: {exc}") from exc
    except BaseException as exc:  # pylint: disable=broad-except
        raise ExpectationFailed("Unexpected unknown exception thrown") from exc


def expect_throw(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> BaseException:
    """Call ``fn(*args, **kwargs)`` and expect it to raise anything.

    Returns:
        The raised exception.
    """
    try:
        fn(*args, **kwargs)
    except KeyboardInterrupt:
        raise
    except BaseException as exc:  # pylint: disable=broad-except
        return exc
    fail("Expected exception but none was thrown.")


def expect_throw_msg(
    fn: Callable[..., Any], expected_msg: str, *args: Any, **kwargs: Any
) -> BaseException:
    """Expect ``fn(*args, **kwargs)`` to raise with `expected_msg` in its message.

    Only ``Exception`` messages are inspected; any other raised signal
    satisfies the expectation as long as something was raised.

    Returns:
        The raised exception.
    """
    exc = expect_throw(fn, *args, **kwargs)
    if isinstance(exc, Exception) and expected_msg not in str(exc):
        fail(
            f'Exception message mismatch. Got: "{exc}", '
            f'expected to contain: "{expected_msg}"'
        )
    return exc
