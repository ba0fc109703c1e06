"""Test case registry.

The registry is the ordered, append-only collection of test cases a run
executes. A process-wide default instance is created lazily on first access;
test modules populate it at import time through the `goodweather` and
`badweather` decorators (or `register_test` for programmatic registration),
and the runner then reads it in registration order.

Example:
    ```py
    from shocktest import badweather, expect_eq, goodweather

    @goodweather
    def addition_works():
        expect_eq(1 + 1, 2)

    @badweather
    def division_by_zero_raises():
        1 / 0
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import overload

logger = logging.getLogger(__name__)

TestBody = Callable[[], object]


@dataclass(frozen=True)
class TestCase:
    """A single registered unit of executable behavior.

    Attributes:
        name: Identifying name, unique by convention only.
        body: Zero-argument callable executed by the runner.
        expect_fail: ``False`` for a "good weather" case that must complete
            normally, ``True`` for a "bad weather" case that must raise.
    """

    __test__ = False  # not a pytest test class

    name: str
    body: TestBody
    expect_fail: bool = False


class Registry:
    """Insertion-ordered collection of test cases."""

    def __init__(self) -> None:
        self._cases: list[TestCase] = []

    def register(
        self, name: str, body: TestBody, expect_fail: bool = False
    ) -> TestCase:
        """Append a new test case.

        Duplicate names are permitted; each registration runs independently.

        Args:
            name: Name reported for the case.
            body: Zero-argument callable to execute.
            expect_fail: Whether the case is expected to raise.

        Returns:
            The registered TestCase.
        """
        case = TestCase(name=name, body=body, expect_fail=expect_fail)
        self._cases.append(case)
        logger.debug("Registered case %s (expect_fail=%s)", name, expect_fail)
        return case

    def clear(self) -> None:
        """Remove every registered case."""
        self._cases.clear()

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        return f"Registry({len(self._cases)} cases)"


_default_registry: Registry | None = None


def default_registry() -> Registry:
    """Return the process-wide registry, creating it on first access."""
    global _default_registry  # pylint: disable=global-statement
    if _default_registry is None:
        _default_registry = Registry()
    return _default_registry


def register_test(name: str, body: TestBody, expect_fail: bool = False) -> TestCase:
    """Register a case in the process-wide registry."""
    return default_registry().register(name, body, expect_fail)


def clear() -> None:
    """Empty the process-wide registry.

    Meant for drivers that run several scenarios in one process.
    """
    default_registry().clear()


# ============================================================================
#                           Registration decorators
# ============================================================================


def _registering(
    expect_fail: bool, name: str | None, registry: Registry | None
) -> Callable[[TestBody], TestBody]:
    def decorator(fn: TestBody) -> TestBody:
        target = registry if registry is not None else default_registry()
        target.register(name or fn.__name__, fn, expect_fail)
        return fn

    return decorator


@overload
def goodweather(fn: TestBody, /) -> TestBody: ...
@overload
def goodweather(
    *, name: str | None = None, registry: Registry | None = None
) -> Callable[[TestBody], TestBody]: ...
def goodweather(
    fn: TestBody | None = None,
    /,
    *,
    name: str | None = None,
    registry: Registry | None = None,
):
    """Register a function as a case expected to complete normally.

    Usable bare (``@goodweather``) or with options
    (``@goodweather(name="parses empty input")``). The function is returned
    unchanged.
    """
    decorator = _registering(False, name, registry)
    return decorator(fn) if fn is not None else decorator


@overload
def badweather(fn: TestBody, /) -> TestBody: ...
@overload
def badweather(
    *, name: str | None = None, registry: Registry | None = None
) -> Callable[[TestBody], TestBody]: ...
def badweather(
    fn: TestBody | None = None,
    /,
    *,
    name: str | None = None,
    registry: Registry | None = None,
):
    """Register a function as a case expected to raise.

    The case passes when its body raises anything (the message is only
    informational) and fails when the body completes normally.
    """
    decorator = _registering(True, name, registry)
    return decorator(fn) if fn is not None else decorator


case = goodweather
