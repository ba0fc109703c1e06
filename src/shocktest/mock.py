"""Scoped substitution of mockable callables.

A `MockSlot` is a named cell holding the current implementation of one
target. Production code calls the slot instead of the real function, and
tests swap the implementation for the duration of a scope with an
`OverrideGuard`::

    @mockable
    def fetch_rate(currency: str) -> float:
        ...

    def convert(amount: float, currency: str) -> float:
        return amount * fetch_rate(currency)

    with OverrideGuard(fetch_rate, lambda currency: 2.0):
        assert convert(10, "EUR") == 20.0

A guard remembers the value the slot held when the guard was created and
writes exactly that value back on release. Guards therefore nest: the
innermost guard restores what the next outer one installed. Releasing guards
out of nesting order is not supported.

The named table (`declare_mock`, `mock_override`, `mock_call`) offers the
same mechanism keyed by string for code that cannot hold slot references.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, Generic, TypeVar

from shocktest.errors import (
    GuardNotCopyableError,
    MockAlreadyDeclaredError,
    MockNotDeclaredError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class MockSlot(Generic[F]):
    """Mutable cell holding the active implementation of a mockable target.

    Calling the slot dispatches to whatever implementation it currently
    holds. The slot is only meant to be written through an `OverrideGuard`.

    Args:
        name: Name used in log records and error messages.
        default: The real implementation, installed initially.
    """

    def __init__(self, name: str, default: F) -> None:
        self.name = name
        self.default = default
        self._current: F = default

    @property
    def current(self) -> F:
        """The implementation calls are dispatched to."""
        return self._current

    @property
    def is_overridden(self) -> bool:
        """True while the slot holds something other than its default."""
        return self._current is not self.default

    def _swap(self, impl: F) -> F:
        previous, self._current = self._current, impl
        return previous

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._current(*args, **kwargs)

    def __repr__(self) -> str:
        return f"MockSlot({self.name!r}, current={self._current!r})"


class OverrideGuard(Generic[F]):
    """Install a replacement into a slot until the guard is released.

    The replacement is installed as soon as the guard is constructed. The
    guard is released by leaving its ``with`` block (on any exit path) or
    by calling `restore`. Release happens at most once.

    Guards cannot be copied or pickled: a copy would hold a second
    obligation to restore the same slot.

    Args:
        slot: The slot to override. The guard borrows it.
        new_impl: Replacement implementation with the slot's signature.
    """

    def __init__(self, slot: MockSlot[F], new_impl: F) -> None:
        self._slot = slot
        self._original = slot._swap(new_impl)  # pylint: disable=protected-access
        self._released = False
        logger.debug("Overrode mock %s with %r", slot.name, new_impl)

    @property
    def slot(self) -> MockSlot[F]:
        """The slot this guard overrides."""
        return self._slot

    @property
    def original(self) -> F:
        """The implementation the slot held when this guard was created."""
        return self._original

    @property
    def released(self) -> bool:
        """True once the original implementation has been written back."""
        return self._released

    def restore(self) -> None:
        """Write the captured implementation back into the slot."""
        if self._released:
            return
        self._slot._swap(self._original)  # pylint: disable=protected-access
        self._released = True
        logger.debug("Restored mock %s", self._slot.name)

    def __enter__(self) -> OverrideGuard[F]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()

    def __copy__(self):
        raise GuardNotCopyableError(self._slot.name)

    def __deepcopy__(self, memo):
        raise GuardNotCopyableError(self._slot.name)

    def __reduce_ex__(self, protocol):
        raise GuardNotCopyableError(self._slot.name)


def mockable(fn: F) -> MockSlot[F]:
    """Wrap a real implementation in a slot named after it."""
    return MockSlot(getattr(fn, "__qualname__", repr(fn)), fn)


# ============================================================================
#                           Named declarations
# ============================================================================


class MockTable:
    """Slots declared once each under a unique name."""

    def __init__(self) -> None:
        self._slots: dict[str, MockSlot[Any]] = {}

    def declare(self, name: str, real_impl: F) -> MockSlot[F]:
        """Declare a mockable target initialized to its real implementation.

        Raises:
            MockAlreadyDeclaredError: If `name` is already declared.
        """
        if name in self._slots:
            raise MockAlreadyDeclaredError(name)
        slot = MockSlot(name, real_impl)
        self._slots[name] = slot
        return slot

    def get(self, name: str) -> MockSlot[Any]:
        """Return the slot declared under `name`.

        Raises:
            MockNotDeclaredError: If `name` was never declared.
        """
        try:
            return self._slots[name]
        except KeyError as e:
            raise MockNotDeclaredError(name) from e

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call the current implementation of `name`."""
        return self.get(name)(*args, **kwargs)

    def override(self, name: str, new_impl: Callable[..., Any]) -> OverrideGuard[Any]:
        """Override `name` until the returned guard is released."""
        return OverrideGuard(self.get(name), new_impl)

    def __contains__(self, name: object) -> bool:
        return name in self._slots


_table = MockTable()


def declare_mock(name: str, real_impl: F) -> MockSlot[F]:
    """Declare a mockable target in the process-wide table."""
    return _table.declare(name, real_impl)


def get_mock(name: str) -> MockSlot[Any]:
    """Return a slot from the process-wide table."""
    return _table.get(name)


def mock_call(name: str, *args: Any, **kwargs: Any) -> Any:
    """Call a target from the process-wide table through its slot."""
    return _table.call(name, *args, **kwargs)


def mock_override(name: str, new_impl: Callable[..., Any]) -> OverrideGuard[Any]:
    """Override a target from the process-wide table.

    Example:
        ```py
        declare_mock("parse_expression", parse_expression)

        with mock_override("parse_expression", fake_parse):
            mock_call("parse_expression", tokens)
        ```
    """
    return _table.override(name, new_impl)
