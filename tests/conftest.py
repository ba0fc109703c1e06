"""Global pytest fixtures and hooks for shocktest."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from shocktest.registry import Registry, default_registry
from shocktest.reporting import RecordingReporter


@pytest.fixture(autouse=True)
def clean_default_registry() -> Iterator[None]:
    """Give every test an empty process-wide registry and leave none behind.

    Decorators without an explicit ``registry=`` argument, and test modules
    loaded by the CLI, register into the shared default registry.
    """
    default_registry().clear()
    yield
    default_registry().clear()


@pytest.fixture(autouse=True)
def no_color_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SHOCKTEST_COLOR out of report assertions."""
    monkeypatch.delenv("SHOCKTEST_COLOR", raising=False)


@pytest.fixture
def registry() -> Registry:
    """A fresh, private registry."""
    return Registry()


@pytest.fixture
def recorder() -> RecordingReporter:
    """A reporter that keeps every runner event for inspection."""
    return RecordingReporter()


# ============================================================================
#                           Default markers
# ============================================================================

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": "unit", "functional": "functional", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark each test after the top-level folder it lives in.

    Tests under ``tests/unit/`` get ``unit``, and so on, unless they already
    carry that marker explicitly.
    """
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        marker_name = FOLDER_MARKERS.get(folder)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
