"""Functional tests for driving the harness from a custom entry point.

A custom driver runs several scenarios in one process: it clears the
process-wide registry, registers the cases of one scenario, calls
`run_all`, and inspects the returned failure count and the printed report.

Scenarios
1. A good weather case asserting ``1 == 1`` passes.
2. A bad weather case raising "boom" passes.
3. A bad weather case that does nothing fails.
4. A good weather case raising "oops" fails and the report names the reason.
5. A failing case does not stop the case registered after it.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import shocktest
from shocktest import badweather, expect_eq, expect_true, goodweather

if TYPE_CHECKING:
    from pytest import CaptureFixture


def scenario(capsys: CaptureFixture[str]) -> tuple[int, str]:
    """Run the registered cases and return (failures, report text)."""
    failures = shocktest.run_all()
    return failures, capsys.readouterr().out


class TestCustomDriver:
    """A driver author runs several scenarios back to back."""

    @staticmethod
    def test_goodweather_case_passes(capsys: CaptureFixture[str]) -> None:
        """Scenario 1: one passing good weather case."""

        @goodweather
        def a() -> None:
            expect_true(1 == 1)

        failures, out = scenario(capsys)

        assert failures == 0
        assert "1 tests ran." in out
        assert re.search(r"PASSED.*1 test\(s\)", out)

    @staticmethod
    def test_badweather_raise_passes(capsys: CaptureFixture[str]) -> None:
        """Scenario 2: the expected failure occurred."""

        @badweather
        def b() -> None:
            raise RuntimeError("boom")

        failures, out = scenario(capsys)

        assert failures == 0
        assert "BADWEATHER b" in out
        assert "- boom" in out

    @staticmethod
    def test_badweather_without_raise_fails(capsys: CaptureFixture[str]) -> None:
        """Scenario 3: the expected failure did not occur."""

        @badweather
        def c() -> None:
            pass

        failures, out = scenario(capsys)

        assert failures == 1
        assert "expected failure but none was raised" in out
        assert "1 test(s), out of 1" in out

    @staticmethod
    def test_goodweather_raise_fails_with_message(capsys: CaptureFixture[str]) -> None:
        """Scenario 4: the unexpected failure is reported with its message."""

        @goodweather
        def d() -> None:
            raise RuntimeError("oops")

        failures, out = scenario(capsys)

        assert failures == 1
        (line,) = [ln for ln in out.splitlines() if "FAILED" in ln and " d " in ln]
        assert "oops" in line

    @staticmethod
    def test_failure_does_not_abort_run(capsys: CaptureFixture[str]) -> None:
        """Scenario 5: f runs and is reported despite e failing."""

        @goodweather
        def e() -> None:
            expect_eq(1, 2)

        @goodweather
        def f() -> None:
            pass

        failures, out = scenario(capsys)

        assert failures == 1
        assert "OK ] GOODWEATHER f" in out
        assert "EXPECT_EQ failed: 1 != 2" in out

    @staticmethod
    def test_scenarios_back_to_back(capsys: CaptureFixture[str]) -> None:
        """clear() between runs gives each scenario a clean slate."""
        shocktest.register_test("pass", lambda: None)
        assert shocktest.run_all() == 0

        shocktest.clear()
        shocktest.register_test("no_raise", lambda: None, expect_fail=True)
        assert shocktest.run_all() == 1

        shocktest.clear()
        assert shocktest.run_all() == 0

        out = capsys.readouterr().out
        assert out.count("Running 1 tests") == 2
        assert "Running 0 tests" in out
        assert "0 tests ran." in out
