"""Unit tests for outcome classification and run reports."""

import pytest

from shocktest.outcomes import (
    BADWEATHER,
    GOODWEATHER,
    CaseResult,
    RunReport,
    Signal,
    classify,
    polarity_label,
)
from shocktest.registry import TestCase


def _result(passed: bool, elapsed_ms: int = 0, expect_fail: bool = False) -> CaseResult:
    return CaseResult(
        case=TestCase("c", lambda: None, expect_fail),
        signal=Signal.NONE,
        passed=passed,
        elapsed_ms=elapsed_ms,
    )


@pytest.mark.parametrize(
    ("signal", "expect_fail", "passed"),
    [
        (Signal.NONE, False, True),
        (Signal.NONE, True, False),
        (Signal.FAILURE, True, True),
        (Signal.FAILURE, False, False),
        (Signal.UNKNOWN, True, True),
        (Signal.UNKNOWN, False, False),
    ],
)
def test_classify_truth_table(signal: Signal, expect_fail: bool, passed: bool) -> None:
    """Every signal/polarity combination maps to the documented verdict."""
    assert classify(signal, expect_fail) is passed


@pytest.mark.parametrize(
    ("expect_fail", "label"), [(False, GOODWEATHER), (True, BADWEATHER)]
)
def test_polarity_label(expect_fail: bool, label: str) -> None:
    """Polarity labels are GOODWEATHER and BADWEATHER."""
    assert polarity_label(expect_fail) == label
    assert _result(True, expect_fail=expect_fail).label == label


class TestRunReport:
    """Tests for the RunReport aggregate."""

    @staticmethod
    def test_empty_report() -> None:
        """An empty run has no cases, no failures, and counts as passed."""
        report = RunReport()
        assert report.total == 0
        assert report.failures == 0
        assert report.elapsed_ms == 0
        assert report.passed

    @staticmethod
    def test_add_accumulates_counts_and_time() -> None:
        """Adding results updates totals, failures and elapsed time."""
        report = RunReport()
        report.add(_result(True, 3))
        report.add(_result(False, 5))
        report.add(_result(True, 2))

        assert report.total == 3
        assert report.failures == 1
        assert report.elapsed_ms == 10
        assert not report.passed
