"""Outcome classification for executed test cases.

A case body either completes normally, raises a recognized failure signal
(any ``Exception``), or raises something else. That observation is folded
against the case's polarity into a pass/fail verdict:

| signal    | good weather      | bad weather       |
|-----------|-------------------|-------------------|
| NONE      | pass              | fail              |
| FAILURE   | fail (message)    | pass (note)       |
| UNKNOWN   | fail              | pass (note)       |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shocktest.registry import TestCase

GOODWEATHER = "GOODWEATHER"
BADWEATHER = "BADWEATHER"

UNKNOWN_ERROR_MSG = "unknown error"
NO_FAILURE_MSG = "expected failure but none was raised"


class Signal(Enum):
    """What the runner observed around a case body."""

    NONE = "none"
    FAILURE = "failure"
    UNKNOWN = "unknown"


def polarity_label(expect_fail: bool) -> str:
    """Return the report label for a case polarity."""
    return BADWEATHER if expect_fail else GOODWEATHER


def classify(signal: Signal, expect_fail: bool) -> bool:
    """Return True if the observed signal satisfies the case polarity.

    A good weather case passes only on normal completion; a bad weather case
    passes on any raised signal, whatever its message.
    """
    raised = signal is not Signal.NONE
    return raised if expect_fail else not raised


@dataclass(frozen=True)
class CaseResult:
    """Outcome of a single executed case.

    Attributes:
        case: The executed test case.
        signal: The signal observed while running the body.
        passed: Verdict after folding the signal against the polarity.
        elapsed_ms: Wall-clock duration of the body in whole milliseconds.
        message: Failure reason for a failed case, or the caught signal's
            description for a bad weather case that passed. ``None`` when
            there is nothing to report.
    """

    case: TestCase
    signal: Signal
    passed: bool
    elapsed_ms: int
    message: str | None = None

    @property
    def label(self) -> str:
        """Polarity label of the executed case."""
        return polarity_label(self.case.expect_fail)


@dataclass
class RunReport:
    """Aggregate result of one run."""

    results: list[CaseResult] = field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def total(self) -> int:
        """Number of cases executed."""
        return len(self.results)

    @property
    def failures(self) -> int:
        """Number of cases that failed."""
        return sum(1 for result in self.results if not result.passed)

    @property
    def passed(self) -> bool:
        """True if every case passed (vacuously true for an empty run)."""
        return self.failures == 0

    def add(self, result: CaseResult) -> None:
        """Record a case result and accumulate its elapsed time."""
        self.results.append(result)
        self.elapsed_ms += result.elapsed_ms
