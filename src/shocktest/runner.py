"""Test execution engine.

Runs every registered case in registration order, one at a time, and folds
what each body raised against the case's polarity. Every signal a body can
raise is contained at the case boundary, so one failing case never stops the
cases registered after it. `KeyboardInterrupt` is the exception: an operator
interrupt ends the whole run.

Embedding:
    Test modules that only want the stock behaviour end with::

        if __name__ == "__main__":
            shocktest.main()

    Custom drivers call `run_all` instead, inspect its return value, and may
    `clear` and repopulate the registry between calls.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn

from shocktest.config import MAX_EXIT_STATUS
from shocktest.outcomes import (
    NO_FAILURE_MSG,
    UNKNOWN_ERROR_MSG,
    CaseResult,
    RunReport,
    Signal,
    classify,
)
from shocktest.registry import default_registry
from shocktest.reporting import ConsoleReporter

if TYPE_CHECKING:
    from shocktest.registry import Registry, TestBody, TestCase
    from shocktest.reporting import Reporter

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def invoke(body: TestBody) -> tuple[Signal, str | None]:
    """Call a case body and report which signal, if any, it raised.

    Returns:
        ``(Signal.NONE, None)`` on normal completion, ``(Signal.FAILURE, msg)``
        for any ``Exception``, and ``(Signal.UNKNOWN, "unknown error")`` for
        any other ``BaseException`` except ``KeyboardInterrupt``.
    """
    try:
        body()
    except KeyboardInterrupt:
        raise
    except Exception as exc:  # pylint: disable=broad-except
        logger.debug("Case body raised %s", type(exc).__name__, exc_info=True)
        return Signal.FAILURE, _describe(exc)
    except BaseException:  # pylint: disable=broad-except
        logger.debug("Case body raised an unrecognized signal", exc_info=True)
        return Signal.UNKNOWN, UNKNOWN_ERROR_MSG
    return Signal.NONE, None


class Runner:
    """Execute the cases of a registry and report on them.

    Args:
        registry: Cases to run, in registration order.
        reporter: Receiver of progress events.
        clock: Monotonic clock returning seconds.
    """

    def __init__(
        self,
        registry: Registry,
        reporter: Reporter,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.registry = registry
        self.reporter = reporter
        self._clock = clock

    def run_case(self, case: TestCase) -> CaseResult:
        """Execute one case and classify its outcome."""
        self.reporter.case_started(case)
        logger.debug("Running case %s", case.name)

        start = self._clock()
        signal, message = invoke(case.body)
        elapsed_ms = int((self._clock() - start) * 1000)

        passed = classify(signal, case.expect_fail)
        if signal is Signal.NONE and not passed:
            message = NO_FAILURE_MSG
        result = CaseResult(
            case=case,
            signal=signal,
            passed=passed,
            elapsed_ms=elapsed_ms,
            message=message,
        )

        logger.debug(
            "Case %s %s in %d ms",
            case.name,
            "passed" if passed else "failed",
            elapsed_ms,
        )
        self.reporter.case_finished(result)
        return result

    def run(self) -> RunReport:
        """Run every case and return the aggregate report."""
        # Snapshot so a body that registers more cases cannot alter this run.
        cases = list(self.registry)
        report = RunReport()

        self.reporter.run_started(len(cases))
        for case in cases:
            report.add(self.run_case(case))
        self.reporter.run_finished(report)

        logger.info(
            "Ran %d cases: %d failed (%d ms)",
            report.total,
            report.failures,
            report.elapsed_ms,
        )
        return report


def run_all(
    registry: Registry | None = None, reporter: Reporter | None = None
) -> int:
    """Run all registered cases and return the number that failed.

    Args:
        registry: Registry to run; defaults to the process-wide registry.
        reporter: Progress receiver; defaults to a `ConsoleReporter` on stdout.

    Returns:
        The failure count. ``0`` means every case passed.
    """
    runner = Runner(
        registry if registry is not None else default_registry(),
        reporter if reporter is not None else ConsoleReporter(),
    )
    return runner.run().failures


def exit_status(failures: int) -> int:
    """Map a failure count onto a process exit status.

    Counts above the platform's single-byte range are capped rather than
    wrapped, so a run with 256 failures never reports success.
    """
    return max(0, min(failures, MAX_EXIT_STATUS))


def main() -> NoReturn:
    """Run the process-wide registry and exit with its failure count."""
    sys.exit(exit_status(run_all()))
