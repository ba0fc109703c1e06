"""Run reporters.

Reporters receive the runner's progress events. `ConsoleReporter` renders the
human-readable report; `RecordingReporter` keeps the events in memory for
drivers that want to inspect a run after the fact.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, TextIO

import click

from shocktest.config import get_color_setting

if TYPE_CHECKING:
    from shocktest.outcomes import CaseResult, RunReport
    from shocktest.registry import TestCase

# Fixed-width markers keep case names aligned.
LABEL_HEADER = "[==========]"
LABEL_RUN = "[ RUN      ]"
LABEL_OK = "[       OK ]"
LABEL_FAILED = "[  FAILED  ]"
LABEL_PASSED = "[  PASSED  ]"


class Reporter(abc.ABC):
    """Receiver of runner progress events."""

    @abc.abstractmethod
    def run_started(self, total: int) -> None:
        """Called once before the first case runs."""

    @abc.abstractmethod
    def case_started(self, case: TestCase) -> None:
        """Called right before a case body is invoked."""

    @abc.abstractmethod
    def case_finished(self, result: CaseResult) -> None:
        """Called once a case has been classified."""

    @abc.abstractmethod
    def run_finished(self, report: RunReport) -> None:
        """Called once after the last case."""


class ConsoleReporter(Reporter):
    """Write the progress and summary report to a text stream.

    Args:
        file: Destination stream. ``None`` writes to whatever ``sys.stdout``
            is at the time of each write, so redirections are honoured.
        color: ``True``/``False`` to force or suppress ANSI styling. ``None``
            falls back to `SHOCKTEST_COLOR`, then to Click's terminal detection.
    """

    def __init__(self, file: TextIO | None = None, color: bool | None = None) -> None:
        self._file = file
        self._color = color if color is not None else get_color_setting()

    def _echo(self, message: str = "") -> None:
        click.echo(message, file=self._file, color=self._color)

    @staticmethod
    def _polarity(expect_fail: bool) -> str:
        if expect_fail:
            return click.style("BADWEATHER", fg="red")
        return click.style("GOODWEATHER", fg="green")

    def run_started(self, total: int) -> None:
        self._echo(f"{click.style(LABEL_HEADER, fg='green')} Running {total} tests")

    def case_started(self, case: TestCase) -> None:
        run = click.style(LABEL_RUN, fg="green")
        self._echo(f"{run} {self._polarity(case.expect_fail)} {case.name} ...")

    def case_finished(self, result: CaseResult) -> None:
        polarity = self._polarity(result.case.expect_fail)
        name = result.case.name
        if result.passed:
            line = f"{click.style(LABEL_OK, fg='green')} {polarity} {name} ({result.elapsed_ms} ms)"
            if result.message:
                line += f" - {result.message}"
            self._echo(line)
        else:
            self._echo()
            self._echo(
                f"{click.style(LABEL_FAILED, fg='red')} {polarity} {name}"
                f" - {result.message} ({result.elapsed_ms} ms)"
            )

    def run_finished(self, report: RunReport) -> None:
        self._echo(f"{click.style(LABEL_HEADER, fg='green')} {report.total} tests ran.")
        if report.passed:
            self._echo(
                f"{click.style(LABEL_PASSED, fg='green')} {report.total} test(s)"
                f" ({report.elapsed_ms} ms total)"
            )
        else:
            self._echo(
                f"{click.style(LABEL_FAILED, fg='red')} {report.failures} test(s),"
                f" out of {report.total} ({report.elapsed_ms} ms total)"
            )


class RecordingReporter(Reporter):
    """Keep every runner event in memory.

    Attributes:
        events: ``(event_name, payload)`` tuples in the order received.
        results: Case results in the order they finished.
        report: The final report once the run has finished.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []
        self.results: list[CaseResult] = []
        self.report: RunReport | None = None

    def run_started(self, total: int) -> None:
        self.events.append(("run_started", total))

    def case_started(self, case: TestCase) -> None:
        self.events.append(("case_started", case))

    def case_finished(self, result: CaseResult) -> None:
        self.events.append(("case_finished", result))
        self.results.append(result)

    def run_finished(self, report: RunReport) -> None:
        self.events.append(("run_finished", report))
        self.report = report

