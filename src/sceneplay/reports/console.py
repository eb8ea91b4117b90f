"""Console reporter for scenario output using Rich."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.traceback import Traceback

from sceneplay.reports.base import Reporter
from sceneplay.testing.models import TestStatus
from sceneplay.version import __version__


if TYPE_CHECKING:
    from sceneplay.testing.models import Description, RunResult


_STATUS_CONFIG: dict[TestStatus, tuple[str, str, str]] = {
    TestStatus.PASSED: ("✓", "green", "PASSED"),
    TestStatus.FAILED: ("✗", "red", "FAILED"),
    TestStatus.ERROR: ("!", "yellow", "ERROR"),
}


@dataclass
class _Failure:
    description: Description
    status: TestStatus
    error: BaseException


class ConsoleReporter(Reporter):
    """Reporter that outputs test results to the console using Rich formatting.

    ``verbosity`` below zero prints failures only, zero prints one symbol per
    test and anything above prints one line per test.
    """

    def __init__(
        self, console: Console | None = None, verbosity: int = 0, show_locals: bool = False
    ) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity
        self.show_locals = show_locals
        self._failures: list[_Failure] = []
        self._current_error: BaseException | None = None
        self._current_scenario: type | None = None
        self._header_printed = False

    def _status_symbol(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][0]

    def _status_color(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][1]

    def _status_label(self, status: TestStatus) -> str:
        return _STATUS_CONFIG[status][2]

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def _print_run_header(self) -> None:
        self._print_section_header("SCENEPLAY RUN STARTS")
        self.console.print(
            f"platform {platform.platform()} -- python {sys.version.split()[0]} "
            f"-- sceneplay {__version__}"
        )
        self.console.print()

    def _print_scenario_header(self, scenario_class: type) -> None:
        if self._current_scenario is not None:
            self.console.print()
        name = escape(scenario_class.__qualname__)
        if self.verbosity == 0:
            self.console.print(f" • {name} ", end="")
        else:
            self.console.print(f"• {name}")
        self._current_scenario = scenario_class

    def on_collection_complete(self, description: Description) -> None:
        if not self._header_printed:
            self._print_run_header()
            self._header_printed = True
        if self.verbosity > 0:
            self.console.print(
                f"[bold]Collected {len(description.children)} tests from "
                f"{escape(description.name)}[/bold]"
            )

    def on_test_start(self, description: Description) -> None:
        self._current_error = None

    def on_test_failure(self, description: Description, error: BaseException) -> None:
        self._current_error = error
        self._failures.append(_Failure(description, TestStatus.for_error(error), error))

    def on_test_finish(self, description: Description, duration_ms: float) -> None:
        status = TestStatus.for_error(self._current_error)
        self._current_error = None

        if self.verbosity < 0:
            return
        if self._current_scenario is not description.scenario_class:
            self._print_scenario_header(description.scenario_class)

        color = self._status_color(status)
        if self.verbosity == 0:
            self.console.print(f"[{color}]{self._status_symbol(status)}[/{color}]", end="")
            return

        duration = f"[dim]({duration_ms:.1f}ms)[/dim]"
        label = self._status_label(status)
        self.console.print(f"  • {escape(description.name)} {duration} [{color}]{label}[/{color}]")

    def on_run_complete(self, run_result: RunResult) -> None:
        if self.verbosity == 0 and self._current_scenario is not None:
            self.console.print()
        if not run_result.total:
            self.console.print("[yellow]No tests found.[/yellow]")
        if self._failures:
            self._print_failures()
        self._print_summary(run_result)

    def _format_error(self, error: BaseException) -> str | Traceback:
        if error.__traceback__:
            return Traceback.from_exception(
                type(error),
                error,
                error.__traceback__,
                suppress=[__import__("sceneplay")],
                show_locals=self.show_locals,
            )
        return escape(f"{type(error).__name__}: {error}")

    def _print_failures(self) -> None:
        self.console.print()
        self._print_section_header("FAILURES")

        for index, failure in enumerate(self._failures):
            if index:
                self.console.print()
            color = self._status_color(failure.status)
            self.console.print(
                Panel(
                    self._format_error(failure.error),
                    title=escape(failure.description.display_name),
                    title_align="left",
                    border_style=color,
                    expand=True,
                    padding=(1, 1),
                )
            )

        self.console.print()

    def _print_summary(self, run_result: RunResult) -> None:
        parts = []
        if run_result.passed:
            parts.append(f"[green]{run_result.passed} passed[/green]")
        if run_result.failed:
            parts.append(f"[red]{run_result.failed} failed[/red]")
        if run_result.errors:
            parts.append(f"[yellow]{run_result.errors} errors[/yellow]")

        summary = ", ".join(parts) if parts else "[dim]0 tests[/dim]"
        self.console.print()
        self._print_section_header("SUMMARY")
        self.console.print(
            f"[bold]{summary} in {run_result.total_duration_ms:.0f}ms[/bold]", justify="center"
        )
        self.console.print("=" * self.console.width)
