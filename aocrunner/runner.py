from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable

from loguru import logger
from rich.console import Console

from . import report
from .config import DEFAULT_CONFIG, RunnerConfig
from .day import Day, ExecutionOutcome, Failed, TestOutcome, execute_day, test_day
from .environment import AocEnvironment
from .errors import AocRunnerError, ExecutionError, InputFetchError, UsageError
from .schedule import current_playable_day, is_released
from .stats import RunStatistics, compute_statistics


@dataclass(frozen=True)
class RunOptions:
    """How each selected day should be run.

    Attributes:
        skip_tests: Don't run the example before the real input.
        tests_only: Only run the example; don't fetch or run the real input.
        run_count: How many times to run the real input. With more than one run, timings are
            reported as statistics over all runs.
        stop_on_test_failure: Don't run the real input for a day whose example failed.
    """

    skip_tests: bool = False
    tests_only: bool = False
    run_count: int = 1
    stop_on_test_failure: bool = False

    def __post_init__(self) -> None:
        if self.skip_tests and self.tests_only:
            raise UsageError("Tests cannot be both skipped and the only thing run")
        if self.run_count < 1:
            raise UsageError(f"Run count must be at least 1, got {self.run_count}")


@dataclass
class DayReport:
    day: int
    tests: tuple[TestOutcome, TestOutcome] | None = None
    executions: list[ExecutionOutcome] = field(default_factory=list)
    skipped: str | None = None
    error: AocRunnerError | None = None

    @property
    def tests_failed(self) -> bool:
        return self.tests is not None and any(isinstance(t, Failed) for t in self.tests)

    @property
    def part_1_stats(self) -> RunStatistics | None:
        return self._stats([e.part_1_time for e in self.executions])

    @property
    def part_2_stats(self) -> RunStatistics | None:
        return self._stats([e.part_2_time for e in self.executions])

    @property
    def total_stats(self) -> RunStatistics | None:
        return self._stats([e.total_time for e in self.executions])

    @property
    def total_time(self) -> timedelta | None:
        """The time of the single run, or the median time when run repeatedly."""
        if not self.executions:
            return None
        if len(self.executions) == 1:
            return self.executions[0].total_time
        return compute_statistics(e.total_time for e in self.executions).median

    @staticmethod
    def _stats(durations: list[timedelta]) -> RunStatistics | None:
        return compute_statistics(durations) if durations else None


def run_day(
    solution: Day[Any, Any],
    year: int,
    env: AocEnvironment | None,
    options: RunOptions = RunOptions(),
    console: Console | None = None,
    *,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> DayReport:
    """Test and run a single day, printing the results as they come.

    Fetch and execution errors are logged and recorded on the returned report instead of
    being raised, so that the remaining days can still run.

    Args:
        solution: The day to run.
        year: The event year the inputs belong to.
        env: Source of the real puzzle inputs. Only needed when the real input is run.
        options: What to run and how many times.
        console: Where to print the results.
        now: Overrides the current time when deciding whether the day is released.
        config: Supplies the event timezone.
    """
    console = console if console is not None else Console()
    day = solution.day
    day_report = DayReport(day)

    report.print_day_header(console, day)

    if not options.skip_tests:
        day_report.tests = test_day(solution)
        for part, outcome in enumerate(day_report.tests, 1):
            report.print_test_outcome(console, part, outcome)

    if options.tests_only:
        return day_report

    # Only the real input is gated on the release date.
    if not is_released(year, day, now, config):
        playable = current_playable_day(year, now, config)
        logger.warning("Day {} has not been released yet, latest is day {}", day, playable)
        report.print_not_released(console, day, playable)
        day_report.skipped = "not released"
        return day_report

    if options.stop_on_test_failure and day_report.tests_failed:
        logger.warning("Day {} example failed, not running the real input", day)
        day_report.skipped = "example failed"
        return day_report

    if env is None:
        raise ValueError("An environment is required to run the real input")

    try:
        puzzle_input = env.fetch_input(day)
    except InputFetchError as e:
        logger.error("Day {}: fetching input failed: {}", day, e)
        console.print(f"[red]Could not fetch input for day {day}[/]")
        day_report.error = e
        return day_report

    try:
        for run in range(options.run_count):
            logger.debug("Day {} run {}/{}", day, run + 1, options.run_count)
            day_report.executions.append(execute_day(solution, puzzle_input))
    except ExecutionError as e:
        logger.error("Day {}: execution of part {} failed: {}", day, e.part, e.__cause__)
        console.print(f"[red]Day {day} part {e.part} failed[/]")
        day_report.error = e
        day_report.executions.clear()
        return day_report

    if options.run_count == 1:
        report.print_execution(console, day_report.executions[0])
    else:
        rows = [
            ("Part 1", day_report.part_1_stats),
            ("Part 2", day_report.part_2_stats),
            ("Total", day_report.total_stats),
        ]
        report.print_statistics(
            console,
            day_report.executions[-1],
            [(label, stats) for label, stats in rows if stats is not None],
        )
    return day_report


def run_days(
    solutions: Iterable[Day[Any, Any]],
    year: int,
    env: AocEnvironment | None,
    options: RunOptions = RunOptions(),
    console: Console | None = None,
    *,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> list[DayReport]:
    """Run each day in turn, then print a summary comparing their timings."""
    console = console if console is not None else Console()
    reports = [
        run_day(solution, year, env, options, console, now=now, config=config)
        for solution in solutions
    ]
    if not options.tests_only:
        report.print_summary(console, reports, repeated=options.run_count > 1)
    return reports


__all__ = ("RunOptions", "DayReport", "run_day", "run_days")
