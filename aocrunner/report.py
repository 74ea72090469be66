from __future__ import annotations

from datetime import timedelta
from itertools import repeat
from typing import TYPE_CHECKING, Iterable, Sequence

from rich.console import Console, ConsoleOptions, RenderResult
from rich.markup import escape
from rich.rule import Rule
from rich.segment import Segment
from rich.style import Style
from rich.table import Table

from .day import ExecutionOutcome, Failed, NotRun, Passed, TestOutcome
from .stats import RunStatistics, sum_medians

if TYPE_CHECKING:
    from .runner import DayReport


def format_duration(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.1f}µs"


def _make_bar(value: float, max_value: float, width: int, style: Style) -> RenderResult:
    partial_bars = "▏▎▍▌▋▊▉"

    bar = Segment("█", style)
    space = Segment(" ")
    if max_value <= 0:
        yield from repeat(space, width)
        return

    whole, partial = divmod((value / max_value) * width, 1)
    whole = min(int(whole), width)
    yield from repeat(bar, whole)
    if whole < width:
        yield Segment(partial_bars[int(partial * len(partial_bars))], style)
        yield from repeat(space, width - whole - 1)


class TimingBars:
    """Horizontal bars comparing the time taken by each day, scaled to the slowest one."""

    LABEL_WIDTH = 8
    TIME_WIDTH = 12

    def __init__(self, timings: Sequence[tuple[int, timedelta]]) -> None:
        self.timings = timings

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not self.timings:
            return
        slowest = max(t.total_seconds() for _, t in self.timings)
        width = max(options.max_width - self.LABEL_WIDTH - self.TIME_WIDTH - 2, 1)
        for day, timing in self.timings:
            yield Segment(f"Day {day:>2}".ljust(self.LABEL_WIDTH), Style(color="blue"))
            yield from _make_bar(
                timing.total_seconds(), slowest, width, Style(color="green", bold=True)
            )
            yield Segment(" " + format_duration(timing).rjust(self.TIME_WIDTH))
            yield Segment.line()


def print_day_header(console: Console, day: int) -> None:
    console.print(Rule(f"[bold]Day {day}[/bold]"))


def print_not_released(console: Console, day: int, playable: int | None) -> None:
    console.print(
        f"[yellow]Day {day} has not been released yet (latest is day {playable}), skipping[/]"
    )


def print_test_outcome(console: Console, part: int, outcome: TestOutcome) -> None:
    if isinstance(outcome, Passed):
        console.print(
            f"  Test part {part}: [green]passed[/] in {format_duration(outcome.duration)}"
        )
    elif isinstance(outcome, Failed):
        console.print(
            f"  Test part {part}: [red]failed[/], expected [bold]{escape(outcome.expected)}[/], "
            f"got [bold]{escape(outcome.actual)}[/]"
        )
    elif isinstance(outcome, NotRun):
        reason = f" ({outcome.reason})" if outcome.reason else ""
        console.print(f"  Test part {part}: [dim]skipped{reason}[/]")


def print_execution(console: Console, outcome: ExecutionOutcome) -> None:
    parts = (
        (outcome.part_1_result, outcome.part_1_time),
        (outcome.part_2_result, outcome.part_2_time),
    )
    for part, (result, elapsed) in enumerate(parts, 1):
        console.print(f"  Part {part}: [bold]{escape(result)}[/] in {format_duration(elapsed)}")
    console.print(f"  Total: {format_duration(outcome.total_time)}")


def print_statistics(
    console: Console,
    outcome: ExecutionOutcome,
    rows: Iterable[tuple[str, RunStatistics]],
) -> None:
    console.print(f"  Part 1: [bold]{escape(outcome.part_1_result)}[/]")
    console.print(f"  Part 2: [bold]{escape(outcome.part_2_result)}[/]")

    table = Table(title=None, box=None, padding=(0, 2))
    table.add_column("")
    for column in ("min", "median", "mean", "max"):
        table.add_column(column, justify="right")
    for label, stats in rows:
        table.add_row(
            label,
            format_duration(stats.min),
            format_duration(stats.median),
            format_duration(stats.mean),
            format_duration(stats.max),
        )
    console.print(table)


def print_summary(console: Console, reports: Sequence[DayReport], repeated: bool) -> None:
    timings = [(r.day, r.total_time) for r in reports if r.total_time is not None]
    if not timings:
        return

    console.print(Rule("[bold]Summary[/bold]"))
    if len(timings) > 1:
        console.print(TimingBars(timings))

    if repeated:
        # Sum of each day's median total; not the median of the combined runs.
        total = sum_medians(r.total_stats for r in reports if r.total_stats is not None)
        console.print(f"Total (sum of daily medians): [bold]{format_duration(total)}[/]")
    else:
        total = sum((t for _, t in timings), timedelta())
        console.print(f"Total: [bold]{format_duration(total)}[/]")


__all__ = (
    "format_duration",
    "TimingBars",
    "print_day_header",
    "print_not_released",
    "print_test_outcome",
    "print_execution",
    "print_statistics",
    "print_summary",
)
