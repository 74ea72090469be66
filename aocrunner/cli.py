from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Sequence

import httpx
from loguru import logger
from rich.console import Console

from .config import DEFAULT_CONFIG, RunnerConfig
from .day import Day
from .environment import AocEnvironment
from .errors import InitializationError, UsageError
from .log import configure_logging
from .runner import RunOptions, run_days
from .schedule import resolve_days

EXIT_OK = 0
EXIT_INIT_FAILED = 1
EXIT_USAGE = 2


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value!r} must be at least 1")
    return number


def build_parser(year: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Test, run and time Advent of Code {year} solutions.",
    )

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "-d", "--day", type=positive_int, help="Run a specific day (default: today's puzzle)."
    )
    selection.add_argument("-a", "--all", action="store_true", help="Run every day.")

    tests = parser.add_mutually_exclusive_group()
    tests.add_argument(
        "--skip-tests", action="store_true", help="Don't run the examples before the real input."
    )
    tests.add_argument(
        "--tests-only", action="store_true", help="Only run the examples, never the real input."
    )

    parser.add_argument(
        "-n",
        "--runs",
        type=positive_int,
        default=1,
        help="Run the real input this many times and report timing statistics (default: 1).",
    )
    parser.add_argument(
        "--stop-on-test-failure",
        action="store_true",
        help="Don't run the real input for a day whose example failed.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more details; repeat for debug output.",
    )
    return parser


def select_solutions(
    solutions: Sequence[Day[Any, Any]],
    year: int,
    day: int | None,
    all_days: bool,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> list[Day[Any, Any]]:
    """Pick the registered solutions matching the day selection.

    Raises:
        UsageError: If the selection is invalid or refers to a day without a solution.
    """
    by_day = {solution.day: solution for solution in solutions}
    if len(by_day) != len(solutions):
        raise UsageError("More than one solution is registered for the same day")

    days = resolve_days(year, day, all_days, now, config)
    if all_days:
        return [by_day[d] for d in days if d in by_day]

    missing = [d for d in days if d not in by_day]
    if missing:
        raise UsageError(f"No solution registered for day {missing[0]}")
    return [by_day[d] for d in days]


def main(
    solutions: Sequence[Day[Any, Any]],
    year: int,
    argv: Sequence[str] | None = None,
    *,
    working_dir: Path | None = None,
    console: Console | None = None,
    prompt: Callable[[str], str] = input,
    client: httpx.Client | None = None,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> int:
    """Entry point for a solutions repository.

    Example:
        if __name__ == "__main__":
            sys.exit(main([Day1(), Day2()], year=2024))

    Returns:
        The process exit code: 0 when the requested days ran, 1 when the environment couldn't
        be set up and 2 on usage errors. Argument parsing errors exit through argparse with
        code 2.
    """
    console = console if console is not None else Console()
    args = build_parser(year).parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = RunOptions(
            skip_tests=args.skip_tests,
            tests_only=args.tests_only,
            run_count=args.runs,
            stop_on_test_failure=args.stop_on_test_failure,
        )
        selected = select_solutions(solutions, year, args.day, args.all, now, config)
    except UsageError as e:
        console.print(f"[red]error:[/] {e}")
        return EXIT_USAGE

    if options.tests_only:
        run_days(selected, year, None, options, console, now=now, config=config)
        return EXIT_OK

    try:
        env = AocEnvironment.initialize(
            year,
            working_dir,
            config=config,
            prompt=prompt,
            echo=console.print,
            client=client,
        )
    except InitializationError as e:
        logger.error("Could not initialize environment: {}", e)
        console.print(f"[red]error:[/] {e}")
        return EXIT_INIT_FAILED

    with env:
        run_days(selected, year, env, options, console, now=now, config=config)
    return EXIT_OK


__all__ = ("main", "build_parser", "select_solutions", "positive_int")
