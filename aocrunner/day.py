from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from time import perf_counter_ns
from typing import Callable, ClassVar, Generic, TypeAlias, TypeVar, Union

from loguru import logger

from .errors import ExecutionError
from .protocols.type_aliases import CtxT, OutT

_R = TypeVar("_R")


class Day(ABC, Generic[OutT, CtxT]):
    """A solution for one day of the event.

    Subclasses declare the day number and the example from the puzzle description as class
    attributes, and implement both parts. Part one returns its answer together with a context
    value that is handed, untouched, to part two of the same run. The context can be anything
    (parsed input, intermediate results) and is never looked at by the runner.

    Example:
        class Day1(Day[int, list[int]]):
            day = 1
            example_input = "1,2,3"
            example_part_1_result = "6"
            example_part_2_result = "6"

            def execute_part_1(self, input: str) -> tuple[int, list[int]]:
                numbers = [int(n) for n in input.split(",")]
                return sum(numbers), numbers

            def execute_part_2(self, input: str, context: list[int]) -> int:
                return math.prod(context)

    The answers are compared to the expected example results by their `str()`.
    """

    day: ClassVar[int]
    example_input: ClassVar[str]
    example_part_1_result: ClassVar[str]
    # Leave empty until part two is unlocked; part two of the example is then not run.
    example_part_2_result: ClassVar[str] = ""

    @abstractmethod
    def execute_part_1(self, input: str) -> tuple[OutT, CtxT]:
        ...

    @abstractmethod
    def execute_part_2(self, input: str, context: CtxT) -> OutT:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} day={self.day}>"


@dataclass(frozen=True)
class NotRun:
    reason: str = ""


@dataclass(frozen=True)
class Passed:
    duration: timedelta


@dataclass(frozen=True)
class Failed:
    expected: str
    actual: str


TestOutcome: TypeAlias = Union[NotRun, Passed, Failed]


@dataclass(frozen=True)
class ExecutionOutcome:
    part_1_result: str
    part_1_time: timedelta
    part_2_result: str
    part_2_time: timedelta

    @property
    def total_time(self) -> timedelta:
        return self.part_1_time + self.part_2_time


def _timed(fn: Callable[[], _R]) -> tuple[_R, timedelta]:
    """Call `fn` and measure how long it took.

    `timedelta` only resolves whole microseconds, so the nanosecond reading is rounded up:
    anything that took time at all reports at least 1µs.
    """
    start = perf_counter_ns()
    result = fn()
    elapsed = perf_counter_ns() - start
    return result, timedelta(microseconds=-(-elapsed // 1000))


def run_part_1(solution: Day[OutT, CtxT], input: str) -> tuple[str, CtxT, timedelta]:
    """Run part one, returning its rendered answer, the context for part two and the time taken."""
    logger.debug("Starting part 1 for day {}", solution.day)
    try:
        (answer, context), elapsed = _timed(lambda: solution.execute_part_1(input))
        result = str(answer)
    except Exception as e:
        raise ExecutionError(solution.day, 1, repr(e)) from e
    logger.info("Part 1 completed in {}, result: {}", elapsed, result)
    return result, context, elapsed


def run_part_2(solution: Day[OutT, CtxT], input: str, context: CtxT) -> tuple[str, timedelta]:
    logger.debug("Starting part 2 for day {}", solution.day)
    try:
        answer, elapsed = _timed(lambda: solution.execute_part_2(input, context))
        result = str(answer)
    except Exception as e:
        raise ExecutionError(solution.day, 2, repr(e)) from e
    logger.info("Part 2 completed in {}, result: {}", elapsed, result)
    return result, elapsed


def _check(expected: str, actual: str, elapsed: timedelta) -> TestOutcome:
    if actual == expected:
        return Passed(elapsed)
    return Failed(expected, actual)


def _error_text(error: ExecutionError) -> str:
    return f"<error: {error.__cause__!r}>"


def test_day(
    solution: Day[OutT, CtxT],
    skip_part_2: bool = False,
) -> tuple[TestOutcome, TestOutcome]:
    """Run both parts against the example and compare them to the expected results.

    A part that raises is reported as failed rather than propagated. Part two is not run when
    `skip_part_2` is set, when the example has no expected part two result, or when part one
    failed to produce a context.

    Returns:
        The outcome of part one and part two.
    """
    logger.info("Running tests for day {}", solution.day)
    input = solution.example_input

    try:
        result_1, context, elapsed_1 = run_part_1(solution, input)
    except ExecutionError as e:
        logger.error("Example for day {} failed in part 1: {}", solution.day, e.__cause__)
        return Failed(solution.example_part_1_result, _error_text(e)), NotRun("part 1 failed")
    part_1 = _check(solution.example_part_1_result, result_1, elapsed_1)

    if skip_part_2:
        return part_1, NotRun("skipped")
    if not solution.example_part_2_result:
        return part_1, NotRun("no expected result")

    try:
        result_2, elapsed_2 = run_part_2(solution, input, context)
    except ExecutionError as e:
        logger.error("Example for day {} failed in part 2: {}", solution.day, e.__cause__)
        return part_1, Failed(solution.example_part_2_result, _error_text(e))
    return part_1, _check(solution.example_part_2_result, result_2, elapsed_2)


# Not a test function, despite the name.
test_day.__test__ = False  # type: ignore[attr-defined]


def execute_day(solution: Day[OutT, CtxT], input: str) -> ExecutionOutcome:
    """Run both parts against the real puzzle input.

    Raises:
        ExecutionError: If either part raises; `part` tells which one.
    """
    logger.info("Executing day {} with actual input", solution.day)
    result_1, context, elapsed_1 = run_part_1(solution, input)
    result_2, elapsed_2 = run_part_2(solution, input, context)
    return ExecutionOutcome(result_1, elapsed_1, result_2, elapsed_2)


__all__ = (
    "Day",
    "NotRun",
    "Passed",
    "Failed",
    "TestOutcome",
    "ExecutionOutcome",
    "run_part_1",
    "run_part_2",
    "test_day",
    "execute_day",
)
