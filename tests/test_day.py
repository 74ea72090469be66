from __future__ import annotations

from datetime import timedelta

import pytest

from aocrunner import day as day_module
from aocrunner.day import ExecutionOutcome, Failed, NotRun, Passed
from aocrunner.errors import ExecutionError

from tests.conftest import FakeClock, SumProductDay


class WrongPart2Day(SumProductDay):
    example_part_2_result = "7"


class Part1OnlyDay(SumProductDay):
    example_part_2_result = ""


class BrokenPart1Day(SumProductDay):
    def execute_part_1(self, input: str) -> tuple[int, list[int]]:
        raise ValueError("bad input")


class BrokenPart2Day(SumProductDay):
    def execute_part_2(self, input: str, context: list[int]) -> int:
        raise ZeroDivisionError("division by zero")


def test_example_passes(sum_product_day: SumProductDay, fake_clock: FakeClock) -> None:
    fake_clock.queue(timedelta(microseconds=3), timedelta(microseconds=5))

    part_1, part_2 = day_module.test_day(sum_product_day)

    assert part_1 == Passed(timedelta(microseconds=3))
    assert part_2 == Passed(timedelta(microseconds=5))


def test_example_with_real_clock(sum_product_day: SumProductDay) -> None:
    part_1, part_2 = day_module.test_day(sum_product_day)

    assert isinstance(part_1, Passed)
    assert isinstance(part_2, Passed)
    assert part_1.duration > timedelta(0)
    assert part_2.duration > timedelta(0)


def test_example_is_deterministic() -> None:
    outcomes = [day_module.test_day(WrongPart2Day()) for _ in range(5)]
    assert {tuple(type(o) for o in pair) for pair in outcomes} == {(Passed, Failed)}


def test_part_2_receives_part_1_context(sum_product_day: SumProductDay) -> None:
    day_module.test_day(sum_product_day)
    day_module.execute_day(sum_product_day, "4,5")

    assert sum_product_day.contexts == [[1, 2, 3], [4, 5]]


def test_mismatch_reports_expected_and_actual(fake_clock: FakeClock) -> None:
    part_1, part_2 = day_module.test_day(WrongPart2Day())

    assert isinstance(part_1, Passed)
    assert part_2 == Failed(expected="7", actual="6")


def test_part_2_not_run_without_expected_result() -> None:
    solution = Part1OnlyDay()
    part_1, part_2 = day_module.test_day(solution)

    assert isinstance(part_1, Passed)
    assert isinstance(part_2, NotRun)
    assert solution.contexts == []


def test_part_2_not_run_when_skipped(sum_product_day: SumProductDay) -> None:
    _, part_2 = day_module.test_day(sum_product_day, skip_part_2=True)
    assert part_2 == NotRun("skipped")


def test_part_1_error_is_a_failure() -> None:
    part_1, part_2 = day_module.test_day(BrokenPart1Day())

    assert isinstance(part_1, Failed)
    assert part_1.expected == "6"
    assert "bad input" in part_1.actual
    assert isinstance(part_2, NotRun)


def test_part_2_error_is_a_failure() -> None:
    part_1, part_2 = day_module.test_day(BrokenPart2Day())

    assert isinstance(part_1, Passed)
    assert isinstance(part_2, Failed)
    assert "division by zero" in part_2.actual


def test_execute_day(sum_product_day: SumProductDay, fake_clock: FakeClock) -> None:
    fake_clock.queue(timedelta(milliseconds=2), timedelta(milliseconds=3))

    outcome = day_module.execute_day(sum_product_day, "2,3,4")

    assert outcome == ExecutionOutcome(
        part_1_result="9",
        part_1_time=timedelta(milliseconds=2),
        part_2_result="24",
        part_2_time=timedelta(milliseconds=3),
    )
    assert outcome.total_time == timedelta(milliseconds=5)


@pytest.mark.parametrize(("solution", "part"), ((BrokenPart1Day(), 1), (BrokenPart2Day(), 2)))
def test_execute_day_tags_failing_part(solution: SumProductDay, part: int) -> None:
    with pytest.raises(ExecutionError) as exc_info:
        day_module.execute_day(solution, "1,2")

    assert exc_info.value.day == 1
    assert exc_info.value.part == part
    assert exc_info.value.__cause__ is not None


def test_day_is_abstract() -> None:
    with pytest.raises(TypeError):
        day_module.Day()  # type: ignore[abstract]


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class UnprintablePart2Day(SumProductDay):
    def execute_part_2(  # type: ignore[override]
        self, input: str, context: list[int]
    ) -> Unprintable:
        return Unprintable()


def test_unrenderable_answer_fails_the_example() -> None:
    part_1, part_2 = day_module.test_day(UnprintablePart2Day())

    assert isinstance(part_1, Passed)
    assert isinstance(part_2, Failed)
    assert "cannot render" in part_2.actual


def test_unrenderable_answer_is_an_execution_error() -> None:
    with pytest.raises(ExecutionError) as exc_info:
        day_module.execute_day(UnprintablePart2Day(), "1,2")

    assert exc_info.value.part == 2
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.parametrize(
    ("elapsed_ns", "expected"),
    (
        (1, timedelta(microseconds=1)),
        (999, timedelta(microseconds=1)),
        (1001, timedelta(microseconds=2)),
    ),
)
def test_sub_microsecond_timings_round_up(
    monkeypatch: pytest.MonkeyPatch, elapsed_ns: int, expected: timedelta
) -> None:
    readings = iter((1_000_000, 1_000_000 + elapsed_ns))
    monkeypatch.setattr(day_module, "perf_counter_ns", lambda: next(readings))

    part_1, _ = day_module.test_day(SumProductDay(), skip_part_2=True)

    assert part_1 == Passed(expected)
