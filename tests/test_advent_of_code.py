from __future__ import annotations

import pytest

from aocrunner import Day
from aocrunner import day as day_module
from aocrunner.day import Passed

from examples.advent_of_code import day_1, day_2, solutions


@pytest.mark.parametrize("solution", solutions, ids=lambda s: f"day_{s.day}")
def test_examples_pass(solution: Day[int, object]) -> None:
    part_1, part_2 = day_module.test_day(solution)
    assert isinstance(part_1, Passed)
    assert isinstance(part_2, Passed)


@pytest.mark.parametrize(
    ("solution", "input", "result_1", "result_2"),
    (
        (day_1.Day1(), "1\n2\n\n10\n\n3\n4\n\n1\n", "10", "20"),
        (day_2.Day2(), "A X\nC Y\n", "6", "9"),
    ),
)
def test_day(solution: Day[int, object], input: str, result_1: str, result_2: str) -> None:
    outcome = day_module.execute_day(solution, input)
    assert (outcome.part_1_result, outcome.part_2_result) == (result_1, result_2)
