from __future__ import annotations

from aocrunner import Day


class Day1(Day[int, list[int]]):
    """--- Day 1: Calorie Counting ---

    Each elf's inventory is a block of numbers separated by a blank line. Part one wants the
    largest total, part two the sum of the three largest.
    """

    day = 1
    example_input = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
    example_part_1_result = "24000"
    example_part_2_result = "45000"

    def execute_part_1(self, input: str) -> tuple[int, list[int]]:
        elf_carries = sorted(
            (sum(int(n) for n in block.split()) for block in input.strip().split("\n\n")),
            reverse=True,
        )
        return elf_carries[0], elf_carries

    def execute_part_2(self, input: str, context: list[int]) -> int:
        # Already sorted by part 1
        return sum(context[:3])
