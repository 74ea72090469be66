from __future__ import annotations

from aocrunner import Day

Round = tuple[str, str]

SHAPE_SCORE = {"A": 1, "B": 2, "C": 3}
# What beats each shape, and what each shape beats.
BEATEN_BY = {"A": "B", "B": "C", "C": "A"}
BEATS = {v: k for k, v in BEATEN_BY.items()}


def _outcome_score(opponent: str, mine: str) -> int:
    if mine == opponent:
        return 3
    return 6 if BEATEN_BY[opponent] == mine else 0


class Day2(Day[int, list[Round]]):
    """--- Day 2: Rock Paper Scissors ---

    The strategy guide lists the opponent's shape (A, B, C for rock, paper, scissors) and a
    second column. In part one the second column is our shape (X, Y, Z); in part two it's the
    result the round needs to end in (lose, draw, win).
    """

    day = 2
    example_input = "A Y\nB X\nC Z\n"
    example_part_1_result = "15"
    example_part_2_result = "12"

    def execute_part_1(self, input: str) -> tuple[int, list[Round]]:
        rounds = [(line[0], line[2]) for line in input.splitlines() if line]
        played = {"X": "A", "Y": "B", "Z": "C"}

        score = 0
        for opponent, column in rounds:
            mine = played[column]
            score += SHAPE_SCORE[mine] + _outcome_score(opponent, mine)
        return score, rounds

    def execute_part_2(self, input: str, context: list[Round]) -> int:
        choose = {"X": BEATS.get, "Y": lambda shape: shape, "Z": BEATEN_BY.get}

        score = 0
        for opponent, column in context:
            mine = choose[column](opponent)
            score += SHAPE_SCORE[mine] + _outcome_score(opponent, mine)
        return score
