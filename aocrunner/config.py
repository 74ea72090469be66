from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, timezone
from typing import Final

AOC_BASE_URL: Final = "https://adventofcode.com"
USER_AGENT: Final = "github.com/aocrunner/aocrunner (puzzle input fetcher)"

# Puzzles unlock at midnight EST, regardless of daylight saving.
EVENT_TIMEZONE: Final = timezone(timedelta(hours=-5), "EST")
EVENT_MONTH: Final = 12


@dataclass(frozen=True)
class RunnerConfig:
    base_url: str = AOC_BASE_URL
    user_agent: str = USER_AGENT
    inputs_dirname: str = "inputs"
    session_filename: str = "session"
    event_timezone: timezone = EVENT_TIMEZONE
    event_month: int = EVENT_MONTH

    def input_url(self, year: int, day: int) -> str:
        return f"{self.base_url}/{year}/day/{day}/input"

    @staticmethod
    def input_filename(day: int) -> str:
        return f"day{day:02}"


DEFAULT_CONFIG: Final = RunnerConfig()

__all__ = ("RunnerConfig", "DEFAULT_CONFIG", "EVENT_TIMEZONE", "EVENT_MONTH")
