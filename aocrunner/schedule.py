from __future__ import annotations

from datetime import datetime, timezone

from loguru import logger

from .config import DEFAULT_CONFIG, RunnerConfig
from .errors import UsageError

# From 2025 on, the event runs for twelve days instead of twenty-five.
SHORT_EVENT_FIRST_YEAR = 2025


def max_day(year: int) -> int:
    return 12 if year >= SHORT_EVENT_FIRST_YEAR else 25


def current_playable_day(
    year: int,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> int | None:
    """The latest day that has been released for `year`, or None outside of the event.

    Args:
        year: The configured event year.
        now: The moment to evaluate. Defaults to the current time. Naive datetimes are assumed
            to be in UTC.
        config: Supplies the event timezone and month.

    Returns:
        The day of the month in the event timezone, capped at `max_day(year)`, when `now` is
        inside the event month of `year`; None otherwise.
    """
    if now is None:
        now = datetime.now(tz=config.event_timezone)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(config.event_timezone)
    if local.year != year or local.month != config.event_month:
        return None
    return min(local.day, max_day(year))


def is_released(
    year: int,
    day: int,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> bool:
    """Whether the puzzle for `day` has opened.

    Outside of the event window every day counts as released.
    """
    playable = current_playable_day(year, now, config)
    return playable is None or day <= playable


def validate_day(year: int, day: int) -> int:
    last = max_day(year)
    if not 1 <= day <= last:
        raise UsageError(f"Day {day} is out of range, {year} has days 1 to {last}")
    return day


def resolve_days(
    year: int,
    day: int | None = None,
    all_days: bool = False,
    now: datetime | None = None,
    config: RunnerConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Turn the day selection from the command line into the list of days to run.

    Raises:
        UsageError: If the explicit day is out of range, both selectors are given, or neither
            is given and no day is currently playable.
    """
    if day is not None and all_days:
        raise UsageError("A specific day and all days cannot be selected together")

    if day is not None:
        return [validate_day(year, day)]

    if all_days:
        return list(range(1, max_day(year) + 1))

    playable = current_playable_day(year, now, config)
    if playable is None:
        raise UsageError(
            f"No puzzle for {year} is currently playable, select a day with --day or use --all"
        )
    logger.debug("Defaulting to the current playable day {}", playable)
    return [playable]


__all__ = (
    "max_day",
    "current_playable_day",
    "is_released",
    "validate_day",
    "resolve_days",
)
