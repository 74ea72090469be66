from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable


@dataclass(frozen=True)
class RunStatistics:
    min: timedelta
    max: timedelta
    median: timedelta
    mean: timedelta
    count: int


def compute_statistics(durations: Iterable[timedelta]) -> RunStatistics:
    """Summarise the durations measured over repeated runs of a single part.

    Args:
        durations: The measured durations, in the order they were taken.

    Returns:
        The minimum, maximum, median and mean duration. For an even number of samples the
        median is the average of the two central values.

    Raises:
        ValueError: If no durations are given.
    """
    ordered = sorted(durations)
    if not ordered:
        raise ValueError("Cannot compute statistics over zero durations")

    count = len(ordered)
    middle = count // 2
    if count % 2:
        median = ordered[middle]
    else:
        median = (ordered[middle - 1] + ordered[middle]) / 2

    return RunStatistics(
        min=ordered[0],
        max=ordered[-1],
        median=median,
        mean=sum(ordered, timedelta()) / count,
        count=count,
    )


def sum_medians(stats: Iterable[RunStatistics]) -> timedelta:
    """Add up the medians of several days.

    Note that this is not the median of the combined totals, just an approximation of a
    typical full run used for the grand total line.
    """
    return sum((s.median for s in stats), timedelta())


__all__ = ("RunStatistics", "compute_statistics", "sum_medians")
