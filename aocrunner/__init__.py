from __future__ import annotations

from aocrunner import day, environment, errors, runner, schedule, stats
from aocrunner.cli import main
from aocrunner.day import *
from aocrunner.environment import *
from aocrunner.errors import *
from aocrunner.runner import *
from aocrunner.schedule import *
from aocrunner.stats import *

__all__ = (
    *day.__all__,
    *environment.__all__,
    *errors.__all__,
    *runner.__all__,
    *schedule.__all__,
    *stats.__all__,
    "main",
)
