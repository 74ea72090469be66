from __future__ import annotations

from . import day_1
from . import day_2

YEAR = 2022

solutions = [day_1.Day1(), day_2.Day2()]
