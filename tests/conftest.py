from __future__ import annotations

import io
import math
from datetime import timedelta
from pathlib import Path
from typing import Callable, Iterator

import httpx
import pytest
from rich.console import Console

from aocrunner import Day
from aocrunner import day as day_module
from aocrunner.environment import AocEnvironment

YEAR = 2022
SESSION = "53616c7465645f5f"


class SumProductDay(Day[int, list[int]]):
    """Part one sums a comma separated list, part two multiplies it."""

    day = 1
    example_input = "1,2,3"
    example_part_1_result = "6"
    example_part_2_result = "6"

    def __init__(self) -> None:
        self.contexts: list[list[int]] = []

    def execute_part_1(self, input: str) -> tuple[int, list[int]]:
        numbers = [int(n) for n in input.split(",")]
        return sum(numbers), numbers

    def execute_part_2(self, input: str, context: list[int]) -> int:
        self.contexts.append(context)
        return math.prod(context)


class FakeClock:
    """Stands in for `perf_counter_ns`, making each timed call last the next queued duration."""

    def __init__(self, default: timedelta = timedelta(microseconds=10)) -> None:
        self.now = 0
        self.default = default
        self._durations: list[timedelta] = []
        self._started = False

    def queue(self, *durations: timedelta) -> None:
        self._durations.extend(durations)

    def __call__(self) -> int:
        if self._started:
            elapsed = self._durations.pop(0) if self._durations else self.default
            self.now += elapsed // timedelta(microseconds=1) * 1000
        self._started = not self._started
        return self.now


class InputServer:
    """Serves puzzle inputs through an `httpx.MockTransport`, recording every request."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def body(self, year: int, day: int) -> bytes:
        return f"{year},{day},{day * 2}\n".encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        year, _, day, _ = request.url.path.strip("/").split("/")
        return httpx.Response(self.status_code, content=self.body(int(year), int(day)))

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def sum_product_day() -> SumProductDay:
    return SumProductDay()


@pytest.fixture
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    clock = FakeClock()
    monkeypatch.setattr(day_module, "perf_counter_ns", clock)
    return clock


@pytest.fixture
def input_server() -> InputServer:
    return InputServer()


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    (tmp_path / "session").write_text(SESSION + "\n")
    return tmp_path


@pytest.fixture
def no_prompt() -> Callable[[str], str]:
    def _prompt(message: str) -> str:
        raise AssertionError("the session cookie should not be prompted for")

    return _prompt


@pytest.fixture
def env(
    working_dir: Path,
    input_server: InputServer,
    no_prompt: Callable[[str], str],
) -> Iterator[AocEnvironment]:
    with AocEnvironment.initialize(
        YEAR, working_dir, prompt=no_prompt, client=input_server.client()
    ) as environment:
        yield environment


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None, record=True)
