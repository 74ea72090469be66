from __future__ import annotations


class AocRunnerError(Exception):
    """Base class for all errors raised by the runner."""


class InitializationError(AocRunnerError):
    """The environment (working directory, inputs directory, session) could not be set up."""


class UsageError(AocRunnerError):
    """Invalid command line combination or day selection."""


class InputFetchError(AocRunnerError):
    def __init__(self, day: int, message: str) -> None:
        super().__init__(f"Day {day}: {message}")
        self.day = day


class ExecutionError(AocRunnerError):
    """A solution raised while running one of its parts.

    The original exception is available as `__cause__`.
    """

    def __init__(self, day: int, part: int, message: str) -> None:
        super().__init__(f"Day {day} part {part} failed: {message}")
        self.day = day
        self.part = part


__all__ = (
    "AocRunnerError",
    "InitializationError",
    "UsageError",
    "InputFetchError",
    "ExecutionError",
)
