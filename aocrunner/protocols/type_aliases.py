from __future__ import annotations

from typing import Any, Protocol, TypeVar


class Renderable(Protocol):
    """An answer that can be printed and compared against the expected text.

    Every object satisfies this structurally; the bound on `OutT` only documents what the runner
    does with an answer (`str()` it and compare it) and is never checked at runtime.
    """

    def __str__(self) -> str:
        ...

    def __eq__(self, other: Any) -> bool:
        ...


OutT = TypeVar("OutT", bound=Renderable)
CtxT = TypeVar("CtxT")
