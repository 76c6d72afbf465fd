"""
Explicit result type for the decode pipeline. Each sub-step (tokenize, resolve charset,
scheme decode, charset convert) returns a Step; the first failed Step short-circuits
the pipeline to a pass-through of the original word.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Step(Generic[T]):
    """Outcome of one decode sub-step: a value, or the reason it failed."""

    value: T | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def succeed(value: T) -> Step[T]:
    return Step(value=value)


def fail(reason: str) -> Step:
    return Step(reason=reason)
