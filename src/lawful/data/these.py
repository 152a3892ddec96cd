"""These - an inclusive-or of two values, the result type of aligning."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lawful.data.maybe import NOTHING, Just, Maybe

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class These(Generic[A, B]):
    """This(a), That(b) or Both(a, b)."""

    __slots__ = ()

    def fold(
        self,
        this: Callable[[A], C],
        that: Callable[[B], C],
        both: Callable[[A, B], C],
    ) -> C:
        if isinstance(self, Both):
            return both(self.first, self.second)
        if isinstance(self, This):
            return this(self.value)
        return that(self.value)  # type: ignore[attr-defined]

    def bimap(self, f: Callable[[A], C], g: Callable[[B], D]) -> These[C, D]:
        return self.fold(
            lambda a: This(f(a)),
            lambda b: That(g(b)),
            lambda a, b: Both(f(a), g(b)),
        )

    def this_value(self) -> Maybe[A]:
        return self.fold(Just, lambda _: NOTHING, lambda a, _: Just(a))

    def that_value(self) -> Maybe[B]:
        return self.fold(lambda _: NOTHING, Just, lambda _, b: Just(b))

    def swap(self) -> These[B, A]:
        return self.fold(That, This, lambda a, b: Both(b, a))


@dataclass(frozen=True)
class This(These[A, Any]):
    value: A


@dataclass(frozen=True)
class That(These[Any, B]):
    value: B


@dataclass(frozen=True)
class Both(These[A, B]):
    first: A
    second: B
