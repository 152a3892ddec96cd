"""Either - a right-biased disjoint union."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lawful.data.maybe import NOTHING, Just, Maybe

L = TypeVar("L")
R = TypeVar("R")
C = TypeVar("C")
D = TypeVar("D")


class Either(Generic[L, R]):
    """Left(value) for the failure side, Right(value) for the success side.

    map and flat_map act on the Right side.
    """

    __slots__ = ()

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    def fold(self, if_left: Callable[[L], C], if_right: Callable[[R], C]) -> C:
        if isinstance(self, Right):
            return if_right(self.value)
        return if_left(self.value)  # type: ignore[attr-defined]

    def map(self, f: Callable[[R], C]) -> Either[L, C]:
        if isinstance(self, Right):
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[R], Either[L, C]]) -> Either[L, C]:
        if isinstance(self, Right):
            return f(self.value)
        return self  # type: ignore[return-value]

    def left_map(self, f: Callable[[L], C]) -> Either[C, R]:
        if isinstance(self, Left):
            return Left(f(self.value))
        return self  # type: ignore[return-value]

    def bimap(self, f: Callable[[L], C], g: Callable[[R], D]) -> Either[C, D]:
        return self.fold(lambda left: Left(f(left)), lambda right: Right(g(right)))

    def swap(self) -> Either[R, L]:
        return self.fold(Right, Left)

    def to_maybe(self) -> Maybe[R]:
        if isinstance(self, Right):
            return Just(self.value)
        return NOTHING

    def get_or_else(self, default: R) -> R:
        if isinstance(self, Right):
            return self.value
        return default


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R
