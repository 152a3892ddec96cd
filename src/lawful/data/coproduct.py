"""Coproduct - a value of F[A] or of G[A], tagged by an Either."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lawful.data.either import Either, Left, Right

T = TypeVar("T")


@dataclass(frozen=True)
class Coproduct(Generic[T]):
    """Left holds an F[A], Right holds a G[A]."""

    run: Either[Any, Any]

    @staticmethod
    def left(fa: Any) -> Coproduct[Any]:
        return Coproduct(Left(fa))

    @staticmethod
    def right(ga: Any) -> Coproduct[Any]:
        return Coproduct(Right(ga))

    def fold(self, if_left: Callable[[Any], T], if_right: Callable[[Any], T]) -> T:
        return self.run.fold(if_left, if_right)
