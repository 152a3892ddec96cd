"""Predicate as a divisible functor: dividing takes the conjunction."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lawful.data.predicate import Predicate
from lawful.kernel.divide import Divisible

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def _both(fa: Predicate[A], fb: Predicate[B], f: Callable[[C], tuple[A, B]], c: C) -> bool:
    a, b = f(c)
    return fa(a) and fb(b)


class PredicateDivisible(Divisible):
    def contramap(self, fa: Predicate[A], f: Callable[[B], A]) -> Predicate[B]:
        return fa.contramap(f)

    def divide(self, fa: Predicate[A], fb: Predicate[B], f: Callable[[C], tuple[A, B]]) -> Predicate[C]:
        return Predicate(lambda c: _both(fa, fb, f, c))

    def conquer(self) -> Predicate[object]:
        return Predicate.always()

    def __repr__(self) -> str:
        return "predicate_divisible"


predicate_divisible = PredicateDivisible()
