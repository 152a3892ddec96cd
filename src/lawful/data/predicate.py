"""Predicate - a contravariant wrapper around a boolean test."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Predicate(Generic[A]):
    test: Callable[[A], bool]

    def __call__(self, value: A) -> bool:
        return self.test(value)

    def contramap(self, f: Callable[[B], A]) -> Predicate[B]:
        return Predicate(lambda b: self.test(f(b)))

    def and_(self, other: Predicate[A]) -> Predicate[A]:
        return Predicate(lambda a: self.test(a) and other.test(a))

    def negate(self) -> Predicate[A]:
        return Predicate(lambda a: not self.test(a))

    @staticmethod
    def always() -> Predicate[A]:
        return Predicate(lambda _: True)
