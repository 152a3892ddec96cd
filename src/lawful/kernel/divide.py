"""Divide and Divisible: contravariant analogues of Apply and Applicative."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Contravariant, ContravariantLaw, identity

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def delta(a: A) -> tuple[A, A]:
    return (a, a)


class Divide(Contravariant):
    @abstractmethod
    def divide(self, fa: Any, fb: Any, f: Callable[[C], tuple[A, B]]) -> Any:
        """Split each C into an A for fa and a B for fb."""

    def tuple2(self, fa: Any, fb: Any) -> Any:
        return self.divide(fa, fb, identity)

    @property
    def divide_law(self) -> DivideLaw:
        return DivideLaw(self)


class Divisible(Divide):
    @abstractmethod
    def conquer(self) -> Any:
        """The unit: an F[A] that accepts anything."""

    def contramap(self, fa: Any, f: Callable[[B], A]) -> Any:
        return self.divide(self.conquer(), fa, lambda c: ((), f(c)))

    @property
    def divisible_law(self) -> DivisibleLaw:
        return DivisibleLaw(self)


@dataclass(frozen=True)
class DivideLaw(ContravariantLaw):
    F: Divide

    def divide_composition(self, a1: Any, a2: Any, a3: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(
            F.divide(a1, F.divide(a2, a3, delta), delta),
            F.divide(F.divide(a1, a2, delta), a3, delta),
        )


@dataclass(frozen=True)
class DivisibleLaw(DivideLaw):
    F: Divisible

    def right_identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.divide(fa, self.F.conquer(), delta), fa)

    def left_identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.divide(self.F.conquer(), fa, delta), fa)
