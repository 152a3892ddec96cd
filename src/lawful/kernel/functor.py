"""Invariant, covariant and contravariant functors with their laws.

Type constructors are not first-class in Python, so an instance object
stands for the type constructor F and F[A] values are passed to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.equal import Equal

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(a: A) -> A:
    return a


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """f after g."""
    return lambda a: f(g(a))


class InvariantFunctor(ABC):
    """Maps over F given a function and its inverse."""

    @abstractmethod
    def xmap(self, fa: Any, f: Callable[[A], B], g: Callable[[B], A]) -> Any:
        pass

    @property
    def invariant_functor_law(self) -> InvariantFunctorLaw:
        return InvariantFunctorLaw(self)


class Functor(InvariantFunctor):
    """Covariant map over F."""

    @abstractmethod
    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        pass

    def xmap(self, fa: Any, f: Callable[[A], B], g: Callable[[B], A]) -> Any:
        return self.map(fa, f)

    def lift(self, f: Callable[[A], B]) -> Callable[[Any], Any]:
        """Turn A -> B into F[A] -> F[B]."""
        return lambda fa: self.map(fa, f)

    def as_(self, fa: Any, b: B) -> Any:
        return self.map(fa, lambda _: b)

    def void(self, fa: Any) -> Any:
        return self.map(fa, lambda _: None)

    def fpair(self, fa: Any) -> Any:
        return self.map(fa, lambda a: (a, a))

    def fproduct(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.map(fa, lambda a: (a, f(a)))

    def strength_l(self, a: A, fb: Any) -> Any:
        return self.map(fb, lambda b: (a, b))

    def strength_r(self, fa: Any, b: B) -> Any:
        return self.map(fa, lambda a: (a, b))

    def compose(self, G: Functor) -> Functor:
        """The functor of F[G[_]]."""
        return _ComposedFunctor(self, G)

    @property
    def functor_law(self) -> FunctorLaw:
        return FunctorLaw(self)


@dataclass(frozen=True)
class _ComposedFunctor(Functor):
    F: Functor
    G: Functor

    def map(self, fga: Any, f: Callable[[A], B]) -> Any:
        return self.F.map(fga, lambda ga: self.G.map(ga, f))


class Contravariant(InvariantFunctor):
    """Contravariant map over F."""

    @abstractmethod
    def contramap(self, fa: Any, f: Callable[[B], A]) -> Any:
        pass

    def xmap(self, fa: Any, f: Callable[[A], B], g: Callable[[B], A]) -> Any:
        return self.contramap(fa, g)

    @property
    def contravariant_law(self) -> ContravariantLaw:
        return ContravariantLaw(self)


@dataclass(frozen=True)
class InvariantFunctorLaw:
    F: InvariantFunctor

    def invariant_identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.xmap(fa, identity, identity), fa)

    def invariant_composite(
        self,
        fa: Any,
        f1: Callable[[Any], Any],
        g1: Callable[[Any], Any],
        f2: Callable[[Any], Any],
        g2: Callable[[Any], Any],
        eq: Equal[Any],
    ) -> bool:
        """f1/g1 map between X and Y, f2/g2 between Y and Z."""
        return eq.equal(
            self.F.xmap(self.F.xmap(fa, f1, g1), f2, g2),
            self.F.xmap(fa, compose(f2, f1), compose(g1, g2)),
        )


@dataclass(frozen=True)
class FunctorLaw(InvariantFunctorLaw):
    F: Functor

    def identity(self, fa: Any, eq: Equal[Any]) -> bool:
        """Mapping with the identity function is the identity."""
        return eq.equal(self.F.map(fa, identity), fa)

    def composite(self, fa: Any, f1: Callable[[Any], Any], f2: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """Mapping twice is mapping once with the composed function."""
        return eq.equal(self.F.map(self.F.map(fa, f1), f2), self.F.map(fa, compose(f2, f1)))


@dataclass(frozen=True)
class ContravariantLaw(InvariantFunctorLaw):
    F: Contravariant

    def identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.contramap(fa, identity), fa)

    def composite(self, fz: Any, f1: Callable[[Any], Any], f2: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """f1: X -> Y, f2: Y -> Z, fz: F[Z]."""
        return eq.equal(
            self.F.contramap(self.F.contramap(fz, f2), f1),
            self.F.contramap(fz, compose(f2, f1)),
        )
