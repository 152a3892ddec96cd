"""Zip and Align: pairing up two structures by position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.these import Both, These
from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor, FunctorLaw, identity
from lawful.kernel.semigroup import Semigroup

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Zip(ABC):
    """Pairs up elements of F[A] and F[B] where both are present."""

    @abstractmethod
    def zip(self, fa: Any, fb: Any) -> Any:
        pass

    def zip_with(self, fa: Any, fb: Any, f: Callable[[A, B], C], F: Functor) -> Any:
        return F.map(self.zip(fa, fb), lambda ab: f(ab[0], ab[1]))

    def apzip(self, f: Callable[[Any], Any], fa: Any) -> Any:
        """Pair every element with the matching element of f(fa)."""
        return self.zip(fa, f(fa))

    def zip_law(self, F: Functor) -> ZipLaw:
        """Zip laws need a Functor for the same F."""
        return ZipLaw(self, F)


class Align(Functor):
    """Pairs up elements of F[A] and F[B], keeping those with no partner."""

    @abstractmethod
    def align_with(self, fa: Any, fb: Any, f: Callable[[These[A, B]], C]) -> Any:
        pass

    def align(self, fa: Any, fb: Any) -> Any:
        return self.align_with(fa, fb, identity)

    def pad(self, fa: Any, fb: Any) -> Any:
        """Align into pairs of Maybes."""
        return self.align_with(fa, fb, lambda t: (t.this_value(), t.that_value()))

    def merge(self, a1: Any, a2: Any, S: Semigroup[A]) -> Any:
        """Align two F[A], appending elements present on both sides."""
        return self.align_with(a1, a2, lambda t: t.fold(identity, identity, S.append))

    @property
    def align_law(self) -> AlignLaw:
        return AlignLaw(self)


@dataclass(frozen=True)
class ZipLaw:
    Z: Zip
    F: Functor

    def zip_preservation(self, fa: Any, eq: Equal[Any]) -> bool:
        """Zipping with itself and projecting gives back the original."""
        fab = self.Z.zip(fa, fa)
        return eq.equal(self.F.map(fab, lambda ab: ab[0]), fa) and eq.equal(self.F.map(fab, lambda ab: ab[1]), fa)

    def zip_symmetric(self, fa: Any, fb: Any, eq: Equal[Any]) -> bool:
        return eq.equal(
            self.F.map(self.Z.zip(fa, fb), lambda ab: ab[0]),
            self.F.map(self.Z.zip(fb, fa), lambda ba: ba[1]),
        )


@dataclass(frozen=True)
class AlignLaw(FunctorLaw):
    F: Align

    def collapse(self, fa: Any, eq: Equal[Any]) -> bool:
        """Aligning with itself puts every element on both sides."""
        return eq.equal(self.F.align(fa, fa), self.F.map(fa, lambda a: Both(a, a)))
