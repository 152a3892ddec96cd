"""Two-parameter type classes: Profunctor, Strong, Compose, Category, Arrow and Bifunctor.

F[A, B] values here are arrow-like (functions, Kleislis) or pair-like
(Either, These). Composition reads right to left: compose(f, g) runs g
first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor, compose, identity
from lawful.kernel.semigroup import Monoid, Semigroup

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


def swap(pair: tuple[A, B]) -> tuple[B, A]:
    return (pair[1], pair[0])


class Profunctor(ABC):
    """Contravariant in its first parameter, covariant in its second."""

    @abstractmethod
    def dimap(self, fab: Any, f: Callable[[C], A], g: Callable[[B], D]) -> Any:
        pass

    def mapfst(self, fab: Any, f: Callable[[C], A]) -> Any:
        return self.dimap(fab, f, identity)

    def mapsnd(self, fab: Any, g: Callable[[B], D]) -> Any:
        return self.dimap(fab, identity, g)

    @property
    def profunctor_law(self) -> ProfunctorLaw:
        return ProfunctorLaw(self)


class Strong(Profunctor):
    """A profunctor that can carry extra context alongside its input."""

    @abstractmethod
    def first(self, fab: Any) -> Any:
        """F[A, B] becomes F[(A, C), (B, C)]."""

    def second(self, fab: Any) -> Any:
        """F[A, B] becomes F[(C, A), (C, B)]."""
        return self.dimap(self.first(fab), swap, swap)

    @property
    def strong_law(self) -> StrongLaw:
        return StrongLaw(self)


class Compose(ABC):
    @abstractmethod
    def compose(self, f: Any, g: Any) -> Any:
        """F[B, C] after F[A, B] gives F[A, C]."""

    def semigroup(self) -> Semigroup[Any]:
        """Endomorphisms F[A, A] under composition."""
        return _ComposeSemigroup(self)

    @property
    def compose_law(self) -> ComposeLaw:
        return ComposeLaw(self)


class Category(Compose):
    @abstractmethod
    def id(self) -> Any:
        """The identity F[A, A]."""

    def monoid(self) -> Monoid[Any]:
        return _CategoryMonoid(self)

    @property
    def category_law(self) -> CategoryLaw:
        return CategoryLaw(self)


class Arrow(Category, Strong):
    """A category that embeds plain functions and is strong."""

    @abstractmethod
    def arr(self, f: Callable[[A], B]) -> Any:
        pass

    def id(self) -> Any:
        return self.arr(identity)

    def dimap(self, fab: Any, f: Callable[[C], A], g: Callable[[B], D]) -> Any:
        return self.compose(self.arr(g), self.compose(fab, self.arr(f)))

    def and_then(self, fab: Any, fbc: Any) -> Any:
        """Left to right composition."""
        return self.compose(fbc, fab)

    def split(self, fab: Any, fcd: Any) -> Any:
        """Run two arrows side by side on the two halves of a pair."""
        return self.compose(self.second(fcd), self.first(fab))

    def combine(self, fab: Any, fac: Any) -> Any:
        """Feed the same input to two arrows and pair the results."""
        return self.compose(self.split(fab, fac), self.arr(lambda a: (a, a)))


@dataclass(frozen=True)
class _ComposeSemigroup(Semigroup[Any]):
    F: Compose

    def append(self, a1: Any, a2: Any) -> Any:
        return self.F.compose(a1, a2)


@dataclass(frozen=True)
class _CategoryMonoid(_ComposeSemigroup, Monoid[Any]):
    F: Category

    def zero(self) -> Any:
        return self.F.id()


class Bifunctor(ABC):
    """Covariant in both parameters."""

    @abstractmethod
    def bimap(self, fab: Any, f: Callable[[A], C], g: Callable[[B], D]) -> Any:
        pass

    def left_map(self, fab: Any, f: Callable[[A], C]) -> Any:
        return self.bimap(fab, f, identity)

    def right_map(self, fab: Any, g: Callable[[B], D]) -> Any:
        return self.bimap(fab, identity, g)

    def umap(self, faa: Any, f: Callable[[A], B]) -> Any:
        """Map both sides with the same function."""
        return self.bimap(faa, f, f)

    def left_functor(self) -> Functor:
        """The functor obtained by fixing the right parameter."""
        return _LeftFunctor(self)

    def right_functor(self) -> Functor:
        return _RightFunctor(self)

    @property
    def bifunctor_law(self) -> BifunctorLaw:
        return BifunctorLaw(self)


@dataclass(frozen=True)
class _LeftFunctor(Functor):
    F: Bifunctor

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.F.left_map(fa, f)


@dataclass(frozen=True)
class _RightFunctor(Functor):
    F: Bifunctor

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.F.right_map(fa, f)


@dataclass(frozen=True)
class ProfunctorLaw:
    F: Profunctor

    def identity(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.mapfst(fab, identity), fab) and eq.equal(self.F.mapsnd(fab, identity), fab)

    def composite(
        self,
        fad: Any,
        fcb: Callable[[Any], Any],
        fba: Callable[[Any], Any],
        fde: Callable[[Any], Any],
        fef: Callable[[Any], Any],
        eq: Equal[Any],
    ) -> bool:
        F = self.F
        return eq.equal(
            F.mapfst(F.mapfst(fad, fba), fcb),
            F.mapfst(fad, compose(fba, fcb)),
        ) and eq.equal(
            F.mapsnd(F.mapsnd(fad, fde), fef),
            F.mapsnd(fad, compose(fef, fde)),
        )


@dataclass(frozen=True)
class StrongLaw(ProfunctorLaw):
    F: Strong

    def first_is_swapped_second(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.first(fab), self.F.dimap(self.F.second(fab), swap, swap))

    def second_is_swapped_first(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.second(fab), self.F.dimap(self.F.first(fab), swap, swap))

    def mapfst_equals_first_and_then_mapsnd(self, fab: Any, eq: Equal[Any]) -> bool:
        """Dropping the context before or after first is the same."""
        return eq.equal(
            self.F.mapfst(fab, lambda ac: ac[0]),
            self.F.mapsnd(self.F.first(fab), lambda bc: bc[0]),
        )

    def mapfst_equals_second_and_then_mapsnd(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(
            self.F.mapfst(fab, lambda ca: ca[1]),
            self.F.mapsnd(self.F.second(fab), lambda cb: cb[1]),
        )

    def dinaturality_first(self, fab: Any, fcd: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """Transforming the carried context commutes with first."""
        return eq.equal(
            self.F.mapsnd(self.F.first(fab), lambda bc: (bc[0], fcd(bc[1]))),
            self.F.mapfst(self.F.first(fab), lambda ac: (ac[0], fcd(ac[1]))),
        )

    def dinaturality_second(self, fab: Any, fcd: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(
            self.F.mapsnd(self.F.second(fab), lambda cb: (fcd(cb[0]), cb[1])),
            self.F.mapfst(self.F.second(fab), lambda ca: (fcd(ca[0]), ca[1])),
        )

    def first_first_is_dimap(self, fab: Any, eq: Equal[Any]) -> bool:
        """first twice is first once with the context reassociated."""
        return eq.equal(
            self.F.first(self.F.first(fab)),
            self.F.dimap(
                self.F.first(fab),
                lambda acd: (acd[0][0], (acd[0][1], acd[1])),
                lambda bcd: ((bcd[0], bcd[1][0]), bcd[1][1]),
            ),
        )

    def second_second_is_dimap(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(
            self.F.second(self.F.second(fab)),
            self.F.dimap(
                self.F.second(fab),
                lambda dca: ((dca[0], dca[1][0]), dca[1][1]),
                lambda dcb: (dcb[0][0], (dcb[0][1], dcb[1])),
            ),
        )


@dataclass(frozen=True)
class ComposeLaw:
    F: Compose

    def associative(self, fab: Any, fbc: Any, fcd: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.compose(fcd, F.compose(fbc, fab)), F.compose(F.compose(fcd, fbc), fab))


@dataclass(frozen=True)
class CategoryLaw(ComposeLaw):
    F: Category

    def left_identity(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.compose(self.F.id(), fab), fab)

    def right_identity(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.compose(fab, self.F.id()), fab)


@dataclass(frozen=True)
class BifunctorLaw:
    F: Bifunctor

    def identity(self, fab: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.bimap(fab, identity, identity), fab)

    def composite(
        self,
        fab: Any,
        f1: Callable[[Any], Any],
        f2: Callable[[Any], Any],
        g1: Callable[[Any], Any],
        g2: Callable[[Any], Any],
        eq: Equal[Any],
    ) -> bool:
        F = self.F
        return eq.equal(F.bimap(F.bimap(fab, f1, g1), f2, g2), F.bimap(fab, compose(f2, f1), compose(g2, g1)))
