"""Instances for Kleisli[M, A, B], derived from instances of the effect M.

Each factory takes the instance of M and returns the matching instance for
Kleisli arrows into M. Two Kleislis are compared by running them on
sample inputs; see lawful.properties.arbitrary.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.kleisli import Kleisli
from lawful.kernel.applicative import Alt, Applicative
from lawful.kernel.arrow import Arrow
from lawful.kernel.divide import Divisible
from lawful.kernel.functor import Functor
from lawful.kernel.monad import BindRec, Monad, MonadError, MonadPlus
from lawful.kernel.semigroup import Monoid
from lawful.kernel.trans import MonadTrans
from lawful.kernel.zip import Zip

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


@dataclass(frozen=True)
class KleisliFunctor(Functor):
    M: Functor

    def map(self, fa: Kleisli[Any, A], f: Callable[[A], B]) -> Kleisli[Any, B]:
        return fa.map(f, self.M)


@dataclass(frozen=True)
class KleisliApplicative(Applicative):
    M: Applicative

    def point(self, a: A) -> Kleisli[Any, A]:
        return Kleisli(lambda _: self.M.point(a))

    def map(self, fa: Kleisli[Any, A], f: Callable[[A], B]) -> Kleisli[Any, B]:
        return fa.map(f, self.M)

    def ap(self, fa: Kleisli[Any, A], ff: Kleisli[Any, Any]) -> Kleisli[Any, B]:
        return Kleisli(lambda r: self.M.ap(fa.run(r), ff.run(r)))


@dataclass(frozen=True)
class KleisliMonad(Monad):
    """Kleisli[M, R, _] as a reader over R with effects in M."""

    M: Monad

    def point(self, a: A) -> Kleisli[Any, A]:
        return Kleisli(lambda _: self.M.point(a))

    def map(self, fa: Kleisli[Any, A], f: Callable[[A], B]) -> Kleisli[Any, B]:
        return fa.map(f, self.M)

    def bind(self, fa: Kleisli[Any, A], f: Callable[[A], Kleisli[Any, B]]) -> Kleisli[Any, B]:
        return Kleisli(lambda r: self.M.bind(fa.run(r), lambda a: f(a).run(r)))

    def ask(self) -> Kleisli[Any, Any]:
        """The environment itself."""
        return Kleisli(self.M.point)


@dataclass(frozen=True)
class KleisliMonadPlus(KleisliMonad, MonadPlus):
    M: MonadPlus

    def plus(self, a1: Kleisli[Any, A], a2: Kleisli[Any, A]) -> Kleisli[Any, A]:
        return Kleisli(lambda r: self.M.plus(a1.run(r), a2.run(r)))

    def empty(self) -> Kleisli[Any, Any]:
        return Kleisli(lambda _: self.M.empty())


@dataclass(frozen=True)
class KleisliMonadError(KleisliMonad, MonadError):
    M: MonadError

    def raise_error(self, e: Any) -> Kleisli[Any, Any]:
        return Kleisli(lambda _: self.M.raise_error(e))

    def handle_error(self, fa: Kleisli[Any, A], f: Callable[[Any], Kleisli[Any, A]]) -> Kleisli[Any, A]:
        return Kleisli(lambda r: self.M.handle_error(fa.run(r), lambda e: f(e).run(r)))


@dataclass(frozen=True)
class KleisliBindRec(KleisliMonad, BindRec):
    M: Any

    def tailrec_m(self, a: A, f: Callable[[A], Kleisli[Any, Any]]) -> Kleisli[Any, B]:
        return Kleisli(lambda r: self.M.tailrec_m(a, lambda x: f(x).run(r)))


@dataclass(frozen=True)
class KleisliZip(Zip):
    M: Zip

    def zip(self, fa: Kleisli[Any, A], fb: Kleisli[Any, B]) -> Kleisli[Any, tuple[A, B]]:
        return Kleisli(lambda r: self.M.zip(fa.run(r), fb.run(r)))


@dataclass(frozen=True)
class KleisliAlt(KleisliApplicative, Alt):
    M: Alt

    def alt(self, a1: Kleisli[Any, A], a2: Kleisli[Any, A]) -> Kleisli[Any, A]:
        return Kleisli(lambda r: self.M.alt(a1.run(r), a2.run(r)))


@dataclass(frozen=True)
class KleisliArrow(Arrow):
    """Kleisli arrows into M form a category with arr = point after f."""

    M: Monad

    def arr(self, f: Callable[[A], B]) -> Kleisli[A, B]:
        return Kleisli(lambda a: self.M.point(f(a)))

    def id(self) -> Kleisli[A, A]:
        return Kleisli(self.M.point)

    def compose(self, f: Kleisli[B, C], g: Kleisli[A, B]) -> Kleisli[A, C]:
        return g.and_then(f, self.M)

    def dimap(self, fab: Kleisli[A, B], f: Callable[[C], A], g: Callable[[B], D]) -> Kleisli[C, D]:
        return fab.local(f).map(g, self.M)

    def first(self, fab: Kleisli[A, B]) -> Kleisli[tuple[A, C], tuple[B, C]]:
        return Kleisli(lambda ac: self.M.map(fab.run(ac[0]), lambda b: (b, ac[1])))

    def second(self, fab: Kleisli[A, B]) -> Kleisli[tuple[C, A], tuple[C, B]]:
        return Kleisli(lambda ca: self.M.map(fab.run(ca[1]), lambda b: (ca[0], b)))


@dataclass(frozen=True)
class KleisliMonoid(Monoid[Kleisli[Any, Any]]):
    """Pointwise monoid from a monoid on the results M[B]."""

    FB: Monoid[Any]

    def append(self, a1: Kleisli[Any, Any], a2: Kleisli[Any, Any]) -> Kleisli[Any, Any]:
        return Kleisli(lambda a: self.FB.append(a1.run(a), a2.run(a)))

    def zero(self) -> Kleisli[Any, Any]:
        return Kleisli(lambda _: self.FB.zero())


@dataclass(frozen=True)
class KleisliDivisible(Divisible):
    """Kleisli[F, R, _] is divisible when F is, dividing pointwise in R."""

    F: Divisible

    def contramap(self, fa: Kleisli[Any, A], f: Callable[[B], A]) -> Kleisli[Any, B]:
        return Kleisli(lambda r: self.F.contramap(fa.run(r), f))

    def divide(self, fa: Kleisli[Any, A], fb: Kleisli[Any, B], f: Callable[[C], tuple[A, B]]) -> Kleisli[Any, C]:
        return Kleisli(lambda r: self.F.divide(fa.run(r), fb.run(r), f))

    def conquer(self) -> Kleisli[Any, Any]:
        return Kleisli(lambda _: self.F.conquer())


class KleisliTrans(MonadTrans):
    """Kleisli as a reader transformer: lifting ignores the environment."""

    def lift_m(self, ga: Any, G: Monad) -> Kleisli[Any, Any]:
        return Kleisli(lambda _: ga)

    def monad(self, G: Monad) -> Monad:
        return KleisliMonad(G)

    def __repr__(self) -> str:
        return "kleisli_trans"


def kleisli_functor(M: Functor) -> KleisliFunctor:
    return KleisliFunctor(M)


def kleisli_monad(M: Monad) -> KleisliMonad:
    return KleisliMonad(M)


def kleisli_monad_plus(M: MonadPlus) -> KleisliMonadPlus:
    return KleisliMonadPlus(M)


def kleisli_monad_error(M: MonadError) -> KleisliMonadError:
    return KleisliMonadError(M)


def kleisli_bind_rec(M: Any) -> KleisliBindRec:
    """M must be both a Monad and a BindRec."""
    return KleisliBindRec(M)


def kleisli_zip(M: Zip) -> KleisliZip:
    return KleisliZip(M)


def kleisli_alt(M: Alt) -> KleisliAlt:
    return KleisliAlt(M)


def kleisli_arrow(M: Monad) -> KleisliArrow:
    return KleisliArrow(M)


def kleisli_monoid(FB: Monoid[Any]) -> KleisliMonoid:
    return KleisliMonoid(FB)


def kleisli_divisible(F: Divisible) -> KleisliDivisible:
    return KleisliDivisible(F)


kleisli_trans = KleisliTrans()
