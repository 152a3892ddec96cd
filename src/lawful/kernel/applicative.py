"""Apply, Applicative, ApplicativeError and Alt with their laws."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.either import Left, Right
from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor, FunctorLaw, identity
from lawful.kernel.reducer import Reducer
from lawful.kernel.semigroup import Monoid, Semigroup

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Apply(Functor):
    """A functor that can apply a wrapped function to a wrapped value."""

    @abstractmethod
    def ap(self, fa: Any, ff: Any) -> Any:
        """Apply every function in ff: F[A -> B] to fa: F[A]."""

    def apply2(self, fa: Any, fb: Any, f: Callable[[A, B], C]) -> Any:
        return self.ap(fb, self.map(fa, lambda a: lambda b: f(a, b)))

    def tuple2(self, fa: Any, fb: Any) -> Any:
        return self.apply2(fa, fb, lambda a, b: (a, b))

    def lift2(self, f: Callable[[A, B], C]) -> Callable[[Any, Any], Any]:
        return lambda fa, fb: self.apply2(fa, fb, f)

    def discard_left(self, fa: Any, fb: Any) -> Any:
        """Sequence fa then fb, keeping fb's value."""
        return self.apply2(fa, fb, lambda _, b: b)

    def discard_right(self, fa: Any, fb: Any) -> Any:
        return self.apply2(fa, fb, lambda a, _: a)

    def lift_semigroup(self, S: Semigroup[A]) -> Semigroup[Any]:
        """Append inside F pointwise."""
        return _LiftedSemigroup(self, S)

    def lift_reducer(self, R: Reducer[C, A]) -> Reducer[Any, Any]:
        """Reduce F[C] into F[M] pointwise."""
        return _LiftedReducer(self, R)

    @property
    def apply_law(self) -> ApplyLaw:
        return ApplyLaw(self)


@dataclass(frozen=True)
class _LiftedSemigroup(Semigroup[Any]):
    F: Apply
    S: Semigroup[Any]

    def append(self, a1: Any, a2: Any) -> Any:
        return self.F.apply2(a1, a2, self.S.append)


@dataclass(frozen=True)
class _LiftedMonoid(_LiftedSemigroup, Monoid[Any]):
    S: Monoid[Any]

    def zero(self) -> Any:
        return self.F.point(self.S.zero())  # type: ignore[attr-defined]


@dataclass(frozen=True)
class _LiftedReducer(Reducer[Any, Any]):
    F: Apply
    R: Reducer[Any, Any]

    @property
    def semigroup(self) -> Semigroup[Any]:
        return self.F.lift_semigroup(self.R.semigroup)

    def unit(self, fc: Any) -> Any:
        return self.F.map(fc, self.R.unit)

    def cons(self, fc: Any, fm: Any) -> Any:
        return self.F.apply2(fc, fm, self.R.cons)

    def snoc(self, fm: Any, fc: Any) -> Any:
        return self.F.apply2(fm, fc, self.R.snoc)


class Applicative(Apply):
    """An Apply that can lift pure values."""

    @abstractmethod
    def point(self, a: A) -> Any:
        pass

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.ap(fa, self.point(f))

    def unit(self) -> Any:
        return self.point(())

    def when(self, condition: bool, fa: Any) -> Any:
        """Run fa only when condition holds."""
        return fa if condition else self.unit()

    def sequence_iterable(self, fas: Iterable[Any]) -> Any:
        """F[A] values in order become F[tuple[A, ...]]."""
        acc = self.point(())
        for fa in fas:
            acc = self.apply2(acc, fa, lambda t, a: t + (a,))
        return acc

    def traverse_iterable(self, values: Iterable[A], f: Callable[[A], Any]) -> Any:
        return self.sequence_iterable(f(a) for a in values)

    def replicate(self, n: int, fa: Any) -> Any:
        return self.sequence_iterable([fa] * n)

    def lift_monoid(self, M: Monoid[A]) -> Monoid[Any]:
        """Lift a monoid pointwise into F."""
        return _LiftedMonoid(self, M)

    def compose(self, G: Applicative) -> Applicative:  # type: ignore[override]
        """The applicative of F[G[_]]."""
        return _ComposedApplicative(self, G)

    def product(self, G: Applicative) -> Applicative:
        """The applicative of pairs (F[A], G[A])."""
        return _ProductApplicative(self, G)

    @property
    def applicative_law(self) -> ApplicativeLaw:
        return ApplicativeLaw(self)


@dataclass(frozen=True)
class _ComposedApplicative(Applicative):
    F: Applicative
    G: Applicative

    def point(self, a: A) -> Any:
        return self.F.point(self.G.point(a))

    def map(self, fga: Any, f: Callable[[A], B]) -> Any:
        return self.F.map(fga, lambda ga: self.G.map(ga, f))

    def ap(self, fga: Any, fgf: Any) -> Any:
        return self.F.apply2(fgf, fga, lambda gf, ga: self.G.ap(ga, gf))


@dataclass(frozen=True)
class _ProductApplicative(Applicative):
    F: Applicative
    G: Applicative

    def point(self, a: A) -> Any:
        return (self.F.point(a), self.G.point(a))

    def map(self, fga: Any, f: Callable[[A], B]) -> Any:
        fa, ga = fga
        return (self.F.map(fa, f), self.G.map(ga, f))

    def ap(self, fga: Any, fgf: Any) -> Any:
        fa, ga = fga
        ff, gf = fgf
        return (self.F.ap(fa, ff), self.G.ap(ga, gf))


class ApplicativeError(Applicative):
    """An applicative that can fail with an error of type E and recover."""

    @abstractmethod
    def raise_error(self, e: Any) -> Any:
        pass

    @abstractmethod
    def handle_error(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        """Recover from an error with f: E -> F[A]."""

    def attempt(self, fa: Any) -> Any:
        """Expose the error: F[A] becomes F[Either[E, A]] that never fails."""
        return self.handle_error(self.map(fa, Right), lambda e: self.point(Left(e)))

    def recover(self, fa: Any, f: Callable[[Any], A]) -> Any:
        return self.handle_error(fa, lambda e: self.point(f(e)))

    @property
    def applicative_error_law(self) -> ApplicativeErrorLaw:
        return ApplicativeErrorLaw(self)


class Alt(Applicative):
    """An applicative with a left-biased choice."""

    @abstractmethod
    def alt(self, a1: Any, a2: Any) -> Any:
        pass

    @property
    def alt_law(self) -> AltLaw:
        return AltLaw(self)


@dataclass(frozen=True)
class ApplyLaw(FunctorLaw):
    F: Apply

    def composition(self, fbc: Any, fab: Any, fa: Any, eq: Equal[Any]) -> bool:
        """Applying composed functions equals applying them one at a time."""
        F = self.F
        composed = F.ap(fab, F.map(fbc, lambda bc: lambda ab: lambda a: bc(ab(a))))
        return eq.equal(F.ap(F.ap(fa, fab), fbc), F.ap(fa, composed))


@dataclass(frozen=True)
class ApplicativeLaw(ApplyLaw):
    F: Applicative

    def identity_ap(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.ap(fa, self.F.point(identity)), fa)

    def homomorphism(self, ab: Callable[[Any], Any], a: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.ap(F.point(a), F.point(ab)), F.point(ab(a)))

    def interchange(self, f: Any, a: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.ap(F.point(a), f), F.ap(f, F.point(lambda g: g(a))))

    def map_like_derived(self, f: Callable[[Any], Any], fa: Any, eq: Equal[Any]) -> bool:
        """map agrees with ap of a pure function."""
        return eq.equal(self.F.map(fa, f), self.F.ap(fa, self.F.point(f)))


@dataclass(frozen=True)
class ApplicativeErrorLaw(ApplicativeLaw):
    F: ApplicativeError

    def raised_errors_handled(self, e: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(self.F.handle_error(self.F.raise_error(e), f), f(e))


@dataclass(frozen=True)
class AltLaw(ApplicativeLaw):
    F: Alt

    def alt_associative(self, f1: Any, f2: Any, f3: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.alt(f1, F.alt(f2, f3)), F.alt(F.alt(f1, f2), f3))
