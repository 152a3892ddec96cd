"""Bind, Monad and the Plus family of type classes with their laws."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.either import Left, Right
from lawful.kernel.applicative import Applicative, ApplicativeError, ApplicativeErrorLaw, ApplicativeLaw, Apply, ApplyLaw
from lawful.kernel.equal import Equal
from lawful.kernel.functor import identity
from lawful.kernel.semigroup import Monoid, Semigroup

A = TypeVar("A")
B = TypeVar("B")


class Bind(Apply):
    """An Apply whose effects may depend on earlier results."""

    @abstractmethod
    def bind(self, fa: Any, f: Callable[[A], Any]) -> Any:
        pass

    def ap(self, fa: Any, ff: Any) -> Any:
        return self.bind(ff, lambda f: self.map(fa, f))

    def join(self, ffa: Any) -> Any:
        return self.bind(ffa, identity)

    def if_m(self, condition: Any, if_true: Callable[[], Any], if_false: Callable[[], Any]) -> Any:
        """Branch on an effectful boolean."""
        return self.bind(condition, lambda c: if_true() if c else if_false())

    @property
    def bind_law(self) -> BindLaw:
        return BindLaw(self)


class BindRec(Bind):
    """A Bind with stack-safe monadic recursion."""

    @abstractmethod
    def tailrec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        """Iterate f: A -> F[Either[A, B]] until it yields Right values."""

    @property
    def bind_rec_law(self) -> BindRecLaw:
        return BindRecLaw(self)


class Monad(Applicative, Bind):
    """Applicative and Bind together."""

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        return self.bind(fa, lambda a: self.point(f(a)))

    def while_m(self, condition: Callable[[], Any], body: Callable[[], Any]) -> Any:
        """Run body while condition yields True, collecting the results in a tuple."""
        return self.bind(
            condition(),
            lambda c: self.bind(body(), lambda a: self.map(self.while_m(condition, body), lambda rest: (a,) + rest))
            if c
            else self.point(()),
        )

    def iterate_until(self, fa: Any, p: Callable[[A], bool], limit: int = 1000) -> Any:
        """Run fa until its result satisfies p or limit runs have happened."""
        def loop(n: int) -> Any:
            return self.bind(fa, lambda a: self.point(a) if p(a) or n <= 1 else loop(n - 1))

        return loop(limit)

    @property
    def monad_law(self) -> MonadLaw:
        return MonadLaw(self)


class MonadError(Monad, ApplicativeError):
    @property
    def monad_error_law(self) -> MonadErrorLaw:
        return MonadErrorLaw(self)


class Plus(ABC):
    """A semigroup over F[A] for every A."""

    @abstractmethod
    def plus(self, a1: Any, a2: Any) -> Any:
        pass

    def semigroup(self) -> Semigroup[Any]:
        return _PlusSemigroup(self)

    @property
    def plus_law(self) -> PlusLaw:
        return PlusLaw(self)


class PlusEmpty(Plus):
    """A monoid over F[A] for every A."""

    @abstractmethod
    def empty(self) -> Any:
        pass

    def monoid(self) -> Monoid[Any]:
        return _PlusMonoid(self)

    @property
    def plus_empty_law(self) -> PlusEmptyLaw:
        return PlusEmptyLaw(self)


class IsEmpty(PlusEmpty):
    @abstractmethod
    def is_empty(self, fa: Any) -> bool:
        pass

    @property
    def is_empty_law(self) -> IsEmptyLaw:
        return IsEmptyLaw(self)


@dataclass(frozen=True)
class _PlusSemigroup(Semigroup[Any]):
    F: Plus

    def append(self, a1: Any, a2: Any) -> Any:
        return self.F.plus(a1, a2)


@dataclass(frozen=True)
class _PlusMonoid(_PlusSemigroup, Monoid[Any]):
    F: PlusEmpty

    def zero(self) -> Any:
        return self.F.empty()


class ApplicativePlus(Applicative, PlusEmpty):
    pass


class MonadPlus(Monad, ApplicativePlus):
    """A monad with a monoidal choice."""

    def filter(self, fa: Any, p: Callable[[A], bool]) -> Any:
        return self.bind(fa, lambda a: self.point(a) if p(a) else self.empty())

    def unite(self, fga: Any, to_tuple: Callable[[Any], tuple[Any, ...]]) -> Any:
        """Flatten F[G[A]] given a way to list the elements of each G[A]."""
        def collect(ga: Any) -> Any:
            result = self.empty()
            for a in to_tuple(ga):
                result = self.plus(result, self.point(a))
            return result

        return self.bind(fga, collect)

    def separate(self, fab: Any) -> tuple[Any, Any]:
        """Split F[Either[A, B]] into the lefts and the rights."""
        lefts = self.bind(fab, lambda e: e.fold(self.point, lambda _: self.empty()))
        rights = self.bind(fab, lambda e: e.fold(lambda _: self.empty(), self.point))
        return lefts, rights

    @property
    def monad_plus_law(self) -> MonadPlusLaw:
        return MonadPlusLaw(self)


@dataclass(frozen=True)
class BindLaw(ApplyLaw):
    F: Bind

    def associative_bind(self, fa: Any, f: Callable[[Any], Any], g: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.bind(F.bind(fa, f), g), F.bind(fa, lambda a: F.bind(f(a), g)))

    def ap_like_derived(self, fa: Any, f: Any, eq: Equal[Any]) -> bool:
        """ap agrees with its definition through bind."""
        F = self.F
        return eq.equal(F.ap(fa, f), F.bind(f, lambda x: F.map(fa, x)))


@dataclass(frozen=True)
class BindRecLaw(BindLaw):
    F: BindRec

    def tailrec_bind_consistency(self, a: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """One bounce through tailrec_m equals binding f twice."""
        F = self.F

        def step(state: tuple[bool, Any]) -> Any:
            bounced, x = state
            if bounced:
                return F.map(f(x), Right)
            return F.map(f(x), lambda b: Left((True, b)))

        return eq.equal(F.bind(f(a), f), F.tailrec_m((False, a), step))


@dataclass(frozen=True)
class MonadLaw(ApplicativeLaw, BindLaw):
    F: Monad

    def right_identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.bind(fa, self.F.point), fa)

    def left_identity(self, a: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(self.F.bind(self.F.point(a), f), f(a))


@dataclass(frozen=True)
class MonadErrorLaw(MonadLaw, ApplicativeErrorLaw):
    F: MonadError

    def errors_raised(self, a: Any, e: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.bind(F.point(a), lambda _: F.raise_error(e)), F.raise_error(e))

    def errors_stop_computation(self, e: Any, a: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.bind(F.raise_error(e), lambda _: F.point(a)), F.raise_error(e))


@dataclass(frozen=True)
class PlusLaw:
    F: Plus

    def associative(self, f1: Any, f2: Any, f3: Any, eq: Equal[Any]) -> bool:
        F = self.F
        return eq.equal(F.plus(f1, F.plus(f2, f3)), F.plus(F.plus(f1, f2), f3))


@dataclass(frozen=True)
class PlusEmptyLaw(PlusLaw):
    F: PlusEmpty

    def left_plus_identity(self, f1: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.plus(self.F.empty(), f1), f1)

    def right_plus_identity(self, f1: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.plus(f1, self.F.empty()), f1)


@dataclass(frozen=True)
class IsEmptyLaw(PlusEmptyLaw):
    F: IsEmpty

    def empty_is_empty(self) -> bool:
        return self.F.is_empty(self.F.empty())

    def empty_plus_identity(self, f1: Any, f2: Any) -> bool:
        """A sum is empty exactly when both parts are."""
        return self.F.is_empty(self.F.plus(f1, f2)) == (self.F.is_empty(f1) and self.F.is_empty(f2))


@dataclass(frozen=True)
class MonadPlusLaw(MonadLaw, PlusEmptyLaw):
    F: MonadPlus

    def empty_map(self, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(self.F.map(self.F.empty(), f), self.F.empty())

    def left_zero(self, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(self.F.bind(self.F.empty(), f), self.F.empty())

    def right_zero(self, fa: Any, eq: Equal[Any]) -> bool:
        """Binding to empty discards everything. Not every MonadPlus obeys this."""
        return eq.equal(self.F.bind(fa, lambda _: self.F.empty()), self.F.empty())
