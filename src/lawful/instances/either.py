"""Instances for Either, right-biased in its second parameter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawful.data.either import Either, Left, Right
from lawful.kernel.applicative import Applicative
from lawful.kernel.arrow import Bifunctor
from lawful.kernel.foldable import Traverse
from lawful.kernel.monad import BindRec, MonadError
from lawful.kernel.semigroup import Monoid

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class EitherInstance(MonadError, BindRec, Traverse):
    """Either[E, _] for any error type E carried on the Left."""

    def point(self, a: A) -> Either[Any, A]:
        return Right(a)

    def map(self, fa: Either[Any, A], f: Callable[[A], B]) -> Either[Any, B]:
        return fa.map(f)

    def ap(self, fa: Either[Any, A], ff: Either[Any, Callable[[A], B]]) -> Either[Any, B]:
        return ff.flat_map(lambda f: fa.map(f))

    def bind(self, fa: Either[Any, A], f: Callable[[A], Either[Any, B]]) -> Either[Any, B]:
        return fa.flat_map(f)

    def tailrec_m(self, a: A, f: Callable[[A], Either[Any, Either[A, B]]]) -> Either[Any, B]:
        step = f(a)
        while isinstance(step, Right) and isinstance(step.value, Left):
            step = f(step.value.value)
        return step.map(lambda e: e.value)

    def raise_error(self, e: Any) -> Either[Any, Any]:
        return Left(e)

    def handle_error(self, fa: Either[Any, A], f: Callable[[Any], Either[Any, A]]) -> Either[Any, A]:
        return fa.fold(f, lambda _: fa)

    def traverse(self, fa: Either[Any, A], f: Callable[[A], Any], G: Applicative) -> Any:
        if isinstance(fa, Right):
            return G.map(f(fa.value), Right)
        return G.point(fa)

    def fold_map(self, fa: Either[Any, A], f: Callable[[A], B], M: Monoid[B]) -> B:
        return fa.fold(lambda _: M.zero(), f)

    def fold_right(self, fa: Either[Any, A], z: B, f: Callable[[A, B], B]) -> B:
        return fa.fold(lambda _: z, lambda a: f(a, z))

    def __repr__(self) -> str:
        return "either_instance"


either_instance = EitherInstance()


class EitherBifunctor(Bifunctor):
    def bimap(self, fab: Either[A, B], f: Callable[[A], C], g: Callable[[B], D]) -> Either[C, D]:
        return fab.bimap(f, g)

    def __repr__(self) -> str:
        return "either_bifunctor"


either_bifunctor = EitherBifunctor()
