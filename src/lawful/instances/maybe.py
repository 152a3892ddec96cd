"""Instances for Maybe."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.either import Left
from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.data.these import Both, That, This
from lawful.kernel.applicative import Alt, Applicative
from lawful.kernel.comonad import Cobind
from lawful.kernel.foldable import Traverse
from lawful.kernel.monad import BindRec, IsEmpty, MonadError, MonadPlus
from lawful.kernel.semigroup import Monoid, Semigroup
from lawful.kernel.zip import Align, Zip

A = TypeVar("A")
B = TypeVar("B")


class MaybeInstance(MonadPlus, IsEmpty, MonadError, BindRec, Traverse, Zip, Align, Alt, Cobind):
    """Every type class Maybe supports.

    As a MonadError the error type is the empty tuple: raising an error
    gives Nothing and handling it sees ().
    """

    def point(self, a: A) -> Maybe[A]:
        return Just(a)

    def map(self, fa: Maybe[A], f: Callable[[A], B]) -> Maybe[B]:
        return fa.map(f)

    def ap(self, fa: Maybe[A], ff: Maybe[Callable[[A], B]]) -> Maybe[B]:
        if isinstance(fa, Just) and isinstance(ff, Just):
            return Just(ff.value(fa.value))
        return NOTHING

    def bind(self, fa: Maybe[A], f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        return fa.flat_map(f)

    def tailrec_m(self, a: A, f: Callable[[A], Maybe[Any]]) -> Maybe[B]:
        step = f(a)
        while isinstance(step, Just) and isinstance(step.value, Left):
            step = f(step.value.value)
        return step.map(lambda e: e.value)

    def plus(self, a1: Maybe[A], a2: Maybe[A]) -> Maybe[A]:
        return a1.or_else(a2)

    def alt(self, a1: Maybe[A], a2: Maybe[A]) -> Maybe[A]:
        return a1.or_else(a2)

    def empty(self) -> Maybe[Any]:
        return NOTHING

    def is_empty(self, fa: Maybe[Any]) -> bool:
        return fa.is_empty

    def raise_error(self, e: Any) -> Maybe[Any]:
        return NOTHING

    def handle_error(self, fa: Maybe[A], f: Callable[[Any], Maybe[A]]) -> Maybe[A]:
        return fa if fa.is_just else f(())

    def traverse(self, fa: Maybe[A], f: Callable[[A], Any], G: Applicative) -> Any:
        if isinstance(fa, Just):
            return G.map(f(fa.value), Just)
        return G.point(NOTHING)

    def fold_map(self, fa: Maybe[A], f: Callable[[A], B], M: Monoid[B]) -> B:
        return fa.fold(M.zero, f)

    def fold_right(self, fa: Maybe[A], z: B, f: Callable[[A, B], B]) -> B:
        return fa.fold(lambda: z, lambda a: f(a, z))

    def zip(self, fa: Maybe[A], fb: Maybe[B]) -> Maybe[tuple[A, B]]:
        if isinstance(fa, Just) and isinstance(fb, Just):
            return Just((fa.value, fb.value))
        return NOTHING

    def align_with(self, fa: Maybe[A], fb: Maybe[B], f: Callable[[Any], Any]) -> Maybe[Any]:
        if isinstance(fa, Just) and isinstance(fb, Just):
            return Just(f(Both(fa.value, fb.value)))
        if isinstance(fa, Just):
            return Just(f(This(fa.value)))
        if isinstance(fb, Just):
            return Just(f(That(fb.value)))
        return NOTHING

    def cobind(self, fa: Maybe[A], f: Callable[[Maybe[A]], B]) -> Maybe[B]:
        return Just(f(fa)) if fa.is_just else NOTHING

    def __repr__(self) -> str:
        return "maybe_instance"


maybe_instance = MaybeInstance()


@dataclass(frozen=True)
class MaybeMonoid(Monoid[Maybe[A]]):
    """Nothing is the identity; two Justs append their contents with S."""

    S: Semigroup[A]

    def append(self, a1: Maybe[A], a2: Maybe[A]) -> Maybe[A]:
        if isinstance(a1, Just) and isinstance(a2, Just):
            return Just(self.S.append(a1.value, a2.value))
        return a1.or_else(a2)

    def zero(self) -> Maybe[A]:
        return NOTHING


def maybe_monoid(S: Semigroup[A]) -> Monoid[Maybe[A]]:
    return MaybeMonoid(S)
