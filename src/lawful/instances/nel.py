"""Instances for NonEmptyList."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawful.data.nel import NonEmptyList
from lawful.data.these import Both, That, This
from lawful.kernel.applicative import Applicative
from lawful.kernel.comonad import Comonad
from lawful.kernel.foldable import Traverse
from lawful.kernel.monad import Monad
from lawful.kernel.semigroup import Monoid, Semigroup
from lawful.kernel.zip import Align, Zip

A = TypeVar("A")
B = TypeVar("B")


class NonEmptyListInstance(Monad, Traverse, Comonad, Zip, Align):
    def point(self, a: A) -> NonEmptyList[A]:
        return NonEmptyList(a)

    def map(self, fa: NonEmptyList[A], f: Callable[[A], B]) -> NonEmptyList[B]:
        return fa.map(f)

    def ap(self, fa: NonEmptyList[A], ff: NonEmptyList[Callable[[A], B]]) -> NonEmptyList[B]:
        return ff.flat_map(fa.map)

    def bind(self, fa: NonEmptyList[A], f: Callable[[A], NonEmptyList[B]]) -> NonEmptyList[B]:
        return fa.flat_map(f)

    def traverse(self, fa: NonEmptyList[A], f: Callable[[A], Any], G: Applicative) -> Any:
        return G.map(G.traverse_iterable(fa, f), NonEmptyList.from_iterable)

    def fold_map(self, fa: NonEmptyList[A], f: Callable[[A], B], M: Monoid[B]) -> B:
        return M.sum(f(a) for a in fa)

    def fold_right(self, fa: NonEmptyList[A], z: B, f: Callable[[A, B], B]) -> B:
        acc = z
        for a in reversed(fa.to_tuple()):
            acc = f(a, acc)
        return acc

    def to_tuple(self, fa: NonEmptyList[A]) -> tuple[A, ...]:
        return fa.to_tuple()

    def copoint(self, fa: NonEmptyList[A]) -> A:
        return fa.head

    def cobind(self, fa: NonEmptyList[A], f: Callable[[NonEmptyList[A]], B]) -> NonEmptyList[B]:
        return fa.tails().map(f)

    def zip(self, fa: NonEmptyList[A], fb: NonEmptyList[B]) -> NonEmptyList[tuple[A, B]]:
        return NonEmptyList.from_iterable(zip(fa, fb))

    def align_with(self, fa: NonEmptyList[A], fb: NonEmptyList[B], f: Callable[[Any], Any]) -> NonEmptyList[Any]:
        xs, ys = fa.to_tuple(), fb.to_tuple()
        common = min(len(xs), len(ys))
        aligned = [f(Both(a, b)) for a, b in zip(xs, ys)]
        aligned.extend(f(This(a)) for a in xs[common:])
        aligned.extend(f(That(b)) for b in ys[common:])
        return NonEmptyList.from_iterable(aligned)

    def __repr__(self) -> str:
        return "nel_instance"


nel_instance = NonEmptyListInstance()


class NonEmptyListSemigroup(Semigroup[NonEmptyList[Any]]):
    def append(self, a1: NonEmptyList[Any], a2: NonEmptyList[Any]) -> NonEmptyList[Any]:
        return a1.append(a2)


nel_semigroup = NonEmptyListSemigroup()
