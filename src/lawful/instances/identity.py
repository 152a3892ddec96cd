"""The identity type constructor: Id[A] is just A."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawful.data.either import Either, Left
from lawful.kernel.applicative import Applicative
from lawful.kernel.comonad import Comonad
from lawful.kernel.foldable import Traverse
from lawful.kernel.monad import BindRec, Monad
from lawful.kernel.semigroup import Monoid
from lawful.kernel.zip import Zip

A = TypeVar("A")
B = TypeVar("B")


class IdInstance(Monad, BindRec, Traverse, Comonad, Zip):
    def point(self, a: A) -> A:
        return a

    def map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def ap(self, fa: A, ff: Callable[[A], B]) -> B:
        return ff(fa)

    def bind(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def tailrec_m(self, a: A, f: Callable[[A], Either[A, B]]) -> B:
        step = f(a)
        while isinstance(step, Left):
            step = f(step.value)
        return step.value  # type: ignore[attr-defined]

    def traverse(self, fa: A, f: Callable[[A], Any], G: Applicative) -> Any:
        return f(fa)

    def fold_map(self, fa: A, f: Callable[[A], B], M: Monoid[B]) -> B:
        return f(fa)

    def fold_right(self, fa: A, z: B, f: Callable[[A, B], B]) -> B:
        return f(fa, z)

    def cobind(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def copoint(self, fa: A) -> A:
        return fa

    def zip(self, fa: A, fb: B) -> tuple[A, B]:
        return (fa, fb)

    def __repr__(self) -> str:
        return "id_instance"


id_instance = IdInstance()
