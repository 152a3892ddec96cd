"""Instances for Const, parameterised by the monoid of its contents."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.const import Const
from lawful.kernel.applicative import Applicative
from lawful.kernel.divide import Divisible
from lawful.kernel.foldable import Traverse
from lawful.kernel.semigroup import Monoid

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class ConstInstance(Applicative, Traverse, Divisible):
    """Const[M, _] is an applicative, a traversable and a divisible functor.

    Mapping, in either direction, never touches the contents. Applying and
    dividing append the contents with M, left operand first.
    """

    M: Monoid[Any]

    def point(self, a: Any) -> Const[Any]:
        return Const(self.M.zero())

    def map(self, fa: Const[Any], f: Callable[[A], B]) -> Const[Any]:
        return fa

    def ap(self, fa: Const[Any], ff: Const[Any]) -> Const[Any]:
        return Const(self.M.append(ff.value, fa.value))

    def traverse(self, fa: Const[Any], f: Callable[[A], Any], G: Applicative) -> Any:
        return G.point(fa)

    def fold_map(self, fa: Const[Any], f: Callable[[A], B], M: Monoid[B]) -> B:
        return M.zero()

    def fold_right(self, fa: Const[Any], z: B, f: Callable[[A, B], B]) -> B:
        return z

    def contramap(self, fa: Const[Any], f: Callable[[B], A]) -> Const[Any]:
        return fa

    def divide(self, fa: Const[Any], fb: Const[Any], f: Callable[[C], tuple[A, B]]) -> Const[Any]:
        return Const(self.M.append(fa.value, fb.value))

    def conquer(self) -> Const[Any]:
        return Const(self.M.zero())


def const_instance(M: Monoid[Any]) -> ConstInstance:
    return ConstInstance(M)
