"""Kleisli - a function A -> M[B] treated as a value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from lawful.kernel.functor import Functor
    from lawful.kernel.monad import Bind

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Kleisli(Generic[A, B]):
    """Wraps run: A -> M[B].

    The effect M is not part of the value; operations that need it take
    the M instance explicitly.
    """

    run: Callable[[A], Any]

    def __call__(self, a: A) -> Any:
        return self.run(a)

    def map(self, f: Callable[[B], C], M: Functor) -> Kleisli[A, C]:
        return Kleisli(lambda a: M.map(self.run(a), f))

    def flat_map_k(self, f: Callable[[B], Any], M: Bind) -> Kleisli[A, C]:
        """Bind the result with f: B -> M[C]."""
        return Kleisli(lambda a: M.bind(self.run(a), f))

    def and_then(self, other: Kleisli[B, C], M: Bind) -> Kleisli[A, C]:
        """Kleisli composition: run self, then feed its result to other."""
        return Kleisli(lambda a: M.bind(self.run(a), other.run))

    def compose(self, other: Kleisli[C, A], M: Bind) -> Kleisli[C, B]:
        return other.and_then(self, M)

    def map_k(self, f: Callable[[Any], Any]) -> Kleisli[A, Any]:
        """Transform the effect itself: f: M[B] -> N[C]."""
        return Kleisli(lambda a: f(self.run(a)))

    def local(self, f: Callable[[C], A]) -> Kleisli[C, B]:
        """Adapt the input before running."""
        return Kleisli(lambda c: self.run(f(c)))
