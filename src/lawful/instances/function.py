"""Plain callables as an arrow."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawful.kernel.arrow import Arrow
from lawful.kernel.functor import compose, identity

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class FunctionArrow(Arrow):
    def arr(self, f: Callable[[A], B]) -> Callable[[A], B]:
        return f

    def id(self) -> Callable[[A], A]:
        return identity

    def compose(self, f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
        return compose(f, g)

    def dimap(self, fab: Callable[[A], B], f: Callable[[C], A], g: Callable[[B], D]) -> Callable[[C], D]:
        return lambda c: g(fab(f(c)))

    def first(self, fab: Callable[[A], B]) -> Callable[[tuple[A, Any]], tuple[B, Any]]:
        return lambda ac: (fab(ac[0]), ac[1])

    def second(self, fab: Callable[[A], B]) -> Callable[[tuple[Any, A]], tuple[Any, B]]:
        return lambda ca: (ca[0], fab(ca[1]))

    def __repr__(self) -> str:
        return "function_arrow"


function_arrow = FunctionArrow()
