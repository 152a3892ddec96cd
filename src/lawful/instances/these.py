"""Instances for These."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lawful.data.these import These
from lawful.kernel.arrow import Bifunctor

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class TheseBifunctor(Bifunctor):
    def bimap(self, fab: These[A, B], f: Callable[[A], C], g: Callable[[B], D]) -> These[C, D]:
        return fab.bimap(f, g)

    def __repr__(self) -> str:
        return "these_bifunctor"


these_bifunctor = TheseBifunctor()
