"""Lens - a first-class getter/setter pair focused on part of a record."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from lawful.kernel.equal import Equal

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Lens(Generic[A, B]):
    """Focus on a B inside an A.

    Attributes:
        get: Read the focus out of a record
        set: Return a copy of the record with the focus replaced
    """

    get: Callable[[A], B]
    set: Callable[[A, B], A]

    def modify(self, a: A, f: Callable[[B], B]) -> A:
        return self.set(a, f(self.get(a)))

    def and_then(self, other: Lens[B, C]) -> Lens[A, C]:
        """Focus further, through this lens and then other."""
        return Lens(
            get=lambda a: other.get(self.get(a)),
            set=lambda a, c: self.set(a, other.set(self.get(a), c)),
        )

    def compose(self, other: Lens[C, A]) -> Lens[C, B]:
        return other.and_then(self)

    @staticmethod
    def identity() -> Lens[A, A]:
        return Lens(get=lambda a: a, set=lambda _, b: b)

    @staticmethod
    def first() -> Lens[tuple[Any, Any], Any]:
        return Lens(get=lambda p: p[0], set=lambda p, v: (v, p[1]))

    @staticmethod
    def second() -> Lens[tuple[Any, Any], Any]:
        return Lens(get=lambda p: p[1], set=lambda p, v: (p[0], v))

    @property
    def lens_law(self) -> LensLaw[A, B]:
        return LensLaw(self)


@dataclass(frozen=True)
class LensLaw(Generic[A, B]):
    """Well-behaved lens laws."""

    lens: Lens[A, B]

    def identity(self, a: A, eq: Equal[A]) -> bool:
        """Setting what you got changes nothing."""
        return eq.equal(self.lens.set(a, self.lens.get(a)), a)

    def retention(self, a: A, b: B, eq: Equal[B]) -> bool:
        """You get back what you set."""
        return eq.equal(self.lens.get(self.lens.set(a, b)), b)

    def double_set(self, a: A, b1: B, b2: B, eq: Equal[A]) -> bool:
        """Setting twice is the same as setting once with the latter value."""
        return eq.equal(self.lens.set(self.lens.set(a, b1), b2), self.lens.set(a, b2))
