"""Maybe - an optional value that, unlike None, can itself hold None."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Maybe(Generic[A]):
    """Either Just(value) or Nothing."""

    __slots__ = ()

    @staticmethod
    def just(value: A) -> Maybe[A]:
        return Just(value)

    @staticmethod
    def empty() -> Maybe[Any]:
        return NOTHING

    @staticmethod
    def from_optional(value: A | None) -> Maybe[A]:
        """Lift a plain optional value; None becomes Nothing."""
        return NOTHING if value is None else Just(value)

    @property
    def is_just(self) -> bool:
        return isinstance(self, Just)

    @property
    def is_empty(self) -> bool:
        return not self.is_just

    def fold(self, if_empty: Callable[[], B], if_just: Callable[[A], B]) -> B:
        if isinstance(self, Just):
            return if_just(self.value)
        return if_empty()

    def map(self, f: Callable[[A], B]) -> Maybe[B]:
        if isinstance(self, Just):
            return Just(f(self.value))
        return NOTHING

    def flat_map(self, f: Callable[[A], Maybe[B]]) -> Maybe[B]:
        if isinstance(self, Just):
            return f(self.value)
        return NOTHING

    def get_or_else(self, default: A) -> A:
        if isinstance(self, Just):
            return self.value
        return default

    def or_else(self, alternative: Maybe[A]) -> Maybe[A]:
        return self if self.is_just else alternative

    def filter(self, predicate: Callable[[A], bool]) -> Maybe[A]:
        if isinstance(self, Just) and predicate(self.value):
            return self
        return NOTHING

    def to_tuple(self) -> tuple[A, ...]:
        if isinstance(self, Just):
            return (self.value,)
        return ()


@dataclass(frozen=True)
class Just(Maybe[A]):
    value: A


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    def __repr__(self) -> str:
        return "NOTHING"


NOTHING: Maybe[Any] = Nothing()
