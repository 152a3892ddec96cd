"""NonEmptyList - a sequence with at least one element."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from lawful.errors import EmptyStructureError

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class NonEmptyList(Generic[A]):
    """A head element followed by a (possibly empty) tuple of elements."""

    head: A
    tail: tuple[A, ...] = field(default=())

    @staticmethod
    def of(head: A, *tail: A) -> NonEmptyList[A]:
        return NonEmptyList(head, tuple(tail))

    @staticmethod
    def from_iterable(values: Iterable[A]) -> NonEmptyList[A]:
        """Build from any iterable.

        Raises:
            EmptyStructureError: If values yields nothing
        """
        items = tuple(values)
        if not items:
            raise EmptyStructureError("NonEmptyList requires at least one element")
        return NonEmptyList(items[0], items[1:])

    def to_tuple(self) -> tuple[A, ...]:
        return (self.head,) + self.tail

    def __iter__(self) -> Iterator[A]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 1 + len(self.tail)

    @property
    def last(self) -> A:
        return self.tail[-1] if self.tail else self.head

    def map(self, f: Callable[[A], B]) -> NonEmptyList[B]:
        return NonEmptyList(f(self.head), tuple(f(a) for a in self.tail))

    def flat_map(self, f: Callable[[A], NonEmptyList[B]]) -> NonEmptyList[B]:
        first = f(self.head)
        rest: list[B] = list(first.tail)
        for a in self.tail:
            rest.extend(f(a))
        return NonEmptyList(first.head, tuple(rest))

    def append(self, other: NonEmptyList[A]) -> NonEmptyList[A]:
        return NonEmptyList(self.head, self.tail + other.to_tuple())

    def tails(self) -> NonEmptyList[NonEmptyList[A]]:
        """Every non-empty suffix, longest first."""
        items = self.to_tuple()
        return NonEmptyList.from_iterable(
            NonEmptyList(items[i], items[i + 1:]) for i in range(len(items))
        )

    def reverse(self) -> NonEmptyList[A]:
        return NonEmptyList.from_iterable(reversed(self.to_tuple()))
