"""Equality, ordering and enumeration type classes and their laws."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

from lawful.data.maybe import NOTHING, Maybe

A = TypeVar("A")
B = TypeVar("B")


class Ordering(IntEnum):
    """Result of comparing two values."""

    LT = -1
    EQ = 0
    GT = 1

    @staticmethod
    def from_int(n: int) -> Ordering:
        """Map a cmp-style integer onto an Ordering by its sign."""
        if n < 0:
            return Ordering.LT
        if n > 0:
            return Ordering.GT
        return Ordering.EQ

    def complement(self) -> Ordering:
        return Ordering(-self.value)

    def then(self, other: Ordering) -> Ordering:
        """Lexicographic combination: other breaks ties."""
        return other if self is Ordering.EQ else self


class Equal(ABC, Generic[A]):
    """A decidable equivalence on A."""

    @abstractmethod
    def equal(self, a1: A, a2: A) -> bool:
        pass

    @property
    def equal_is_natural(self) -> bool:
        """True when equal agrees with the == operator."""
        return False

    def contramap(self, f: Callable[[B], A]) -> Equal[B]:
        return _EqualBy(lambda b1, b2: self.equal(f(b1), f(b2)))

    @property
    def equal_law(self) -> EqualLaw[A]:
        return EqualLaw(self)

    @staticmethod
    def natural() -> Equal[Any]:
        """Equality by ==."""
        return _NATURAL_EQUAL

    @staticmethod
    def by(fn: Callable[[A, A], bool]) -> Equal[A]:
        return _EqualBy(fn)


@dataclass(frozen=True)
class _EqualBy(Equal[A]):
    fn: Callable[[A, A], bool]

    def equal(self, a1: A, a2: A) -> bool:
        return self.fn(a1, a2)


class _NaturalEqual(Equal[Any]):
    def equal(self, a1: Any, a2: Any) -> bool:
        return a1 == a2

    @property
    def equal_is_natural(self) -> bool:
        return True


_NATURAL_EQUAL = _NaturalEqual()


def _call(f: Any, x: Any) -> Any:
    return f(x)


@dataclass(frozen=True)
class SamplingEqual(Equal[A]):
    """Extensional equality for function-like values.

    Two values are equal when applying both to every sample input gives
    equal results. This is an approximation: it can only refute equality
    on the inputs it is given.

    Attributes:
        samples: Inputs to apply both values to
        result: Equality on the results
        apply: How to apply a value to an input, defaults to calling it
    """

    samples: Sequence[Any]
    result: Equal[Any] = _NATURAL_EQUAL
    apply: Callable[[A, Any], Any] = _call

    def equal(self, a1: A, a2: A) -> bool:
        return all(self.result.equal(self.apply(a1, x), self.apply(a2, x)) for x in self.samples)


@dataclass(frozen=True)
class EqualLaw(Generic[A]):
    """An Equal must be an equivalence relation."""

    F: Equal[A]

    def commutative(self, f1: A, f2: A) -> bool:
        return self.F.equal(f1, f2) == self.F.equal(f2, f1)

    def reflexive(self, f: A) -> bool:
        return self.F.equal(f, f)

    def transitive(self, f1: A, f2: A, f3: A) -> bool:
        return not (self.F.equal(f1, f2) and self.F.equal(f2, f3)) or self.F.equal(f1, f3)

    def naturality(self, f1: A, f2: A) -> bool:
        """An Equal claiming to be natural must agree with ==."""
        return not self.F.equal_is_natural or self.F.equal(f1, f2) == (f1 == f2)


class Order(Equal[A]):
    """A total order on A."""

    @abstractmethod
    def order(self, a1: A, a2: A) -> Ordering:
        pass

    def equal(self, a1: A, a2: A) -> bool:
        return self.order(a1, a2) is Ordering.EQ

    def less_than(self, a1: A, a2: A) -> bool:
        return self.order(a1, a2) is Ordering.LT

    def less_than_or_equal(self, a1: A, a2: A) -> bool:
        return self.order(a1, a2) is not Ordering.GT

    def greater_than(self, a1: A, a2: A) -> bool:
        return self.order(a1, a2) is Ordering.GT

    def greater_than_or_equal(self, a1: A, a2: A) -> bool:
        return self.order(a1, a2) is not Ordering.LT

    def max(self, a1: A, a2: A) -> A:
        return a2 if self.less_than(a1, a2) else a1

    def min(self, a1: A, a2: A) -> A:
        return a2 if self.greater_than(a1, a2) else a1

    def sort(self, values: Iterable[A]) -> list[A]:
        return sorted(values, key=functools.cmp_to_key(lambda x, y: int(self.order(x, y))))

    def reverse_order(self) -> Order[A]:
        return _OrderBy(lambda a1, a2: self.order(a2, a1))

    def contramap(self, f: Callable[[B], A]) -> Order[B]:
        return _OrderBy(lambda b1, b2: self.order(f(b1), f(b2)))

    @property
    def order_law(self) -> OrderLaw[A]:
        return OrderLaw(self)

    @staticmethod
    def natural() -> Order[Any]:
        """Order by the < and == operators."""
        return _NATURAL_ORDER

    @staticmethod
    def by(fn: Callable[[A, A], Ordering]) -> Order[A]:
        return _OrderBy(fn)


@dataclass(frozen=True)
class _OrderBy(Order[A]):
    fn: Callable[[A, A], Ordering]

    def order(self, a1: A, a2: A) -> Ordering:
        return self.fn(a1, a2)


class _NaturalOrder(Order[Any]):
    def order(self, a1: Any, a2: Any) -> Ordering:
        if a1 < a2:
            return Ordering.LT
        if a1 == a2:
            return Ordering.EQ
        return Ordering.GT

    @property
    def equal_is_natural(self) -> bool:
        return True


_NATURAL_ORDER = _NaturalOrder()


@dataclass(frozen=True)
class OrderLaw(Generic[A]):
    F: Order[A]

    def antisymmetric(self, f1: A, f2: A) -> bool:
        return self.F.order(f1, f2) is self.F.order(f2, f1).complement()

    def transitive_order(self, f1: A, f2: A, f3: A) -> bool:
        f1f2 = self.F.order(f1, f2)
        if f1f2 is Ordering.EQ or f1f2 is not self.F.order(f2, f3):
            return True
        return self.F.order(f1, f3) is f1f2

    def order_and_equal_consistent(self, f1: A, f2: A) -> bool:
        return self.F.equal(f1, f2) == (self.F.order(f1, f2) is Ordering.EQ)


class Enum(Order[A]):
    """An order with successor and predecessor.

    Bounded enums are cyclic: the successor of max is min and the
    predecessor of min is max.
    """

    @abstractmethod
    def succ(self, a: A) -> A:
        pass

    @abstractmethod
    def pred(self, a: A) -> A:
        pass

    def min_value(self) -> Maybe[A]:
        """The least element, if bounded below."""
        return NOTHING

    def max_value(self) -> Maybe[A]:
        """The greatest element, if bounded above."""
        return NOTHING

    def succn(self, n: int, a: A) -> A:
        """Step n times forward; a negative n steps backward."""
        step = self.succ if n >= 0 else self.pred
        for _ in range(abs(n)):
            a = step(a)
        return a

    def predn(self, n: int, a: A) -> A:
        return self.succn(-n, a)

    def from_to(self, start: A, end: A) -> tuple[A, ...]:
        """Every element from start up to end inclusive."""
        values = [start]
        current = start
        while self.less_than(current, end):
            current = self.succ(current)
            values.append(current)
        return tuple(values)

    @property
    def enum_law(self) -> EnumLaw[A]:
        return EnumLaw(self)


@dataclass(frozen=True)
class EnumLaw(Generic[A]):
    F: Enum[A]

    def succpred(self, x: A) -> bool:
        return self.F.equal(self.F.succ(self.F.pred(x)), x)

    def predsucc(self, x: A) -> bool:
        return self.F.equal(self.F.pred(self.F.succ(x)), x)

    def minmaxpred(self) -> bool:
        return self.F.min_value().fold(
            lambda: True,
            lambda lo: self.F.max_value().fold(lambda: True, lambda hi: self.F.equal(self.F.pred(lo), hi)),
        )

    def minmaxsucc(self) -> bool:
        return self.F.min_value().fold(
            lambda: True,
            lambda lo: self.F.max_value().fold(lambda: True, lambda hi: self.F.equal(self.F.succ(hi), lo)),
        )

    def succn(self, x: A, n: int) -> bool:
        expected = x
        for _ in range(n):
            expected = self.F.succ(expected)
        for _ in range(-n):
            expected = self.F.pred(expected)
        return self.F.equal(self.F.succn(n, x), expected)

    def predn(self, x: A, n: int) -> bool:
        expected = x
        for _ in range(n):
            expected = self.F.pred(expected)
        for _ in range(-n):
            expected = self.F.succ(expected)
        return self.F.equal(self.F.predn(n, x), expected)

    def succorder(self, x: A) -> bool:
        """Successor is greater or equal, except where max wraps around."""
        if self.F.max_value().fold(lambda: False, lambda hi: self.F.equal(x, hi)):
            return True
        return self.F.greater_than_or_equal(self.F.succ(x), x)

    def predorder(self, x: A) -> bool:
        if self.F.min_value().fold(lambda: False, lambda lo: self.F.equal(x, lo)):
            return True
        return self.F.less_than_or_equal(self.F.pred(x), x)
