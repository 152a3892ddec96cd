"""Semigroup, Monoid, Band and SemiLattice with their laws."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.kernel.equal import Equal

A = TypeVar("A")
S = TypeVar("S")

UnfoldStep = Callable[[S], Maybe[tuple[S, A]]]


class Semigroup(ABC, Generic[A]):
    """An associative binary operation."""

    @abstractmethod
    def append(self, a1: A, a2: A) -> A:
        pass

    def multiply1(self, value: A, n: int) -> A:
        """Append value to itself n more times."""
        result = value
        for _ in range(n):
            result = self.append(result, value)
        return result

    def sum_opt(self, values: Iterable[A]) -> Maybe[A]:
        """Append all values left to right; Nothing when there are none."""
        iterator = iter(values)
        try:
            acc = next(iterator)
        except StopIteration:
            return NOTHING
        for value in iterator:
            acc = self.append(acc, value)
        return Just(acc)

    def unfoldl_sum_opt(self, seed: S, f: UnfoldStep[S, A]) -> Maybe[A]:
        """Unfold seed to the left and sum the generated values.

        The first generated value ends up rightmost.
        """
        step = f(seed)
        if not isinstance(step, Just):
            return NOTHING
        seed, acc = step.value
        step = f(seed)
        while isinstance(step, Just):
            seed, value = step.value
            acc = self.append(value, acc)
            step = f(seed)
        return Just(acc)

    def unfoldr_sum_opt(self, seed: S, f: UnfoldStep[S, A]) -> Maybe[A]:
        """Unfold seed to the right and sum the generated values."""
        step = f(seed)
        if not isinstance(step, Just):
            return NOTHING
        seed, acc = step.value
        step = f(seed)
        while isinstance(step, Just):
            seed, value = step.value
            acc = self.append(acc, value)
            step = f(seed)
        return Just(acc)

    @property
    def semigroup_law(self) -> SemigroupLaw[A]:
        return SemigroupLaw(self)


class Monoid(Semigroup[A]):
    """A semigroup with an identity element."""

    @abstractmethod
    def zero(self) -> A:
        pass

    def multiply(self, value: A, n: int) -> A:
        """Append n copies of value; zero when n <= 0."""
        if n <= 0:
            return self.zero()
        return self.multiply1(value, n - 1)

    def sum(self, values: Iterable[A]) -> A:
        return self.sum_opt(values).get_or_else(self.zero())

    def is_zero(self, value: A, eq: Equal[A]) -> bool:
        return eq.equal(value, self.zero())

    @property
    def monoid_law(self) -> MonoidLaw[A]:
        return MonoidLaw(self)


class Band(Semigroup[A]):
    """An idempotent semigroup."""

    @property
    def band_law(self) -> BandLaw[A]:
        return BandLaw(self)


class SemiLattice(Band[A]):
    """A commutative band."""

    @property
    def semilattice_law(self) -> SemiLatticeLaw[A]:
        return SemiLatticeLaw(self)


def unfold_values(seed: S, f: UnfoldStep[S, A]) -> list[A]:
    """Run an unfold to completion, collecting the generated values in order."""
    values: list[A] = []
    step = f(seed)
    while isinstance(step, Just):
        seed, value = step.value
        values.append(value)
        step = f(seed)
    return values


def maybe_equal(eq: Equal[A], m1: Maybe[A], m2: Maybe[A]) -> bool:
    if isinstance(m1, Just) and isinstance(m2, Just):
        return eq.equal(m1.value, m2.value)
    return m1.is_empty and m2.is_empty


@dataclass(frozen=True)
class SemigroupLaw(Generic[A]):
    F: Semigroup[A]

    def associative(self, f1: A, f2: A, f3: A, eq: Equal[A]) -> bool:
        return eq.equal(
            self.F.append(f1, self.F.append(f2, f3)),
            self.F.append(self.F.append(f1, f2), f3),
        )

    def unfoldl_sum_opt_consistency(self, seed: Any, f: UnfoldStep[Any, A], eq: Equal[A]) -> bool:
        values = unfold_values(seed, f)
        expected: Maybe[A] = NOTHING
        if values:
            acc = values[0]
            for value in values[1:]:
                acc = self.F.append(value, acc)
            expected = Just(acc)
        return maybe_equal(eq, self.F.unfoldl_sum_opt(seed, f), expected)

    def unfoldr_sum_opt_consistency(self, seed: Any, f: UnfoldStep[Any, A], eq: Equal[A]) -> bool:
        values = unfold_values(seed, f)
        expected: Maybe[A] = NOTHING
        if values:
            acc = values[0]
            for value in values[1:]:
                acc = self.F.append(acc, value)
            expected = Just(acc)
        return maybe_equal(eq, self.F.unfoldr_sum_opt(seed, f), expected)


@dataclass(frozen=True)
class MonoidLaw(SemigroupLaw[A]):
    F: Monoid[A]

    def left_identity(self, a: A, eq: Equal[A]) -> bool:
        return eq.equal(self.F.append(self.F.zero(), a), a)

    def right_identity(self, a: A, eq: Equal[A]) -> bool:
        return eq.equal(self.F.append(a, self.F.zero()), a)


@dataclass(frozen=True)
class BandLaw(SemigroupLaw[A]):
    F: Band[A]

    def idempotency(self, a: A, eq: Equal[A]) -> bool:
        return eq.equal(self.F.append(a, a), a)


@dataclass(frozen=True)
class SemiLatticeLaw(BandLaw[A]):
    F: SemiLattice[A]

    def commutative(self, a: A, b: A, eq: Equal[A]) -> bool:
        return eq.equal(self.F.append(a, b), self.F.append(b, a))
