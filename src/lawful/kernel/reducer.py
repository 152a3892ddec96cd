"""Reducer - accumulate values of C into a semigroup M."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.kernel.equal import Equal
from lawful.kernel.semigroup import Semigroup, UnfoldStep, maybe_equal, unfold_values

C = TypeVar("C")
M = TypeVar("M")
S = TypeVar("S")


class Reducer(ABC, Generic[C, M]):
    """Injects elements of C into M and appends them with M's semigroup.

    cons and snoc may be overridden with cheaper versions, but must agree
    with appending unit on the left or the right.
    """

    @property
    @abstractmethod
    def semigroup(self) -> Semigroup[M]:
        pass

    @abstractmethod
    def unit(self, c: C) -> M:
        pass

    def cons(self, c: C, m: M) -> M:
        return self.semigroup.append(self.unit(c), m)

    def snoc(self, m: M, c: C) -> M:
        return self.semigroup.append(m, self.unit(c))

    def unfoldl_opt(self, seed: S, f: UnfoldStep[S, C]) -> Maybe[M]:
        """Unfold to the left; the first generated element ends up rightmost."""
        step = f(seed)
        if not isinstance(step, Just):
            return NOTHING
        seed, c = step.value
        acc = self.unit(c)
        step = f(seed)
        while isinstance(step, Just):
            seed, c = step.value
            acc = self.cons(c, acc)
            step = f(seed)
        return Just(acc)

    def unfoldr_opt(self, seed: S, f: UnfoldStep[S, C]) -> Maybe[M]:
        step = f(seed)
        if not isinstance(step, Just):
            return NOTHING
        seed, c = step.value
        acc = self.unit(c)
        step = f(seed)
        while isinstance(step, Just):
            seed, c = step.value
            acc = self.snoc(acc, c)
            step = f(seed)
        return Just(acc)

    @property
    def reducer_law(self) -> ReducerLaw[C, M]:
        return ReducerLaw(self)

    @staticmethod
    def unit_reducer(unit: Callable[[C], M], semigroup: Semigroup[M]) -> Reducer[C, M]:
        return _UnitReducer(unit, semigroup)

    @staticmethod
    def identity_reducer(semigroup: Semigroup[M]) -> Reducer[M, M]:
        return _UnitReducer(lambda m: m, semigroup)


@dataclass(frozen=True)
class _UnitReducer(Reducer[C, M]):
    _unit: Callable[[C], M]
    _semigroup: Semigroup[M]

    @property
    def semigroup(self) -> Semigroup[M]:
        return self._semigroup

    def unit(self, c: C) -> M:
        return self._unit(c)


@dataclass(frozen=True)
class ReducerLaw(Generic[C, M]):
    R: Reducer[C, M]

    def cons_correctness(self, c: C, m: M, eq: Equal[M]) -> bool:
        return eq.equal(self.R.cons(c, m), self.R.semigroup.append(self.R.unit(c), m))

    def snoc_correctness(self, m: M, c: C, eq: Equal[M]) -> bool:
        return eq.equal(self.R.snoc(m, c), self.R.semigroup.append(m, self.R.unit(c)))

    def unfoldl_opt_consistency(self, seed: Any, f: UnfoldStep[Any, C], eq: Equal[M]) -> bool:
        values = unfold_values(seed, f)
        expected: Maybe[M] = NOTHING
        if values:
            acc = self.R.unit(values[0])
            for c in values[1:]:
                acc = self.R.semigroup.append(self.R.unit(c), acc)
            expected = Just(acc)
        return maybe_equal(eq, self.R.unfoldl_opt(seed, f), expected)

    def unfoldr_opt_consistency(self, seed: Any, f: UnfoldStep[Any, C], eq: Equal[M]) -> bool:
        values = unfold_values(seed, f)
        expected: Maybe[M] = NOTHING
        if values:
            acc = self.R.unit(values[0])
            for c in values[1:]:
                acc = self.R.semigroup.append(acc, self.R.unit(c))
            expected = Just(acc)
        return maybe_equal(eq, self.R.unfoldr_opt(seed, f), expected)
