"""Algebras on builtin values: numbers, strings, booleans, tuples and frozensets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from lawful.data.maybe import Just, Maybe
from lawful.errors import ConfigurationError
from lawful.kernel.equal import Enum, Order, Ordering
from lawful.kernel.reducer import Reducer
from lawful.kernel.semigroup import Band, Monoid, SemiLattice


class IntSum(Monoid[int]):
    def append(self, a1: int, a2: int) -> int:
        return a1 + a2

    def zero(self) -> int:
        return 0

    def multiply(self, value: int, n: int) -> int:
        return value * max(n, 0)

    def sum(self, values: Iterable[int]) -> int:
        return sum(values)


class IntProduct(Monoid[int]):
    def append(self, a1: int, a2: int) -> int:
        return a1 * a2

    def zero(self) -> int:
        return 1


class IntMin(SemiLattice[int]):
    """min is a semilattice; unbounded ints have no identity for it."""

    def append(self, a1: int, a2: int) -> int:
        return min(a1, a2)


class IntMax(SemiLattice[int]):
    def append(self, a1: int, a2: int) -> int:
        return max(a1, a2)


class StrMonoid(Monoid[str]):
    def append(self, a1: str, a2: str) -> str:
        return a1 + a2

    def zero(self) -> str:
        return ""

    def sum(self, values: Iterable[str]) -> str:
        return "".join(values)


class FrozensetUnion(Monoid[frozenset[Any]], SemiLattice[frozenset[Any]]):
    def append(self, a1: frozenset[Any], a2: frozenset[Any]) -> frozenset[Any]:
        return a1 | a2

    def zero(self) -> frozenset[Any]:
        return frozenset()


class TupleMonoid(Monoid[tuple[Any, ...]]):
    def append(self, a1: tuple[Any, ...], a2: tuple[Any, ...]) -> tuple[Any, ...]:
        return a1 + a2

    def zero(self) -> tuple[Any, ...]:
        return ()


class AllMonoid(Monoid[bool], SemiLattice[bool]):
    """Conjunction."""

    def append(self, a1: bool, a2: bool) -> bool:
        return a1 and a2

    def zero(self) -> bool:
        return True


class AnyMonoid(Monoid[bool], SemiLattice[bool]):
    """Disjunction."""

    def append(self, a1: bool, a2: bool) -> bool:
        return a1 or a2

    def zero(self) -> bool:
        return False


class FirstBand(Band[Any]):
    """Keeps the left operand. Idempotent but not commutative."""

    def append(self, a1: Any, a2: Any) -> Any:
        return a1


class IntegerEnum(Enum[int]):
    """Unbounded integers in their natural order."""

    def order(self, a1: int, a2: int) -> Ordering:
        return Ordering.from_int((a1 > a2) - (a1 < a2))

    @property
    def equal_is_natural(self) -> bool:
        return True

    def succ(self, a: int) -> int:
        return a + 1

    def pred(self, a: int) -> int:
        return a - 1

    def succn(self, n: int, a: int) -> int:
        return a + n


class StrOrder(Order[str]):
    def order(self, a1: str, a2: str) -> Ordering:
        return Ordering.from_int((a1 > a2) - (a1 < a2))

    @property
    def equal_is_natural(self) -> bool:
        return True


@dataclass(frozen=True)
class BoundedIntEnum(Enum[int]):
    """Integers in [lo, hi], wrapping around at both ends."""

    lo: int
    hi: int

    def __post_init__(self) -> None:
        if self.lo > self.hi:
            raise ConfigurationError(f"empty range: lo={self.lo} > hi={self.hi}")

    def order(self, a1: int, a2: int) -> Ordering:
        return Ordering.from_int((a1 > a2) - (a1 < a2))

    @property
    def equal_is_natural(self) -> bool:
        return True

    def _wrap(self, a: int) -> int:
        return self.lo + (a - self.lo) % (self.hi - self.lo + 1)

    def succ(self, a: int) -> int:
        return self._wrap(a + 1)

    def pred(self, a: int) -> int:
        return self._wrap(a - 1)

    def succn(self, n: int, a: int) -> int:
        return self._wrap(a + n)

    def min_value(self) -> Maybe[int]:
        return Just(self.lo)

    def max_value(self) -> Maybe[int]:
        return Just(self.hi)


class BoolEnum(Enum[bool]):
    """False < True, cyclic."""

    def order(self, a1: bool, a2: bool) -> Ordering:
        return Ordering.from_int(int(a1) - int(a2))

    @property
    def equal_is_natural(self) -> bool:
        return True

    def succ(self, a: bool) -> bool:
        return not a

    def pred(self, a: bool) -> bool:
        return not a

    def min_value(self) -> Maybe[bool]:
        return Just(False)

    def max_value(self) -> Maybe[bool]:
        return Just(True)


int_sum = IntSum()
int_product = IntProduct()
int_min = IntMin()
int_max = IntMax()
str_monoid = StrMonoid()
frozenset_union = FrozensetUnion()
tuple_monoid = TupleMonoid()
all_monoid = AllMonoid()
any_monoid = AnyMonoid()
first_band = FirstBand()
int_enum = IntegerEnum()
int_order: Order[int] = int_enum
str_order = StrOrder()
bool_enum = BoolEnum()


def bounded_int_enum(lo: int, hi: int) -> BoundedIntEnum:
    """Raises ConfigurationError when lo > hi."""
    return BoundedIntEnum(lo, hi)


def identity_reducer(M: Monoid[Any]) -> Reducer[Any, Any]:
    return Reducer.identity_reducer(M)
