from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

from lawful.config import LawSettings
from lawful.data.either import Either, Left
from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.instances.either import EitherInstance
from lawful.kernel.equal import Equal, Order, Ordering
from lawful.kernel.functor import Functor
from lawful.kernel.monad import Monad
from lawful.kernel.semigroup import Monoid, Semigroup
from lawful.properties.arbitrary import eithers, functions, kleislis, maybes, predicates, small_ints

FAST = LawSettings(max_examples=25, derandomize=True)
"""Small, reproducible settings so the whole law suite stays quick."""

NATURAL: Equal[Any] = Equal.natural()


def identities(elements: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    """Id[A] is A itself."""
    return elements


def small_eithers(elements: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return eithers(small_ints, elements)


maybe_kleislis = kleislis(maybes)
either_kleislis = kleislis(small_eithers)
predicate_kleislis = kleislis(lambda _: predicates())


def maybe_kleisli_arrows(inputs: st.SearchStrategy[Any], outputs: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return maybe_kleislis(outputs)


def plain_functions(inputs: st.SearchStrategy[Any], outputs: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return functions(outputs)


class Subtraction(Semigroup[int]):
    """Not associative."""

    def append(self, a1: int, a2: int) -> int:
        return a1 - a2


class OffByOneSum(Monoid[int]):
    """Associative, but its zero is not an identity."""

    def append(self, a1: int, a2: int) -> int:
        return a1 + a2

    def zero(self) -> int:
        return 1


class DroppingFunctor(Functor):
    """Maps over tuples but loses the last element."""

    def map(self, fa: tuple[Any, ...], f: Callable[[Any], Any]) -> tuple[Any, ...]:
        return tuple(f(a) for a in fa[:-1])


class ExplodingFunctor(Functor):
    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        raise RuntimeError("map is not supported")


class ForgetfulMaybe(Monad):
    """A Maybe monad whose point forgets its value."""

    def point(self, a: Any) -> Maybe[Any]:
        return NOTHING

    def bind(self, fa: Maybe[Any], f: Callable[[Any], Maybe[Any]]) -> Maybe[Any]:
        return fa.flat_map(f)


class AbsoluteOrder(Order[int]):
    """Orders by absolute value but claims to agree with ==."""

    def order(self, a1: int, a2: int) -> Ordering:
        return Ordering.from_int(abs(a1) - abs(a2))

    @property
    def equal_is_natural(self) -> bool:
        return True


class FixedErrorEither(EitherInstance):
    """Raises the same error whatever it is asked to raise."""

    def raise_error(self, e: Any) -> Either[Any, Any]:
        return Left(0)


@dataclass
class Counter:
    """Counts calls made through it, for checking evaluation order."""

    calls: list[Any]

    def record(self, value: Any) -> Maybe[Any]:
        self.calls.append(value)
        return Just(value)
