"""Value generators for law checking, built on hypothesis strategies.

A unary type constructor F is described by an Arbitrary1: given a strategy
for A it returns a strategy for F[A]. Binary constructors use an
Arbitrary2. Laws are instantiated at int.

Function-like values (plain functions, Kleislis, predicates) cannot be
compared directly, so they are compared by sampling: see SamplingEqual and
the *_SAMPLES constants below.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lawful.data.const import Const
from lawful.data.either import Left, Right
from lawful.data.kleisli import Kleisli
from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.data.nel import NonEmptyList
from lawful.data.predicate import Predicate
from lawful.data.these import Both, That, This
from lawful.kernel.equal import Equal, SamplingEqual

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")

Arbitrary1 = Callable[[SearchStrategy[Any]], SearchStrategy[Any]]
Arbitrary2 = Callable[[SearchStrategy[Any], SearchStrategy[Any]], SearchStrategy[Any]]

DEFAULT_FUEL = 16

INT_SAMPLES: tuple[int, ...] = (-7, -1, 0, 1, 2, 42)
INT_PAIRS: tuple[tuple[int, int], ...] = tuple((a, c) for a in (-1, 0, 2) for c in (0, 1, 42))
LEFT_NESTED_PAIRS: tuple[Any, ...] = tuple((ac, d) for ac in INT_PAIRS for d in (0, 7))
"""Inputs of the shape ((a, c), d)."""
RIGHT_NESTED_PAIRS: tuple[Any, ...] = tuple((d, ca) for d in (0, 7) for ca in INT_PAIRS)
"""Inputs of the shape (d, (c, a))."""

ints: SearchStrategy[int] = st.integers(min_value=-1000, max_value=1000)
small_ints: SearchStrategy[int] = st.integers(min_value=-8, max_value=8)


def functions(returns: SearchStrategy[B]) -> SearchStrategy[Callable[[Any], B]]:
    """Pure one-argument functions: equal arguments always give equal results.

    Arguments must be hashable.
    """
    return st.functions(like=lambda a: None, returns=returns, pure=True)


int_functions: SearchStrategy[Callable[[Any], int]] = functions(ints)


def maybes(elements: SearchStrategy[A]) -> SearchStrategy[Maybe[A]]:
    return st.one_of(st.just(NOTHING), elements.map(Just))


def eithers(lefts: SearchStrategy[Any], rights: SearchStrategy[Any]) -> SearchStrategy[Any]:
    return st.one_of(lefts.map(Left), rights.map(Right))


def theses(thises: SearchStrategy[Any], thats: SearchStrategy[Any]) -> SearchStrategy[Any]:
    return st.one_of(
        thises.map(This),
        thats.map(That),
        st.builds(Both, thises, thats),
    )


def seqs(elements: SearchStrategy[A], max_size: int = 5) -> SearchStrategy[tuple[A, ...]]:
    return st.lists(elements, max_size=max_size).map(tuple)


def nels(elements: SearchStrategy[A], max_size: int = 4) -> SearchStrategy[NonEmptyList[A]]:
    return st.builds(NonEmptyList, elements, seqs(elements, max_size=max_size))


def consts(values: SearchStrategy[Any]) -> Arbitrary1:
    """Const ignores its element strategy; the contents come from values."""
    return lambda _: values.map(Const)


def kleislis(results: Arbitrary1) -> Arbitrary1:
    """Kleisli arrows int -> M[A], where results generates M[A]."""
    return lambda elements: functions(results(elements)).map(Kleisli)


def predicates() -> SearchStrategy[Predicate[Any]]:
    return functions(st.booleans()).map(Predicate)


def fuel(step: Callable[[S], Maybe[tuple[S, A]]], limit: int = DEFAULT_FUEL) -> Callable[[Any], Maybe[Any]]:
    """Make an unfold step terminate after at most limit steps.

    The returned step works on seeds of the form (seed, remaining).
    """

    def fueled_step(seed: tuple[S, int]) -> Maybe[Any]:
        s, remaining = seed
        if remaining <= 0:
            return NOTHING
        return step(s).map(lambda sa: ((sa[0], remaining - 1), sa[1]))

    return fueled_step


def fueled(
    states: SearchStrategy[S],
    values: SearchStrategy[A],
    limit: int = DEFAULT_FUEL,
) -> SearchStrategy[tuple[Any, Callable[[Any], Maybe[Any]]]]:
    """Pairs of (seed, step) for unfold laws, guaranteed to terminate."""
    steps = functions(maybes(st.tuples(states, values))).map(lambda f: fuel(f, limit))
    return st.tuples(states.map(lambda s: (s, limit)), steps)


def sampling_equal(samples: Sequence[Any], result: Equal[Any] | None = None) -> Equal[Any]:
    """Compare function-like values by applying them to samples."""
    if result is None:
        return SamplingEqual(samples)
    return SamplingEqual(samples, result)


function_equal: Equal[Any] = SamplingEqual(INT_SAMPLES)
"""Equality of int -> X functions whose results compare with ==."""
