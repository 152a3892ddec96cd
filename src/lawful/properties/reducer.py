"""Properties of Reducer."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.reducer import Reducer
from lawful.properties.arbitrary import DEFAULT_FUEL, fueled, ints
from lawful.properties.prop import Prop, Properties, for_all


def cons_correctness(R: Reducer[Any, Any], cs: SearchStrategy[Any], ms: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(cs, ms)(lambda c, m: R.reducer_law.cons_correctness(c, m, eq))


def snoc_correctness(R: Reducer[Any, Any], cs: SearchStrategy[Any], ms: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(ms, cs)(lambda m, c: R.reducer_law.snoc_correctness(m, c, eq))


def unfoldl_opt_consistency(R: Reducer[Any, Any], cs: SearchStrategy[Any], eq: Equal[Any], fuel: int = DEFAULT_FUEL) -> Prop:
    return for_all(fueled(ints, cs, fuel))(
        lambda unfold: R.reducer_law.unfoldl_opt_consistency(unfold[0], unfold[1], eq)
    )


def unfoldr_opt_consistency(R: Reducer[Any, Any], cs: SearchStrategy[Any], eq: Equal[Any], fuel: int = DEFAULT_FUEL) -> Prop:
    return for_all(fueled(ints, cs, fuel))(
        lambda unfold: R.reducer_law.unfoldr_opt_consistency(unfold[0], unfold[1], eq)
    )


def laws(
    R: Reducer[Any, Any],
    cs: SearchStrategy[Any],
    ms: SearchStrategy[Any],
    eq: Equal[Any],
    fuel: int = DEFAULT_FUEL,
) -> Properties:
    """cs generates the reduced elements C, ms the accumulated values M.

    fuel bounds the length of generated unfolds.
    """
    p = Properties("reducer")
    p.property("cons is correct", cons_correctness(R, cs, ms, eq))
    p.property("snoc is correct", snoc_correctness(R, cs, ms, eq))
    p.property("unfoldl is consistent with cons", unfoldl_opt_consistency(R, cs, eq, fuel))
    p.property("unfoldr is consistent with snoc", unfoldr_opt_consistency(R, cs, eq, fuel))
    return p
