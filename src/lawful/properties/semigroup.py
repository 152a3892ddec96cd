"""Properties of Semigroup."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.semigroup import Semigroup
from lawful.properties.arbitrary import fueled, ints
from lawful.properties.prop import Prop, Properties, for_all


def associative(S: Semigroup[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(values, values, values)(lambda a, b, c: S.semigroup_law.associative(a, b, c, eq))


def unfoldl_sum_opt_consistency(S: Semigroup[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(fueled(ints, values))(
        lambda unfold: S.semigroup_law.unfoldl_sum_opt_consistency(unfold[0], unfold[1], eq)
    )


def unfoldr_sum_opt_consistency(S: Semigroup[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(fueled(ints, values))(
        lambda unfold: S.semigroup_law.unfoldr_sum_opt_consistency(unfold[0], unfold[1], eq)
    )


def laws(S: Semigroup[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    p = Properties("semigroup")
    p.property("associative", associative(S, values, eq))
    p.property("unfoldl sum consistency", unfoldl_sum_opt_consistency(S, values, eq))
    p.property("unfoldr sum consistency", unfoldr_sum_opt_consistency(S, values, eq))
    return p
