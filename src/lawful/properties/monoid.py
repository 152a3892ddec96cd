"""Properties of Monoid."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.semigroup import Monoid
from lawful.properties import semigroup
from lawful.properties.prop import Prop, Properties, for_all


def left_identity(M: Monoid[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(values)(lambda a: M.monoid_law.left_identity(a, eq))


def right_identity(M: Monoid[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(values)(lambda a: M.monoid_law.right_identity(a, eq))


def laws(M: Monoid[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    p = Properties("monoid")
    p.include(semigroup.laws(M, values, eq))
    p.property("left identity", left_identity(M, values, eq))
    p.property("right identity", right_identity(M, values, eq))
    return p
