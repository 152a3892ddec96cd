"""Properties of Equal."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.properties.prop import Prop, Properties, for_all


def commutativity(E: Equal[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values)(E.equal_law.commutative)


def reflexive(E: Equal[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values)(E.equal_law.reflexive)


def transitive(E: Equal[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values, values)(E.equal_law.transitive)


def naturality(E: Equal[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values)(E.equal_law.naturality)


def laws(E: Equal[Any], values: SearchStrategy[Any]) -> Properties:
    p = Properties("equal")
    p.property("commutativity", commutativity(E, values))
    p.property("reflexive", reflexive(E, values))
    p.property("transitive", transitive(E, values))
    p.property("naturality", naturality(E, values))
    return p
