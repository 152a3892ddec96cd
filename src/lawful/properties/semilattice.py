"""Properties of SemiLattice."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.semigroup import SemiLattice
from lawful.properties import band
from lawful.properties.prop import Prop, Properties, for_all


def commutative(L: SemiLattice[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(values, values)(lambda a, b: L.semilattice_law.commutative(a, b, eq))


def laws(L: SemiLattice[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    p = Properties("semilattice")
    p.include(band.laws(L, values, eq))
    p.property("commutative", commutative(L, values, eq))
    return p
