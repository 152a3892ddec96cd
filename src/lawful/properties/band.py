"""Properties of Band."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.semigroup import Band
from lawful.properties import semigroup
from lawful.properties.prop import Prop, Properties, for_all


def idempotency(B: Band[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(values)(lambda a: B.band_law.idempotency(a, eq))


def laws(B: Band[Any], values: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    p = Properties("band")
    p.include(semigroup.laws(B, values, eq))
    p.property("idempotency", idempotency(B, values, eq))
    return p
