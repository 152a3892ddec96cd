"""Properties of Plus."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import Plus
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def associative(F: Plus, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), gen(ints), gen(ints))(lambda f1, f2, f3: F.plus_law.associative(f1, f2, f3, eq))


def laws(F: Plus, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("plus")
    p.property("associative", associative(F, gen, eq))
    return p
