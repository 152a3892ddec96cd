"""Properties of Divide."""

from __future__ import annotations

from typing import Any

from lawful.kernel.divide import Divide
from lawful.kernel.equal import Equal
from lawful.properties import contravariant
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def composition(F: Divide, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), gen(ints), gen(ints))(
        lambda a1, a2, a3: F.divide_law.divide_composition(a1, a2, a3, eq)
    )


def laws(F: Divide, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("divide")
    p.include(contravariant.laws(F, gen, eq))
    p.property("composition", composition(F, gen, eq))
    return p
