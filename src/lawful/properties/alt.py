"""Properties of Alt."""

from __future__ import annotations

from typing import Any

from lawful.kernel.applicative import Alt
from lawful.kernel.equal import Equal
from lawful.properties import applicative
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def associative(F: Alt, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), gen(ints), gen(ints))(lambda f1, f2, f3: F.alt_law.alt_associative(f1, f2, f3, eq))


def laws(F: Alt, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("alt")
    p.include(applicative.laws(F, gen, eq))
    p.property("associative", associative(F, gen, eq))
    return p
