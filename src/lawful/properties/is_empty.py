"""Properties of IsEmpty."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import IsEmpty
from lawful.properties import plus_empty
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def empty_is_empty(F: IsEmpty) -> Prop:
    return Prop.holds(F.is_empty_law.empty_is_empty)


def empty_plus_identity(F: IsEmpty, gen: Arbitrary1) -> Prop:
    return for_all(gen(ints), gen(ints))(F.is_empty_law.empty_plus_identity)


def laws(F: IsEmpty, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("is empty")
    p.include(plus_empty.laws(F, gen, eq))
    p.property("empty is empty", empty_is_empty(F))
    p.property("empty plus identity", empty_plus_identity(F, gen))
    return p
