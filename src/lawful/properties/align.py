"""Properties of Align."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.zip import Align
from lawful.properties import functor
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def collapse(F: Align, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.align_law.collapse(fa, eq))


def laws(F: Align, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("align")
    p.include(functor.laws(F, gen, eq))
    p.property("collapse", collapse(F, gen, eq))
    return p
