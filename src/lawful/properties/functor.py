"""Properties of Functor."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor
from lawful.properties import invariant_functor
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def identity(F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.functor_law.identity(fa, eq))


def composite(F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), int_functions, int_functions)(
        lambda fa, f1, f2: F.functor_law.composite(fa, f1, f2, eq)
    )


def laws(F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("functor")
    p.include(invariant_functor.laws(F, gen, eq))
    p.property("identity", identity(F, gen, eq))
    p.property("composite", composite(F, gen, eq))
    return p
