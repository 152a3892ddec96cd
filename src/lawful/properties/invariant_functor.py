"""Properties of InvariantFunctor."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.functor import InvariantFunctor
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def invariant_identity(F: InvariantFunctor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.invariant_functor_law.invariant_identity(fa, eq))


def invariant_composite(F: InvariantFunctor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), int_functions, int_functions, int_functions, int_functions)(
        lambda fa, f1, g1, f2, g2: F.invariant_functor_law.invariant_composite(fa, f1, g1, f2, g2, eq)
    )


def laws(F: InvariantFunctor, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("invariant functor")
    p.property("identity", invariant_identity(F, gen, eq))
    p.property("composite", invariant_composite(F, gen, eq))
    return p
