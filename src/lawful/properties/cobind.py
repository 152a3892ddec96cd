"""Properties of Cobind.

Co-Kleisli arrows F[int] -> int are generated as pure functions, so F[int]
values must be hashable.
"""

from __future__ import annotations

from typing import Any

from lawful.kernel.comonad import Cobind
from lawful.kernel.equal import Equal
from lawful.properties import functor
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def cobind_associative(F: Cobind, gen: Arbitrary1) -> Prop:
    return for_all(gen(ints), int_functions, int_functions, int_functions)(
        lambda fa, f, g, h: F.cobind_law.cobind_associative(fa, f, g, h, Equal.natural())
    )


def laws(F: Cobind, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("cobind")
    p.include(functor.laws(F, gen, eq))
    p.property("cobind associative", cobind_associative(F, gen))
    return p
