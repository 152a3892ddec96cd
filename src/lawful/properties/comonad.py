"""Properties of Comonad."""

from __future__ import annotations

from typing import Any

from lawful.kernel.comonad import Comonad
from lawful.kernel.equal import Equal
from lawful.properties import cobind
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def cobind_left_identity(F: Comonad, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.comonad_law.cobind_left_identity(fa, eq))


def cobind_right_identity(F: Comonad, gen: Arbitrary1) -> Prop:
    return for_all(gen(ints), int_functions)(
        lambda fa, f: F.comonad_law.cobind_right_identity(fa, f, Equal.natural())
    )


def laws(F: Comonad, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("comonad")
    p.include(cobind.laws(F, gen, eq))
    p.property("cobind left identity", cobind_left_identity(F, gen, eq))
    p.property("cobind right identity", cobind_right_identity(F, gen))
    return p
