"""Properties of Bind."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import Bind
from lawful.properties import apply
from lawful.properties.arbitrary import Arbitrary1, functions, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def associativity(F: Bind, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    kleisli = functions(gen(ints))
    return for_all(gen(ints), kleisli, kleisli)(lambda fa, f, g: F.bind_law.associative_bind(fa, f, g, eq))


def ap_like_derived(F: Bind, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), gen(int_functions))(lambda fa, f: F.bind_law.ap_like_derived(fa, f, eq))


def laws(F: Bind, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("bind")
    p.include(apply.laws(F, gen, eq))
    p.property("associativity", associativity(F, gen, eq))
    p.property("ap consistent with bind", ap_like_derived(F, gen, eq))
    return p
