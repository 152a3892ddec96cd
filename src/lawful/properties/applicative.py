"""Properties of Applicative."""

from __future__ import annotations

from typing import Any

from lawful.kernel.applicative import Applicative
from lawful.kernel.equal import Equal
from lawful.properties import apply
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def identity(F: Applicative, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.applicative_law.identity_ap(fa, eq))


def homomorphism(F: Applicative, eq: Equal[Any]) -> Prop:
    return for_all(int_functions, ints)(lambda ab, a: F.applicative_law.homomorphism(ab, a, eq))


def interchange(F: Applicative, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(int_functions), ints)(lambda f, a: F.applicative_law.interchange(f, a, eq))


def map_like_derived(F: Applicative, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(int_functions, gen(ints))(lambda f, fa: F.applicative_law.map_like_derived(f, fa, eq))


def laws(F: Applicative, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("applicative")
    p.include(apply.laws(F, gen, eq))
    p.property("identity", identity(F, gen, eq))
    p.property("homomorphism", homomorphism(F, eq))
    p.property("interchange", interchange(F, gen, eq))
    p.property("map consistent with ap", map_like_derived(F, gen, eq))
    return p
