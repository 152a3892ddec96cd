"""Properties of Divisible."""

from __future__ import annotations

from typing import Any

from lawful.kernel.divide import Divisible
from lawful.kernel.equal import Equal
from lawful.properties import divide
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def right_identity(F: Divisible, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.divisible_law.right_identity(fa, eq))


def left_identity(F: Divisible, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.divisible_law.left_identity(fa, eq))


def laws(F: Divisible, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("divisible")
    p.include(divide.laws(F, gen, eq))
    p.property("right identity", right_identity(F, gen, eq))
    p.property("left identity", left_identity(F, gen, eq))
    return p
