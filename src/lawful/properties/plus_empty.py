"""Properties of PlusEmpty."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import PlusEmpty
from lawful.properties import monoid, plus
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def left_plus_identity(F: PlusEmpty, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda f1: F.plus_empty_law.left_plus_identity(f1, eq))


def right_plus_identity(F: PlusEmpty, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda f1: F.plus_empty_law.right_plus_identity(f1, eq))


def laws(F: PlusEmpty, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("plus empty")
    p.include(plus.laws(F, gen, eq), monoid.laws(F.monoid(), gen(ints), eq))
    p.property("left plus identity", left_plus_identity(F, gen, eq))
    p.property("right plus identity", right_plus_identity(F, gen, eq))
    return p
