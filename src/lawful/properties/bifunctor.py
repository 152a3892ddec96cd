"""Properties of Bifunctor.

A bifunctor is a functor in each of its parameters; both projections are
checked with the functor laws.
"""

from __future__ import annotations

from typing import Any

from lawful.kernel.arrow import Bifunctor
from lawful.kernel.equal import Equal
from lawful.properties import functor
from lawful.properties.arbitrary import Arbitrary2, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def identity(F: Bifunctor, gen: Arbitrary2, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints, ints))(lambda fab: F.bifunctor_law.identity(fab, eq))


def composite(F: Bifunctor, gen: Arbitrary2, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints, ints), int_functions, int_functions, int_functions, int_functions)(
        lambda fab, f1, f2, g1, g2: F.bifunctor_law.composite(fab, f1, f2, g1, g2, eq)
    )


def laws(F: Bifunctor, gen: Arbitrary2, eq: Equal[Any] | None = None) -> Properties:
    eq = eq or Equal.natural()
    p = Properties("bifunctor")
    left = functor.laws(F.left_functor(), lambda a: gen(a, ints), eq)
    right = functor.laws(F.right_functor(), lambda b: gen(ints, b), eq)
    for name, prop in left.items():
        p.property(f"left {name}", prop)
    for name, prop in right.items():
        p.property(f"right {name}", prop)
    p.property("identity", identity(F, gen, eq))
    p.property("composite", composite(F, gen, eq))
    return p
