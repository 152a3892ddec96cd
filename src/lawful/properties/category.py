"""Properties of Category."""

from __future__ import annotations

from lawful.kernel.arrow import Category
from lawful.properties import compose, monoid
from lawful.properties.arbitrary import INT_SAMPLES, Arbitrary2, ints, sampling_equal
from lawful.properties.profunctor import EqualOn
from lawful.properties.prop import Prop, Properties, for_all


def left_identity(F: Category, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_SAMPLES)
    return for_all(gen(ints, ints))(lambda fab: F.category_law.left_identity(fab, eq))


def right_identity(F: Category, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_SAMPLES)
    return for_all(gen(ints, ints))(lambda fab: F.category_law.right_identity(fab, eq))


def laws(F: Category, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Properties:
    p = Properties("category")
    p.include(compose.laws(F, gen, equal_on), monoid.laws(F.monoid(), gen(ints, ints), equal_on(INT_SAMPLES)))
    p.property("left identity", left_identity(F, gen, equal_on))
    p.property("right identity", right_identity(F, gen, equal_on))
    return p
