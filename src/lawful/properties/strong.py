"""Properties of Strong.

first and second work on pairs, so these laws sample pair inputs: flat
(a, c) pairs and the two nested shapes produced by applying first or
second twice.
"""

from __future__ import annotations

from lawful.kernel.arrow import Strong
from lawful.properties import profunctor
from lawful.properties.arbitrary import (
    INT_PAIRS,
    LEFT_NESTED_PAIRS,
    RIGHT_NESTED_PAIRS,
    Arbitrary2,
    int_functions,
    ints,
    sampling_equal,
)
from lawful.properties.profunctor import EqualOn
from lawful.properties.prop import Prop, Properties, for_all


def _on_pairs(F: Strong, gen: Arbitrary2, equal_on: EqualOn, law: str) -> Prop:
    eq = equal_on(INT_PAIRS)
    check = getattr(F.strong_law, law)
    return for_all(gen(ints, ints))(lambda fab: check(fab, eq))


def first_is_swapped_second(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    return _on_pairs(F, gen, equal_on, "first_is_swapped_second")


def second_is_swapped_first(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    return _on_pairs(F, gen, equal_on, "second_is_swapped_first")


def mapfst_equals_first_and_then_mapsnd(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    return _on_pairs(F, gen, equal_on, "mapfst_equals_first_and_then_mapsnd")


def mapfst_equals_second_and_then_mapsnd(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    return _on_pairs(F, gen, equal_on, "mapfst_equals_second_and_then_mapsnd")


def dinaturality_first(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_PAIRS)
    return for_all(gen(ints, ints), int_functions)(lambda fab, fcd: F.strong_law.dinaturality_first(fab, fcd, eq))


def dinaturality_second(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_PAIRS)
    return for_all(gen(ints, ints), int_functions)(lambda fab, fcd: F.strong_law.dinaturality_second(fab, fcd, eq))


def first_first_is_dimap(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(LEFT_NESTED_PAIRS)
    return for_all(gen(ints, ints))(lambda fab: F.strong_law.first_first_is_dimap(fab, eq))


def second_second_is_dimap(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(RIGHT_NESTED_PAIRS)
    return for_all(gen(ints, ints))(lambda fab: F.strong_law.second_second_is_dimap(fab, eq))


def laws(F: Strong, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Properties:
    p = Properties("strong")
    p.include(profunctor.laws(F, gen, equal_on))
    p.property("first is swapped second", first_is_swapped_second(F, gen, equal_on))
    p.property("second is swapped first", second_is_swapped_first(F, gen, equal_on))
    p.property("mapfst is first then mapsnd", mapfst_equals_first_and_then_mapsnd(F, gen, equal_on))
    p.property("mapfst is second then mapsnd", mapfst_equals_second_and_then_mapsnd(F, gen, equal_on))
    p.property("dinaturality of first", dinaturality_first(F, gen, equal_on))
    p.property("dinaturality of second", dinaturality_second(F, gen, equal_on))
    p.property("first first is dimap", first_first_is_dimap(F, gen, equal_on))
    p.property("second second is dimap", second_second_is_dimap(F, gen, equal_on))
    return p
