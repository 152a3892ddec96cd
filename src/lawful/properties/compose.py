"""Properties of Compose."""

from __future__ import annotations

from lawful.kernel.arrow import Compose
from lawful.properties import semigroup
from lawful.properties.arbitrary import INT_SAMPLES, Arbitrary2, ints, sampling_equal
from lawful.properties.profunctor import EqualOn
from lawful.properties.prop import Prop, Properties, for_all


def associative(F: Compose, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_SAMPLES)
    return for_all(gen(ints, ints), gen(ints, ints), gen(ints, ints))(
        lambda fab, fbc, fcd: F.compose_law.associative(fab, fbc, fcd, eq)
    )


def laws(F: Compose, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Properties:
    p = Properties("compose")
    p.include(semigroup.laws(F.semigroup(), gen(ints, ints), equal_on(INT_SAMPLES)))
    p.property("associative", associative(F, gen, equal_on))
    return p
