"""Properties of Profunctor.

Profunctor values are arrow-like, so they are compared by sampling. Each
builder takes equal_on, which makes an Equal from the inputs to sample.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from lawful.kernel.arrow import Profunctor
from lawful.kernel.equal import Equal
from lawful.properties.arbitrary import INT_SAMPLES, Arbitrary2, int_functions, ints, sampling_equal
from lawful.properties.prop import Prop, Properties, for_all

EqualOn = Callable[[Sequence[Any]], Equal[Any]]


def identity(F: Profunctor, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_SAMPLES)
    return for_all(gen(ints, ints))(lambda fab: F.profunctor_law.identity(fab, eq))


def composite(F: Profunctor, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Prop:
    eq = equal_on(INT_SAMPLES)
    return for_all(gen(ints, ints), int_functions, int_functions, int_functions, int_functions)(
        lambda fad, fcb, fba, fde, fef: F.profunctor_law.composite(fad, fcb, fba, fde, fef, eq)
    )


def laws(F: Profunctor, gen: Arbitrary2, equal_on: EqualOn = sampling_equal) -> Properties:
    p = Properties("profunctor")
    p.property("identity", identity(F, gen, equal_on))
    p.property("composite", composite(F, gen, equal_on))
    return p
