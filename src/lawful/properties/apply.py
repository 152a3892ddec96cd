"""Properties of Apply."""

from __future__ import annotations

from typing import Any

from lawful.instances.seq import seq_reducer
from lawful.kernel.applicative import Apply
from lawful.kernel.equal import Equal
from lawful.properties import functor, reducer
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints, seqs
from lawful.properties.prop import Prop, Properties, for_all


def composition(F: Apply, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(int_functions), gen(int_functions), gen(ints))(
        lambda fbc, fab, fa: F.apply_law.composition(fbc, fab, fa, eq)
    )


def lifted_reducer(F: Apply, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    """A reducer lifted pointwise into F is still a lawful reducer."""
    return reducer.laws(F.lift_reducer(seq_reducer), gen(ints), gen(seqs(ints, max_size=3)), eq, fuel=3)


def laws(F: Apply, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("apply")
    p.include(functor.laws(F, gen, eq))
    p.include(lifted_reducer(F, gen, eq))
    p.property("composition", composition(F, gen, eq))
    return p
