"""Properties of BindRec."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import BindRec
from lawful.properties import bind
from lawful.properties.arbitrary import Arbitrary1, functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def tailrec_bind_consistency(F: BindRec, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(ints, functions(gen(ints)))(lambda a, f: F.bind_rec_law.tailrec_bind_consistency(a, f, eq))


def laws(F: BindRec, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("bind rec")
    p.include(bind.laws(F, gen, eq))
    p.property("tailrecM is consistent with bind", tailrec_bind_consistency(F, gen, eq))
    return p
