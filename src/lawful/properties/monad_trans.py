"""Properties of MonadTrans, checked for one inner monad G."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import Monad
from lawful.kernel.trans import MonadTrans
from lawful.properties.arbitrary import Arbitrary1, functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def identity(T: MonadTrans, G: Monad, eq: Equal[Any]) -> Prop:
    return for_all(ints)(lambda a: T.monad_trans_law.identity(a, G, eq))


def composition(T: MonadTrans, G: Monad, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), functions(gen(ints)))(lambda ga, f: T.monad_trans_law.composition(ga, f, G, eq))


def laws(T: MonadTrans, G: Monad, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    """gen generates G[int]; eq compares transformed values T[G, int]."""
    p = Properties("monad trans")
    p.property("identity", identity(T, G, eq))
    p.property("composition", composition(T, G, gen, eq))
    return p
