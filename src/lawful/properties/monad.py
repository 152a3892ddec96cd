"""Properties of Monad."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import Monad
from lawful.properties import applicative, bind
from lawful.properties.arbitrary import Arbitrary1, functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def right_identity(M: Monad, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: M.monad_law.right_identity(fa, eq))


def left_identity(M: Monad, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(ints, functions(gen(ints)))(lambda a, f: M.monad_law.left_identity(a, f, eq))


def laws(M: Monad, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("monad")
    p.include(applicative.laws(M, gen, eq), bind.laws(M, gen, eq))
    p.property("right identity", right_identity(M, gen, eq))
    p.property("left identity", left_identity(M, gen, eq))
    return p
