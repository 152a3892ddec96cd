"""Properties of MonadPlus.

right_zero is kept apart in strong_laws: some lawful instances (for
example ones with effects that run before the bind) do not obey it.
"""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import MonadPlus
from lawful.properties import monad, plus_empty
from lawful.properties.arbitrary import Arbitrary1, functions, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def empty_map(F: MonadPlus, eq: Equal[Any]) -> Prop:
    return for_all(int_functions)(lambda f: F.monad_plus_law.empty_map(f, eq))


def left_zero(F: MonadPlus, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(functions(gen(ints)))(lambda f: F.monad_plus_law.left_zero(f, eq))


def right_zero(F: MonadPlus, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.monad_plus_law.right_zero(fa, eq))


def laws(F: MonadPlus, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("monad plus")
    p.include(monad.laws(F, gen, eq), plus_empty.laws(F, gen, eq))
    p.property("empty map", empty_map(F, eq))
    p.property("left zero", left_zero(F, gen, eq))
    return p


def strong_laws(F: MonadPlus, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("monad plus")
    p.include(laws(F, gen, eq))
    p.property("right zero", right_zero(F, gen, eq))
    return p
