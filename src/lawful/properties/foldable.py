"""Properties of Foldable."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.foldable import Foldable
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def left_fm_consistent(F: Foldable, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.foldable_law.left_fm_consistent(fa, eq))


def right_fm_consistent(F: Foldable, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.foldable_law.right_fm_consistent(fa, eq))


def laws(F: Foldable, gen: Arbitrary1, eq: Equal[Any] | None = None) -> Properties:
    """eq compares the tuples of visited elements; defaults to ==."""
    eq = eq or Equal.natural()
    p = Properties("foldable")
    p.property("consistent left fold", left_fm_consistent(F, gen, eq))
    p.property("consistent right fold", right_fm_consistent(F, gen, eq))
    return p
