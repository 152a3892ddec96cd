"""Properties of a Lens[A, B]."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.data.lens import Lens
from lawful.kernel.equal import Equal
from lawful.properties.prop import Prop, Properties, for_all


def identity(lens: Lens[Any, Any], wholes: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(wholes)(lambda a: lens.lens_law.identity(a, eq))


def retention(lens: Lens[Any, Any], wholes: SearchStrategy[Any], parts: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(wholes, parts)(lambda a, b: lens.lens_law.retention(a, b, eq))


def double_set(lens: Lens[Any, Any], wholes: SearchStrategy[Any], parts: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(wholes, parts, parts)(lambda a, b1, b2: lens.lens_law.double_set(a, b1, b2, eq))


def laws(
    lens: Lens[Any, Any],
    wholes: SearchStrategy[Any],
    parts: SearchStrategy[Any],
    eq: Equal[Any] | None = None,
) -> Properties:
    """wholes generates A, parts generates B; both compare with eq."""
    eq = eq or Equal.natural()
    p = Properties("lens")
    p.property("identity", identity(lens, wholes, eq))
    p.property("retention", retention(lens, wholes, parts, eq))
    p.property("double set", double_set(lens, wholes, parts, eq))
    return p
