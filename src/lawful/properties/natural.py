"""Properties of a natural transformation F ~> G."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor
from lawful.kernel.natural import NaturalTransformation
from lawful.properties.arbitrary import Arbitrary1, int_functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def naturality(nt: NaturalTransformation, F: Functor, G: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), int_functions)(lambda fa, f: nt.natural_law(F, G).naturality(fa, f, eq))


def laws(
    nt: NaturalTransformation,
    F: Functor,
    G: Functor,
    gen: Arbitrary1,
    eq: Equal[Any] | None = None,
) -> Properties:
    """gen generates F[int]; eq compares G[int]."""
    p = Properties("natural transformation")
    p.property("naturality", naturality(nt, F, G, gen, eq or Equal.natural()))
    return p
