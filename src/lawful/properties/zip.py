"""Properties of Zip."""

from __future__ import annotations

from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor
from lawful.kernel.zip import Zip
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def zip_preservation(Z: Zip, F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: Z.zip_law(F).zip_preservation(fa, eq))


def zip_symmetric(Z: Zip, F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), gen(ints))(lambda fa, fb: Z.zip_law(F).zip_symmetric(fa, fb, eq))


def laws(Z: Zip, F: Functor, gen: Arbitrary1, eq: Equal[Any]) -> Properties:
    p = Properties("zip")
    p.property("preserves structure", zip_preservation(Z, F, gen, eq))
    p.property("symmetric", zip_symmetric(Z, F, gen, eq))
    return p
