"""Properties of Traverse.

Traversals are checked in two concrete applicatives, Maybe and Seq, whose
values compare with ==. Seq results grow as the product of the element
counts, so inner sequences are kept short.
"""

from __future__ import annotations

from typing import Any

from lawful.instances.maybe import maybe_instance
from lawful.instances.seq import seq_head, seq_instance
from lawful.kernel.equal import Equal
from lawful.kernel.foldable import Traverse
from lawful.properties import foldable, functor
from lawful.properties.arbitrary import Arbitrary1, functions, int_functions, ints, maybes, seqs
from lawful.properties.prop import Prop, Properties, for_all

_maybe_functions = functions(maybes(ints))
_seq_functions = functions(seqs(ints, max_size=2))


def identity_traverse(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), int_functions)(lambda fa, f: F.traverse_law.identity_traverse(fa, f, eq))


def purity_maybe(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.traverse_law.purity(fa, maybe_instance, eq))


def purity_seq(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints))(lambda fa: F.traverse_law.purity(fa, seq_instance, eq))


def sequential_fusion(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), _maybe_functions, _seq_functions)(
        lambda fa, amb, bnc: F.traverse_law.sequential_fusion(fa, amb, bnc, seq_instance, maybe_instance, eq)
    )


def naturality(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    """seq_head is an applicative morphism Seq ~> Maybe."""
    return for_all(gen(seqs(ints, max_size=2)))(
        lambda fma: F.traverse_law.naturality(seq_head, fma, maybe_instance, seq_instance, eq)
    )


def parallel_fusion(F: Traverse, gen: Arbitrary1, eq: Equal[Any]) -> Prop:
    return for_all(gen(ints), _maybe_functions, _seq_functions)(
        lambda fa, amb, anb: F.traverse_law.parallel_fusion(fa, amb, anb, seq_instance, maybe_instance, eq)
    )


def laws(F: Traverse, gen: Arbitrary1, eq: Equal[Any] | None = None) -> Properties:
    eq = eq or Equal.natural()
    p = Properties("traverse")
    p.include(functor.laws(F, gen, eq), foldable.laws(F, gen))
    p.property("identity traverse", identity_traverse(F, gen, eq))
    p.property("purity maybe", purity_maybe(F, gen, eq))
    p.property("purity seq", purity_seq(F, gen, eq))
    p.property("sequential fusion", sequential_fusion(F, gen, eq))
    p.property("naturality", naturality(F, gen, eq))
    p.property("parallel fusion", parallel_fusion(F, gen, eq))
    return p
