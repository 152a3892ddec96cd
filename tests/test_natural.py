from __future__ import annotations

from lawful.data import NOTHING, Both, Coproduct, Just, Left, Right, That, This
from lawful.instances import int_sum, maybe_instance, seq_head, seq_instance, str_monoid
from lawful.kernel import (
    BiConstrainedNaturalTransformation,
    BiNaturalTransformation,
    ConstrainedNaturalTransformation,
    DiNaturalTransformation,
    NaturalTransformation,
    lift_map,
)
from lawful.kernel.natural import or_
from lawful.properties import natural
from lawful.properties.arbitrary import maybes, seqs
from lawful.properties.prop import check_all

from fakes import FAST

maybe_to_seq = NaturalTransformation.of(lambda fa: fa.to_tuple())
positives_only = NaturalTransformation.of(lambda fa: tuple(a for a in fa if a > 0))


class TestNaturalTransformation:
    """Composition and combinators"""

    def test_seq_head(self):
        assert seq_head((3, 4)) == Just(3)
        assert seq_head(()) == NOTHING

    def test_compose_and_and_then(self):
        assert seq_head.and_then(maybe_to_seq)((5, 6)) == (5,)
        assert maybe_to_seq.compose(seq_head)((5, 6)) == (5,)
        assert seq_head.compose(maybe_to_seq)(Just(1)) == Just(1)

    def test_or_sends_each_side_through_its_own_transformation(self):
        from_either = seq_head.or_(NaturalTransformation.refl())
        assert from_either(Coproduct.left((1, 2))) == Just(1)
        assert from_either(Coproduct.right(Just(9))) == Just(9)
        assert or_(seq_head, NaturalTransformation.refl())(Coproduct.left(())) == NOTHING

    def test_lift_map(self):
        heads = lift_map(seq_head, seq_instance)
        assert heads(((1, 2), (), (3,))) == (Just(1), NOTHING, Just(3))

    def test_refl_and_identity(self):
        assert NaturalTransformation.refl()((1, 2)) == (1, 2)
        assert NaturalTransformation.identity()(7) == 7
        assert NaturalTransformation.identity() is NaturalTransformation.refl()


class TestOtherTransformations:
    """Binatural, dinatural and constrained transformations"""

    def test_binatural(self):
        either_to_these = BiNaturalTransformation.of(lambda e: e.fold(This, That))
        swapped = BiNaturalTransformation.of(lambda t: t.swap()).compose(either_to_these)
        assert either_to_these(Left(1)) == This(1)
        assert either_to_these(Right("a")) == That("a")
        assert swapped(Left(1)) == That(1)

    def test_dinatural(self):
        twice = DiNaturalTransformation.of(lambda f: lambda a: f(f(a)))
        assert twice(lambda a: a * 3)(2) == 18

    def test_constrained_uses_its_instance(self):
        total = ConstrainedNaturalTransformation.of(lambda fa, M: Just(M.sum(fa)))
        assert total((1, 2, 3), int_sum) == Just(6)
        assert total(("a", "b"), str_monoid) == Just("ab")

    def test_biconstrained_uses_an_instance_per_side(self):
        both_sums = BiConstrainedNaturalTransformation.of(
            lambda t, L, R: t.bimap(lambda a: L.append(a, a), lambda b: R.append(b, b))
        )
        assert both_sums(Both(2, "x"), int_sum, str_monoid) == Both(4, "xx")
        assert both_sums(This(3), int_sum, str_monoid) == This(6)


class TestNaturality:
    """Naturality checking"""

    def test_structural_transformations_are_natural(self):
        check_all(natural.laws(seq_head, seq_instance, maybe_instance, seqs), FAST)
        check_all(natural.laws(maybe_to_seq, maybe_instance, seq_instance, maybes), FAST)

    def test_inspecting_elements_is_not_natural(self):
        report = natural.laws(positives_only, seq_instance, seq_instance, seqs).check(FAST)
        assert report.result("natural transformation.naturality").status == "failed"
