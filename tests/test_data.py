from __future__ import annotations

import pytest

from lawful.data import (
    NOTHING,
    Both,
    Const,
    Coproduct,
    Just,
    Kleisli,
    Left,
    Lens,
    Maybe,
    NonEmptyList,
    Predicate,
    Right,
    That,
    This,
)
from lawful.errors import EmptyStructureError
from lawful.instances import maybe_instance, seq_instance


class TestMaybe:
    """Maybe values"""

    def test_just_can_hold_none(self):
        assert Just(None).is_just
        assert Maybe.from_optional(None) == NOTHING
        assert Maybe.from_optional(0) == Just(0)

    def test_map_and_flat_map(self):
        assert Just(2).map(lambda a: a * 10) == Just(20)
        assert NOTHING.map(lambda a: a * 10) == NOTHING
        assert Just(2).flat_map(lambda a: NOTHING) == NOTHING
        assert Just(2).flat_map(lambda a: Just(a + 1)) == Just(3)

    def test_fold_and_defaults(self):
        assert Just(3).fold(lambda: 0, lambda a: a + 1) == 4
        assert NOTHING.fold(lambda: 0, lambda a: a + 1) == 0
        assert NOTHING.get_or_else(9) == 9
        assert NOTHING.or_else(Just(1)) == Just(1)
        assert Just(2).or_else(Just(1)) == Just(2)

    def test_filter_and_to_tuple(self):
        assert Just(4).filter(lambda a: a > 5) == NOTHING
        assert Just(4).to_tuple() == (4,)
        assert NOTHING.to_tuple() == ()

    def test_nothing_is_a_singleton_value(self):
        assert Maybe.empty() is NOTHING
        assert repr(NOTHING) == "NOTHING"
        assert hash(Just(1)) == hash(Just(1))


class TestEither:
    """Either values"""

    def test_right_biased(self):
        assert Right(1).map(lambda a: a + 1) == Right(2)
        assert Left("e").map(lambda a: a + 1) == Left("e")
        assert Left("e").flat_map(lambda a: Right(a)) == Left("e")

    def test_left_map_bimap_and_swap(self):
        assert Left(1).left_map(str) == Left("1")
        assert Right(1).bimap(str, lambda a: -a) == Right(-1)
        assert Left(1).swap() == Right(1)

    def test_conversions(self):
        assert Right(5).to_maybe() == Just(5)
        assert Left(5).to_maybe() == NOTHING
        assert Left(5).get_or_else(0) == 0
        assert Left(5).is_left and Right(5).is_right


class TestThese:
    """These values"""

    def test_fold_each_case(self):
        def describe(t):
            return t.fold(lambda a: f"this {a}", lambda b: f"that {b}", lambda a, b: f"both {a} {b}")

        assert describe(This(1)) == "this 1"
        assert describe(That(2)) == "that 2"
        assert describe(Both(1, 2)) == "both 1 2"

    def test_projections_and_swap(self):
        assert Both(1, 2).this_value() == Just(1)
        assert That(2).this_value() == NOTHING
        assert This(1).that_value() == NOTHING
        assert This(1).swap() == That(1)
        assert Both(1, 2).bimap(str, lambda b: b * 2) == Both("1", 4)


class TestNonEmptyList:
    """NonEmptyList values"""

    def test_construction(self):
        nel = NonEmptyList.of(1, 2, 3)
        assert nel.head == 1
        assert nel.tail == (2, 3)
        assert nel.to_tuple() == (1, 2, 3)
        assert len(nel) == 3
        assert nel.last == 3
        assert NonEmptyList.from_iterable(iter("ab")) == NonEmptyList("a", ("b",))

    def test_from_empty_iterable_raises(self):
        with pytest.raises(EmptyStructureError):
            NonEmptyList.from_iterable(())

    def test_flat_map_and_append(self):
        nel = NonEmptyList.of(1, 2)
        assert nel.flat_map(lambda a: NonEmptyList.of(a, a * 10)) == NonEmptyList.of(1, 10, 2, 20)
        assert nel.append(NonEmptyList.of(3)) == NonEmptyList.of(1, 2, 3)

    def test_tails_and_reverse(self):
        nel = NonEmptyList.of(1, 2, 3)
        assert nel.tails() == NonEmptyList.of(NonEmptyList.of(1, 2, 3), NonEmptyList.of(2, 3), NonEmptyList.of(3))
        assert nel.reverse() == NonEmptyList.of(3, 2, 1)


class TestKleisli:
    """Kleisli arrows"""

    def test_and_then_binds_in_the_effect(self):
        half = Kleisli(lambda n: Just(n // 2) if n % 2 == 0 else NOTHING)
        quarter = half.and_then(half, maybe_instance)
        assert quarter(8) == Just(2)
        assert quarter(6) == NOTHING
        assert half.compose(half, maybe_instance)(4) == Just(1)

    def test_map_and_local(self):
        pairs = Kleisli(lambda n: (n, n + 1))
        assert pairs.map(str, seq_instance)(1) == ("1", "2")
        assert pairs.local(len)("abc") == (3, 4)

    def test_flat_map_k_and_map_k(self):
        k = Kleisli(lambda n: (n,))
        assert k.flat_map_k(lambda a: (a, a), seq_instance)(2) == (2, 2)
        assert k.map_k(len)(5) == 1


class TestOtherData:
    """Const, Coproduct, Lens and Predicate"""

    def test_const_holds_its_value(self):
        assert Const("x").value == "x"
        assert Const(1) == Const(1)

    def test_coproduct_fold(self):
        assert Coproduct.left((1, 2)).fold(len, lambda m: -1) == 2
        assert Coproduct.right(Just(1)).fold(len, lambda m: m.get_or_else(0)) == 1

    def test_lens_get_set_modify(self):
        first = Lens.first()
        assert first.get((1, 2)) == 1
        assert first.set((1, 2), 9) == (9, 2)
        assert first.modify((1, 2), lambda a: a + 1) == (2, 2)

    def test_lens_composition(self):
        inner = Lens.second().compose(Lens.first())
        assert inner.get(((1, 2), 3)) == 2
        assert inner.set(((1, 2), 3), 0) == ((1, 0), 3)
        assert Lens.identity().set(1, 2) == 2

    def test_predicate_combinators(self):
        positive = Predicate(lambda n: n > 0)
        even = Predicate(lambda n: n % 2 == 0)
        assert positive.and_(even)(4)
        assert not positive.and_(even)(3)
        assert positive.negate()(-1)
        assert positive.contramap(len)("a")
        assert Predicate.always()(None)
