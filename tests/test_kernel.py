from __future__ import annotations

from lawful.data import NOTHING, Both, Just, Left, NonEmptyList, Right, That, This
from lawful.instances import (
    bool_enum,
    bounded_int_enum,
    const_instance,
    either_bifunctor,
    either_instance,
    function_arrow,
    id_instance,
    int_enum,
    int_max,
    int_order,
    int_sum,
    maybe_instance,
    nel_instance,
    predicate_divisible,
    seq_instance,
    seq_reducer,
    str_monoid,
    tuple_monoid,
)
from lawful.kernel import Equal, Order, Ordering
from lawful.data.predicate import Predicate

from fakes import Counter


class TestOrdering:
    """Ordering and derived comparisons"""

    def test_from_int_and_combinators(self):
        assert Ordering.from_int(-5) is Ordering.LT
        assert Ordering.from_int(0) is Ordering.EQ
        assert Ordering.LT.complement() is Ordering.GT
        assert Ordering.EQ.then(Ordering.GT) is Ordering.GT
        assert Ordering.LT.then(Ordering.GT) is Ordering.LT

    def test_order_helpers(self):
        assert int_order.max(3, 7) == 7
        assert int_order.min(3, 7) == 3
        assert int_order.sort([3, 1, 2]) == [1, 2, 3]
        assert int_order.reverse_order().sort([3, 1, 2]) == [3, 2, 1]
        assert Order.natural().contramap(len).less_than("a", "bb")

    def test_equal_contramap(self):
        by_length = Equal.natural().contramap(len)
        assert by_length.equal("ab", "cd")
        assert not by_length.equal("a", "cd")


class TestEnum:
    """Enum stepping"""

    def test_unbounded_ints(self):
        assert int_enum.succn(3, 10) == 13
        assert int_enum.predn(3, 10) == 7
        assert int_enum.from_to(1, 4) == (1, 2, 3, 4)
        assert int_enum.min_value() == NOTHING

    def test_bounded_range_wraps(self):
        digits = bounded_int_enum(0, 9)
        assert digits.succ(9) == 0
        assert digits.pred(0) == 9
        assert digits.succn(12, 5) == 7
        assert digits.max_value() == Just(9)

    def test_bounded_steps_agree_outside_the_range(self):
        digits = bounded_int_enum(0, 9)
        assert digits.succ(15) == digits.succn(1, 15) == 6
        assert digits.pred(-3) == digits.predn(1, -3) == 6
        assert digits.succn(3, 25) == digits.succ(digits.succ(digits.succ(25)))

    def test_booleans(self):
        assert bool_enum.succ(False) is True
        assert bool_enum.from_to(False, True) == (False, True)


class TestSemigroups:
    """Derived semigroup and monoid operations"""

    def test_multiply(self):
        assert str_monoid.multiply1("ab", 2) == "ababab"
        assert str_monoid.multiply("ab", 0) == ""
        assert int_sum.multiply(4, 3) == 12

    def test_sums(self):
        assert int_max.sum_opt([]) == NOTHING
        assert int_max.sum_opt([3, 9, 2]) == Just(9)
        assert tuple_monoid.sum([(1,), (2, 3)]) == (1, 2, 3)
        assert int_sum.is_zero(0, Equal.natural())

    def test_unfolds_keep_direction(self):
        def countdown(n):
            return Just((n - 1, (n,))) if n > 0 else NOTHING

        assert tuple_monoid.unfoldr_sum_opt(3, countdown) == Just((3, 2, 1))
        assert tuple_monoid.unfoldl_sum_opt(3, countdown) == Just((1, 2, 3))
        assert tuple_monoid.unfoldr_sum_opt(0, countdown) == NOTHING

    def test_reducer(self):
        assert seq_reducer.cons(1, (2,)) == (1, 2)
        assert seq_reducer.snoc((1,), 2) == (1, 2)
        assert seq_reducer.unfoldr_opt(2, lambda n: Just((n - 1, n)) if n else NOTHING) == Just((2, 1))


class TestApplicative:
    """Derived applicative operations"""

    def test_apply2_and_tuple2(self):
        assert maybe_instance.apply2(Just(1), Just(2), lambda a, b: a + b) == Just(3)
        assert maybe_instance.tuple2(Just(1), NOTHING) == NOTHING
        assert seq_instance.tuple2((1, 2), ("a",)) == ((1, "a"), (2, "a"))

    def test_discard(self):
        assert maybe_instance.discard_left(Just(1), Just(2)) == Just(2)
        assert maybe_instance.discard_right(Just(1), Just(2)) == Just(1)
        assert maybe_instance.discard_left(NOTHING, Just(2)) == NOTHING

    def test_sequence_and_replicate(self):
        assert maybe_instance.sequence_iterable([Just(1), Just(2)]) == Just((1, 2))
        assert maybe_instance.sequence_iterable([Just(1), NOTHING]) == NOTHING
        assert seq_instance.replicate(2, (0, 1)) == ((0, 0), (0, 1), (1, 0), (1, 1))
        assert maybe_instance.when(False, NOTHING) == Just(())

    def test_lifted_monoid(self):
        lifted = maybe_instance.lift_monoid(int_sum)
        assert lifted.append(Just(2), Just(3)) == Just(5)
        assert lifted.zero() == Just(0)

    def test_compose_and_product(self):
        composed = maybe_instance.compose(seq_instance)
        assert composed.map(Just((1, 2)), lambda a: a * 2) == Just((2, 4))
        assert composed.point(1) == Just((1,))
        product = maybe_instance.product(seq_instance)
        assert product.map((Just(1), (1, 2)), str) == (Just("1"), ("1", "2"))

    def test_const_applicative_accumulates(self):
        consts = const_instance(str_monoid)
        assert seq_instance.traverse((1, 2, 3), lambda a: consts.point(a), consts).value == ""
        assert seq_instance.fold_map((1, 2, 3), str, str_monoid) == "123"

    def test_errors(self):
        assert either_instance.attempt(Left("bad")) == Right(Left("bad"))
        assert either_instance.attempt(Right(1)) == Right(Right(1))
        assert either_instance.recover(Left("bad"), len) == Right(3)
        assert maybe_instance.handle_error(NOTHING, lambda e: Just(e)) == Just(())


class TestMonad:
    """Derived monad operations"""

    def test_join_and_if_m(self):
        assert maybe_instance.join(Just(Just(1))) == Just(1)
        assert seq_instance.if_m((True, False), lambda: ("t",), lambda: ("f",)) == ("t", "f")

    def test_tailrec_m(self):
        def count_up(n):
            return Right(Left(n + 1)) if n < 10_000 else Right(Right(n))

        assert either_instance.tailrec_m(0, count_up) == Right(10_000)
        assert id_instance.tailrec_m(0, lambda n: Left(n + 1) if n < 5 else Right(n)) == 5

    def test_seq_tailrec_is_depth_first(self):
        def expand(n):
            return (Right(n),) if n >= 2 else (Left(n + 1), Right(-n))

        assert seq_instance.tailrec_m(0, expand) == (2, -1, 0)

    def test_while_m_collects(self):
        remaining = [3]

        def condition():
            return Just(remaining[0] > 0)

        def body():
            remaining[0] -= 1
            return Just(remaining[0])

        assert maybe_instance.while_m(condition, body) == Just((2, 1, 0))

    def test_iterate_until(self):
        assert maybe_instance.iterate_until(Just(4), lambda a: a > 3) == Just(4)
        assert maybe_instance.iterate_until(Just(1), lambda a: a > 3, limit=5) == Just(1)
        assert maybe_instance.iterate_until(NOTHING, lambda a: True) == NOTHING

    def test_monad_plus_helpers(self):
        assert seq_instance.filter((1, 2, 3, 4), lambda a: a % 2 == 0) == (2, 4)
        assert seq_instance.unite((Just(1), NOTHING, Just(3)), lambda m: m.to_tuple()) == (1, 3)
        assert seq_instance.separate((Left("a"), Right(1), Left("b"))) == (("a", "b"), (1,))


class TestFoldableAndTraverse:
    """Derived fold and traverse operations"""

    def test_folds(self):
        assert seq_instance.fold_left((1, 2, 3), "", lambda acc, a: acc + str(a)) == "123"
        assert seq_instance.fold_right((1, 2, 3), "", lambda a, acc: acc + str(a)) == "321"
        assert nel_instance.fold(NonEmptyList.of("a", "b"), str_monoid) == "ab"

    def test_queries(self):
        assert seq_instance.length((4, 5)) == 2
        assert maybe_instance.length(NOTHING) == 0
        assert seq_instance.find((1, 4, 6), lambda a: a > 3) == Just(4)
        assert seq_instance.element((1, 2), 2, Equal.natural())
        assert seq_instance.all((), lambda a: False)
        assert not seq_instance.any((), lambda a: True)
        assert seq_instance.maximum((3, 9, 2), int_order) == Just(9)
        assert seq_instance.minimum((), int_order) == NOTHING

    def test_traverse_stops_at_nothing(self):
        assert seq_instance.traverse((1, 2), lambda a: Just(a * 2), maybe_instance) == Just((2, 4))
        assert seq_instance.traverse((1, -2), lambda a: Just(a) if a > 0 else NOTHING, maybe_instance) == NOTHING
        assert nel_instance.sequence(NonEmptyList.of(Just(1), Just(2)), maybe_instance) == Just(NonEmptyList.of(1, 2))

    def test_traverse_underscore_runs_effects_in_order(self):
        calls = []
        counter = Counter(calls)
        assert seq_instance.traverse_((1, 2, 3), counter.record, maybe_instance) == Just(())
        assert calls == [1, 2, 3]

    def test_map_accum_left_and_zip_with_index(self):
        assert seq_instance.map_accum_left((1, 2, 3), 0, lambda acc, a: (acc + a, acc)) == (6, (0, 1, 3))
        assert nel_instance.zip_with_index(NonEmptyList.of("a", "b")) == NonEmptyList.of((0, "a"), (1, "b"))


class TestZipAndAlign:
    """Zipping and aligning"""

    def test_zip_with_and_apzip(self):
        assert seq_instance.zip_with((1, 2, 3), (10, 20), lambda a, b: a + b, seq_instance) == (11, 22)
        assert maybe_instance.apzip(lambda m: m.map(str), Just(1)) == Just((1, "1"))

    def test_align_keeps_unpaired(self):
        assert seq_instance.align((1, 2), ("a",)) == (Both(1, "a"), This(2))
        assert seq_instance.pad((1,), ("a", "b")) == ((Just(1), Just("a")), (NOTHING, Just("b")))
        assert seq_instance.merge((1, 2), (10,), int_sum) == (11, 2)
        assert maybe_instance.align(NOTHING, Just(1)) == Just(That(1))


class TestComonad:
    """Comonads"""

    def test_nel_cobind_sees_suffixes(self):
        assert nel_instance.cobind(NonEmptyList.of(1, 2, 3), sum) == NonEmptyList.of(6, 5, 3)
        assert nel_instance.copoint(NonEmptyList.of(7, 8)) == 7
        assert len(nel_instance.cojoin(NonEmptyList.of(1, 2))) == 2

    def test_cokleisli(self):
        total_then_double = seq_instance.cokleisli(sum, lambda sums: sums[0] * 2)
        assert total_then_double((1, 2, 3)) == 12


class TestArrows:
    """Arrows, profunctors and bifunctors"""

    def test_function_arrow(self):
        def inc(a):
            return a + 1

        def double(a):
            return a * 2

        assert function_arrow.and_then(inc, double)(3) == 8
        assert function_arrow.compose(inc, double)(3) == 7
        assert function_arrow.split(inc, double)((1, 1)) == (2, 2)
        assert function_arrow.combine(inc, double)(5) == (6, 10)
        assert function_arrow.id()(4) == 4

    def test_profunctor_helpers(self):
        show_length = function_arrow.dimap(len, str, lambda s: s + "!")
        assert show_length(12345) == "5!"
        assert function_arrow.mapsnd(len, lambda n: n * 2)("abc") == 6

    def test_endomorphism_monoid(self):
        endo = function_arrow.monoid()
        assert endo.append(lambda a: a + 1, lambda a: a * 10)(1) == 11
        assert endo.zero()(3) == 3

    def test_bifunctor_helpers(self):
        assert either_bifunctor.left_map(Left(1), str) == Left("1")
        assert either_bifunctor.right_map(Left(1), str) == Left(1)
        assert either_bifunctor.umap(Right(2), lambda a: -a) == Right(-2)
        assert either_bifunctor.left_functor().map(Left(2), str) == Left("2")

    def test_predicate_divide(self):
        both_positive = predicate_divisible.divide(
            Predicate(lambda a: a > 0), Predicate(lambda b: b > 0), lambda pair: pair
        )
        assert both_positive((1, 2))
        assert not both_positive((1, -2))
        assert predicate_divisible.conquer()("anything")
