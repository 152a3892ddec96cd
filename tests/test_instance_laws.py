from __future__ import annotations

import pytest
from hypothesis import strategies as st

from lawful.data.lens import Lens
from lawful.instances import (
    all_monoid,
    any_monoid,
    bool_enum,
    bounded_int_enum,
    const_instance,
    either_bifunctor,
    either_instance,
    first_band,
    frozenset_union,
    function_arrow,
    id_instance,
    identity_reducer,
    int_enum,
    int_max,
    int_min,
    int_product,
    int_sum,
    kleisli_alt,
    kleisli_arrow,
    kleisli_bind_rec,
    kleisli_divisible,
    kleisli_functor,
    kleisli_monad_error,
    kleisli_monad_plus,
    kleisli_monoid,
    kleisli_trans,
    kleisli_zip,
    maybe_instance,
    maybe_monoid,
    nel_instance,
    nel_semigroup,
    predicate_divisible,
    seq_head,
    seq_instance,
    seq_monoid,
    seq_reducer,
    str_monoid,
    str_order,
    these_bifunctor,
    tuple_monoid,
)
from lawful.kernel.equal import Equal, Order
from lawful.properties import (
    align,
    applicative,
    alt,
    band,
    bifunctor,
    bind_rec,
    category,
    cobind,
    comonad,
    divisible,
    enums,
    equal,
    is_empty,
    lens,
    monad,
    monad_error,
    monad_plus,
    monad_trans,
    monoid,
    natural,
    order,
    reducer,
    semigroup,
    semilattice,
    strong,
    traverse,
    zip,
)
from lawful.properties.arbitrary import (
    INT_SAMPLES,
    consts,
    eithers,
    function_equal,
    ints,
    maybes,
    nels,
    predicates,
    sampling_equal,
    seqs,
    small_ints,
    theses,
)
from lawful.properties.prop import Properties, check_all

from fakes import (
    FAST,
    NATURAL,
    either_kleislis,
    identities,
    maybe_kleisli_arrows,
    maybe_kleislis,
    plain_functions,
    predicate_kleislis,
    small_eithers,
)

texts = st.text(max_size=4)
const_strs = const_instance(str_monoid)
kleisli_maybe_functor = kleisli_functor(maybe_instance)
predicate_equal = sampling_equal(INT_SAMPLES)
"""Predicates are functions to bool, so they compare like any int function."""
kleisli_predicate_equal = sampling_equal(INT_SAMPLES, predicate_equal)

LAWS: list[tuple[str, Properties]] = [
    # Identity
    ("identity", monad.laws(id_instance, identities, NATURAL)),
    ("identity", bind_rec.laws(id_instance, identities, NATURAL)),
    ("identity", traverse.laws(id_instance, identities)),
    ("identity", comonad.laws(id_instance, identities, NATURAL)),
    ("identity", zip.laws(id_instance, id_instance, identities, NATURAL)),
    # Maybe
    ("maybe", monad_plus.strong_laws(maybe_instance, maybes, NATURAL)),
    ("maybe", is_empty.laws(maybe_instance, maybes, NATURAL)),
    ("maybe", monad_error.laws(maybe_instance, maybes, st.just(()), NATURAL)),
    ("maybe", bind_rec.laws(maybe_instance, maybes, NATURAL)),
    ("maybe", traverse.laws(maybe_instance, maybes)),
    ("maybe", zip.laws(maybe_instance, maybe_instance, maybes, NATURAL)),
    ("maybe", align.laws(maybe_instance, maybes, NATURAL)),
    ("maybe", alt.laws(maybe_instance, maybes, NATURAL)),
    ("maybe", cobind.laws(maybe_instance, maybes, NATURAL)),
    ("maybe", monoid.laws(maybe_monoid(int_sum), maybes(ints), NATURAL)),
    ("maybe", semigroup.laws(maybe_monoid(int_min), maybes(ints), NATURAL)),
    # Either
    ("either", monad_error.laws(either_instance, small_eithers, small_ints, NATURAL)),
    ("either", bind_rec.laws(either_instance, small_eithers, NATURAL)),
    ("either", traverse.laws(either_instance, small_eithers)),
    ("either", bifunctor.laws(either_bifunctor, eithers)),
    # These
    ("these", bifunctor.laws(these_bifunctor, theses)),
    # Seq
    ("seq", monad_plus.strong_laws(seq_instance, seqs, NATURAL)),
    ("seq", is_empty.laws(seq_instance, seqs, NATURAL)),
    ("seq", bind_rec.laws(seq_instance, seqs, NATURAL)),
    ("seq", traverse.laws(seq_instance, seqs)),
    ("seq", zip.laws(seq_instance, seq_instance, seqs, NATURAL)),
    ("seq", align.laws(seq_instance, seqs, NATURAL)),
    ("seq", cobind.laws(seq_instance, seqs, NATURAL)),
    ("seq", monoid.laws(seq_monoid, seqs(ints), NATURAL)),
    ("seq", reducer.laws(seq_reducer, ints, seqs(ints), NATURAL)),
    ("seq", natural.laws(seq_head, seq_instance, maybe_instance, seqs)),
    # NonEmptyList
    ("nel", monad.laws(nel_instance, nels, NATURAL)),
    ("nel", traverse.laws(nel_instance, nels)),
    ("nel", comonad.laws(nel_instance, nels, NATURAL)),
    ("nel", zip.laws(nel_instance, nel_instance, nels, NATURAL)),
    ("nel", align.laws(nel_instance, nels, NATURAL)),
    ("nel", semigroup.laws(nel_semigroup, nels(ints), NATURAL)),
    # Const
    ("const", traverse.laws(const_strs, consts(texts))),
    ("const", divisible.laws(const_strs, consts(texts), NATURAL)),
    ("const", applicative.laws(const_strs, consts(texts), NATURAL)),
    # Kleisli
    ("kleisli", monad_plus.strong_laws(kleisli_monad_plus(maybe_instance), maybe_kleislis, function_equal)),
    ("kleisli", monad_error.laws(kleisli_monad_error(maybe_instance), maybe_kleislis, st.just(()), function_equal)),
    ("kleisli", monad_error.laws(kleisli_monad_error(either_instance), either_kleislis, small_ints, function_equal)),
    ("kleisli", bind_rec.laws(kleisli_bind_rec(maybe_instance), maybe_kleislis, function_equal)),
    ("kleisli", zip.laws(kleisli_zip(maybe_instance), kleisli_maybe_functor, maybe_kleislis, function_equal)),
    ("kleisli", alt.laws(kleisli_alt(maybe_instance), maybe_kleislis, function_equal)),
    ("kleisli", category.laws(kleisli_arrow(maybe_instance), maybe_kleisli_arrows)),
    ("kleisli", strong.laws(kleisli_arrow(maybe_instance), maybe_kleisli_arrows)),
    ("kleisli", monoid.laws(kleisli_monoid(maybe_monoid(int_sum)), maybe_kleislis(ints), function_equal)),
    ("kleisli", divisible.laws(kleisli_divisible(predicate_divisible), predicate_kleislis, kleisli_predicate_equal)),
    ("kleisli", monad_trans.laws(kleisli_trans, maybe_instance, maybes, function_equal)),
    # Functions and predicates
    ("function", category.laws(function_arrow, plain_functions)),
    ("function", strong.laws(function_arrow, plain_functions)),
    ("predicate", divisible.laws(predicate_divisible, lambda _: predicates(), predicate_equal)),
    # Numbers, strings, booleans and collections
    ("int_sum", monoid.laws(int_sum, ints, NATURAL)),
    ("int_product", monoid.laws(int_product, small_ints, NATURAL)),
    ("int_min", semilattice.laws(int_min, ints, NATURAL)),
    ("int_max", semilattice.laws(int_max, ints, NATURAL)),
    ("str_monoid", monoid.laws(str_monoid, texts, NATURAL)),
    ("frozenset_union", monoid.laws(frozenset_union, st.frozensets(small_ints, max_size=4), NATURAL)),
    ("frozenset_union", semilattice.laws(frozenset_union, st.frozensets(small_ints, max_size=4), NATURAL)),
    ("tuple_monoid", monoid.laws(tuple_monoid, seqs(ints), NATURAL)),
    ("all_monoid", monoid.laws(all_monoid, st.booleans(), NATURAL)),
    ("any_monoid", semilattice.laws(any_monoid, st.booleans(), NATURAL)),
    ("first_band", band.laws(first_band, ints, NATURAL)),
    ("identity_reducer", reducer.laws(identity_reducer(int_sum), ints, ints, NATURAL)),
    # Equalities, orders and enums
    ("natural equal", equal.laws(Equal.natural(), ints)),
    ("equal mod 7", equal.laws(Equal.by(lambda a, b: a % 7 == b % 7), ints)),
    ("natural order", order.laws(Order.natural(), ints)),
    ("str_order", order.laws(str_order, texts)),
    ("reversed int order", order.laws(int_enum.reverse_order(), ints)),
    ("int_enum", enums.laws(int_enum, ints)),
    ("bool_enum", enums.laws(bool_enum, st.booleans())),
    ("bounded_int_enum", enums.laws(bounded_int_enum(-3, 3), st.integers(min_value=-3, max_value=3))),
    # Lens
    ("first lens", lens.laws(Lens.first(), st.tuples(ints, ints), ints)),
    ("second lens", lens.laws(Lens.second(), st.tuples(ints, texts), texts)),
    ("composed lens", lens.laws(Lens.first().and_then(Lens.second()), st.tuples(st.tuples(ints, ints), ints), ints)),
]


@pytest.mark.parametrize(
    "laws",
    [pytest.param(laws, id=f"{label}: {laws.name}") for label, laws in LAWS],
)
def test_instance_is_lawful(laws: Properties):
    report = check_all(laws, FAST)
    assert report.passed
    assert len(report.results) == len(laws)
