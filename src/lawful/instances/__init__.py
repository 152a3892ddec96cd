"""Concrete type-class instances for the data types and builtin values."""

from lawful.instances.const import const_instance
from lawful.instances.either import either_bifunctor, either_instance
from lawful.instances.function import function_arrow
from lawful.instances.identity import id_instance
from lawful.instances.kleisli import (
    kleisli_alt,
    kleisli_arrow,
    kleisli_bind_rec,
    kleisli_divisible,
    kleisli_functor,
    kleisli_monad,
    kleisli_monad_error,
    kleisli_monad_plus,
    kleisli_monoid,
    kleisli_trans,
    kleisli_zip,
)
from lawful.instances.maybe import maybe_instance, maybe_monoid
from lawful.instances.nel import nel_instance, nel_semigroup
from lawful.instances.predicate import predicate_divisible
from lawful.instances.seq import seq_head, seq_instance, seq_monoid, seq_reducer
from lawful.instances.std import (
    all_monoid,
    any_monoid,
    bool_enum,
    bounded_int_enum,
    first_band,
    frozenset_union,
    identity_reducer,
    int_enum,
    int_max,
    int_min,
    int_order,
    int_product,
    int_sum,
    str_monoid,
    str_order,
    tuple_monoid,
)
from lawful.instances.these import these_bifunctor

__all__ = [
    "id_instance",
    "maybe_instance",
    "maybe_monoid",
    "either_instance",
    "either_bifunctor",
    "seq_instance",
    "seq_monoid",
    "seq_reducer",
    "seq_head",
    "nel_instance",
    "nel_semigroup",
    "const_instance",
    "these_bifunctor",
    "kleisli_functor",
    "kleisli_monad",
    "kleisli_monad_plus",
    "kleisli_monad_error",
    "kleisli_bind_rec",
    "kleisli_zip",
    "kleisli_alt",
    "kleisli_arrow",
    "kleisli_monoid",
    "kleisli_divisible",
    "kleisli_trans",
    "function_arrow",
    "predicate_divisible",
    "int_sum",
    "int_product",
    "int_min",
    "int_max",
    "str_monoid",
    "frozenset_union",
    "tuple_monoid",
    "all_monoid",
    "any_monoid",
    "first_band",
    "int_enum",
    "int_order",
    "str_order",
    "bool_enum",
    "bounded_int_enum",
    "identity_reducer",
]
