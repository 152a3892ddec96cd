"""Properties of MonadError."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Equal
from lawful.kernel.monad import MonadError
from lawful.properties import applicative_error, monad
from lawful.properties.arbitrary import Arbitrary1, ints
from lawful.properties.prop import Prop, Properties, for_all


def errors_raised(F: MonadError, errors: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(ints, errors)(lambda a, e: F.monad_error_law.errors_raised(a, e, eq))


def errors_stop_computation(F: MonadError, errors: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(errors, ints)(lambda e, a: F.monad_error_law.errors_stop_computation(e, a, eq))


def laws(F: MonadError, gen: Arbitrary1, errors: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    p = Properties("monad error")
    p.include(monad.laws(F, gen, eq), applicative_error.laws(F, gen, errors, eq))
    p.property("errors raised", errors_raised(F, errors, eq))
    p.property("errors stop computation", errors_stop_computation(F, errors, eq))
    return p
