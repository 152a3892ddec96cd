"""Properties of ApplicativeError."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.applicative import ApplicativeError
from lawful.kernel.equal import Equal
from lawful.properties import applicative
from lawful.properties.arbitrary import Arbitrary1, functions, ints
from lawful.properties.prop import Prop, Properties, for_all


def raised_errors_handled(F: ApplicativeError, gen: Arbitrary1, errors: SearchStrategy[Any], eq: Equal[Any]) -> Prop:
    return for_all(errors, functions(gen(ints)))(
        lambda e, f: F.applicative_error_law.raised_errors_handled(e, f, eq)
    )


def laws(F: ApplicativeError, gen: Arbitrary1, errors: SearchStrategy[Any], eq: Equal[Any]) -> Properties:
    """errors generates values of the error type E."""
    p = Properties("applicative error")
    p.include(applicative.laws(F, gen, eq))
    p.property("raised errors handled", raised_errors_handled(F, gen, errors, eq))
    return p
