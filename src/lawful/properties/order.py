"""Properties of Order."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Order, Ordering
from lawful.properties import equal
from lawful.properties.prop import Prop, Properties, for_all


def antisymmetric(O: Order[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values)(O.order_law.antisymmetric)


def transitive_order(O: Order[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values, values)(O.order_law.transitive_order)


def order_and_equal_consistent(O: Order[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, values)(O.order_law.order_and_equal_consistent)


def python_ordering(O: Order[Any], values: SearchStrategy[Any]) -> Prop:
    """A natural order must agree with the < and == operators."""

    def consistent(a1: Any, a2: Any) -> bool:
        if not O.equal_is_natural:
            return True
        expected = Ordering.LT if a1 < a2 else Ordering.EQ if a1 == a2 else Ordering.GT
        return O.order(a1, a2) is expected

    return for_all(values, values)(consistent)


def laws(O: Order[Any], values: SearchStrategy[Any]) -> Properties:
    p = Properties("order")
    p.include(equal.laws(O, values))
    p.property("antisymmetric", antisymmetric(O, values))
    p.property("transitive order", transitive_order(O, values))
    p.property("order and equal consistent", order_and_equal_consistent(O, values))
    p.property("python ordering", python_ordering(O, values))
    return p
