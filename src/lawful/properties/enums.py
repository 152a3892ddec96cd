"""Properties of Enum."""

from __future__ import annotations

from typing import Any

from hypothesis.strategies import SearchStrategy

from lawful.kernel.equal import Enum
from lawful.properties import order
from lawful.properties.arbitrary import small_ints
from lawful.properties.prop import Prop, Properties, for_all


def succpred(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values)(E.enum_law.succpred)


def predsucc(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values)(E.enum_law.predsucc)


def minmaxpred(E: Enum[Any]) -> Prop:
    return Prop.holds(E.enum_law.minmaxpred)


def minmaxsucc(E: Enum[Any]) -> Prop:
    return Prop.holds(E.enum_law.minmaxsucc)


def succn(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, small_ints)(E.enum_law.succn)


def predn(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values, small_ints)(E.enum_law.predn)


def succorder(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values)(E.enum_law.succorder)


def predorder(E: Enum[Any], values: SearchStrategy[Any]) -> Prop:
    return for_all(values)(E.enum_law.predorder)


def laws(E: Enum[Any], values: SearchStrategy[Any]) -> Properties:
    p = Properties("enum")
    p.include(order.laws(E, values))
    p.property("predecessor then successor is identity", succpred(E, values))
    p.property("successor then predecessor is identity", predsucc(E, values))
    p.property("predecessor of the min is the max if min and max are defined", minmaxpred(E))
    p.property("successor of the max is the min if min and max are defined", minmaxsucc(E))
    p.property("n-successor is n-times successor", succn(E, values))
    p.property("n-predecessor is n-times predecessor", predn(E, values))
    p.property("successor is greater or equal", succorder(E, values))
    p.property("predecessor is less or equal", predorder(E, values))
    return p
