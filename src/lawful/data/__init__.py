"""Concrete immutable data types used by the instances."""

from lawful.data.const import Const
from lawful.data.coproduct import Coproduct
from lawful.data.either import Either, Left, Right
from lawful.data.kleisli import Kleisli
from lawful.data.lens import Lens, LensLaw
from lawful.data.maybe import NOTHING, Just, Maybe, Nothing
from lawful.data.nel import NonEmptyList
from lawful.data.predicate import Predicate
from lawful.data.these import Both, That, These, This

__all__ = [
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "These",
    "This",
    "That",
    "Both",
    "NonEmptyList",
    "Const",
    "Kleisli",
    "Coproduct",
    "Lens",
    "LensLaw",
    "Predicate",
]
