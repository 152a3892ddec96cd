"""Const - a functor that ignores its element type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

C = TypeVar("C")


@dataclass(frozen=True)
class Const(Generic[C]):
    """Holds a value of C while pretending to contain some other type.

    Mapping over a Const leaves it unchanged; this is what lets
    Traverse derive fold_map from traverse.
    """

    value: C
