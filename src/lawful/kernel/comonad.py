"""Cobind and Comonad with their laws."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor, FunctorLaw, identity

A = TypeVar("A")
B = TypeVar("B")


class Cobind(Functor):
    """Extend a function on a whole structure to every position in it."""

    @abstractmethod
    def cobind(self, fa: Any, f: Callable[[Any], B]) -> Any:
        pass

    def cojoin(self, fa: Any) -> Any:
        return self.cobind(fa, identity)

    def cokleisli(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Cokleisli composition: f then g."""
        return lambda fa: g(self.cobind(fa, f))

    @property
    def cobind_law(self) -> CobindLaw:
        return CobindLaw(self)


class Comonad(Cobind):
    @abstractmethod
    def copoint(self, fa: Any) -> Any:
        """Extract the value at the focus."""

    @property
    def comonad_law(self) -> ComonadLaw:
        return ComonadLaw(self)


@dataclass(frozen=True)
class CobindLaw(FunctorLaw):
    F: Cobind

    def cobind_associative(
        self,
        fa: Any,
        f: Callable[[Any], Any],
        g: Callable[[Any], Any],
        h: Callable[[Any], Any],
        eq: Equal[Any],
    ) -> bool:
        F = self.F
        return eq.equal(
            F.cokleisli(F.cokleisli(f, g), h)(fa),
            F.cokleisli(f, F.cokleisli(g, h))(fa),
        )


@dataclass(frozen=True)
class ComonadLaw(CobindLaw):
    F: Comonad

    def cobind_left_identity(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(self.F.cobind(fa, self.F.copoint), fa)

    def cobind_right_identity(self, fa: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        return eq.equal(self.F.copoint(self.F.cobind(fa, f)), f(fa))
