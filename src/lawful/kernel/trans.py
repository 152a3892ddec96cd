"""MonadTrans - lifting computations of an inner monad G into T[G, _]."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel.equal import Equal
from lawful.kernel.monad import Monad


class MonadTrans(ABC):
    @abstractmethod
    def lift_m(self, ga: Any, G: Monad) -> Any:
        """Lift G[A] into T[G, A]."""

    @abstractmethod
    def monad(self, G: Monad) -> Monad:
        """The monad of T[G, _] for a given inner monad G."""

    def lift_mu(self, G: Monad) -> Callable[[Any], Any]:
        return lambda ga: self.lift_m(ga, G)

    @property
    def monad_trans_law(self) -> MonadTransLaw:
        return MonadTransLaw(self)


@dataclass(frozen=True)
class MonadTransLaw:
    T: MonadTrans

    def identity(self, a: Any, G: Monad, eq: Equal[Any]) -> bool:
        """Lifting a pure value is pure."""
        return eq.equal(self.T.lift_m(G.point(a), G), self.T.monad(G).point(a))

    def composition(self, ga: Any, f: Callable[[Any], Any], G: Monad, eq: Equal[Any]) -> bool:
        """Lifting distributes over bind."""
        TG = self.T.monad(G)
        return eq.equal(
            self.T.lift_m(G.bind(ga, f), G),
            TG.bind(self.T.lift_m(ga, G), lambda a: self.T.lift_m(f(a), G)),
        )
