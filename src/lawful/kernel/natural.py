"""Natural transformations between type constructors.

A natural transformation F ~> G turns any F[A] into a G[A] without
looking at the A values. Python cannot enforce the polymorphism, so
naturality is checked as a law instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.data.coproduct import Coproduct
from lawful.kernel.equal import Equal
from lawful.kernel.functor import Functor


class NaturalTransformation(ABC):
    """F ~> G."""

    @abstractmethod
    def __call__(self, fa: Any) -> Any:
        pass

    def compose(self, f: NaturalTransformation) -> NaturalTransformation:
        """E ~> F followed by self."""
        return _Composed(self, f)

    def and_then(self, g: NaturalTransformation) -> NaturalTransformation:
        """self followed by G ~> H."""
        return _Composed(g, self)

    def or_(self, hg: NaturalTransformation) -> NaturalTransformation:
        """Handle Coproduct[F, H] by sending each side through its own transformation."""
        return _Or(self, hg)

    def natural_law(self, F: Functor, G: Functor) -> NaturalTransformationLaw:
        return NaturalTransformationLaw(self, F, G)

    @staticmethod
    def of(fn: Callable[[Any], Any]) -> NaturalTransformation:
        """Wrap a plain function that is polymorphic in the element type."""
        return _FromFunction(fn)

    @staticmethod
    def refl() -> NaturalTransformation:
        """F ~> F for any F."""
        return _REFL

    @staticmethod
    def identity() -> NaturalTransformation:
        """Id ~> Id. Id[A] is A itself, so this is refl."""
        return _REFL


@dataclass(frozen=True)
class _FromFunction(NaturalTransformation):
    fn: Callable[[Any], Any]

    def __call__(self, fa: Any) -> Any:
        return self.fn(fa)


class _Refl(NaturalTransformation):
    def __call__(self, fa: Any) -> Any:
        return fa

    def __repr__(self) -> str:
        return "NaturalTransformation.refl()"


_REFL = _Refl()


@dataclass(frozen=True)
class _Composed(NaturalTransformation):
    outer: NaturalTransformation
    inner: NaturalTransformation

    def __call__(self, fa: Any) -> Any:
        return self.outer(self.inner(fa))


@dataclass(frozen=True)
class _Or(NaturalTransformation):
    fg: NaturalTransformation
    hg: NaturalTransformation

    def __call__(self, fa: Coproduct[Any]) -> Any:
        return fa.fold(self.fg, self.hg)


@dataclass(frozen=True)
class _Lifted(NaturalTransformation):
    nt: NaturalTransformation
    H: Functor

    def __call__(self, hfa: Any) -> Any:
        return self.H.map(hfa, self.nt)


def or_(fg: NaturalTransformation, hg: NaturalTransformation) -> NaturalTransformation:
    """Coproduct[F, H] ~> G from F ~> G and H ~> G."""
    return fg.or_(hg)


def lift_map(nt: NaturalTransformation, H: Functor) -> NaturalTransformation:
    """Lift F ~> G to H[F[_]] ~> H[G[_]]."""
    return _Lifted(nt, H)


class BiNaturalTransformation(ABC):
    """F[A, B] ~> G[A, B]."""

    @abstractmethod
    def __call__(self, fab: Any) -> Any:
        pass

    def compose(self, f: BiNaturalTransformation) -> BiNaturalTransformation:
        return _BiComposed(self, f)

    @staticmethod
    def of(fn: Callable[[Any], Any]) -> BiNaturalTransformation:
        return _BiFromFunction(fn)


@dataclass(frozen=True)
class _BiFromFunction(BiNaturalTransformation):
    fn: Callable[[Any], Any]

    def __call__(self, fab: Any) -> Any:
        return self.fn(fab)


@dataclass(frozen=True)
class _BiComposed(BiNaturalTransformation):
    outer: BiNaturalTransformation
    inner: BiNaturalTransformation

    def __call__(self, fab: Any) -> Any:
        return self.outer(self.inner(fab))


class DiNaturalTransformation(ABC):
    """F[A, A] ~> G[A, A]."""

    @abstractmethod
    def __call__(self, faa: Any) -> Any:
        pass

    @staticmethod
    def of(fn: Callable[[Any], Any]) -> DiNaturalTransformation:
        return _DiFromFunction(fn)


@dataclass(frozen=True)
class _DiFromFunction(DiNaturalTransformation):
    fn: Callable[[Any], Any]

    def __call__(self, faa: Any) -> Any:
        return self.fn(faa)


class ConstrainedNaturalTransformation(ABC):
    """F ~> G for element types that have an instance of some type class."""

    @abstractmethod
    def __call__(self, fa: Any, instance: Any) -> Any:
        pass

    @staticmethod
    def of(fn: Callable[[Any, Any], Any]) -> ConstrainedNaturalTransformation:
        return _ConstrainedFromFunction(fn)


@dataclass(frozen=True)
class _ConstrainedFromFunction(ConstrainedNaturalTransformation):
    fn: Callable[[Any, Any], Any]

    def __call__(self, fa: Any, instance: Any) -> Any:
        return self.fn(fa, instance)


class BiConstrainedNaturalTransformation(ABC):
    """F[A, B] ~> G[A, B] given one instance for A and one for B."""

    @abstractmethod
    def __call__(self, fab: Any, left: Any, right: Any) -> Any:
        pass

    @staticmethod
    def of(fn: Callable[[Any, Any, Any], Any]) -> BiConstrainedNaturalTransformation:
        return _BiConstrainedFromFunction(fn)


@dataclass(frozen=True)
class _BiConstrainedFromFunction(BiConstrainedNaturalTransformation):
    fn: Callable[[Any, Any, Any], Any]

    def __call__(self, fab: Any, left: Any, right: Any) -> Any:
        return self.fn(fab, left, right)


@dataclass(frozen=True)
class NaturalTransformationLaw:
    nt: NaturalTransformation
    F: Functor
    G: Functor

    def naturality(self, fa: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """Transforming commutes with mapping."""
        return eq.equal(self.nt(self.F.map(fa, f)), self.G.map(self.nt(fa), f))
