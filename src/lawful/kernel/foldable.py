"""Foldable and Traverse with their laws."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.data.const import Const
from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.kernel.applicative import Applicative
from lawful.kernel.equal import Equal, Order
from lawful.kernel.functor import Functor, FunctorLaw
from lawful.kernel.semigroup import Monoid

A = TypeVar("A")
B = TypeVar("B")


class _TupleMonoid(Monoid[tuple[Any, ...]]):
    def append(self, a1: tuple[Any, ...], a2: tuple[Any, ...]) -> tuple[Any, ...]:
        return a1 + a2

    def zero(self) -> tuple[Any, ...]:
        return ()


class _EndoMonoid(Monoid[Callable[[Any], Any]]):
    """Functions B -> B under composition; append(f, g) runs g first."""

    def append(self, a1: Callable[[Any], Any], a2: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return lambda b: a1(a2(b))

    def zero(self) -> Callable[[Any], Any]:
        return lambda b: b


_TUPLES = _TupleMonoid()
_ENDO = _EndoMonoid()


class Foldable(ABC):
    """Structures that can be folded to a summary value.

    Either fold_right or fold_map must be overridden; each has a default
    in terms of the other.
    """

    def fold_right(self, fa: Any, z: B, f: Callable[[A, B], B]) -> B:
        return self.fold_map(fa, lambda a: lambda b: f(a, b), _ENDO)(z)

    def fold_map(self, fa: Any, f: Callable[[A], B], M: Monoid[B]) -> B:
        return self.fold_right(fa, M.zero(), lambda a, b: M.append(f(a), b))

    def fold_left(self, fa: Any, z: B, f: Callable[[B, A], B]) -> B:
        acc = z
        for a in self.to_tuple(fa):
            acc = f(acc, a)
        return acc

    def fold(self, fa: Any, M: Monoid[A]) -> A:
        return self.fold_map(fa, lambda a: a, M)

    def to_tuple(self, fa: Any) -> tuple[Any, ...]:
        return self.fold_map(fa, lambda a: (a,), _TUPLES)

    def length(self, fa: Any) -> int:
        return self.fold_left(fa, 0, lambda n, _: n + 1)

    def is_empty(self, fa: Any) -> bool:
        return self.length(fa) == 0

    def all(self, fa: Any, p: Callable[[A], bool]) -> bool:
        return all(p(a) for a in self.to_tuple(fa))

    def any(self, fa: Any, p: Callable[[A], bool]) -> bool:
        return any(p(a) for a in self.to_tuple(fa))

    def find(self, fa: Any, p: Callable[[A], bool]) -> Maybe[A]:
        for a in self.to_tuple(fa):
            if p(a):
                return Just(a)
        return NOTHING

    def element(self, fa: Any, a: A, eq: Equal[A]) -> bool:
        return self.any(fa, lambda x: eq.equal(x, a))

    def maximum(self, fa: Any, order: Order[A]) -> Maybe[A]:
        values = self.to_tuple(fa)
        if not values:
            return NOTHING
        result = values[0]
        for a in values[1:]:
            result = order.max(result, a)
        return Just(result)

    def minimum(self, fa: Any, order: Order[A]) -> Maybe[A]:
        values = self.to_tuple(fa)
        if not values:
            return NOTHING
        result = values[0]
        for a in values[1:]:
            result = order.min(result, a)
        return Just(result)

    def traverse_(self, fa: Any, f: Callable[[A], Any], G: Applicative) -> Any:
        """Run f for each element in G, discarding the results."""
        acc = G.point(())
        for a in self.to_tuple(fa):
            acc = G.discard_right(acc, f(a))
        return acc

    @property
    def foldable_law(self) -> FoldableLaw:
        return FoldableLaw(self)


class Traverse(Functor, Foldable):
    """Structures that can be traversed left to right in an applicative."""

    @abstractmethod
    def traverse(self, fa: Any, f: Callable[[A], Any], G: Applicative) -> Any:
        """Map each element to G[B] and collect the results into G[F[B]]."""

    def sequence(self, fga: Any, G: Applicative) -> Any:
        return self.traverse(fga, lambda ga: ga, G)

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        from lawful.instances.identity import id_instance

        return self.traverse(fa, f, id_instance)

    def fold_map(self, fa: Any, f: Callable[[A], B], M: Monoid[B]) -> B:
        from lawful.instances.const import const_instance

        return self.traverse(fa, lambda a: Const(f(a)), const_instance(M)).value

    def map_accum_left(self, fa: Any, z: B, f: Callable[[B, A], tuple[B, Any]]) -> tuple[B, Any]:
        """Thread an accumulator through the elements left to right."""
        from lawful.instances.identity import id_instance

        state = [z]

        def step(a: A) -> Any:
            state[0], b = f(state[0], a)
            return b

        result = self.traverse(fa, step, id_instance)
        return state[0], result

    def zip_with_index(self, fa: Any) -> Any:
        return self.map_accum_left(fa, 0, lambda i, a: (i + 1, (i, a)))[1]

    @property
    def traverse_law(self) -> TraverseLaw:
        return TraverseLaw(self)


@dataclass(frozen=True)
class FoldableLaw:
    F: Foldable

    def left_fm_consistent(self, fa: Any, eq: Equal[Any]) -> bool:
        """fold_map and fold_left visit the elements in the same order."""
        return eq.equal(
            self.F.fold_map(fa, lambda a: (a,), _TUPLES),
            self.F.fold_left(fa, (), lambda acc, a: acc + (a,)),
        )

    def right_fm_consistent(self, fa: Any, eq: Equal[Any]) -> bool:
        return eq.equal(
            self.F.fold_map(fa, lambda a: (a,), _TUPLES),
            self.F.fold_right(fa, (), lambda a, acc: (a,) + acc),
        )


@dataclass(frozen=True)
class TraverseLaw(FunctorLaw, FoldableLaw):
    F: Traverse

    def identity_traverse(self, fa: Any, f: Callable[[Any], Any], eq: Equal[Any]) -> bool:
        """Traversing in the identity applicative is map."""
        from lawful.instances.identity import id_instance

        return eq.equal(self.F.traverse(fa, f, id_instance), self.F.map(fa, f))

    def purity(self, fa: Any, G: Applicative, eq: Equal[Any]) -> bool:
        """Traversing with point is point."""
        return eq.equal(self.F.traverse(fa, G.point, G), G.point(fa))

    def sequential_fusion(
        self,
        fa: Any,
        amb: Callable[[Any], Any],
        bnc: Callable[[Any], Any],
        N: Applicative,
        M: Applicative,
        eq: Equal[Any],
    ) -> bool:
        """Two traversals in a row equal one traversal in the composed applicative M[N[_]]."""
        t1 = M.map(self.F.traverse(fa, amb, M), lambda fb: self.F.traverse(fb, bnc, N))
        t2 = self.F.traverse(fa, lambda a: M.map(amb(a), bnc), M.compose(N))
        return eq.equal(t1, t2)

    def naturality(self, nat: Callable[[Any], Any], fma: Any, N: Applicative, M: Applicative, eq: Equal[Any]) -> bool:
        """An applicative morphism nat: M ~> N commutes with sequence."""
        return eq.equal(nat(self.F.sequence(fma, M)), self.F.sequence(self.F.map(fma, nat), N))

    def parallel_fusion(
        self,
        fa: Any,
        amb: Callable[[Any], Any],
        anb: Callable[[Any], Any],
        N: Applicative,
        M: Applicative,
        eq: Equal[Any],
    ) -> bool:
        """Two traversals side by side equal one traversal in the product applicative."""
        t1 = (self.F.traverse(fa, amb, M), self.F.traverse(fa, anb, N))
        t2 = self.F.traverse(fa, lambda a: (amb(a), anb(a)), M.product(N))
        return eq.equal(t1, t2)
