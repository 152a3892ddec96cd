"""Instances for sequences, represented as plain tuples."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawful.data.either import Right
from lawful.data.maybe import NOTHING, Just, Maybe
from lawful.data.these import Both, That, This
from lawful.kernel.applicative import Applicative
from lawful.kernel.comonad import Cobind
from lawful.kernel.foldable import Traverse
from lawful.kernel.monad import BindRec, IsEmpty, MonadPlus
from lawful.kernel.natural import NaturalTransformation
from lawful.kernel.reducer import Reducer
from lawful.kernel.semigroup import Monoid, Semigroup
from lawful.kernel.zip import Align, Zip

A = TypeVar("A")
B = TypeVar("B")


class SeqInstance(MonadPlus, IsEmpty, BindRec, Traverse, Zip, Align, Cobind):
    def point(self, a: A) -> tuple[A, ...]:
        return (a,)

    def map(self, fa: tuple[A, ...], f: Callable[[A], B]) -> tuple[B, ...]:
        return tuple(f(a) for a in fa)

    def ap(self, fa: tuple[A, ...], ff: tuple[Callable[[A], B], ...]) -> tuple[B, ...]:
        return tuple(f(a) for f in ff for a in fa)

    def bind(self, fa: tuple[A, ...], f: Callable[[A], tuple[B, ...]]) -> tuple[B, ...]:
        return tuple(b for a in fa for b in f(a))

    def tailrec_m(self, a: A, f: Callable[[A], tuple[Any, ...]]) -> tuple[B, ...]:
        """Depth first, so results come out in the order nested binds would give."""
        results: list[B] = []
        stack = [iter(f(a))]
        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
            elif isinstance(step, Right):
                results.append(step.value)
            else:
                stack.append(iter(f(step.value)))
        return tuple(results)

    def plus(self, a1: tuple[A, ...], a2: tuple[A, ...]) -> tuple[A, ...]:
        return a1 + a2

    def empty(self) -> tuple[Any, ...]:
        return ()

    def is_empty(self, fa: tuple[Any, ...]) -> bool:
        return not fa

    def traverse(self, fa: tuple[A, ...], f: Callable[[A], Any], G: Applicative) -> Any:
        return G.traverse_iterable(fa, f)

    def fold_map(self, fa: tuple[A, ...], f: Callable[[A], B], M: Monoid[B]) -> B:
        return M.sum(f(a) for a in fa)

    def fold_right(self, fa: tuple[A, ...], z: B, f: Callable[[A, B], B]) -> B:
        acc = z
        for a in reversed(fa):
            acc = f(a, acc)
        return acc

    def to_tuple(self, fa: tuple[A, ...]) -> tuple[A, ...]:
        return fa

    def length(self, fa: tuple[Any, ...]) -> int:
        return len(fa)

    def zip(self, fa: tuple[A, ...], fb: tuple[B, ...]) -> tuple[tuple[A, B], ...]:
        return tuple(zip(fa, fb))

    def align_with(self, fa: tuple[A, ...], fb: tuple[B, ...], f: Callable[[Any], Any]) -> tuple[Any, ...]:
        common = min(len(fa), len(fb))
        aligned = [f(Both(a, b)) for a, b in zip(fa, fb)]
        aligned.extend(f(This(a)) for a in fa[common:])
        aligned.extend(f(That(b)) for b in fb[common:])
        return tuple(aligned)

    def cobind(self, fa: tuple[A, ...], f: Callable[[tuple[A, ...]], B]) -> tuple[B, ...]:
        """Apply f to every non-empty suffix."""
        return tuple(f(fa[i:]) for i in range(len(fa)))

    def __repr__(self) -> str:
        return "seq_instance"


seq_instance = SeqInstance()


class SeqMonoid(Monoid[tuple[Any, ...]]):
    def append(self, a1: tuple[Any, ...], a2: tuple[Any, ...]) -> tuple[Any, ...]:
        return a1 + a2

    def zero(self) -> tuple[Any, ...]:
        return ()

    def sum(self, values: Any) -> tuple[Any, ...]:
        return tuple(a for value in values for a in value)


seq_monoid = SeqMonoid()


class SeqReducer(Reducer[Any, tuple[Any, ...]]):
    """Collects single elements into a tuple."""

    @property
    def semigroup(self) -> Semigroup[tuple[Any, ...]]:
        return seq_monoid

    def unit(self, c: Any) -> tuple[Any, ...]:
        return (c,)

    def cons(self, c: Any, m: tuple[Any, ...]) -> tuple[Any, ...]:
        return (c,) + m

    def snoc(self, m: tuple[Any, ...], c: Any) -> tuple[Any, ...]:
        return m + (c,)


seq_reducer = SeqReducer()


def _head(fa: tuple[A, ...]) -> Maybe[A]:
    return Just(fa[0]) if fa else NOTHING


seq_head: NaturalTransformation = NaturalTransformation.of(_head)
"""The first element, if any: Seq ~> Maybe. It is also an applicative morphism."""
