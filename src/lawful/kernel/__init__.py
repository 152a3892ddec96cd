"""Type classes, their derived operations and their laws."""

from lawful.kernel.applicative import (
    Alt,
    AltLaw,
    Applicative,
    ApplicativeError,
    ApplicativeErrorLaw,
    ApplicativeLaw,
    Apply,
    ApplyLaw,
)
from lawful.kernel.arrow import (
    Arrow,
    Bifunctor,
    BifunctorLaw,
    Category,
    CategoryLaw,
    Compose,
    ComposeLaw,
    Profunctor,
    ProfunctorLaw,
    Strong,
    StrongLaw,
)
from lawful.kernel.comonad import Cobind, CobindLaw, Comonad, ComonadLaw
from lawful.kernel.divide import Divide, DivideLaw, Divisible, DivisibleLaw
from lawful.kernel.equal import Enum, EnumLaw, Equal, EqualLaw, Order, Ordering, OrderLaw, SamplingEqual
from lawful.kernel.foldable import Foldable, FoldableLaw, Traverse, TraverseLaw
from lawful.kernel.functor import (
    Contravariant,
    ContravariantLaw,
    Functor,
    FunctorLaw,
    InvariantFunctor,
    InvariantFunctorLaw,
)
from lawful.kernel.monad import (
    ApplicativePlus,
    Bind,
    BindLaw,
    BindRec,
    BindRecLaw,
    IsEmpty,
    IsEmptyLaw,
    Monad,
    MonadError,
    MonadErrorLaw,
    MonadLaw,
    MonadPlus,
    MonadPlusLaw,
    Plus,
    PlusEmpty,
    PlusEmptyLaw,
    PlusLaw,
)
from lawful.kernel.natural import (
    BiConstrainedNaturalTransformation,
    BiNaturalTransformation,
    ConstrainedNaturalTransformation,
    DiNaturalTransformation,
    NaturalTransformation,
    NaturalTransformationLaw,
    lift_map,
)
from lawful.kernel.reducer import Reducer, ReducerLaw
from lawful.kernel.semigroup import Band, BandLaw, Monoid, MonoidLaw, SemiLattice, SemiLatticeLaw, Semigroup, SemigroupLaw
from lawful.kernel.trans import MonadTrans, MonadTransLaw
from lawful.kernel.zip import Align, AlignLaw, Zip, ZipLaw

__all__ = [
    "Equal",
    "EqualLaw",
    "SamplingEqual",
    "Order",
    "OrderLaw",
    "Ordering",
    "Enum",
    "EnumLaw",
    "Semigroup",
    "SemigroupLaw",
    "Monoid",
    "MonoidLaw",
    "Band",
    "BandLaw",
    "SemiLattice",
    "SemiLatticeLaw",
    "Reducer",
    "ReducerLaw",
    "InvariantFunctor",
    "InvariantFunctorLaw",
    "Functor",
    "FunctorLaw",
    "Contravariant",
    "ContravariantLaw",
    "Divide",
    "DivideLaw",
    "Divisible",
    "DivisibleLaw",
    "Apply",
    "ApplyLaw",
    "Applicative",
    "ApplicativeLaw",
    "ApplicativeError",
    "ApplicativeErrorLaw",
    "Alt",
    "AltLaw",
    "Bind",
    "BindLaw",
    "BindRec",
    "BindRecLaw",
    "Monad",
    "MonadLaw",
    "MonadError",
    "MonadErrorLaw",
    "Plus",
    "PlusLaw",
    "PlusEmpty",
    "PlusEmptyLaw",
    "IsEmpty",
    "IsEmptyLaw",
    "ApplicativePlus",
    "MonadPlus",
    "MonadPlusLaw",
    "Foldable",
    "FoldableLaw",
    "Traverse",
    "TraverseLaw",
    "Zip",
    "ZipLaw",
    "Align",
    "AlignLaw",
    "Cobind",
    "CobindLaw",
    "Comonad",
    "ComonadLaw",
    "Profunctor",
    "ProfunctorLaw",
    "Strong",
    "StrongLaw",
    "Compose",
    "ComposeLaw",
    "Category",
    "CategoryLaw",
    "Arrow",
    "Bifunctor",
    "BifunctorLaw",
    "MonadTrans",
    "MonadTransLaw",
    "NaturalTransformation",
    "NaturalTransformationLaw",
    "BiNaturalTransformation",
    "DiNaturalTransformation",
    "ConstrainedNaturalTransformation",
    "BiConstrainedNaturalTransformation",
    "lift_map",
]
