"""Property-based law checking.

Each type class has a module here (functor, monad, traverse, ...) with one
builder per law and a laws(...) function that groups them together with
the laws of its superclasses.
"""

from lawful.properties.prop import LawReport, Prop, Properties, PropResult, check_all, for_all

__all__ = [
    "Prop",
    "Properties",
    "PropResult",
    "LawReport",
    "for_all",
    "check_all",
]
