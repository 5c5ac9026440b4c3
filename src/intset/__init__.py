from intset._element import (
    Element,
    Finite,
    Full,
    InconsistentElementsError,
    RayDown,
    RayUp,
    at_least,
    at_most,
    between,
    everything,
    point,
)
from intset._set import Cardinality, IntSet
from intset._strategies import elements, intsets, register_type_strategies

__all__ = [
    "Cardinality",
    "Element",
    "Finite",
    "Full",
    "InconsistentElementsError",
    "IntSet",
    "RayDown",
    "RayUp",
    "at_least",
    "at_most",
    "between",
    "elements",
    "everything",
    "intsets",
    "point",
    "register_type_strategies",
]
