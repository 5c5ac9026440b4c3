"""IntSet: a subset of ℤ kept as a minimal, sorted list of elements.

The element list is always sorted by lower bound, and no two elements
overlap or touch. Every operation that builds a set in bulk finishes with
``_optimize``, which re-inserts elements until nothing merges any more.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator

from intset._element import (
    Element,
    Finite,
    Full,
    RayDown,
    RayUp,
    intersect,
    is_adjacent,
    is_overlapping,
    is_super,
    join,
    subtract,
)
from intset._util import NATIVE_WORD_BITS, _check_anchor, _max_uint, _uint_add


@dataclasses.dataclass(frozen=True)
class Cardinality:
    count: int
    status: str  # "finite" | "infinite" | "overflow"

    @property
    def unbounded(self) -> bool:
        """True when ``count`` is meaningless: the set is infinite or too large to count."""
        return self.status != "finite"


def _insert(elements: list[Element], element: Element) -> list[Element]:
    if not elements:
        return [element]
    if isinstance(elements[0], Full):
        return list(elements)

    out: list[Element] = []
    inserted = False
    for e in elements:
        if inserted:
            # merge mode: fold anything the new element now reaches
            prev = out[-1]
            if is_overlapping(prev, e) or is_adjacent(prev, e):
                out[-1] = join(prev, e)
                continue
        elif is_overlapping(e, element) or is_adjacent(e, element):
            e = join(e, element)
            inserted = True
        elif element.lower < e.lower:
            out.append(element)
            inserted = True
        out.append(e)
    if not inserted:
        out.append(element)
    return out


def _remove(elements: list[Element], element: Element) -> list[Element]:
    out: list[Element] = []
    for e in elements:
        out.extend(subtract(e, element))
    return out


def _check_element(obj: object) -> Element:
    if not isinstance(obj, Element):
        raise TypeError(f"IntSet holds Element values, got {type(obj).__name__}: {obj!r}")
    return obj


class IntSet:
    """A subset of the integers, possibly unbounded in either direction.

    >>> IntSet(Finite(1, 4), Finite(5, 9), RayUp(20))
    IntSet(Finite(lo=1, hi=9), RayUp(lo=20))
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *elements: Element) -> None:
        self._elements: list[Element] = []
        self.add(*elements)

    @classmethod
    def _wrap(cls, elements: list[Element]) -> IntSet:
        s = cls()
        s._elements = elements
        return s

    def _optimize(self) -> None:
        while True:
            rebuilt: list[Element] = []
            for e in self._elements:
                rebuilt = _insert(rebuilt, e)
            if rebuilt == self._elements:
                return
            self._elements = rebuilt

    # -- mutation ----------------------------------------------------------

    def add(self, *elements: Element) -> None:
        for e in elements:
            self._elements = _insert(self._elements, _check_element(e))
        if len(elements) > 1:
            self._optimize()

    def remove(self, *elements: Element) -> None:
        for e in elements:
            self._elements = _remove(self._elements, _check_element(e))

    def add_ints(self, *numbers: int) -> None:
        self.add(*[Finite(n, n) for n in numbers])

    def remove_ints(self, *numbers: int) -> None:
        self.remove(*[Finite(n, n) for n in numbers])

    def add_at_least(self, n: int) -> None:
        self.add(RayUp(n))

    def add_at_most(self, n: int) -> None:
        self.add(RayDown(n))

    def copy(self) -> IntSet:
        return IntSet._wrap(list(self._elements))

    # -- container protocol ------------------------------------------------

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        """Number of elements, not the number of integers (see ``cardinality``)."""
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    def contains(self, n: int) -> bool:
        _check_anchor(n, "n")
        return any(n in e for e in self._elements)

    def __contains__(self, obj: object) -> bool:
        if isinstance(obj, Element):
            return any(e == obj or is_super(e, obj) for e in self._elements)
        if isinstance(obj, bool) or not isinstance(obj, int):
            return False
        return self.contains(obj)

    # -- set algebra -------------------------------------------------------

    def union(self, other: IntSet) -> IntSet:
        result = self.copy()
        for e in other._elements:
            result._elements = _insert(result._elements, e)
        result._optimize()
        return result

    def intersection(self, other: IntSet) -> IntSet:
        result = IntSet()
        for a in self._elements:
            for b in other._elements:
                for e in intersect(a, b):
                    result._elements = _insert(result._elements, e)
        result._optimize()
        return result

    def difference(self, other: IntSet) -> IntSet:
        result = self.copy()
        result.remove(*other._elements)
        result._optimize()
        return result

    def symmetric_difference(self, other: IntSet) -> IntSet:
        return self.union(other).difference(self.intersection(other))

    def complement(self) -> IntSet:
        els = self._elements
        if not els:
            return IntSet._wrap([Full()])
        if isinstance(els[0], Full):
            return IntSet()

        gaps: list[Element] = []
        if els[0].bounded_below:
            gaps.append(RayDown(els[0].lower - 1))
        for prev, nxt in zip(els, els[1:]):
            gaps.append(Finite(prev.upper + 1, nxt.lower - 1))
        if els[-1].bounded_above:
            gaps.append(RayUp(els[-1].upper + 1))
        return IntSet._wrap(gaps)

    def cardinality(self, *, word_bits: int = NATIVE_WORD_BITS) -> Cardinality:
        """Count the integers in the set using an unsigned ``word_bits`` accumulator.

        Infinite sets report status "infinite"; finite sets whose size does
        not fit the accumulator report "overflow". Both are ``unbounded``.
        """
        max_uint = _max_uint(word_bits)
        if any(not isinstance(e, Finite) for e in self._elements):
            return Cardinality(0, "infinite")

        total = 0
        for e in self._elements:
            if e.lo < 0 <= e.hi:
                # split at zero so no intermediate exceeds the signed range
                parts: tuple[int, ...] = (e.hi, -e.lo, 1)
            else:
                parts = (e.hi - e.lo + 1,)
            for part in parts:
                total, overflowed = _uint_add(total, part, max_uint=max_uint)
                if overflowed:
                    return Cardinality(0, "overflow")
        return Cardinality(total, "finite")

    # -- comparisons -------------------------------------------------------

    def equals(self, other: IntSet) -> bool:
        if len(self._elements) != len(other._elements):
            return False
        return all(a == b for a, b in zip(self._elements, other._elements, strict=True))

    def issubset(self, other: IntSet) -> bool:
        return self.union(other).equals(other)

    def is_proper_subset(self, other: IntSet) -> bool:
        return self.issubset(other) and not self.equals(other)

    def issuperset(self, other: IntSet) -> bool:
        return other.issubset(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.equals(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.is_proper_subset(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return other.is_proper_subset(self)

    # -- operators ---------------------------------------------------------

    def __or__(self, other: object) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __invert__(self) -> IntSet:
        return self.complement()

    # -- rendering ---------------------------------------------------------

    def __str__(self) -> str:
        if not self._elements:
            return "{∅}"
        return "{" + ", ".join(str(e) for e in self._elements) + "}"

    def __repr__(self) -> str:
        return f"IntSet({', '.join(repr(e) for e in self._elements)})"
