"""Elements: the convex pieces of ℤ an IntSet is made of.

An element is one of four shapes:
- Full: all of ℤ
- Finite(lo, hi): the closed range [lo, hi]
- RayDown(hi): (-∞, hi]
- RayUp(lo): [lo, +∞)

Every shape exposes ``lower`` and ``upper`` as extended bounds (an int,
or -inf/inf), which is what the relations below compare. Combinators only
ever compute new edges from int anchors.
"""

from __future__ import annotations

import dataclasses

from intset._util import NEG_INF, POS_INF, Bound, _check_anchor

_INF = "∞"


class InconsistentElementsError(AssertionError):
    """A combinator met a shape combination it cannot handle.

    Never raised while IntSet invariants hold.
    """


@dataclasses.dataclass(frozen=True)
class Element:
    @property
    def lower(self) -> Bound:
        raise NotImplementedError

    @property
    def upper(self) -> Bound:
        raise NotImplementedError

    @property
    def bounded_below(self) -> bool:
        return self.lower != NEG_INF

    @property
    def bounded_above(self) -> bool:
        return self.upper != POS_INF

    def __contains__(self, n: object) -> bool:
        if isinstance(n, bool) or not isinstance(n, int):
            return False
        return self.lower <= n <= self.upper


@dataclasses.dataclass(frozen=True)
class Full(Element):
    @property
    def lower(self) -> Bound:
        return NEG_INF

    @property
    def upper(self) -> Bound:
        return POS_INF

    def __str__(self) -> str:
        return f"-{_INF}:{_INF}"


@dataclasses.dataclass(frozen=True)
class Finite(Element):
    lo: int
    hi: int

    def __post_init__(self) -> None:
        _check_anchor(self.lo, "lo")
        _check_anchor(self.hi, "hi")
        if self.hi < self.lo:
            lo, hi = self.hi, self.lo
            object.__setattr__(self, "lo", lo)
            object.__setattr__(self, "hi", hi)

    @property
    def lower(self) -> Bound:
        return self.lo

    @property
    def upper(self) -> Bound:
        return self.hi

    def __str__(self) -> str:
        if self.lo == self.hi:
            return f"{self.lo}"
        return f"{self.lo}:{self.hi}"


@dataclasses.dataclass(frozen=True)
class RayDown(Element):
    hi: int

    def __post_init__(self) -> None:
        _check_anchor(self.hi, "hi")

    @property
    def lower(self) -> Bound:
        return NEG_INF

    @property
    def upper(self) -> Bound:
        return self.hi

    def __str__(self) -> str:
        return f"-{_INF}:{self.hi}"


@dataclasses.dataclass(frozen=True)
class RayUp(Element):
    lo: int

    def __post_init__(self) -> None:
        _check_anchor(self.lo, "lo")

    @property
    def lower(self) -> Bound:
        return self.lo

    @property
    def upper(self) -> Bound:
        return POS_INF

    def __str__(self) -> str:
        return f"{self.lo}:{_INF}"


def between(a: int, b: int) -> Finite:
    """The finite range spanning ``a`` and ``b``, in either order."""
    return Finite(a, b)


def point(n: int) -> Finite:
    return Finite(n, n)


def at_most(n: int) -> RayDown:
    """Everything from -∞ up to and including ``n``."""
    return RayDown(n)


def at_least(n: int) -> RayUp:
    """Everything from ``n`` up to +∞."""
    return RayUp(n)


def everything() -> Full:
    return Full()


# Relations


def is_overlapping(a: Element, b: Element) -> bool:
    return a.lower <= b.upper and b.lower <= a.upper


def is_adjacent(a: Element, b: Element) -> bool:
    """True if ``a`` and ``b`` are disjoint with no integer between them.

    Full has no outside, so it is adjacent to everything.
    """
    if isinstance(a, Full) or isinstance(b, Full):
        return True
    if is_overlapping(a, b):
        return False
    return a.upper + 1 == b.lower or b.upper + 1 == a.lower


def is_equal(a: Element, b: Element) -> bool:
    return a == b


def is_super(a: Element, b: Element) -> bool:
    """True if ``a`` is a proper superset of ``b``."""
    return a.lower <= b.lower and b.upper <= a.upper and a != b


def is_within(a: Element, b: Element) -> bool:
    if not (isinstance(a, Finite) and isinstance(b, Finite)):
        raise InconsistentElementsError(f"is_within needs two finite elements, got {a!r} and {b!r}")
    return a.lo >= b.lo and a.hi <= b.hi


# Combinators


def _from_bounds(lower: Bound, upper: Bound) -> Element:
    if upper < lower or lower == POS_INF or upper == NEG_INF:
        raise InconsistentElementsError(f"no element spans {lower} to {upper}")
    if lower == NEG_INF and upper == POS_INF:
        return Full()
    if lower == NEG_INF:
        return RayDown(int(upper))
    if upper == POS_INF:
        return RayUp(int(lower))
    return Finite(int(lower), int(upper))


def join(a: Element, b: Element) -> Element:
    """The single element spanning two overlapping or adjacent elements."""
    if not (is_overlapping(a, b) or is_adjacent(a, b)):
        raise InconsistentElementsError(f"cannot join disjoint elements {a} and {b}")
    return _from_bounds(min(a.lower, b.lower), max(a.upper, b.upper))


def subtract(a: Element, b: Element) -> tuple[Element, ...]:
    """``a`` with every integer of ``b`` removed, as 0, 1 or 2 elements."""
    if a == b or isinstance(b, Full):
        return ()
    if not is_overlapping(a, b):
        return (a,)
    if is_super(b, a):
        return ()

    if isinstance(a, Full):
        if isinstance(b, RayDown):
            return (RayUp(b.hi + 1),)
        if isinstance(b, RayUp):
            return (RayDown(b.lo - 1),)
        if isinstance(b, Finite):
            return (RayDown(b.lo - 1), RayUp(b.hi + 1))

    elif isinstance(a, RayDown):
        if isinstance(b, RayDown):
            return (Finite(b.hi + 1, a.hi),)
        if isinstance(b, RayUp):
            return (RayDown(b.lo - 1),)
        if isinstance(b, Finite):
            if b.hi < a.hi:
                return (RayDown(b.lo - 1), Finite(b.hi + 1, a.hi))
            return (RayDown(b.lo - 1),)

    elif isinstance(a, RayUp):
        if isinstance(b, RayUp):
            return (Finite(a.lo, b.lo - 1),)
        if isinstance(b, RayDown):
            return (RayUp(b.hi + 1),)
        if isinstance(b, Finite):
            if b.lo > a.lo:
                return (Finite(a.lo, b.lo - 1), RayUp(b.hi + 1))
            return (RayUp(b.hi + 1),)

    elif isinstance(a, Finite):
        if isinstance(b, RayDown):
            return (Finite(b.hi + 1, a.hi),)
        if isinstance(b, RayUp):
            return (Finite(a.lo, b.lo - 1),)
        if isinstance(b, Finite):
            if is_within(b, a) and a.lo < b.lo and b.hi < a.hi:
                return (Finite(a.lo, b.lo - 1), Finite(b.hi + 1, a.hi))
            if b.lo <= a.lo:
                return (Finite(b.hi + 1, a.hi),)
            return (Finite(a.lo, b.lo - 1),)

    raise InconsistentElementsError(f"cannot subtract {b!r} from {a!r}")


def intersect(a: Element, b: Element) -> tuple[Element, ...]:
    """The integers common to ``a`` and ``b``, as 0 or 1 elements."""
    if a == b or is_super(b, a):
        return (a,)
    if is_super(a, b):
        return (b,)
    if not is_overlapping(a, b):
        return ()
    # Neither contains the other, so the overlap is always finite.
    return (_from_bounds(max(a.lower, b.lower), min(a.upper, b.upper)),)
