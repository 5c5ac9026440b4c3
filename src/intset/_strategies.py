from __future__ import annotations

from hypothesis import strategies as st

from intset._element import Element, Finite, Full, RayDown, RayUp
from intset._set import IntSet


def elements(
    min_value: int = -1000,
    max_value: int = 1000,
    *,
    unbounded: bool = True,
) -> st.SearchStrategy[Element]:
    """Elements whose int anchors lie in ``[min_value, max_value]``.

    Half of the draws are finite ranges; with ``unbounded`` the rest are
    rays and Full.
    """
    if min_value > max_value:
        raise ValueError(f"Invalid bounds: min_value={min_value!r} > max_value={max_value!r}")
    anchor = st.integers(min_value=min_value, max_value=max_value)
    finite = st.builds(Finite, anchor, anchor)
    if not unbounded:
        return finite
    return st.one_of(
        finite,
        st.one_of(st.builds(RayDown, anchor), st.builds(RayUp, anchor), st.just(Full())),
    )


def intsets(
    min_value: int = -1000,
    max_value: int = 1000,
    *,
    max_elements: int = 8,
    unbounded: bool = True,
) -> st.SearchStrategy[IntSet]:
    return st.lists(
        elements(min_value, max_value, unbounded=unbounded),
        max_size=max_elements,
    ).map(lambda xs: IntSet(*xs))


def register_type_strategies() -> None:
    """Let ``st.from_type`` build Elements and IntSets."""
    st.register_type_strategy(Element, elements())
    st.register_type_strategy(IntSet, intsets())
