"""Tests for the Hypothesis strategies shipped with intset."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intset import Element, Finite, IntSet, register_type_strategies
from intset._strategies import elements, intsets


class TestElements:
    @given(elements(-5, 5))
    def test_anchors_in_range(self, e):
        assert isinstance(e, Element)
        for bound in (e.lower, e.upper):
            assert bound in (float("-inf"), float("inf")) or -5 <= bound <= 5

    @given(elements(-5, 5, unbounded=False))
    def test_finite_only(self, e):
        assert isinstance(e, Finite)

    def test_invalid_bounds(self):
        with pytest.raises(ValueError, match="Invalid bounds"):
            elements(5, -5)


class TestIntSets:
    @given(intsets(-20, 20, max_elements=4))
    def test_produces_normalized_sets(self, s):
        assert isinstance(s, IntSet)
        assert s == IntSet(*s.elements)

    @given(intsets(unbounded=False))
    def test_finite_sets_have_a_count(self, s):
        assert not s.cardinality().unbounded


class TestRegisterTypeStrategies:
    def test_from_type(self):
        register_type_strategies()

        @given(st.from_type(IntSet), st.from_type(Element))
        def check(s, e):
            assert isinstance(s, IntSet)
            assert isinstance(e, Element)

        check()
