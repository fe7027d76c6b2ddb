"""Tests for Halstead metrics and the maintainability index."""

import math

import pytest

from polymetric.metrics.halstead import HalsteadStats
from polymetric.metrics.mi import MiStats

ADD = "def f(a, b):\n    return a + b\n"


class TestHalsteadStats:
    """Derived values from raw operator and operand counts."""

    def test_empty_counts_are_zero(self):
        stats = HalsteadStats()
        out = stats.to_dict()
        assert all(value == 0.0 for value in out.values())

    def test_single_symbol_vocabulary_has_no_volume(self):
        stats = HalsteadStats()
        stats.operators["return"] += 3
        assert stats.vocabulary == 1
        assert stats.volume == 0.0

    def test_merge_adds_counts(self):
        left, right = HalsteadStats(), HalsteadStats()
        left.operators["+"] += 1
        left.operands["a"] += 1
        right.operators["+"] += 2
        right.operands["b"] += 1
        left.merge(right)
        assert left.operators_total == 3
        assert left.u_operators == 1
        assert left.u_operands == 2


class TestPythonHalstead:
    """Token classification on a small Python function."""

    def test_counts(self, analyze_code):
        unit = analyze_code(ADD)
        (fn,) = unit.functions()
        h = fn.metrics.halstead
        # operators: def ( , return +   operands: f a b a b
        assert h.u_operators == 5
        assert h.operators_total == 5
        assert h.u_operands == 3
        assert h.operands_total == 5

    def test_derived_values(self, analyze_code):
        unit = analyze_code(ADD)
        h = unit.metrics.halstead
        assert h.length == 10
        assert h.vocabulary == 8
        assert h.volume == pytest.approx(30.0)
        assert h.difficulty == pytest.approx(25 / 6)
        assert h.level == pytest.approx(6 / 25)
        assert h.effort == pytest.approx(125.0)
        assert h.bugs == pytest.approx(0.01)
        assert h.estimated_program_length == pytest.approx(5 * math.log2(5) + 3 * math.log2(3))

    def test_docstring_is_not_an_operand(self, analyze_code):
        code = '''\
        def f(a):
            """Docs."""
            return a
        '''
        unit = analyze_code(code)
        assert '"""Docs."""' not in unit.metrics.halstead.operands

    def test_string_literal_is_an_operand(self, analyze_code):
        unit = analyze_code("x = 'hello'\n")
        assert unit.metrics.halstead.operands["'hello'"] == 1


class TestMaintainabilityIndex:
    """MI is derived from volume, cumulative cyclomatic and SLOC."""

    def test_formula(self, analyze_code):
        unit = analyze_code(ADD)
        mi = unit.metrics.mi
        expected = 171 - 5.2 * math.log(30) - 0.23 * 2 - 16.2 * math.log(2)
        assert mi.original == pytest.approx(expected)
        assert mi.visual_studio == pytest.approx(max(0.0, expected * 100 / 171))

    def test_empty_inputs_stay_finite(self):
        from polymetric.metrics.cyclomatic import CyclomaticStats
        from polymetric.metrics.loc import LocStats

        mi = MiStats()
        mi.finalize(HalsteadStats(), CyclomaticStats(), LocStats())
        for value in mi.to_dict().values():
            assert math.isfinite(value)
        assert mi.original == 171.0

    def test_visual_studio_clamped_at_zero(self):
        from polymetric.metrics.cyclomatic import CyclomaticStats
        from polymetric.metrics.loc import LocStats

        cyclomatic = CyclomaticStats()
        cyclomatic.cumulative = 10_000
        loc = LocStats()
        loc.sloc = 10
        mi = MiStats()
        mi.finalize(HalsteadStats(), cyclomatic, loc)
        assert mi.original < 0
        assert mi.visual_studio == 0.0
