"""Tests for the scope tree builder and Space serialization."""

import json
import math

import pytest

from polymetric import Space, SpaceKind, analyze
from polymetric.builder import MAX_SPACE_DEPTH
from polymetric.parsing import get_supported_languages

pytestmark = pytest.mark.skipif(
    "python" not in get_supported_languages(), reason="tree-sitter-python not installed"
)

SHAPES = """\
class Shape:
    def area(self):
        return 0

square = lambda s: s * s
"""

METRIC_KEYS = {
    "cognitive",
    "cyclomatic",
    "halstead",
    "loc",
    "nargs",
    "nom",
    "exit",
    "abc",
    "npa",
    "npm",
    "mi",
    "wmc",
}


def _all_values(space):
    for node in space.walk():
        for family in node.metrics.to_dict().values():
            yield from family.values()


def _max_depth(root):
    deepest = 0
    stack = [(root, 0)]
    while stack:
        space, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in space.children)
    return deepest


class TestSpaceTree:
    """Shape of the tree: kinds, names, line ranges and order."""

    def test_root_is_unit(self):
        unit = analyze("x = 1\n", "python", "mod.py")
        assert unit.kind is SpaceKind.UNIT
        assert unit.name == "mod.py"
        assert (unit.start_line, unit.end_line) == (1, 1)

    def test_nested_spaces(self):
        unit = analyze(SHAPES, "python")
        assert [child.name for child in unit.children] == ["Shape", "square"]
        shape, square = unit.children
        assert shape.kind is SpaceKind.CLASS
        assert (shape.start_line, shape.end_line) == (1, 3)
        (area,) = shape.children
        assert area.kind is SpaceKind.FUNCTION
        assert area.name == "area"
        assert (area.start_line, area.end_line) == (2, 3)
        assert square.kind is SpaceKind.FUNCTION
        assert square.start_line == square.end_line == 5

    def test_unbound_closure_is_anonymous(self):
        unit = analyze("print(lambda: 1)\n", "python")
        (closure,) = unit.children
        assert closure.name == "<anonymous>"

    def test_children_within_parent_lines(self):
        unit = analyze(SHAPES, "python")
        for space in unit.walk():
            assert space.start_line <= space.end_line
            for child in space.children:
                assert space.start_line <= child.start_line
                assert child.end_line <= space.end_line

    def test_walk_is_preorder(self):
        unit = analyze(SHAPES, "python")
        assert [s.name for s in unit.walk()] == [None, "Shape", "area", "square"]

    def test_functions_lists_function_spaces(self):
        unit = analyze(SHAPES, "python")
        assert [s.name for s in unit.functions()] == ["area", "square"]


class TestEdgeCases:
    """Empty, trivial and malformed input."""

    @pytest.mark.parametrize("language", ["python", "javascript", "rust", "go", "java", "c", "lua"])
    def test_empty_input(self, language):
        if language not in get_supported_languages():
            pytest.skip(f"tree-sitter grammar for {language} not installed")
        unit = analyze(b"", language)
        assert unit.children == []
        out = unit.metrics.to_dict()
        assert set(out["loc"].values()) == {0.0}
        for family in out.values():
            if "sum" in family:
                assert family["sum"] == 0.0
        assert out["nom"]["total"] == 0.0
        assert out["halstead"]["length"] == 0.0
        assert unit.metrics.cyclomatic.value == 1
        for value in _all_values(unit):
            assert math.isfinite(value)

    def test_single_function(self):
        unit = analyze("def f():\n    return 1\n", "python")
        (fn,) = unit.children
        assert fn.metrics.cyclomatic.value == 1
        assert fn.metrics.cognitive.structural == 0

    def test_malformed_input_still_builds(self):
        unit = analyze("def f(:\n    if x\n        return (\n", "python")
        assert isinstance(unit, Space)
        assert unit.start_line == 1
        for space in unit.walk():
            assert 1 <= space.start_line <= space.end_line <= unit.end_line
        for value in _all_values(unit):
            assert math.isfinite(value)

    def test_invalid_utf8_does_not_raise(self):
        unit = analyze(b"x = '\xff\xfe'\ndef f():\n    pass\n", "python")
        assert any(s.name == "f" for s in unit.walk())

    def test_deep_expression_does_not_recurse(self):
        depth = 5000
        code = "x = " + "(" * depth + "1" + ")" * depth + "\n"
        unit = analyze(code, "python")
        assert unit.metrics.loc.ploc == 1
        assert json.loads(unit.to_json())["kind"] == "unit"

    def test_deep_closures_are_capped_and_serialize(self):
        code = "f = " + "lambda: " * 5000 + "0\n"
        unit = analyze(code, "python")
        assert _max_depth(unit) == MAX_SPACE_DEPTH
        out = json.loads(unit.to_json())
        assert out["spaces"][0]["name"] == "f"
        assert unit.metrics.nom.closures == MAX_SPACE_DEPTH


class TestAggregation:
    """Parent metrics fold in their children."""

    def test_building_twice_is_identical(self):
        first = analyze(SHAPES, "python").to_dict()
        second = analyze(SHAPES, "python").to_dict()
        assert first == second

    def test_sum_over_functions_equals_function_values(self):
        code = """\
def a(x):
    if x:
        return 1

def b(x):
    for i in x:
        if i and x:
            return i
"""
        unit = analyze(code, "python")
        functions = unit.functions()
        expected = sum(fn.metrics.cyclomatic.value for fn in functions)
        assert unit.metrics.cyclomatic.functions.total == expected
        expected = sum(fn.metrics.cognitive.structural for fn in functions)
        assert unit.metrics.cognitive.functions.total == expected
        assert unit.metrics.nom.functions == len(functions)

    def test_average_between_min_and_max(self):
        unit = analyze(SHAPES + "def g(x):\n    return x if x else -x\n", "python")
        for space in unit.walk():
            for family in ("cyclomatic", "cognitive", "exit", "nargs"):
                aggregate = getattr(space.metrics, family).functions
                if aggregate.count == 0:
                    continue
                assert aggregate.average == aggregate.total / aggregate.count
                assert aggregate.minimum <= aggregate.average <= aggregate.maximum

    def test_cyclomatic_at_least_one(self):
        unit = analyze(SHAPES, "python")
        for fn in unit.functions():
            assert fn.metrics.cyclomatic.value >= 1


class TestSerialization:
    """to_dict / to_json output."""

    def test_keys(self):
        out = analyze(SHAPES, "python", "shapes.py").to_dict()
        assert set(out) == {"name", "kind", "start_line", "end_line", "metrics", "spaces"}
        assert set(out["metrics"]) == METRIC_KEYS
        assert out["kind"] == "unit"
        assert out["spaces"][0]["name"] == "Shape"
        assert out["spaces"][0]["spaces"][0]["kind"] == "function"

    def test_json_round_trip(self):
        unit = analyze(SHAPES, "python", "shapes.py")
        assert json.loads(unit.to_json()) == unit.to_dict()

    def test_metric_values_are_floats(self):
        out = analyze(SHAPES, "python").to_dict()
        for family in out["metrics"].values():
            for value in family.values():
                assert isinstance(value, float)
