"""Per-language classification checks on small, idiomatic snippets."""

from polymetric import SpaceKind


def _kinds(unit):
    return [(space.kind, space.name) for space in unit.walk()][1:]


class TestJavaScript:
    def test_spaces(self, analyze_code):
        code = """\
        class Counter {
            increment() { this.n += 1; }
        }
        const double = (x) => x * 2;
        function main() {}
        """
        unit = analyze_code(code, "javascript")
        assert _kinds(unit) == [
            (SpaceKind.CLASS, "Counter"),
            (SpaceKind.FUNCTION, "increment"),
            (SpaceKind.FUNCTION, "double"),
            (SpaceKind.FUNCTION, "main"),
        ]

    def test_closure_counted_as_closure(self, analyze_code):
        unit = analyze_code("const f = function () { return 1; };\n", "javascript")
        assert unit.metrics.nom.closures == 1
        assert unit.metrics.nom.functions == 0

    def test_private_members(self, analyze_code, find_space):
        code = """\
        class Box {
            #secret = 1;
            shown = 2;
            #hide() {}
            show() {}
        }
        """
        unit = analyze_code(code, "javascript")
        box = find_space(unit, "Box")
        assert box.metrics.npa.attributes == 2
        assert box.metrics.npa.public_attributes == 1
        assert box.metrics.npm.methods == 2
        assert box.metrics.npm.public_methods == 1


class TestTypeScript:
    def test_interface_space(self, analyze_code, find_space):
        code = """\
        interface Shape {
            area(): number;
            name: string;
        }
        """
        unit = analyze_code(code, "typescript")
        shape = find_space(unit, "Shape")
        assert shape.kind is SpaceKind.INTERFACE
        assert shape.metrics.npm.methods == 1
        assert shape.metrics.npm.public_methods == 1
        assert shape.metrics.npa.public_attributes == 1

    def test_types_are_not_operands(self, analyze_code):
        unit = analyze_code("let n: number = 1;\n", "typescript")
        assert "number" not in unit.metrics.halstead.operands
        assert unit.metrics.halstead.operands["n"] == 1


class TestJava:
    def test_else_if_chain(self, analyze_code, find_space):
        code = """\
        class A {
            int sign(int x) {
                if (x > 0) {
                    return 1;
                } else if (x < 0) {
                    return -1;
                } else {
                    return 0;
                }
            }
        }
        """
        unit = analyze_code(code, "java")
        sign = find_space(unit, "sign")
        assert sign.metrics.cyclomatic.value == 3
        assert sign.metrics.cognitive.structural == 3
        assert sign.metrics.exit.value == 3
        assert find_space(unit, "A").metrics.wmc.value == 3

    def test_lambda(self, analyze_code):
        code = """\
        class B {
            void run() {
                Runnable r = () -> {};
            }
        }
        """
        unit = analyze_code(code, "java")
        assert unit.metrics.nom.functions == 1
        assert unit.metrics.nom.closures == 1


class TestRust:
    def test_spaces(self, analyze_code):
        code = """\
        struct Point { x: i32 }

        impl Point {
            fn new(x: i32) -> Self {
                Point { x }
            }
        }

        trait Area {
            fn area(&self) -> f64;
        }
        """
        unit = analyze_code(code, "rust")
        kinds = _kinds(unit)
        assert (SpaceKind.STRUCT, "Point") in kinds
        assert (SpaceKind.IMPL, "Point") in kinds
        assert (SpaceKind.FUNCTION, "new") in kinds
        assert (SpaceKind.TRAIT, "Area") in kinds

    def test_decisions(self, analyze_code, find_space):
        code = """\
        fn check(a: bool, b: bool) -> i32 {
            if a && b {
                return 1;
            }
            0
        }
        """
        unit = analyze_code(code, "rust")
        check = find_space(unit, "check")
        assert check.metrics.cyclomatic.value == 3
        assert check.metrics.cognitive.structural == 2

    def test_closure_binding(self, analyze_code, find_space):
        code = """\
        fn main() {
            let add = |a, b| a + b;
        }
        """
        unit = analyze_code(code, "rust")
        add = find_space(unit, "add")
        assert add.kind is SpaceKind.FUNCTION
        assert unit.metrics.nom.closures == 1


class TestC:
    def test_function_name_through_pointer_declarator(self, analyze_code):
        unit = analyze_code("char *name(int id) { return 0; }\n", "c")
        (fn,) = unit.functions()
        assert fn.name == "name"
        assert fn.metrics.nargs.value == 1

    def test_struct_declaration_vs_use(self, analyze_code):
        code = """\
        struct point { int x; int y; };
        struct point origin;
        """
        unit = analyze_code(code, "c")
        structs = [s for s in unit.walk() if s.kind is SpaceKind.STRUCT]
        assert len(structs) == 1
        assert structs[0].metrics.npa.attributes == 2


class TestCpp:
    def test_class_methods_and_lambda(self, analyze_code):
        code = """\
        class Widget {
        public:
            int size() { return 1; }
        };

        int main() {
            auto f = [](int a) { return a; };
            return f(1);
        }
        """
        unit = analyze_code(code, "cpp")
        names = [s.name for s in unit.walk()]
        assert "Widget" in names
        assert "size" in names
        assert "main" in names
        assert unit.metrics.nom.closures == 1


class TestGo:
    def test_method_outside_struct(self, analyze_code):
        code = """\
        package main

        type Point struct {
            X int
        }

        func (p Point) Norm() int {
            if p.X > 0 {
                return p.X
            }
            return -p.X
        }
        """
        unit = analyze_code(code, "go")
        kinds = _kinds(unit)
        assert (SpaceKind.STRUCT, "Point") in kinds
        assert (SpaceKind.FUNCTION, "Norm") in kinds
        (norm,) = unit.functions()
        assert norm.metrics.cyclomatic.value == 2
        assert norm.metrics.exit.value == 2

    def test_func_literal_takes_binding_name(self, analyze_code):
        code = """\
        package m

        var h = func() {}

        func g() {
            f := func(a int) {}
            x, cb := 1, func() {}
            _, _ = x, cb
            _ = f
        }
        """
        unit = analyze_code(code, "go")
        assert [s.name for s in unit.functions()] == ["h", "g", "f", "cb"]

    def test_unbound_func_literal_is_anonymous(self, analyze_code):
        code = """\
        package m

        func g() {
            go func() {}()
        }
        """
        unit = analyze_code(code, "go")
        assert [s.name for s in unit.functions()] == ["g", "<anonymous>"]


class TestCSharp:
    def test_class_and_method(self, analyze_code, find_space):
        code = """\
        namespace App {
            public class Greeter {
                private string name;
                public string Greet(string who) {
                    if (who == null) { return "hi"; }
                    return "hello " + who;
                }
            }
        }
        """
        unit = analyze_code(code, "csharp")
        assert find_space(unit, "App").kind is SpaceKind.NAMESPACE
        greeter = find_space(unit, "Greeter")
        assert greeter.kind is SpaceKind.CLASS
        assert greeter.metrics.npa.attributes == 1
        assert greeter.metrics.npa.public_attributes == 0
        assert greeter.metrics.npm.public_methods == 1
        greet = find_space(unit, "Greet")
        assert greet.metrics.nargs.value == 1
        assert greet.metrics.cyclomatic.value == 2


class TestLua:
    def test_function_and_branches(self, analyze_code, find_space):
        code = """\
        local function classify(n)
            if n > 0 then
                return 1
            elseif n < 0 then
                return -1
            else
                return 0
            end
        end
        """
        unit = analyze_code(code, "lua")
        classify = find_space(unit, "classify")
        assert classify.kind is SpaceKind.FUNCTION
        assert classify.metrics.cyclomatic.value == 3
        assert classify.metrics.exit.value == 3
        assert classify.metrics.nargs.value == 1
