"""JavaScript, TypeScript and TSX classification tables.

TypeScript and TSX share one table; they differ only in the grammar used to
parse them. Type annotations parse to their own node kinds
(``type_identifier``, ``predefined_type``, ...) which are neither operators
nor operands, so types do not inflate Halstead counts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import HalsteadType, LanguageSpec, MemberCounts, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


_OPERATORS = frozenset(
    {
        "export",
        "import",
        "from",
        "as",
        "var",
        "let",
        "const",
        "function",
        "async",
        "await",
        "yield",
        "return",
        "if",
        "else",
        "switch",
        "case",
        "default",
        "for",
        "in",
        "of",
        "while",
        "do",
        "try",
        "catch",
        "finally",
        "throw",
        "break",
        "continue",
        "new",
        "delete",
        "typeof",
        "instanceof",
        "void",
        "class",
        "extends",
        "static",
        "get",
        "set",
        "=>",
        "=",
        "+=",
        "-=",
        "*=",
        "/=",
        "%=",
        "**=",
        "<<=",
        ">>=",
        ">>>=",
        "&=",
        "^=",
        "|=",
        "&&=",
        "||=",
        "??=",
        "+",
        "-",
        "*",
        "/",
        "%",
        "**",
        "++",
        "--",
        "==",
        "===",
        "!=",
        "!==",
        "<",
        ">",
        "<=",
        ">=",
        "&&",
        "||",
        "??",
        "!",
        "~",
        "&",
        "|",
        "^",
        "<<",
        ">>",
        ">>>",
        "?",
        ":",
        ".",
        "?.",
        ",",
        ";",
        "(",
        "[",
        "{",
        "...",
    }
)

_OPERANDS = frozenset(
    {
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "private_property_identifier",
        "number",
        "string",
        "template_string",
        "regex",
        "true",
        "false",
        "null",
        "undefined",
        "this",
        "super",
    }
)

_STATEMENTS = frozenset(
    {
        "expression_statement",
        "variable_declaration",
        "lexical_declaration",
        "return_statement",
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "switch_statement",
        "try_statement",
        "throw_statement",
        "break_statement",
        "continue_statement",
        "debugger_statement",
        "import_statement",
    }
)


class JavaScriptSpec(LanguageSpec):
    name = "javascript"
    extensions = (".js", ".mjs", ".cjs", ".jsx")

    unit_kinds = frozenset({"program"})
    function_kinds = frozenset(
        {"function_declaration", "generator_function_declaration", "method_definition"}
    )
    closure_kinds = frozenset(
        {"function_expression", "generator_function", "arrow_function"}
    )
    container_kinds = {"class_declaration": SpaceKind.CLASS, "class": SpaceKind.CLASS}
    name_bindings = {
        "variable_declarator": "name",
        "pair": "key",
        "assignment_expression": "left",
        "field_definition": "property",
        "public_field_definition": "name",
    }

    string_kinds = frozenset({"string", "template_string"})
    call_kinds = frozenset({"call_expression", "new_expression"})
    primitive_kinds = frozenset({"number", "true", "false", "null", "undefined"})

    decision_kinds = frozenset(
        {"if", "for", "while", "case", "catch", "ternary_expression", "&&", "||"}
    )

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "for_in_statement",
            "while_statement",
            "do_statement",
            "switch_statement",
            "catch_clause",
            "ternary_expression",
        }
    )
    flat_kinds = frozenset({"else_clause"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "return_statement",
            "lexical_declaration",
            "variable_declaration",
            "arguments",
            "statement_block",
        }
    )
    condition_owner_kinds = frozenset(
        {"if_statement", "while_statement", "do_statement", "for_statement", "ternary_expression"}
    )
    jump_kinds = frozenset({"break_statement", "continue_statement"})

    exit_kinds = frozenset(
        {"return_statement", "throw_statement", "break_statement", "continue_statement"}
    )
    statement_kinds = _STATEMENTS

    assignment_kinds = frozenset(
        {"assignment_expression", "augmented_assignment_expression", "update_expression"}
    )
    initializer_kinds = frozenset({"variable_declarator"})
    condition_kinds = frozenset(
        {"else_clause", "switch_case", "switch_default", "catch_clause", "ternary_expression"}
    )
    comparison_operators = frozenset({"==", "===", "!=", "!==", "<", ">", "<=", ">="})

    operator_kinds = _OPERATORS
    operand_kinds = _OPERANDS

    def is_labelled_jump(self, node: Node) -> bool:
        return node.type in self.jump_kinds and node.child_by_field_name("label") is not None

    def count_parameters(self, node: Node) -> int:
        # x => x has a bare identifier in the ``parameter`` field
        if node.child_by_field_name("parameter") is not None:
            return 1
        return super().count_parameters(node)

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()

        attributes = public_attributes = methods = public_methods = 0
        for member in body.named_children:
            if member.type == "method_definition":
                methods += 1
                if self._is_public_member(member, code):
                    public_methods += 1
            elif member.type in ("field_definition", "public_field_definition"):
                attributes += 1
                if self._is_public_member(member, code):
                    public_attributes += 1
        return MemberCounts(attributes, public_attributes, methods, public_methods)

    def _is_public_member(self, member: Node, code: bytes) -> bool:
        for child in member.children:
            if child.type == "private_property_identifier":
                return False
            if child.type == "accessibility_modifier":
                return node_text(child, code) == "public"
        return True


class TypeScriptSpec(JavaScriptSpec):
    name = "typescript"
    extensions = (".ts", ".mts", ".cts")

    container_kinds = {
        "class_declaration": SpaceKind.CLASS,
        "class": SpaceKind.CLASS,
        "abstract_class_declaration": SpaceKind.CLASS,
        "interface_declaration": SpaceKind.INTERFACE,
        "internal_module": SpaceKind.NAMESPACE,
    }
    primitive_kinds = JavaScriptSpec.primitive_kinds | {"predefined_type"}

    def op_type(self, node: Node, parent: Optional[Node]) -> HalsteadType:
        # `number` and `void` inside a type are keyword tokens, not literals
        if parent is not None and parent.type == "predefined_type":
            return HalsteadType.UNKNOWN
        return super().op_type(node, parent)

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        if node.type != "interface_declaration":
            return super().class_members(node, code)
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()
        # interface members are always public
        methods = sum(1 for m in body.named_children if m.type == "method_signature")
        attributes = sum(1 for m in body.named_children if m.type == "property_signature")
        return MemberCounts(attributes, attributes, methods, methods)


class TsxSpec(TypeScriptSpec):
    name = "tsx"
    extensions = (".tsx",)
