"""Java classification table (tree-sitter-java)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import LanguageSpec, MemberCounts, first_child_of_type, is_alternative_of, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


def _has_modifier(member: Node, code: bytes, modifier: str) -> bool:
    modifiers = first_child_of_type(member, "modifiers")
    if modifiers is None:
        return False
    return any(node_text(child, code) == modifier for child in modifiers.children)


class JavaSpec(LanguageSpec):
    name = "java"
    extensions = (".java",)

    unit_kinds = frozenset({"program"})
    function_kinds = frozenset({"method_declaration", "constructor_declaration"})
    closure_kinds = frozenset({"lambda_expression"})
    container_kinds = {
        "class_declaration": SpaceKind.CLASS,
        "enum_declaration": SpaceKind.CLASS,
        "record_declaration": SpaceKind.CLASS,
        "interface_declaration": SpaceKind.INTERFACE,
    }
    name_bindings = {"variable_declarator": "name", "assignment_expression": "left"}

    comment_kinds = frozenset({"line_comment", "block_comment"})
    string_kinds = frozenset({"string_literal", "character_literal"})
    call_kinds = frozenset({"method_invocation", "object_creation_expression"})
    primitive_kinds = frozenset(
        {
            "decimal_integer_literal",
            "hex_integer_literal",
            "octal_integer_literal",
            "binary_integer_literal",
            "decimal_floating_point_literal",
            "hex_floating_point_literal",
            "true",
            "false",
            "null_literal",
        }
    )

    decision_kinds = frozenset(
        {"if", "for", "while", "case", "catch", "ternary_expression", "&&", "||"}
    )

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "enhanced_for_statement",
            "while_statement",
            "do_statement",
            "switch_expression",
            "switch_statement",
            "catch_clause",
            "ternary_expression",
        }
    )
    # Java has no else node; the keyword token itself costs the increment
    flat_kinds = frozenset({"else"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "local_variable_declaration",
            "return_statement",
            "argument_list",
            "block",
        }
    )
    condition_owner_kinds = frozenset(
        {"if_statement", "while_statement", "do_statement", "for_statement", "ternary_expression"}
    )
    jump_kinds = frozenset({"break_statement", "continue_statement"})

    exit_kinds = frozenset(
        {"return_statement", "throw_statement", "break_statement", "continue_statement"}
    )

    statement_kinds = frozenset(
        {
            "expression_statement",
            "local_variable_declaration",
            "field_declaration",
            "return_statement",
            "if_statement",
            "for_statement",
            "enhanced_for_statement",
            "while_statement",
            "do_statement",
            "switch_expression",
            "try_statement",
            "try_with_resources_statement",
            "throw_statement",
            "break_statement",
            "continue_statement",
            "assert_statement",
            "yield_statement",
            "import_declaration",
            "package_declaration",
        }
    )

    assignment_kinds = frozenset({"assignment_expression", "update_expression"})
    initializer_kinds = frozenset({"variable_declarator"})
    condition_kinds = frozenset({"else", "switch_label", "catch_clause", "ternary_expression"})

    operator_kinds = frozenset(
        {
            "(",
            "[",
            "{",
            "=",
            "+",
            "-",
            "*",
            "/",
            "%",
            "++",
            "--",
            "!",
            "~",
            "&",
            "|",
            "^",
            "<<",
            ">>",
            ">>>",
            "&&",
            "||",
            "==",
            "!=",
            "<",
            ">",
            "<=",
            ">=",
            "+=",
            "-=",
            "*=",
            "/=",
            "%=",
            "&=",
            "|=",
            "^=",
            "<<=",
            ">>=",
            ">>>=",
            "?",
            ":",
            "::",
            "->",
            ".",
            ",",
            ";",
            "@",
            "...",
            "if",
            "else",
            "for",
            "while",
            "do",
            "switch",
            "case",
            "default",
            "try",
            "catch",
            "finally",
            "throw",
            "throws",
            "return",
            "break",
            "continue",
            "new",
            "instanceof",
            "class",
            "interface",
            "enum",
            "extends",
            "implements",
            "import",
            "package",
            "assert",
            "yield",
            "synchronized",
        }
    )
    operand_kinds = frozenset(
        {
            "identifier",
            "decimal_integer_literal",
            "hex_integer_literal",
            "octal_integer_literal",
            "binary_integer_literal",
            "decimal_floating_point_literal",
            "hex_floating_point_literal",
            "string_literal",
            "character_literal",
            "true",
            "false",
            "null_literal",
            "this",
            "super",
        }
    )

    def is_else_if(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.if_kinds and is_alternative_of(node, parent)

    def is_labelled_jump(self, node: Node) -> bool:
        return node.type in self.jump_kinds and first_child_of_type(node, "identifier") is not None

    def count_parameters(self, node: Node) -> int:
        params = self.function_parameters(node)
        if params is None:
            return 0
        # x -> x
        if params.type == "identifier":
            return 1
        return sum(1 for child in params.children if not self.is_non_arg(child))

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()

        interface = node.type == "interface_declaration"
        attributes = public_attributes = methods = public_methods = 0
        for member in body.named_children:
            public = interface or _has_modifier(member, code, "public")
            if member.type in ("field_declaration", "constant_declaration"):
                declared = len(member.children_by_field_name("declarator")) or 1
                attributes += declared
                if public:
                    public_attributes += declared
            elif member.type in ("method_declaration", "constructor_declaration"):
                methods += 1
                public_methods += public
        return MemberCounts(attributes, public_attributes, methods, public_methods)
