"""Rust classification table (tree-sitter-rust)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import LanguageSpec, MemberCounts, first_child_of_type

if TYPE_CHECKING:
    from tree_sitter import Node


class RustSpec(LanguageSpec):
    name = "rust"
    extensions = (".rs",)

    unit_kinds = frozenset({"source_file"})
    function_kinds = frozenset({"function_item"})
    closure_kinds = frozenset({"closure_expression"})
    container_kinds = {
        "trait_item": SpaceKind.TRAIT,
        "impl_item": SpaceKind.IMPL,
        "struct_item": SpaceKind.STRUCT,
        "mod_item": SpaceKind.NAMESPACE,
    }
    body_required_kinds = frozenset({"struct_item", "mod_item"})
    name_bindings = {"let_declaration": "pattern", "assignment_expression": "left"}

    comment_kinds = frozenset({"line_comment", "block_comment"})
    string_kinds = frozenset({"string_literal", "raw_string_literal"})
    call_kinds = frozenset({"call_expression", "macro_invocation"})
    primitive_kinds = frozenset(
        {"integer_literal", "float_literal", "boolean_literal", "char_literal", "primitive_type"}
    )

    decision_kinds = frozenset(
        {"if", "for", "while", "loop", "match_arm", "try_expression"}
    )

    nesting_kinds = frozenset(
        {
            "if_expression",
            "for_expression",
            "while_expression",
            "loop_expression",
            "match_expression",
        }
    )
    flat_kinds = frozenset({"else_clause"})
    if_kinds = frozenset({"if_expression"})
    reset_kinds = frozenset(
        {"expression_statement", "let_declaration", "arguments", "block"}
    )
    condition_owner_kinds = frozenset({"if_expression", "while_expression"})
    jump_kinds = frozenset({"break_expression", "continue_expression"})

    exit_kinds = frozenset(
        {"return_expression", "try_expression", "break_expression", "continue_expression"}
    )

    statement_kinds = frozenset(
        {
            "expression_statement",
            "let_declaration",
            "use_declaration",
            "const_item",
            "static_item",
        }
    )

    assignment_kinds = frozenset({"assignment_expression", "compound_assignment_expr"})
    initializer_kinds = frozenset({"let_declaration"})
    condition_kinds = frozenset({"else_clause", "match_arm"})

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
            "^",
            "!",
            "&",
            "|",
            "&&",
            "||",
            "<<",
            ">>",
            "+=",
            "-=",
            "*=",
            "/=",
            "%=",
            "^=",
            "&=",
            "|=",
            "<<=",
            ">>=",
            "==",
            "!=",
            "<",
            ">",
            "<=",
            ">=",
            "@",
            "_",
            ".",
            "..",
            "..=",
            ",",
            ";",
            ":",
            "::",
            "->",
            "=>",
            "?",
            "#",
            "let",
            "fn",
            "return",
            "if",
            "else",
            "match",
            "for",
            "while",
            "loop",
            "in",
            "break",
            "continue",
            "mut",
            "ref",
            "as",
            "move",
            "async",
            "await",
            "unsafe",
            "impl",
            "struct",
            "enum",
            "trait",
            "type",
            "use",
            "mod",
            "pub",
            "const",
            "static",
            "where",
            "dyn",
            "yield",
        }
    )
    operand_kinds = frozenset(
        {
            "identifier",
            "field_identifier",
            "shorthand_field_identifier",
            "integer_literal",
            "float_literal",
            "boolean_literal",
            "char_literal",
            "string_literal",
            "raw_string_literal",
            "self",
            "crate",
            "super",
        }
    )

    def fallback_name_node(self, node: Node) -> Optional[Node]:
        if node.type == "impl_item":
            return node.child_by_field_name("type")
        return None

    def is_labelled_jump(self, node: Node) -> bool:
        if node.type not in self.jump_kinds:
            return False
        return first_child_of_type(node, "label", "loop_label") is not None

    def is_decision(self, node: Node, parent: Optional[Node]) -> bool:
        if node.type in self.decision_kinds:
            return True
        # closure parameter lists also open with `||`
        return (
            node.type in self.boolean_operators
            and parent is not None
            and parent.type == "binary_expression"
        )

    def is_exit(self, node: Node, parent: Optional[Node]) -> bool:
        if node.type in self.exit_kinds:
            return True
        # a declared return type implies the tail expression returns
        return node.type == "function_item" and node.child_by_field_name("return_type") is not None

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()

        everything_public = node.type == "trait_item"
        attributes = public_attributes = methods = public_methods = 0
        for member in body.named_children:
            public = everything_public or first_child_of_type(member, "visibility_modifier") is not None
            if member.type == "field_declaration":
                attributes += 1
                public_attributes += public
            elif member.type in ("function_item", "function_signature_item"):
                methods += 1
                public_methods += public
        return MemberCounts(attributes, public_attributes, methods, public_methods)
