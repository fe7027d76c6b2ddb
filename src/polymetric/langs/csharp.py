"""C# classification table (tree-sitter-c-sharp)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import LanguageSpec, MemberCounts, first_child_of_type, is_alternative_of, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


def _is_public(member: Node, code: bytes) -> bool:
    return any(
        child.type == "modifier" and node_text(child, code) == "public" for child in member.children
    )


class CSharpSpec(LanguageSpec):
    name = "csharp"
    extensions = (".cs", ".csx")

    unit_kinds = frozenset({"compilation_unit"})
    function_kinds = frozenset(
        {
            "method_declaration",
            "constructor_declaration",
            "destructor_declaration",
            "operator_declaration",
            "local_function_statement",
        }
    )
    closure_kinds = frozenset({"lambda_expression", "anonymous_method_expression"})
    container_kinds = {
        "class_declaration": SpaceKind.CLASS,
        "record_declaration": SpaceKind.CLASS,
        "struct_declaration": SpaceKind.STRUCT,
        "interface_declaration": SpaceKind.INTERFACE,
        "namespace_declaration": SpaceKind.NAMESPACE,
        "file_scoped_namespace_declaration": SpaceKind.NAMESPACE,
    }
    name_bindings = {"variable_declarator": "name", "assignment_expression": "left"}

    string_kinds = frozenset(
        {
            "string_literal",
            "verbatim_string_literal",
            "raw_string_literal",
            "interpolated_string_expression",
            "character_literal",
        }
    )
    call_kinds = frozenset({"invocation_expression", "object_creation_expression"})
    primitive_kinds = frozenset(
        {"integer_literal", "real_literal", "boolean_literal", "null_literal", "character_literal"}
    )

    decision_kinds = frozenset(
        {
            "if",
            "for",
            "foreach",
            "while",
            "case",
            "catch",
            "conditional_expression",
            "switch_expression_arm",
            "&&",
            "||",
        }
    )

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "foreach_statement",
            "while_statement",
            "do_statement",
            "switch_statement",
            "switch_expression",
            "catch_clause",
            "conditional_expression",
        }
    )
    flat_kinds = frozenset({"else", "goto_statement"})
    negation_kinds = frozenset({"prefix_unary_expression"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "local_declaration_statement",
            "return_statement",
            "argument_list",
            "block",
        }
    )
    condition_owner_kinds = frozenset(
        {
            "if_statement",
            "while_statement",
            "do_statement",
            "for_statement",
            "conditional_expression",
        }
    )

    exit_kinds = frozenset(
        {
            "return_statement",
            "throw_statement",
            "throw_expression",
            "break_statement",
            "continue_statement",
        }
    )

    statement_kinds = frozenset(
        {
            "expression_statement",
            "local_declaration_statement",
            "field_declaration",
            "return_statement",
            "if_statement",
            "for_statement",
            "foreach_statement",
            "while_statement",
            "do_statement",
            "switch_statement",
            "try_statement",
            "throw_statement",
            "break_statement",
            "continue_statement",
            "goto_statement",
            "yield_statement",
            "using_statement",
            "lock_statement",
            "using_directive",
        }
    )

    assignment_kinds = frozenset({"assignment_expression"})
    condition_kinds = frozenset(
        {"else", "switch_section", "catch_clause", "conditional_expression", "switch_expression_arm"}
    )

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
            "&&",
            "||",
            "??",
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
            "??=",
            "=>",
            "?",
            ":",
            "::",
            ".",
            "?.",
            ",",
            ";",
            "if",
            "else",
            "for",
            "foreach",
            "in",
            "while",
            "do",
            "switch",
            "case",
            "default",
            "try",
            "catch",
            "finally",
            "throw",
            "return",
            "break",
            "continue",
            "goto",
            "yield",
            "new",
            "is",
            "as",
            "typeof",
            "sizeof",
            "nameof",
            "using",
            "namespace",
            "class",
            "struct",
            "interface",
            "await",
            "lock",
        }
    )
    operand_kinds = frozenset(
        {
            "identifier",
            "integer_literal",
            "real_literal",
            "boolean_literal",
            "null_literal",
            "character_literal",
            "string_literal",
            "verbatim_string_literal",
            "raw_string_literal",
            "this",
            "base",
        }
    )

    def is_else_if(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.if_kinds and is_alternative_of(node, parent)

    def is_assignment(self, node: Node) -> bool:
        if node.type in self.assignment_kinds:
            return True
        if node.type == "variable_declarator":
            return any(child.type in ("=", "equals_value_clause") for child in node.children)
        if node.type in ("prefix_unary_expression", "postfix_unary_expression"):
            return any(child.type in ("++", "--") for child in node.children)
        return False

    def count_parameters(self, node: Node) -> int:
        params = self.function_parameters(node)
        if params is None:
            return 0
        # x => x
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
            public = interface or _is_public(member, code)
            if member.type == "field_declaration":
                declaration = first_child_of_type(member, "variable_declaration")
                declared = 1
                if declaration is not None:
                    declared = sum(
                        1 for child in declaration.named_children if child.type == "variable_declarator"
                    ) or 1
                attributes += declared
                if public:
                    public_attributes += declared
            elif member.type == "property_declaration":
                attributes += 1
                public_attributes += public
            elif member.type in ("method_declaration", "constructor_declaration"):
                methods += 1
                public_methods += public
        return MemberCounts(attributes, public_attributes, methods, public_methods)

