"""Go classification table (tree-sitter-go).

Go attaches methods to types outside the type declaration, so struct spaces
only ever hold fields; interfaces hold method signatures. Exported (public)
names start with an upper-case letter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import LanguageSpec, MemberCounts, first_child_of_type, is_alternative_of, node_text

if TYPE_CHECKING:
    from tree_sitter import Node

_TYPE_SPACES = {"struct_type": SpaceKind.STRUCT, "interface_type": SpaceKind.INTERFACE}


def _exported(name: str) -> bool:
    return name[:1].isupper()


class GoSpec(LanguageSpec):
    name = "go"
    extensions = (".go",)

    unit_kinds = frozenset({"source_file"})
    function_kinds = frozenset({"function_declaration", "method_declaration"})
    closure_kinds = frozenset({"func_literal"})

    string_kinds = frozenset({"interpreted_string_literal", "raw_string_literal", "rune_literal"})
    call_kinds = frozenset({"call_expression"})
    primitive_kinds = frozenset(
        {"int_literal", "float_literal", "imaginary_literal", "rune_literal", "true", "false", "nil"}
    )

    decision_kinds = frozenset({"if", "for", "case", "&&", "||"})

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "expression_switch_statement",
            "type_switch_statement",
            "select_statement",
        }
    )
    flat_kinds = frozenset({"else", "goto_statement"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "short_var_declaration",
            "assignment_statement",
            "return_statement",
            "argument_list",
            "block",
        }
    )
    condition_owner_kinds = frozenset({"if_statement", "for_clause"})
    jump_kinds = frozenset({"break_statement", "continue_statement"})

    exit_kinds = frozenset({"return_statement", "break_statement", "continue_statement"})

    statement_kinds = frozenset(
        {
            "expression_statement",
            "short_var_declaration",
            "assignment_statement",
            "inc_statement",
            "dec_statement",
            "send_statement",
            "go_statement",
            "defer_statement",
            "return_statement",
            "if_statement",
            "for_statement",
            "expression_switch_statement",
            "type_switch_statement",
            "select_statement",
            "break_statement",
            "continue_statement",
            "goto_statement",
            "fallthrough_statement",
            "var_declaration",
            "const_declaration",
            "import_declaration",
            "package_clause",
        }
    )

    assignment_kinds = frozenset(
        {"assignment_statement", "short_var_declaration", "inc_statement", "dec_statement"}
    )
    initializer_kinds = frozenset({"var_spec"})
    condition_kinds = frozenset(
        {"else", "expression_case", "type_case", "default_case", "communication_case"}
    )

    operator_kinds = frozenset(
        {
            "(",
            "[",
            "{",
            "=",
            ":=",
            "+",
            "-",
            "*",
            "/",
            "%",
            "++",
            "--",
            "!",
            "^",
            "&",
            "|",
            "&^",
            "<<",
            ">>",
            "&&",
            "||",
            "<-",
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
            "&^=",
            ".",
            ",",
            ";",
            ":",
            "...",
            "func",
            "return",
            "if",
            "else",
            "for",
            "range",
            "switch",
            "case",
            "default",
            "select",
            "break",
            "continue",
            "goto",
            "fallthrough",
            "go",
            "defer",
            "var",
            "const",
            "type",
            "struct",
            "interface",
            "map",
            "chan",
            "package",
            "import",
        }
    )
    operand_kinds = frozenset(
        {
            "identifier",
            "field_identifier",
            "package_identifier",
            "int_literal",
            "float_literal",
            "imaginary_literal",
            "rune_literal",
            "interpreted_string_literal",
            "raw_string_literal",
            "true",
            "false",
            "nil",
            "iota",
        }
    )

    def space_kind(self, node: Node) -> SpaceKind:
        if node.type == "type_spec":
            declared = node.child_by_field_name("type")
            if declared is not None:
                return _TYPE_SPACES.get(declared.type, SpaceKind.UNKNOWN)
            return SpaceKind.UNKNOWN
        return super().space_kind(node)

    def binding_name_node(self, node: Node) -> Optional[Node]:
        # f := func() {}: the literal sits in the right-hand expression_list and
        # pairs by position with the names on the left
        values = node.parent
        if values is None or values.type != "expression_list":
            return None
        binding = values.parent
        if binding is None:
            return None
        if binding.type in ("short_var_declaration", "assignment_statement"):
            left = binding.child_by_field_name("left")
            if left is None or left.start_byte == values.start_byte:
                return None
            names = left.named_children
        elif binding.type == "var_spec":
            names = binding.children_by_field_name("name")
        else:
            return None
        for index, value in enumerate(values.named_children):
            if value.start_byte == node.start_byte:
                return names[index] if index < len(names) else None
        return None

    def is_else_if(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.if_kinds and is_alternative_of(node, parent)

    def is_labelled_jump(self, node: Node) -> bool:
        return node.type in self.jump_kinds and first_child_of_type(node, "label_name") is not None

    def count_parameters(self, node: Node) -> int:
        params = self.function_parameters(node)
        if params is None:
            return 0
        count = 0
        for child in params.named_children:
            if child.type == "parameter_declaration":
                # a, b int declares two
                count += len(child.children_by_field_name("name")) or 1
            elif child.type == "variadic_parameter_declaration":
                count += 1
        return count

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        declared = node.child_by_field_name("type")
        if declared is None:
            return MemberCounts()

        attributes = public_attributes = methods = public_methods = 0
        if declared.type == "struct_type":
            fields = first_child_of_type(declared, "field_declaration_list")
            members = fields.named_children if fields is not None else []
            for member in members:
                if member.type != "field_declaration":
                    continue
                names = member.children_by_field_name("name")
                if not names:
                    # embedded field: named after its type
                    embedded = member.child_by_field_name("type")
                    names = [embedded] if embedded is not None else []
                for name in names:
                    attributes += 1
                    public_attributes += _exported(node_text(name, code).lstrip("*"))
        else:
            for member in declared.named_children:
                if member.type not in ("method_elem", "method_spec"):
                    continue
                name = member.child_by_field_name("name")
                methods += 1
                if name is not None and _exported(node_text(name, code)):
                    public_methods += 1
        return MemberCounts(attributes, public_attributes, methods, public_methods)
