"""C and C++ classification tables (tree-sitter-c, tree-sitter-cpp).

C++ extends the C table; both grammars spell functions as a definition whose
name and parameters hang off a nested ``function_declarator``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import LanguageSpec, MemberCounts, find_descendant, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


_C_OPERATORS = frozenset(
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
        "?",
        ":",
        ".",
        "->",
        ",",
        ";",
        "...",
        "if",
        "else",
        "for",
        "while",
        "do",
        "switch",
        "case",
        "default",
        "return",
        "break",
        "continue",
        "goto",
        "sizeof",
        "struct",
        "union",
        "enum",
        "typedef",
        "static",
        "extern",
        "const",
        "volatile",
        "inline",
        "#include",
        "#define",
        "#if",
        "#ifdef",
        "#ifndef",
        "#else",
        "#endif",
    }
)

_C_OPERANDS = frozenset(
    {
        "identifier",
        "field_identifier",
        "number_literal",
        "string_literal",
        "char_literal",
        "system_lib_string",
        "true",
        "false",
        "null",
    }
)


class CSpec(LanguageSpec):
    name = "c"
    extensions = (".c", ".h")

    unit_kinds = frozenset({"translation_unit"})
    function_kinds = frozenset({"function_definition"})
    container_kinds = {"struct_specifier": SpaceKind.STRUCT}
    # `struct point p;` names a type, it does not declare one
    body_required_kinds = frozenset({"struct_specifier"})
    name_bindings = {"init_declarator": "declarator"}

    string_kinds = frozenset({"string_literal", "char_literal", "concatenated_string"})
    call_kinds = frozenset({"call_expression"})
    primitive_kinds = frozenset(
        {"number_literal", "char_literal", "true", "false", "null", "primitive_type"}
    )

    decision_kinds = frozenset(
        {"if", "for", "while", "case", "conditional_expression", "&&", "||"}
    )

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "while_statement",
            "do_statement",
            "switch_statement",
            "conditional_expression",
        }
    )
    flat_kinds = frozenset({"else_clause", "goto_statement"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "declaration",
            "return_statement",
            "argument_list",
            "compound_statement",
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

    exit_kinds = frozenset({"return_statement", "break_statement", "continue_statement"})

    statement_kinds = frozenset(
        {
            "expression_statement",
            "declaration",
            "return_statement",
            "if_statement",
            "for_statement",
            "while_statement",
            "do_statement",
            "switch_statement",
            "break_statement",
            "continue_statement",
            "goto_statement",
        }
    )

    assignment_kinds = frozenset({"assignment_expression", "update_expression"})
    initializer_kinds = frozenset({"init_declarator"})
    condition_kinds = frozenset({"else_clause", "case_statement", "conditional_expression"})

    operator_kinds = _C_OPERATORS
    operand_kinds = _C_OPERANDS

    def _function_declarator(self, node: Node) -> Optional[Node]:
        declarator = node.child_by_field_name("declarator")
        if declarator is None:
            return None
        return find_descendant(declarator, "function_declarator")

    def fallback_name_node(self, node: Node) -> Optional[Node]:
        if node.type not in self.function_kinds:
            return None
        declarator = self._function_declarator(node)
        if declarator is None:
            return None
        return declarator.child_by_field_name("declarator")

    def function_parameters(self, node: Node) -> Optional[Node]:
        declarator = self._function_declarator(node)
        if declarator is None:
            return None
        return declarator.child_by_field_name("parameters")

    def count_parameters(self, node: Node) -> int:
        params = self.function_parameters(node)
        if params is None:
            return 0
        declared = [child for child in params.children if not self.is_non_arg(child)]
        # f(void) declares no parameters
        if len(declared) == 1 and declared[0].text == b"void":
            return 0
        return len(declared)

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()
        attributes = sum(1 for member in body.named_children if member.type == "field_declaration")
        return MemberCounts(attributes, attributes, 0, 0)


class CppSpec(CSpec):
    name = "cpp"
    extensions = (".cpp", ".cc", ".cxx", ".c++", ".hpp", ".hh", ".hxx", ".h++")

    closure_kinds = frozenset({"lambda_expression"})
    container_kinds = {
        "struct_specifier": SpaceKind.STRUCT,
        "class_specifier": SpaceKind.CLASS,
        "namespace_definition": SpaceKind.NAMESPACE,
    }
    body_required_kinds = frozenset({"struct_specifier", "class_specifier"})

    string_kinds = CSpec.string_kinds | {"raw_string_literal"}
    call_kinds = frozenset({"call_expression", "new_expression"})
    primitive_kinds = CSpec.primitive_kinds | {"nullptr"}

    decision_kinds = CSpec.decision_kinds | {"catch", "and", "or"}

    nesting_kinds = CSpec.nesting_kinds | {"for_range_loop", "catch_clause"}
    boolean_operators = frozenset({"&&", "||", "and", "or"})
    negation_operators = frozenset({"!", "not"})

    exit_kinds = CSpec.exit_kinds | {"throw_statement", "throw_expression"}
    statement_kinds = CSpec.statement_kinds | {
        "for_range_loop",
        "try_statement",
        "throw_statement",
        "using_declaration",
        "alias_declaration",
    }
    condition_kinds = CSpec.condition_kinds | {"catch_clause"}

    operator_kinds = _C_OPERATORS | {
        "::",
        "new",
        "delete",
        "throw",
        "try",
        "catch",
        "class",
        "namespace",
        "template",
        "typename",
        "using",
        "public",
        "private",
        "protected",
        "virtual",
        "override",
        "and",
        "or",
        "not",
        "<=>",
    }
    operand_kinds = _C_OPERANDS | {"this", "nullptr", "namespace_identifier", "raw_string_literal"}

    def _function_declarator(self, node: Node) -> Optional[Node]:
        declarator = node.child_by_field_name("declarator")
        if declarator is None:
            return None
        if node.type in self.closure_kinds:
            return find_descendant(declarator, "abstract_function_declarator") or declarator
        return find_descendant(declarator, "function_declarator")

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()

        # members before the first access label follow the declaring keyword
        public = node.type == "struct_specifier"
        attributes = public_attributes = methods = public_methods = 0
        for member in body.named_children:
            if member.type == "access_specifier":
                public = node_text(member, code).strip().startswith("public")
            elif member.type == "function_definition" or (
                member.type in ("field_declaration", "declaration")
                and find_descendant(member, "function_declarator") is not None
            ):
                methods += 1
                public_methods += public
            elif member.type == "field_declaration":
                attributes += 1
                public_attributes += public
        return MemberCounts(attributes, public_attributes, methods, public_methods)
