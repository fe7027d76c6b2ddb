"""Python classification table (tree-sitter-python)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..spaces import SpaceKind
from .base import HalsteadType, LanguageSpec, MemberCounts, node_text

if TYPE_CHECKING:
    from tree_sitter import Node


def _is_public(name: str) -> bool:
    if name.startswith("__") and name.endswith("__"):
        return True
    return not name.startswith("_")


class PythonSpec(LanguageSpec):
    name = "python"
    extensions = (".py", ".pyi")

    unit_kinds = frozenset({"module"})
    function_kinds = frozenset({"function_definition"})
    closure_kinds = frozenset({"lambda"})
    container_kinds = {"class_definition": SpaceKind.CLASS}
    name_bindings = {"assignment": "left", "keyword_argument": "name", "pair": "key"}

    string_kinds = frozenset({"string", "concatenated_string"})
    call_kinds = frozenset({"call"})
    primitive_kinds = frozenset({"integer", "float", "true", "false", "none"})
    non_arg_kinds = frozenset({"keyword_separator", "positional_separator"})

    decision_kinds = frozenset(
        {"if", "elif", "for", "while", "except", "with", "assert", "and", "or"}
    )

    nesting_kinds = frozenset(
        {
            "if_statement",
            "for_statement",
            "while_statement",
            "except_clause",
            "conditional_expression",
            "match_statement",
        }
    )
    flat_kinds = frozenset({"elif_clause", "else_clause", "finally_clause"})
    else_if_parents = frozenset()
    boolean_expression_kinds = frozenset({"boolean_operator"})
    boolean_operators = frozenset({"and", "or"})
    negation_kinds = frozenset({"not_operator"})
    negation_operators = frozenset({"not"})
    reset_kinds = frozenset(
        {
            "expression_statement",
            "return_statement",
            "assert_statement",
            "tuple",
            "expression_list",
            "argument_list",
            "block",
        }
    )
    condition_owner_kinds = frozenset({"if_statement", "elif_clause", "while_statement"})
    lambda_boolean_bonus = True

    exit_kinds = frozenset(
        {"return_statement", "raise_statement", "break_statement", "continue_statement"}
    )

    statement_kinds = frozenset(
        {
            "expression_statement",
            "return_statement",
            "pass_statement",
            "break_statement",
            "continue_statement",
            "raise_statement",
            "import_statement",
            "import_from_statement",
            "future_import_statement",
            "assert_statement",
            "delete_statement",
            "global_statement",
            "nonlocal_statement",
            "type_alias_statement",
            "if_statement",
            "elif_clause",
            "for_statement",
            "while_statement",
            "try_statement",
            "except_clause",
            "with_statement",
            "match_statement",
            "function_definition",
            "class_definition",
        }
    )

    assignment_kinds = frozenset({"assignment", "augmented_assignment", "named_expression"})
    condition_kinds = frozenset(
        {"else_clause", "except_clause", "conditional_expression", "case_clause"}
    )
    comparison_operators = frozenset(
        {"<", "<=", "==", "!=", ">=", ">", "<>", "in", "not in", "is", "is not"}
    )
    comparison_parents = frozenset({"comparison_operator"})

    operator_kinds = frozenset(
        {
            "(",
            "[",
            "{",
            ".",
            ",",
            "=",
            ":=",
            "->",
            "@",
            "import",
            "from",
            "as",
            "assert",
            "return",
            "def",
            "lambda",
            "del",
            "raise",
            "pass",
            "break",
            "continue",
            "if",
            "elif",
            "else",
            "async",
            "await",
            "for",
            "in",
            "while",
            "try",
            "except",
            "finally",
            "with",
            "global",
            "nonlocal",
            "yield",
            "not",
            "and",
            "or",
            "is",
            "+",
            "-",
            "*",
            "/",
            "%",
            "//",
            "**",
            "|",
            "&",
            "^",
            "<<",
            ">>",
            "~",
            "<",
            "<=",
            "==",
            "!=",
            ">=",
            ">",
            "<>",
            "+=",
            "-=",
            "*=",
            "/=",
            "@=",
            "//=",
            "%=",
            "**=",
            ">>=",
            "<<=",
            "&=",
            "^=",
            "|=",
        }
    )
    operand_kinds = frozenset({"identifier", "integer", "float", "true", "false", "none", "string"})

    def is_docstring(self, node: Node, parent: Optional[Node]) -> bool:
        return (
            node.type == "expression_statement"
            and node.named_child_count == 1
            and node.named_children[0].type == "string"
        )

    def is_decision(self, node: Node, parent: Optional[Node]) -> bool:
        if node.type in self.decision_kinds:
            return True
        # for/while ... else: the else branch is its own path
        return (
            node.type == "else"
            and parent is not None
            and parent.type == "else_clause"
            and parent.parent is not None
            and parent.parent.type in ("for_statement", "while_statement")
        )

    def is_statement(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.statement_kinds

    def op_type(self, node: Node, parent: Optional[Node]) -> HalsteadType:
        if node.type == "string":
            if parent is not None and parent.type == "expression_statement" and parent.child_count == 1:
                return HalsteadType.UNKNOWN
            return HalsteadType.OPERAND
        return super().op_type(node, parent)

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        body = node.child_by_field_name("body")
        if body is None:
            return MemberCounts()

        attributes = public_attributes = methods = public_methods = 0
        for statement in body.named_children:
            if statement.type == "decorated_definition":
                statement = statement.child_by_field_name("definition") or statement
            if statement.type == "function_definition":
                name = statement.child_by_field_name("name")
                methods += 1
                if name is not None and _is_public(node_text(name, code)):
                    public_methods += 1
            elif statement.type == "expression_statement":
                for child in statement.named_children:
                    if child.type != "assignment":
                        continue
                    target = child.child_by_field_name("left")
                    if target is None or target.type != "identifier":
                        continue
                    attributes += 1
                    if _is_public(node_text(target, code)):
                        public_attributes += 1
        return MemberCounts(attributes, public_attributes, methods, public_methods)
