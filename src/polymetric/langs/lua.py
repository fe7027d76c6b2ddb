"""Lua classification table (tree-sitter-lua)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import LanguageSpec

if TYPE_CHECKING:
    from tree_sitter import Node


class LuaSpec(LanguageSpec):
    name = "lua"
    extensions = (".lua",)

    unit_kinds = frozenset({"chunk", "program"})
    function_kinds = frozenset({"function_declaration"})
    closure_kinds = frozenset({"function_definition"})
    name_bindings = {"field": "name"}

    string_kinds = frozenset({"string"})
    call_kinds = frozenset({"function_call"})
    primitive_kinds = frozenset({"number", "true", "false", "nil"})

    decision_kinds = frozenset({"if", "elseif", "for", "while", "until", "and", "or"})

    nesting_kinds = frozenset(
        {"if_statement", "for_statement", "while_statement", "repeat_statement"}
    )
    flat_kinds = frozenset({"elseif_statement", "else_statement", "goto_statement"})
    else_if_parents = frozenset()
    boolean_operators = frozenset({"and", "or"})
    negation_operators = frozenset({"not"})
    reset_kinds = frozenset(
        {
            "variable_declaration",
            "assignment_statement",
            "return_statement",
            "arguments",
            "block",
        }
    )
    condition_owner_kinds = frozenset(
        {"if_statement", "elseif_statement", "while_statement", "repeat_statement"}
    )

    exit_kinds = frozenset({"return_statement", "break_statement"})

    statement_kinds = frozenset(
        {
            "variable_declaration",
            "assignment_statement",
            "return_statement",
            "if_statement",
            "for_statement",
            "while_statement",
            "repeat_statement",
            "do_statement",
            "break_statement",
            "goto_statement",
            "function_declaration",
        }
    )

    assignment_kinds = frozenset({"assignment_statement"})
    condition_kinds = frozenset({"elseif_statement", "else_statement"})
    comparison_operators = frozenset({"==", "~=", "<", ">", "<=", ">="})

    operator_kinds = frozenset(
        {
            "=",
            "+",
            "-",
            "*",
            "/",
            "//",
            "%",
            "^",
            "#",
            "..",
            "==",
            "~=",
            "<",
            ">",
            "<=",
            ">=",
            "and",
            "or",
            "not",
            "&",
            "|",
            "~",
            "<<",
            ">>",
            ".",
            ":",
            "::",
            ",",
            ";",
            "(",
            "[",
            "{",
            "local",
            "function",
            "return",
            "if",
            "then",
            "elseif",
            "else",
            "for",
            "in",
            "do",
            "while",
            "repeat",
            "until",
            "break",
            "goto",
        }
    )
    operand_kinds = frozenset(
        {"identifier", "number", "string", "true", "false", "nil", "vararg_expression"}
    )

    def binding_name_node(self, node: Node) -> Optional[Node]:
        # f = function() end: the closure sits in the right-hand expression_list
        parent = node.parent
        if parent is not None and parent.type == "expression_list":
            assignment = parent.parent
            if assignment is not None and assignment.type == "assignment_statement":
                targets = assignment.named_children[0] if assignment.named_child_count else None
                if targets is not None and targets.type == "variable_list" and targets.named_child_count:
                    return targets.named_children[0]
        return super().binding_name_node(node)

    def is_statement(self, node: Node, parent: Optional[Node]) -> bool:
        if node.type in self.statement_kinds:
            return True
        # a call is a statement only when it stands alone
        return (
            node.type == "function_call"
            and parent is not None
            and parent.type in ("chunk", "block", "program")
        )
