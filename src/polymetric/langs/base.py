"""Base classification table shared by every supported language.

A ``LanguageSpec`` maps one grammar's node vocabulary onto the small set of
semantic roles the metric accumulators understand (function boundary,
comment, call, boolean connective, operator/operand, ...). Most of a spec is
declarative: frozensets of node kinds. The few rules that need to look at
neighbouring nodes are methods that subclasses override.

Every method is total: unknown kinds fall through to ``False`` /
``HalsteadType.UNKNOWN`` / ``SpaceKind.UNKNOWN``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Mapping, Optional

from ..spaces import SpaceKind

if TYPE_CHECKING:
    from tree_sitter import Node

ANONYMOUS = "<anonymous>"

_BRACKET_KEYS = {"(": "()", "[": "[]", "{": "{}"}


class HalsteadType(Enum):
    """Halstead role of a syntax node."""

    OPERATOR = "operator"
    OPERAND = "operand"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MemberCounts:
    """Direct members of one class-like body, split by visibility."""

    attributes: int = 0
    public_attributes: int = 0
    methods: int = 0
    public_methods: int = 0


def node_text(node: Node, code: bytes) -> str:
    """Source text of a node; invalid UTF-8 is replaced, never raised."""
    return code[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def first_child_of_type(node: Node, *kinds: str) -> Optional[Node]:
    for child in node.children:
        if child.type in kinds:
            return child
    return None


def find_descendant(node: Node, kind: str) -> Optional[Node]:
    """Breadth-first search for the first descendant of the given kind."""
    queue = [node]
    while queue:
        current = queue.pop(0)
        if current.type == kind:
            return current
        queue.extend(current.children)
    return None


def is_alternative_of(node: Node, parent: Optional[Node]) -> bool:
    """True when ``node`` fills the ``alternative`` field of ``parent``."""
    if parent is None:
        return False
    alternative = parent.child_by_field_name("alternative")
    return alternative is not None and alternative == node


class LanguageSpec:
    """Classification table for one language.

    Subclasses fill in the kind sets and override hooks where a grammar
    needs more than a kind lookup.
    """

    name: ClassVar[str] = ""
    extensions: ClassVar[tuple[str, ...]] = ()

    # Spaces
    unit_kinds: ClassVar[frozenset[str]] = frozenset()
    function_kinds: ClassVar[frozenset[str]] = frozenset()
    closure_kinds: ClassVar[frozenset[str]] = frozenset()
    container_kinds: ClassVar[Mapping[str, SpaceKind]] = {}
    # container kinds that only open a space when they have a body
    body_required_kinds: ClassVar[frozenset[str]] = frozenset()
    # parent kind -> field holding the name a closure is bound to
    name_bindings: ClassVar[Mapping[str, str]] = {}

    # Roles
    comment_kinds: ClassVar[frozenset[str]] = frozenset({"comment"})
    string_kinds: ClassVar[frozenset[str]] = frozenset()
    call_kinds: ClassVar[frozenset[str]] = frozenset()
    primitive_kinds: ClassVar[frozenset[str]] = frozenset()
    non_arg_kinds: ClassVar[frozenset[str]] = frozenset()

    # Cyclomatic
    decision_kinds: ClassVar[frozenset[str]] = frozenset()

    # Cognitive
    nesting_kinds: ClassVar[frozenset[str]] = frozenset()
    flat_kinds: ClassVar[frozenset[str]] = frozenset()
    else_if_parents: ClassVar[frozenset[str]] = frozenset({"else_clause"})
    if_kinds: ClassVar[frozenset[str]] = frozenset({"if_statement"})
    boolean_expression_kinds: ClassVar[frozenset[str]] = frozenset({"binary_expression"})
    boolean_operators: ClassVar[frozenset[str]] = frozenset({"&&", "||"})
    negation_kinds: ClassVar[frozenset[str]] = frozenset({"unary_expression"})
    negation_operators: ClassVar[frozenset[str]] = frozenset({"!"})
    reset_kinds: ClassVar[frozenset[str]] = frozenset()
    condition_owner_kinds: ClassVar[frozenset[str]] = frozenset()
    jump_kinds: ClassVar[frozenset[str]] = frozenset()
    lambda_boolean_bonus: ClassVar[bool] = False

    # Exit
    exit_kinds: ClassVar[frozenset[str]] = frozenset()

    # LOC
    statement_kinds: ClassVar[frozenset[str]] = frozenset()

    # ABC
    assignment_kinds: ClassVar[frozenset[str]] = frozenset()
    # declarators that only assign when they carry an initializer
    initializer_kinds: ClassVar[frozenset[str]] = frozenset()
    condition_kinds: ClassVar[frozenset[str]] = frozenset()
    comparison_operators: ClassVar[frozenset[str]] = frozenset(
        {"==", "!=", "<", ">", "<=", ">="}
    )
    comparison_parents: ClassVar[frozenset[str]] = frozenset({"binary_expression"})

    # Halstead
    operator_kinds: ClassVar[frozenset[str]] = frozenset()
    operand_kinds: ClassVar[frozenset[str]] = frozenset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    # -- roles -------------------------------------------------------------

    def is_comment(self, node: Node) -> bool:
        return node.type in self.comment_kinds

    def is_docstring(self, node: Node, parent: Optional[Node]) -> bool:
        """String statements that document code; treated as comments."""
        return False

    def is_string(self, node: Node) -> bool:
        return node.type in self.string_kinds

    def is_call(self, node: Node) -> bool:
        return node.type in self.call_kinds

    def is_primitive(self, node: Node) -> bool:
        return node.type in self.primitive_kinds

    def is_func(self, node: Node) -> bool:
        return node.type in self.function_kinds

    def is_closure(self, node: Node) -> bool:
        return node.type in self.closure_kinds

    def is_func_space(self, node: Node) -> bool:
        return self.space_kind(node) is not SpaceKind.UNKNOWN

    def is_non_arg(self, node: Node) -> bool:
        return not node.is_named or node.type in self.non_arg_kinds or self.is_comment(node)

    # -- spaces ------------------------------------------------------------

    def space_kind(self, node: Node) -> SpaceKind:
        """Space opened by ``node``; precedence is function > container > unit."""
        # keyword tokens such as `class` share their text with node kinds
        if not node.is_named:
            return SpaceKind.UNKNOWN
        kind = node.type
        if kind in self.function_kinds or kind in self.closure_kinds:
            return SpaceKind.FUNCTION
        container = self.container_kinds.get(kind)
        if container is not None:
            if kind in self.body_required_kinds and node.child_by_field_name("body") is None:
                return SpaceKind.UNKNOWN
            return container
        if kind in self.unit_kinds:
            return SpaceKind.UNIT
        return SpaceKind.UNKNOWN

    def space_name(self, node: Node, code: bytes) -> str:
        name = node.child_by_field_name("name")
        if name is None:
            name = self.fallback_name_node(node)
        if name is None:
            name = self.binding_name_node(node)
        if name is None:
            return ANONYMOUS
        return node_text(name, code) or ANONYMOUS

    def fallback_name_node(self, node: Node) -> Optional[Node]:
        """Language-specific name location when there is no ``name`` field."""
        return None

    def binding_name_node(self, node: Node) -> Optional[Node]:
        """Name a closure is bound to: ``x = lambda: 0`` names it ``x``."""
        parent = node.parent
        if parent is None:
            return None
        field_name = self.name_bindings.get(parent.type)
        if field_name is None:
            return None
        return parent.child_by_field_name(field_name)

    # -- cognitive ---------------------------------------------------------

    def is_else_if(self, node: Node, parent: Optional[Node]) -> bool:
        return (
            node.type in self.if_kinds
            and parent is not None
            and parent.type in self.else_if_parents
        )

    def is_nesting(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.nesting_kinds and not self.is_else_if(node, parent)

    def is_flat_increment(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.flat_kinds or self.is_labelled_jump(node)

    def is_labelled_jump(self, node: Node) -> bool:
        """break/continue to a label; costs a flat increment."""
        return False

    def is_boolean_expression(self, node: Node) -> bool:
        return node.type in self.boolean_expression_kinds

    def is_negation(self, node: Node) -> bool:
        if node.type not in self.negation_kinds or node.child_count == 0:
            return False
        return node.children[0].type in self.negation_operators

    def resets_boolean_sequence(self, node: Node, parent: Optional[Node]) -> bool:
        """Statement boundaries and the start of a control condition."""
        if node.type in self.reset_kinds:
            return True
        if parent is None or parent.type not in self.condition_owner_kinds:
            return False
        condition = parent.child_by_field_name("condition")
        return condition is not None and condition == node

    # -- cyclomatic / exit / loc / abc --------------------------------------

    def is_decision(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.decision_kinds

    def is_exit(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.exit_kinds

    def is_statement(self, node: Node, parent: Optional[Node]) -> bool:
        return node.type in self.statement_kinds

    def is_assignment(self, node: Node) -> bool:
        if node.type in self.assignment_kinds:
            return True
        if node.type in self.initializer_kinds:
            return any(child.type == "=" for child in node.children)
        return False

    def is_condition(self, node: Node, parent: Optional[Node]) -> bool:
        if node.type in self.condition_kinds:
            return True
        return (
            node.type in self.comparison_operators
            and not node.is_named
            and parent is not None
            and parent.type in self.comparison_parents
        )

    # -- halstead ----------------------------------------------------------

    def op_type(self, node: Node, parent: Optional[Node]) -> HalsteadType:
        kind = node.type
        if kind in self.operator_kinds:
            return HalsteadType.OPERATOR
        if kind in self.operand_kinds:
            return HalsteadType.OPERAND
        return HalsteadType.UNKNOWN

    def operator_key(self, node: Node) -> str:
        return _BRACKET_KEYS.get(node.type, node.type)

    # -- arguments ---------------------------------------------------------

    def function_parameters(self, node: Node) -> Optional[Node]:
        return node.child_by_field_name("parameters")

    def count_parameters(self, node: Node) -> int:
        """Number of formal parameters declared by a function boundary."""
        params = self.function_parameters(node)
        if params is None:
            return 0
        return sum(1 for child in params.children if not self.is_non_arg(child))

    # -- visibility --------------------------------------------------------

    def class_members(self, node: Node, code: bytes) -> MemberCounts:
        """Attributes and methods declared directly in a class-like body."""
        return MemberCounts()
