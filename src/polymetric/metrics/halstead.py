"""Halstead software science metrics.

Operators are keyed by node kind (brackets folded to ``()``, ``[]``, ``{}``),
operands by their source text, so repeated occurrences of the same token
count once toward the distinct totals.
"""

from __future__ import annotations

import math
from collections import Counter

from ..langs.base import HalsteadType, node_text
from .common import Visit


class HalsteadStats:
    def __init__(self) -> None:
        self.operators: Counter[str] = Counter()
        self.operands: Counter[str] = Counter()

    def compute(self, visit: Visit) -> None:
        node, lang = visit.node, visit.lang
        op = lang.op_type(node, visit.parent)
        if op is HalsteadType.OPERATOR:
            self.operators[lang.operator_key(node)] += 1
        elif op is HalsteadType.OPERAND:
            self.operands[node_text(node, visit.code)] += 1

    def merge(self, child: HalsteadStats) -> None:
        self.operators.update(child.operators)
        self.operands.update(child.operands)

    @property
    def u_operators(self) -> int:
        """n1: distinct operators."""
        return len(self.operators)

    @property
    def operators_total(self) -> int:
        """N1: operator occurrences."""
        return sum(self.operators.values())

    @property
    def u_operands(self) -> int:
        """n2: distinct operands."""
        return len(self.operands)

    @property
    def operands_total(self) -> int:
        """N2: operand occurrences."""
        return sum(self.operands.values())

    @property
    def length(self) -> int:
        return self.operators_total + self.operands_total

    @property
    def vocabulary(self) -> int:
        return self.u_operators + self.u_operands

    @property
    def estimated_program_length(self) -> float:
        return _nlog2n(self.u_operators) + _nlog2n(self.u_operands)

    @property
    def purity_ratio(self) -> float:
        return self.estimated_program_length / self.length if self.length else 0.0

    @property
    def volume(self) -> float:
        vocabulary = self.vocabulary
        if vocabulary <= 1:
            return 0.0
        return self.length * math.log2(vocabulary)

    @property
    def difficulty(self) -> float:
        if self.u_operands == 0:
            return 0.0
        return (self.u_operators / 2) * (self.operands_total / self.u_operands)

    @property
    def level(self) -> float:
        difficulty = self.difficulty
        return 1 / difficulty if difficulty else 0.0

    @property
    def effort(self) -> float:
        return self.difficulty * self.volume

    @property
    def time(self) -> float:
        return self.effort / 18

    @property
    def bugs(self) -> float:
        return self.volume / 3000

    def to_dict(self) -> dict[str, float]:
        return {
            "n1": float(self.u_operators),
            "N1": float(self.operators_total),
            "n2": float(self.u_operands),
            "N2": float(self.operands_total),
            "length": float(self.length),
            "estimated_program_length": self.estimated_program_length,
            "purity_ratio": self.purity_ratio,
            "vocabulary": float(self.vocabulary),
            "volume": self.volume,
            "difficulty": self.difficulty,
            "level": self.level,
            "effort": self.effort,
            "time": self.time,
            "bugs": self.bugs,
        }


def _nlog2n(n: int) -> float:
    return n * math.log2(n) if n > 0 else 0.0
