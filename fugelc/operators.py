"""Rule operators combining antecedent evaluations."""

from __future__ import annotations

from abc import ABC, abstractmethod

DONT_CARE_EVAL = -1.0
"""Evaluation marking an antecedent that takes no part in the rule."""


class FuzzyOperator(ABC):
    """A binary operator applied to two membership evaluations."""

    @abstractmethod
    def operate(self, x: float, y: float) -> float:
        """Combine the evaluations ``x`` and ``y``."""

    def __call__(self, x: float, y: float) -> float:
        return self.operate(x, y)


class FuzzyOperatorAnd(FuzzyOperator):
    """Minimum operator; don't-care evaluations are ignored."""

    def operate(self, x: float, y: float) -> float:
        if x == DONT_CARE_EVAL:
            return y
        if y == DONT_CARE_EVAL:
            return x
        return min(x, y)