"""A named fuzzy set placed at a position on a variable's universe."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FuzzySet:
    """A fuzzy set with a name, a position and an accumulated evaluation.

    The evaluation is built up by singleton aggregation: every value handed
    to :meth:`add_eval` is added to the current evaluation.
    """

    name: str
    position: float
    number: int = 0
    evaluation: float = field(default=0.0)

    def add_eval(self, value: float) -> None:
        """Aggregate ``value`` into the set's evaluation."""
        self.evaluation += value

    def clear_eval(self) -> None:
        """Reset the evaluation to zero."""
        self.evaluation = 0.0