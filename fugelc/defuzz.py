"""Defuzzification methods turning aggregated set evaluations into a crisp value."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .memberships import FuzzyMemberships

DEFAULT_PRECISION = 100


class DefuzzMethod(ABC):
    """Base class of defuzzification algorithms.

    ``precision`` is the number of steps used to sample the universe of
    discourse by methods that need sampling.
    """

    def __init__(self, precision: int = DEFAULT_PRECISION) -> None:
        self._precision = DEFAULT_PRECISION
        self.precision = precision

    @property
    def precision(self) -> int:
        """Number of sampling steps; always at least 1."""
        return self._precision

    @precision.setter
    def precision(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"precision must be positive, got {value}")
        self._precision = int(value)

    @abstractmethod
    def defuzz(self, memberships: FuzzyMemberships) -> float:
        """Return the crisp value of an evaluated output variable."""

    def __call__(self, memberships: FuzzyMemberships) -> float:
        return self.defuzz(memberships)


class CoaDefuzz(DefuzzMethod):
    """Center-of-area defuzzification over the universe [0, 1).

    Each set's membership curve is clipped at the set's evaluation, the
    clipped curves are combined by maximum, and the centroid of the
    result is returned.
    """

    def defuzz(self, memberships: FuzzyMemberships) -> float:
        if len(memberships) == 0:
            raise ValueError("cannot defuzzify a variable without sets")

        steps = self.precision
        step = 1.0 / steps
        values = [0.0] * steps

        for set_num, fuzzy_set in enumerate(memberships):
            ceiling = fuzzy_set.evaluation
            for j in range(steps):
                degree = min(memberships.evaluate_set(j * step, set_num), ceiling)
                if degree > values[j]:
                    values[j] = degree

        weighted = sum(value * index for index, value in enumerate(values))
        total = sum(values)
        if total == 0.0:
            total = 1.0
        return weighted / (total * steps)


class SingletonDefuzz(DefuzzMethod):
    """Weighted mean of set positions, weighted by set evaluations."""

    def defuzz(self, memberships: FuzzyMemberships) -> float:
        eval_sum = 0.0
        eval_product = 0.0
        for fuzzy_set in memberships:
            eval_sum += fuzzy_set.evaluation
            eval_product += fuzzy_set.evaluation * fuzzy_set.position
        if eval_sum == 0.0:
            return 0.0
        return eval_product / eval_sum