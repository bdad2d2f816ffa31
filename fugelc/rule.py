"""A fuzzy rule: antecedent (variable, set) pairs implying consequent pairs.

A rule is evaluated by combining the membership degrees of its antecedents
with the AND operator.  The result, its fire level, is aggregated into the
corresponding set of every consequent variable for later defuzzification.

Variables are used through a small interface: a ``name``, a ``sets_count``,
``get_set(n)``, ``evaluate_set(n)`` (degree of the variable's current input
value in set ``n``), ``set_output_set_value(n, value)`` and a writable
``used_by_system`` flag.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import Protocol

from .fuzzyset import FuzzySet
from .operators import DONT_CARE_EVAL, FuzzyOperator, FuzzyOperatorAnd
from .rule_genome import INVALID_VAR, RuleGenome


class _Variable(Protocol):
    name: str
    used_by_system: bool

    @property
    def sets_count(self) -> int: ...

    def get_set(self, set_num: int) -> FuzzySet: ...

    def evaluate_set(self, set_num: int) -> float: ...

    def set_output_set_value(self, set_num: int, value: float) -> None: ...


def _describe(pairs: Sequence[tuple[_Variable, int]]) -> str:
    return " AND ".join(f"{var.name} is {var.get_set(num).name}" for var, num in pairs)


class FuzzyRule:
    """A rule made of input and output (variable, set number) pairs."""

    def __init__(
        self,
        in_vars: Sequence[_Variable],
        in_sets: Sequence[int],
        out_vars: Sequence[_Variable],
        out_sets: Sequence[int],
        used_out_vars: Sequence[int] | None = None,
        operator: FuzzyOperator | None = None,
    ) -> None:
        if len(in_vars) != len(in_sets):
            raise ValueError("input variables and input sets differ in length")
        if len(out_vars) != len(out_sets):
            raise ValueError("output variables and output sets differ in length")

        self._antecedents: list[tuple[_Variable, int]] = list(zip(in_vars, in_sets))
        self._consequents: list[tuple[_Variable, int]] = list(zip(out_vars, out_sets))
        self.used_out_vars: list[int] = (
            list(range(len(self._consequents)))
            if used_out_vars is None
            else list(used_out_vars)
        )
        self._operator = operator if operator is not None else FuzzyOperatorAnd()
        self._fire_levels: list[float] = [0.0] * len(self._consequents)
        self.description = (
            f" IF {_describe(self._antecedents)} THEN {_describe(self._consequents)}"
        )

    @classmethod
    def from_genome(
        cls,
        in_var_array: Sequence[_Variable],
        out_var_array: Sequence[_Variable],
        genome: RuleGenome,
        fixed_vars: bool,
        nb_in_vars: int,
        nb_out_vars: int,
    ) -> FuzzyRule:
        """Build a rule from a decoded genome, dropping invalid pairs.

        Input variables used by the rule are flagged ``used_by_system``.
        With a single output variable the consequent always uses it, an
        out-of-range set number being wrapped into range.
        """
        in_count = genome.input_var_count

        in_vars: list[_Variable] = []
        in_sets: list[int] = []
        for i in range(in_count):
            var_num = genome.var_number(i)
            set_num = genome.set_number(i)
            if not fixed_vars and (var_num == INVALID_VAR or var_num >= nb_in_vars):
                continue
            variable = in_var_array[var_num]
            if set_num >= variable.sets_count:
                continue
            variable.used_by_system = True
            in_vars.append(variable)
            in_sets.append(set_num)

        out_vars: list[_Variable] = []
        out_sets: list[int] = []
        used: list[int] = []
        if nb_out_vars == 1:
            variable = out_var_array[0]
            set_num = genome.set_number(in_count)
            if set_num >= variable.sets_count:
                set_num %= variable.sets_count
            out_vars.append(variable)
            out_sets.append(set_num)
            used.append(0)
        else:
            for i in range(genome.output_var_count):
                var_num = genome.var_number(i + in_count)
                set_num = genome.set_number(i + in_count)
                if var_num == INVALID_VAR:
                    continue
                variable = out_var_array[var_num]
                if set_num >= variable.sets_count:
                    continue
                out_vars.append(variable)
                out_sets.append(set_num)
                used.append(var_num)

        return cls(in_vars, in_sets, out_vars, out_sets, used_out_vars=used)

    @property
    def nb_in_pairs(self) -> int:
        """Number of antecedent pairs."""
        return len(self._antecedents)

    @property
    def nb_out_pairs(self) -> int:
        """Number of consequent pairs."""
        return len(self._consequents)

    @property
    def antecedents(self) -> tuple[tuple[_Variable, int], ...]:
        """The (variable, set number) pairs of the premise."""
        return tuple(self._antecedents)

    @property
    def consequents(self) -> tuple[tuple[_Variable, int], ...]:
        """The (variable, set number) pairs of the conclusion."""
        return tuple(self._consequents)

    def evaluate(self) -> None:
        """Evaluate the rule and aggregate its fire level into its output sets."""
        degrees = [var.evaluate_set(num) for var, num in self._antecedents]
        value = reduce(self._operator, degrees) if degrees else DONT_CARE_EVAL

        for index, (variable, set_num) in enumerate(self._consequents):
            self._fire_levels[index] = 0.0
            if set_num >= variable.sets_count:
                continue
            if 0.0 <= value <= 1.0:
                variable.set_output_set_value(set_num, value)
                self._fire_levels[index] = value
            else:
                variable.set_output_set_value(set_num, 0.0)

    def fire_level(self, var_num: int) -> float:
        """Fire level of the consequent at index ``var_num`` after evaluation."""
        if not 0 <= var_num < len(self._fire_levels):
            raise IndexError(f"output position {var_num} out of range")
        return self._fire_levels[var_num]

    def in_var_at(self, pos: int) -> _Variable:
        """Input variable of antecedent ``pos``."""
        return self._antecedents[pos][0]

    def out_var_at(self, pos: int) -> _Variable:
        """Output variable of consequent ``pos``."""
        return self._consequents[pos][0]

    def in_set_at(self, pos: int) -> FuzzySet:
        """Fuzzy set of antecedent ``pos``."""
        variable, set_num = self._antecedents[pos]
        return variable.get_set(set_num)

    def out_set_at(self, pos: int) -> FuzzySet:
        """Fuzzy set of consequent ``pos``."""
        variable, set_num = self._consequents[pos]
        return variable.get_set(set_num)

    def __str__(self) -> str:
        return self.description