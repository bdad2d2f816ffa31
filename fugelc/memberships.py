"""Membership functions: the collection of fuzzy sets of one variable."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from .fuzzyset import FuzzySet


class FuzzyMemberships(ABC):
    """The ordered fuzzy sets attached to a single variable."""

    def __init__(self, sets: Iterable[FuzzySet] = ()) -> None:
        self._sets: list[FuzzySet] = list(sets)

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[FuzzySet]:
        return iter(self._sets)

    @property
    def sets_count(self) -> int:
        """Number of sets held."""
        return len(self._sets)

    def get_set(self, set_num: int) -> FuzzySet:
        """Return the set at index ``set_num``."""
        self._check_index(set_num)
        return self._sets[set_num]

    def _check_index(self, set_num: int) -> None:
        if not 0 <= set_num < len(self._sets):
            raise IndexError(f"set number {set_num} out of range")

    @abstractmethod
    def evaluate_set(self, value: float, set_num: int) -> float:
        """Return the membership degree of ``value`` in set ``set_num``."""

    @abstractmethod
    def add_set(self, fuzzy_set: FuzzySet) -> None:
        """Append a set."""

    @abstractmethod
    def remove_set(self, set_num: int) -> None:
        """Remove the set at index ``set_num``."""

    @abstractmethod
    def remove_last_set(self) -> None:
        """Remove the last set."""


class CocoMemberships(FuzzyMemberships):
    """Memberships whose first and last sets are trapezoidal shoulders and
    whose inner sets are triangles, each peaking at its own position and
    reaching zero at the neighbouring sets' positions."""

    def evaluate_set(self, value: float, set_num: int) -> float:
        self._check_index(set_num)
        last = len(self._sets) - 1
        position = self._sets[set_num].position

        if value == position:
            return 1.0

        if set_num == last or (set_num != 0 and value < position):
            if value > position:
                return 1.0
            if set_num == 0:
                # A lone set covers the whole universe.
                return 1.0
            before = self._sets[set_num - 1].position
            if value <= before:
                return 0.0
            return (value - before) / (position - before)

        if value < position:
            return 1.0
        after = self._sets[set_num + 1].position
        if value >= after:
            return 0.0
        return 1.0 - (value - position) / (after - position)

    def add_set(self, fuzzy_set: FuzzySet) -> None:
        self._sets.append(fuzzy_set)

    def remove_set(self, set_num: int) -> None:
        self._check_index(set_num)
        del self._sets[set_num]

    def remove_last_set(self) -> None:
        if not self._sets:
            raise IndexError("no set to remove")
        self._sets.pop()