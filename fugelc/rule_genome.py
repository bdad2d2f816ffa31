"""Genome encoding one fuzzy rule as (variable, set) number pairs.

Layout: ``in_limit`` input pairs followed by ``output_count`` output pairs.
In the bit string every pair is a variable number followed by a set number,
each a little-endian unsigned integer of a fixed width.  A variable number
of ``-1`` marks an antecedent or consequent that is out of range or
duplicated and therefore unused.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INVALID_VAR = -1
"""Variable number given to an out-of-range or already used variable."""


def _decode(bits: Sequence[int], start: int, width: int) -> int:
    return sum(int(bool(bit)) << shift for shift, bit in enumerate(bits[start:start + width]))


class RuleGenome:
    """Decoded variable and set numbers of a single rule."""

    def __init__(
        self,
        in_limit: int,
        in_count: int,
        out_count: int,
        in_code_size: int,
        out_code_size: int,
        in_set_code_size: int,
        out_set_code_size: int,
    ) -> None:
        sizes = (
            in_count,
            out_count,
            in_code_size,
            out_code_size,
            in_set_code_size,
            out_set_code_size,
        )
        if any(size <= 0 for size in sizes):
            raise ValueError("all genome dimensions must be positive")
        if not 0 <= in_limit <= in_count:
            raise ValueError(
                f"input limit must lie between 0 and {in_count}, got {in_limit}"
            )

        self.in_limit = in_limit
        self.input_count = in_count
        self.output_count = out_count
        self.in_var_code_size = in_code_size
        self.out_var_code_size = out_code_size
        self.in_set_code_size = in_set_code_size
        self.out_set_code_size = out_set_code_size
        self._pairs: list[tuple[int, int]] | None = None

    @property
    def input_var_count(self) -> int:
        """Number of input pairs a rule reads from the genome."""
        return self.in_limit

    @property
    def output_var_count(self) -> int:
        """Number of output pairs encoded in the genome."""
        return self.output_count

    @property
    def bit_length(self) -> int:
        """Number of bits a rule of this shape occupies."""
        return (
            self.in_limit * (self.in_var_code_size + self.in_set_code_size)
            + self.output_count * (self.out_var_code_size + self.out_set_code_size)
        )

    @property
    def int_length(self) -> int:
        """Number of integers expected by :meth:`read_ints`."""
        return 2 * (self.input_count + self.output_count)

    @property
    def is_empty(self) -> bool:
        """True until one of the read methods has populated the genome."""
        return self._pairs is None

    def read_bits(self, bits: Iterable[int], fixed_vars: bool) -> None:
        """Populate the genome from a bit string.

        With ``fixed_vars`` the input variables are taken in order and their
        encoded variable numbers are not read at all.
        """
        bits = list(bits)
        if len(bits) != self.bit_length:
            raise ValueError(f"expected {self.bit_length} bits, got {len(bits)}")

        pairs: list[tuple[int, int]] = []

        in_var_width = self.in_var_code_size
        in_pair_width = in_var_width + self.in_set_code_size
        used_inputs: set[int] = set()
        for i in range(self.in_limit):
            start = i * in_pair_width
            if fixed_vars:
                var_num = i
            else:
                var_num = self._claim(
                    _decode(bits, start, in_var_width), self.input_count, used_inputs
                )
            set_num = _decode(bits, start + in_var_width, self.in_set_code_size)
            pairs.append((var_num, set_num))

        output_start = self.in_limit * in_pair_width
        out_var_width = self.out_var_code_size
        out_pair_width = out_var_width + self.out_set_code_size
        used_outputs: set[int] = set()
        for i in range(self.output_count):
            start = output_start + i * out_pair_width
            var_num = self._claim(
                _decode(bits, start, out_var_width), self.output_count, used_outputs
            )
            set_num = _decode(bits, start + out_var_width, self.out_set_code_size)
            pairs.append((var_num, set_num))

        self._pairs = pairs

    @staticmethod
    def _claim(var_num: int, limit: int, used: set[int]) -> int:
        if var_num >= limit or var_num in used:
            return INVALID_VAR
        used.add(var_num)
        return var_num

    def read_ints(self, values: Iterable[int]) -> None:
        """Populate the genome from alternating variable and set numbers."""
        values = [int(value) for value in values]
        if len(values) != self.int_length:
            raise ValueError(f"expected {self.int_length} integers, got {len(values)}")
        self._pairs = list(zip(values[0::2], values[1::2]))

    def _pair(self, var_pos: int) -> tuple[int, int]:
        if self._pairs is None:
            raise RuntimeError("genome has not been read yet")
        if not 0 <= var_pos < len(self._pairs):
            raise IndexError(f"variable position {var_pos} out of range")
        return self._pairs[var_pos]

    def var_number(self, var_pos: int) -> int:
        """Variable number stored at pair ``var_pos``."""
        return self._pair(var_pos)[0]

    def set_number(self, var_pos: int) -> int:
        """Set number stored at pair ``var_pos``."""
        return self._pair(var_pos)[1]