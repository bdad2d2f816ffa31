"""Genome encoding the set positions of every variable of a fuzzy system.

Layout: the positions of all input variables' sets come first, variable by
variable, followed by those of the output variables.  In the bit string
each position is a little-endian unsigned integer of a fixed width.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _decode(bits: Sequence[int], start: int, width: int) -> int:
    return sum(int(bool(bit)) << shift for shift, bit in enumerate(bits[start:start + width]))


class MembershipsGenome:
    """Decoded set positions of all input and output variables."""

    def __init__(
        self,
        nb_in_vars: int,
        nb_out_vars: int,
        nb_in_sets: int,
        nb_out_sets: int,
        in_sets_pos_code_size: int,
        out_sets_pos_code_size: int,
    ) -> None:
        sizes = (
            nb_in_vars,
            nb_out_vars,
            nb_in_sets,
            nb_out_sets,
            in_sets_pos_code_size,
            out_sets_pos_code_size,
        )
        if any(size <= 0 for size in sizes):
            raise ValueError("all genome dimensions must be positive")

        self.nb_in_vars = nb_in_vars
        self.nb_out_vars = nb_out_vars
        self.nb_in_sets = nb_in_sets
        self.nb_out_sets = nb_out_sets
        self.in_sets_pos_code_size = in_sets_pos_code_size
        self.out_sets_pos_code_size = out_sets_pos_code_size
        self._params: list[int] | None = None

    @property
    def bit_length(self) -> int:
        """Number of bits a genome of this shape occupies."""
        return (
            self.nb_in_vars * self.nb_in_sets * self.in_sets_pos_code_size
            + self.nb_out_vars * self.nb_out_sets * self.out_sets_pos_code_size
        )

    def read_bits(self, bits: Iterable[int]) -> None:
        """Populate the genome from a bit string."""
        bits = list(bits)
        if len(bits) != self.bit_length:
            raise ValueError(
                f"expected {self.bit_length} bits, got {len(bits)}"
            )

        in_width = self.in_sets_pos_code_size
        out_width = self.out_sets_pos_code_size
        in_count = self.nb_in_vars * self.nb_in_sets
        out_count = self.nb_out_vars * self.nb_out_sets
        out_start = in_count * in_width

        params = [_decode(bits, n * in_width, in_width) for n in range(in_count)]
        params.extend(
            _decode(bits, out_start + n * out_width, out_width) for n in range(out_count)
        )
        self._params = params

    def _loaded(self) -> list[int]:
        if self._params is None:
            raise RuntimeError("genome has not been read yet")
        return self._params

    def in_param(self, var_number: int, set_number: int) -> int:
        """Encoded position of a set of an input variable."""
        params = self._loaded()
        if not 0 <= var_number < self.nb_in_vars:
            raise IndexError(f"input variable {var_number} out of range")
        if not 0 <= set_number < self.nb_in_sets:
            raise IndexError(f"input set {set_number} out of range")
        return params[var_number * self.nb_in_sets + set_number]

    def out_param(self, var_number: int, set_number: int) -> int:
        """Encoded position of a set of an output variable."""
        params = self._loaded()
        if not 0 <= var_number < self.nb_out_vars:
            raise IndexError(f"output variable {var_number} out of range")
        if not 0 <= set_number < self.nb_out_sets:
            raise IndexError(f"output set {set_number} out of range")
        offset = self.nb_in_vars * self.nb_in_sets
        return params[offset + var_number * self.nb_out_sets + set_number]