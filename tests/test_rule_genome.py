import pytest

from fugelc.rule_genome import INVALID_VAR, RuleGenome


def _encode(value, width):
    return [(value >> shift) & 1 for shift in range(width)]


def _bits(pairs_in, pairs_out, in_var=2, in_set=2, out_var=1, out_set=2):
    bits = []
    for var, set_num in pairs_in:
        bits += _encode(var, in_var) + _encode(set_num, in_set)
    for var, set_num in pairs_out:
        bits += _encode(var, out_var) + _encode(set_num, out_set)
    return bits


def _genome(in_limit=3, in_count=4, out_count=2):
    return RuleGenome(in_limit, in_count, out_count, 2, 1, 2, 2)


def test_counts_report_limit_and_outputs():
    genome = _genome()
    assert genome.input_var_count == 3
    assert genome.output_var_count == 2
    assert genome.bit_length == 3 * 4 + 2 * 3


def test_read_bits_round_trip_distinct_variables():
    genome = _genome()
    ins = [(2, 1), (0, 3), (3, 0)]
    outs = [(1, 2), (0, 1)]
    genome.read_bits(_bits(ins, outs), fixed_vars=False)
    got = [(genome.var_number(p), genome.set_number(p)) for p in range(5)]
    assert got == ins + outs


def test_duplicate_input_variable_is_invalid():
    genome = _genome()
    genome.read_bits(_bits([(1, 0), (1, 2), (2, 1)], [(0, 0), (1, 0)]), fixed_vars=False)
    assert genome.var_number(0) == 1
    assert genome.var_number(1) == INVALID_VAR
    assert genome.set_number(1) == 2
    assert genome.var_number(2) == 2


def test_out_of_range_input_variable_is_invalid():
    genome = RuleGenome(2, 3, 1, 2, 1, 1, 1)
    bits = _encode(3, 2) + [1] + _encode(2, 2) + [0] + [0, 1]
    genome.read_bits(bits, fixed_vars=False)
    assert genome.var_number(0) == INVALID_VAR
    assert genome.set_number(0) == 1
    assert genome.var_number(1) == 2
    assert genome.var_number(2) == 0
    assert genome.set_number(2) == 1


def test_output_duplicates_and_range():
    genome = RuleGenome(1, 1, 2, 1, 2, 1, 1)
    bits = [0, 1] + _encode(1, 2) + [1] + _encode(1, 2) + [0]
    genome.read_bits(bits, fixed_vars=False)
    assert genome.var_number(1) == 1
    assert genome.var_number(2) == INVALID_VAR

    genome.read_bits([0, 0] + _encode(3, 2) + [1] + _encode(0, 2) + [1], fixed_vars=False)
    assert genome.var_number(1) == INVALID_VAR
    assert genome.var_number(2) == 0


def test_fixed_vars_takes_inputs_in_order():
    genome = _genome()
    genome.read_bits(_bits([(3, 1), (3, 2), (3, 3)], [(0, 0), (1, 1)]), fixed_vars=True)
    assert [genome.var_number(p) for p in range(3)] == [0, 1, 2]
    assert [genome.set_number(p) for p in range(3)] == [1, 2, 3]


def test_read_bits_wrong_length():
    genome = _genome()
    with pytest.raises(ValueError):
        genome.read_bits([0] * (genome.bit_length - 1), fixed_vars=False)


def test_read_ints_copies_pairs():
    genome = _genome()
    values = [0, 1, 2, 3, 1, 0, 3, 2, 1, 1, 0, 0]
    genome.read_ints(values)
    assert [genome.var_number(p) for p in range(6)] == values[0::2]
    assert [genome.set_number(p) for p in range(6)] == values[1::2]


def test_read_ints_wrong_length():
    genome = _genome()
    with pytest.raises(ValueError):
        genome.read_ints([0, 1, 2])


def test_empty_genome_cannot_be_queried():
    genome = _genome()
    assert genome.is_empty
    with pytest.raises(RuntimeError):
        genome.var_number(0)
    with pytest.raises(RuntimeError):
        genome.set_number(0)


def test_position_out_of_range():
    genome = _genome()
    genome.read_bits([0] * genome.bit_length, fixed_vars=True)
    assert not genome.is_empty
    with pytest.raises(IndexError):
        genome.var_number(5)
    with pytest.raises(IndexError):
        genome.set_number(-1)


@pytest.mark.parametrize(
    "args",
    [
        (1, 0, 1, 1, 1, 1, 1),
        (1, 1, 0, 1, 1, 1, 1),
        (1, 1, 1, 0, 1, 1, 1),
        (1, 1, 1, 1, 1, 1, 0),
        (3, 2, 1, 1, 1, 1, 1),
        (-1, 2, 1, 1, 1, 1, 1),
    ],
)
def test_invalid_dimensions(args):
    with pytest.raises(ValueError):
        RuleGenome(*args)