# fugelc

Building blocks for genome-encoded fuzzy inference systems: fuzzy sets,
"Fuzzy Coco" membership functions, the AND rule operator, defuzzification
methods, and the genomes from which set positions and rules are decoded.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fugelc.fuzzyset` – `FuzzySet(name, position, number=0)`, a dataclass
  whose `evaluation` accumulates every value passed to `add_eval`;
  `clear_eval` resets it to zero.
- `fugelc.operators` – `FuzzyOperator`, an abstract binary operator that
  can be called directly, and `FuzzyOperatorAnd`, which returns the minimum
  of two values and ignores a "don't care" value (`DONT_CARE_EVAL`, `-1.0`).
- `fugelc.memberships` – `FuzzyMemberships`, the ordered sets of one
  variable (iterable, `len()`, `sets_count`, `get_set`), and
  `CocoMemberships`: the first and last sets are shoulders, the inner sets
  triangles peaking at their own position and falling to zero at their
  neighbours' positions. `evaluate_set(value, set_num)` returns the degree;
  `add_set`, `remove_set` and `remove_last_set` edit the sets. Out-of-range
  set numbers raise `IndexError`.
- `fugelc.defuzz` – `DefuzzMethod` with a `precision` (default 100, must be
  positive), `CoaDefuzz` (center of area over the universe `[0, 1)`, with
  each set's curve clipped at its evaluation) and `SingletonDefuzz`
  (evaluation-weighted mean of set positions, `0.0` when nothing fired).
  `defuzz(memberships)` returns the crisp value.
- `fugelc.membership_genome` – `MembershipsGenome`, decoding a bit string
  (little-endian fixed-width fields) into the encoded positions of every
  input and output set: `read_bits`, `in_param`, `out_param`, `bit_length`.
- `fugelc.rule_genome` – `RuleGenome`, decoding a rule's (variable, set)
  number pairs from bits (`read_bits(bits, fixed_vars)`) or from integers
  (`read_ints`); out-of-range or repeated variables become `INVALID_VAR`
  (`-1`). Read with `var_number` and `set_number`.
- `fugelc.rule` – `FuzzyRule`, built from (variable, set) pairs or with
  `FuzzyRule.from_genome(in_var_array, out_var_array, genome, fixed_vars,
  nb_in_vars, nb_out_vars)`, which drops invalid pairs. `evaluate()` ANDs
  the antecedent degrees and passes the result to the output sets;
  `fire_level(var_num)`, `in_set_at`, `out_set_at` and `description`
  report on the rule.

## Example

```python
from fugelc.defuzz import SingletonDefuzz
from fugelc.fuzzyset import FuzzySet
from fugelc.memberships import CocoMemberships

memberships = CocoMemberships()
memberships.add_set(FuzzySet("low", 0.2, 0))
memberships.add_set(FuzzySet("high", 0.8, 1))

memberships.evaluate_set(0.5, 0)   # 0.5
memberships.evaluate_set(0.9, 1)   # 1.0

memberships.get_set(0).add_eval(1.0)
memberships.get_set(1).add_eval(1.0)
SingletonDefuzz().defuzz(memberships)   # 0.5
```

## What the package does not do

There is no fuzzy variable class, no complete fuzzy system, no dataset
loading, no evolutionary search and no command-line or graphical interface.
`FuzzyRule` works with any variable object offering `name`, `sets_count`,
`get_set(n)`, `evaluate_set(n)`, `set_output_set_value(n, value)` and a
writable `used_by_system` flag; supplying such objects is up to the caller.