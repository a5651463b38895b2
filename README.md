# plonkup

Building blocks for PLONK-style proof systems with lookup tables
("plonkup"), working over the scalar field of BLS12-381. Pure Python,
no dependencies.

## Modules

- `plonkup.field`
  - `Scalar`: an element of the BLS12-381 scalar field, with `+`, `-`, `*`,
    negation, `^` (XOR of the canonical values, reduced into the field),
    `square()`, `pow()`, `invert()` (raises `ZeroDivisionError` for zero),
    `Scalar.random()`, and a 32-byte little-endian `to_bytes()` /
    `Scalar.from_bytes()`. Formatting with `"#x"` prints the little-endian
    encoding as hex with a `0x` prefix.
  - `EvaluationDomain(num_coeffs)`: a power-of-two multiplicative subgroup
    (size rounded up from `num_coeffs`), with `elements()`, `fft()` and
    `ifft()`. Raises `DomainSizeError` beyond a size of `2**32`.
  - `Polynomial`: dense coefficients in ascending order (trailing zeros
    trimmed), with `evaluate()`, `degree()`, addition, subtraction and
    scaling by a scalar.
  - `K1`, `K2`, `K3`: the coset constants 7, 13 and 17.
- `plonkup.multiset`
  - `MultiSet`: an ordered list of scalars with `push`, `last`, `position`,
    `pad` (to a power of two by repeating the first element),
    `sorted_concat`, `contains_all`, `halve`, `halve_alternating`,
    `to_polynomial`, `compress_three_arity`, `compress_four_arity`,
    elementwise `+` and `*`, and `to_bytes()` / `MultiSet.from_bytes()`.
  - `ElementNotIndexedError`: raised when an element or table row that is
    required is missing.
- `plonkup.lookup_table`
  - `LookupTable`: rows `(a, b, c, d)` with `insert_add_row`,
    `insert_mul_row`, `insert_xor_row`, `insert_and_row`,
    `insert_special_row`, the `insert_multi_*` builders covering every pair
    in `lower_bound..2**n`, `vec_to_multiset()` and `lookup(a, b, d)`.
    The fourth column tags the operation: 0 add, 1 mul, -1 xor, 2 and.
- `plonkup.witness_table`
  - `WitnessTable`: four `MultiSet` query columns `f_1`..`f_4`, filled with
    `from_wire_values()` or `value_from_table()`; the latter returns the
    looked-up output and leaves the table unchanged when no row matches.
- `plonkup.permutation`
  - `Wire`, `WireData`: a wire column and a wire at a gate index.
  - `Permutation`: maps variables to their wires, with `new_variable()`,
    `add_variables_to_map()`, `add_variable_to_map()`,
    `compute_sigma_permutations(n)`, `compute_permutation_lagrange()` and
    `compute_sigma_polynomials(n, domain)`.
- `plonkup.accumulator`
  - `compute_permutation_vec(domain, wires, beta, gamma, sigma_polys)`: the
    copy-constraint grand product over the domain.
  - `compute_lookup_permutation_vec(domain, f, t, h_1, h_2, delta, epsilon)`:
    the lookup grand product over the domain.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Example

```python
from plonkup.field import Scalar, EvaluationDomain
from plonkup.lookup_table import LookupTable
from plonkup.witness_table import WitnessTable
from plonkup.permutation import Permutation

table = LookupTable([])
table.insert_multi_xor(0, 4)

queries = WitnessTable()
output = queries.value_from_table(table, Scalar(2), Scalar(3), -Scalar.one())
print(int(output))  # 1

domain = EvaluationDomain(4)
evals = [Scalar(v) for v in (1, 2, 3, 4)]
assert domain.fft(domain.ifft(evals)) == evals

perm = Permutation()
x, y = perm.new_variable(), perm.new_variable()
perm.add_variables_to_map(x, x, y, y, 0)
left, right, output_wires, fourth = perm.compute_sigma_permutations(1)
print(left[0])  # WireData(wire=<Wire.RIGHT: 1>, index=0)
```

A lookup for a row that is not in the table raises
`plonkup.multiset.ElementNotIndexedError`.

## What this package does not do

It provides the field, FFT, multiset, table and permutation pieces only.
It has no constraint-system builder, no polynomial commitments, and does
not create, encode or verify proofs.