# plonkwidgets

Building blocks for the verifier side of a PLONK proof system, in plain
Python with no outside dependencies.

The arithmetic is generic: field elements can be any Python objects that
support `+`, `-`, unary `-`, `*`, `/` and `** 0` (giving the field's one),
for example `fractions.Fraction` or your own prime-field class.

## Modules

- `plonkwidgets.manifest`: the enums `PolynomialIndex`, `PolynomialSource`
  and `EvaluationType`, the frozen dataclass `PolynomialDescriptor`, and
  `PolynomialManifest`, an immutable ordered list of descriptors.
  `PolynomialManifest.for_composer(name)` returns the manifest for
  `"standard"`, `"turbo"` or `"plookup"` and raises `ValueError` for any other
  name. The three manifests are also available as
  `STANDARD_POLYNOMIAL_MANIFEST`, `TURBO_POLYNOMIAL_MANIFEST` and
  `ULTRA_POLYNOMIAL_MANIFEST`.
- `plonkwidgets.containers`: `ChallengeIndex`, `challenge_bit(index)` and the
  `CHALLENGE_BIT_*` masks; `ChallengeArray` (challenge values plus powers of
  α); `PolyArray` (a `(value, shifted value)` pair per `PolynomialIndex`);
  `CoefficientArray` (one value per `PolynomialIndex`); and `PolyPtrMap`
  (coset-FFT polynomials with a block mask and index shift). Out-of-range
  indices raise `IndexError`.
- `plonkwidgets.settings`: the frozen dataclass `Settings`, the `HasherType`
  enum, `requires_shifted_wire(wire_shift_settings, wire_index)` and
  `settings_for(name)`, which knows `standard`, `turbo`, `ultra`,
  `ultra_to_standard` and `ultra_with_keccak`.
- `plonkwidgets.public_inputs`: `compute_public_input_delta`, the factor Δ
  that rebalances the copy-permutation grand product for public inputs.
- `plonkwidgets.getters`: `get_challenges`, `update_alpha`,
  `get_polynomial_evaluations`, `get_polynomials`, and the value readers
  `EvaluationGetter` (opening evaluations) and `FFTGetter` (coset-FFT rows,
  with shifted rows wrapping inside the domain).
- `plonkwidgets.arithmetic_widget`: `ArithmeticKernel`, the standard
  arithmetic gate `q_m·w1·w2 + q_1·w1 + q_2·w2 + q_3·w3 + q_c`.
- `plonkwidgets.permutation_widget`: `PermutationKey`,
  `compute_quotient_evaluation_contribution` (the copy-permutation terms of
  the quotient numerator at ʓ, returned together with α⁴) and
  `append_scalar_multiplication_inputs`.
- `plonkwidgets.transition_widget`: `compute_quotient_evaluation_contribution`
  and `append_scalar_multiplication_inputs`, which drive a kernel such as
  `ArithmeticKernel` over the openings in a transcript.

Functions that update a running quotient numerator evaluation return the new
value rather than changing their argument.

## Example

```python
from plonkwidgets.manifest import PolynomialManifest
from plonkwidgets.settings import settings_for

manifest = PolynomialManifest.for_composer("standard")
print(len(manifest))                      # 12
print(manifest[0].commitment_label)       # "W_1"

turbo = settings_for("turbo")
print(turbo.program_width)                # 4
print(turbo.requires_shifted_wire(2))     # True
```

## Transcripts

The widgets read from a transcript object that you supply. It needs the
methods `get_field_element(label)`, `get_field_element_vector(label)`,
`get_challenge_field_element(label, index)`, `has_challenge(label)` and
`get_num_challenges(label)`.

## What this package does not do

It provides the pieces a verifier evaluates, not a complete proof system.
There is no transcript or hashing implementation, no field, curve or pairing
arithmetic, no prover, no commitment scheme, no end-to-end proof
verification, no key or proof serialization, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```