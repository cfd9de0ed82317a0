"""The public-input delta that rebalances the copy-permutation grand product.

The first m rows of program memory force their first wire to zero while a copy
constraint ties it to a public input. The resulting imbalance in the grand
product is the publicly computable factor Δ, checked via z(X.ω) = Δ at row n-1.
"""

from __future__ import annotations

from typing import Any, Iterable


def compute_public_input_delta(
    public_inputs: Iterable[Any],
    beta: Any,
    gamma: Any,
    subgroup_generator: Any,
    coset_generator: Any,
    external_coset_generator: Any,
) -> Any:
    """Return Δ = ∏ (w_i + β.k.g^i + γ) / ∏ (w_i + β.k_ext.g^i + γ).

    All values must be elements of one field supporting +, *, ** and /.
    ``coset_generator`` is the generator of the second column's coset.
    Raises ZeroDivisionError if the denominator vanishes.
    """
    one = subgroup_generator ** 0
    numerator = one
    denominator = one
    work_root = one
    for witness in public_inputs:
        shifted_witness = witness + gamma
        scaled_root = work_root * beta
        numerator *= scaled_root * coset_generator + shifted_witness
        denominator *= scaled_root * external_coset_generator + shifted_witness
        work_root *= subgroup_generator
    return numerator / denominator