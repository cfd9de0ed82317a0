"""Verifier side of the copy-permutation argument.

Evaluates the permutation part of the quotient numerator at the evaluation
challenge ʓ from the openings in a transcript:

      α^2.(z(ʓ.ω) - Δ_PI).L_{n-k}(ʓ)
    - α^3.L_1(ʓ)
    - α.∏(w_i + β.σ_i + γ).z(ʓ.ω)
    + [α.∏(w_i + β.k_i.ʓ + γ) + α^3.L_1(ʓ)].z(ʓ)

where k is the number of roots cut out of the vanishing polynomial.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from .public_inputs import compute_public_input_delta


class Transcript(Protocol):
    """What the permutation widget needs from a Fiat-Shamir transcript."""

    def get_challenge_field_element(self, label: str, index: int = 0) -> Any: ...

    def get_field_element(self, label: str) -> Any: ...

    def get_field_element_vector(self, label: str) -> Sequence[Any]: ...


@dataclass(frozen=True)
class PermutationKey:
    """The parts of a verification key the permutation argument reads.

    ``domain_inverse`` is 1/n for the evaluation domain of size n,
    ``domain_root`` its generator ω and ``z_pow_n`` the value ʓ^n.
    """

    program_width: int
    z_pow_n: Any
    domain_inverse: Any
    domain_root: Any
    external_coset_generator: Any

    def __post_init__(self) -> None:
        if self.program_width < 1:
            raise ValueError(f"program width must be at least 1, got {self.program_width}")


def _l_end_root(root: Any, num_roots_cut_out: int) -> Any:
    """Return the root that maps L_1 onto L_{n-k}."""
    if num_roots_cut_out < 0:
        raise ValueError(f"number of roots cut out must be non-negative, got {num_roots_cut_out}")
    root_squared = root * root
    result = root_squared if num_roots_cut_out & 1 else root
    for _ in range(num_roots_cut_out // 2):
        result *= root_squared
    return result


def compute_quotient_evaluation_contribution(
    key: PermutationKey,
    alpha: Any,
    transcript: Transcript,
    quotient_numerator_eval: Any,
    idpolys: bool,
    num_roots_cut_out: int,
    coset_generator: Callable[[int], Any],
) -> tuple[Any, Any]:
    """Add the permutation terms to the quotient numerator evaluation.

    Returns ``(updated quotient numerator evaluation, α^4)``; the second value
    is the α power the next widget starts from. ``coset_generator(i)`` gives
    the coset generator of column i + 1. With ``idpolys`` the identity
    permutation is read from the openings id_1, id_2, ... instead of being
    computed from ʓ.
    """
    one = alpha ** 0
    alpha_squared = alpha * alpha
    alpha_cubed = alpha_squared * alpha

    z = transcript.get_challenge_field_element("z", 0)
    beta = transcript.get_challenge_field_element("beta", 0)
    gamma = transcript.get_challenge_field_element("beta", 1)

    width = key.program_width
    sigma_evaluations = [
        transcript.get_field_element(f"sigma_{column}") for column in range(1, width + 1)
    ]
    wire_evaluations = [
        transcript.get_field_element(f"w_{column}") for column in range(1, width + 1)
    ]

    numerator = (key.z_pow_n - one) * key.domain_inverse
    l_start = numerator / (z - one)
    l_end = numerator / (z * _l_end_root(key.domain_root, num_roots_cut_out) - one)

    z_shifted_eval = transcript.get_field_element("z_perm_omega")

    sigma_product = math.prod(
        (
            sigma * beta + wire + gamma
            for sigma, wire in zip(sigma_evaluations[:-1], wire_evaluations[:-1])
        ),
        start=one,
    )
    sigma_contribution = sigma_product * (wire_evaluations[-1] + gamma) * z_shifted_eval * alpha

    public_inputs = transcript.get_field_element_vector("public_inputs")
    public_input_delta = compute_public_input_delta(
        public_inputs,
        beta,
        gamma,
        key.domain_root,
        coset_generator(0),
        key.external_coset_generator,
    )

    result = quotient_numerator_eval
    result += (z_shifted_eval - public_input_delta) * l_end * alpha_squared
    result -= l_start * alpha_cubed
    result -= sigma_contribution

    # Completes the last factor (c_eval + γ) into (c_eval + β.σ_last + γ).
    sigma_last_multiplicand = -(sigma_product * z_shifted_eval * alpha) * beta
    result += sigma_last_multiplicand * sigma_evaluations[-1]

    z_eval = transcript.get_field_element("z_perm")
    if idpolys:
        identity_terms = (
            transcript.get_field_element(f"id_{column}") * beta
            for column in range(1, width + 1)
        )
    else:
        z_beta = z * beta
        identity_terms = (
            z_beta * (one if column == 0 else coset_generator(column - 1))
            for column in range(width)
        )
    identity_product = math.prod(
        (term + wire + gamma for term, wire in zip(identity_terms, wire_evaluations)),
        start=one,
    )
    z_multiplicand = identity_product * alpha + l_start * alpha_cubed
    result += z_multiplicand * z_eval

    return result, alpha_squared * alpha_squared


def append_scalar_multiplication_inputs(alpha_base: Any, transcript: Transcript) -> Any:
    """Return ``alpha_base`` advanced past the permutation argument's three α powers."""
    alpha_step = transcript.get_challenge_field_element("alpha", 0)
    return alpha_base * alpha_step * alpha_step * alpha_step