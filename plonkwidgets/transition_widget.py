"""Verifier evaluation of transition-widget kernels.

A kernel (such as the arithmetic gate) describes its relation through linear
and non-linear terms; these functions evaluate it on the opening values read
from a transcript.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .getters import EvaluationGetter, get_challenges, get_polynomial_evaluations, update_alpha
from .manifest import PolynomialManifest


def _relations(kernel: Any, num_relations: Optional[int]) -> int:
    return kernel.NUM_INDEPENDENT_RELATIONS if num_relations is None else num_relations


def compute_quotient_evaluation_contribution(
    kernel: Any,
    manifest: PolynomialManifest,
    alpha_base: Any,
    transcript: Any,
    quotient_numerator_eval: Any,
    num_relations: Optional[int] = None,
    random_element: Optional[Callable[[], Any]] = None,
) -> tuple[Any, Any]:
    """Add the kernel's relation, evaluated at ʓ, to the quotient numerator.

    Returns ``(updated quotient numerator evaluation, next α power)``.
    ``num_relations`` defaults to the kernel's number of independent relations.
    """
    getter = EvaluationGetter()
    evaluations = get_polynomial_evaluations(manifest, transcript)
    challenges = get_challenges(
        transcript,
        alpha_base,
        kernel.QUOTIENT_REQUIRED_CHALLENGES,
        _relations(kernel, num_relations),
        random_element,
    )
    linear_terms = kernel.compute_linear_terms(getter, evaluations, challenges, 0)
    result = quotient_numerator_eval + kernel.sum_linear_terms(
        getter, evaluations, challenges, linear_terms, 0
    )
    result = kernel.compute_non_linear_terms(getter, evaluations, challenges, result, 0)
    return result, update_alpha(challenges)


def append_scalar_multiplication_inputs(
    kernel: Any,
    alpha_base: Any,
    transcript: Any,
    num_relations: Optional[int] = None,
    random_element: Optional[Callable[[], Any]] = None,
) -> Any:
    """Return the α power following the kernel's relations."""
    challenges = get_challenges(
        transcript,
        alpha_base,
        kernel.QUOTIENT_REQUIRED_CHALLENGES | kernel.UPDATE_REQUIRED_CHALLENGES,
        _relations(kernel, num_relations),
        random_element,
    )
    return update_alpha(challenges)