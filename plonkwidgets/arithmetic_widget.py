"""Kernel of the standard arithmetic gate q_m.w1.w2 + q_1.w1 + q_2.w2 + q_3.w3 + q_c = 0."""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from .containers import CHALLENGE_BIT_ALPHA, ChallengeArray, CoefficientArray
from .manifest import EvaluationType, PolynomialIndex

_NON_SHIFTED = EvaluationType.NON_SHIFTED
_I = PolynomialIndex

# Positions of the linear terms and the commitments they scale.
_TERM_LABELS = ((0, "Q_M"), (1, "Q_1"), (2, "Q_2"), (3, "Q_3"))


class ArithmeticKernel:
    """Relation of the arithmetic gate, evaluated through a getter."""

    QUOTIENT_REQUIRED_CHALLENGES = CHALLENGE_BIT_ALPHA
    UPDATE_REQUIRED_CHALLENGES = CHALLENGE_BIT_ALPHA
    NUM_INDEPENDENT_RELATIONS = 1

    _REQUIRED_IDS = frozenset(
        {_I.Q_1, _I.Q_2, _I.Q_3, _I.Q_M, _I.Q_C, _I.W_1, _I.W_2, _I.W_3}
    )

    def required_polynomial_ids(self) -> frozenset[PolynomialIndex]:
        """Return the polynomials the gate reads."""
        return self._REQUIRED_IDS

    def compute_linear_terms(
        self,
        getter: Any,
        polynomials: Any,
        challenges: ChallengeArray,
        index: Optional[int] = None,
    ) -> CoefficientArray:
        """Return the terms w1.w2, w1, w2, w3 in positions 0 to 3."""
        position = 0 if index is None else index
        w_1 = getter.get_value(polynomials, _NON_SHIFTED, _I.W_1, position)
        w_2 = getter.get_value(polynomials, _NON_SHIFTED, _I.W_2, position)
        w_3 = getter.get_value(polynomials, _NON_SHIFTED, _I.W_3, position)
        terms = CoefficientArray(w_1 - w_1)
        terms[0] = w_1 * w_2
        terms[1] = w_1
        terms[2] = w_2
        terms[3] = w_3
        return terms

    def sum_linear_terms(
        self,
        getter: Any,
        polynomials: Any,
        challenges: ChallengeArray,
        linear_terms: CoefficientArray,
        index: Optional[int] = None,
    ) -> Any:
        """Scale the linear terms by their selectors, add q_c and multiply by α."""
        position = 0 if index is None else index
        alpha = challenges.alpha_powers[0]
        q_1 = getter.get_value(polynomials, _NON_SHIFTED, _I.Q_1, position)
        q_2 = getter.get_value(polynomials, _NON_SHIFTED, _I.Q_2, position)
        q_3 = getter.get_value(polynomials, _NON_SHIFTED, _I.Q_3, position)
        q_m = getter.get_value(polynomials, _NON_SHIFTED, _I.Q_M, position)
        q_c = getter.get_value(polynomials, _NON_SHIFTED, _I.Q_C, position)
        result = linear_terms[0] * q_m
        result += linear_terms[1] * q_1
        result += linear_terms[2] * q_2
        result += linear_terms[3] * q_3
        result += q_c
        return result * alpha

    def compute_non_linear_terms(
        self,
        getter: Any,
        polynomials: Any,
        challenges: ChallengeArray,
        quotient_term: Any,
        index: Optional[int] = None,
    ) -> Any:
        """Return ``quotient_term`` unchanged: the arithmetic gate has no non-linear terms."""
        return quotient_term

    def update_kate_opening_scalars(
        self,
        linear_terms: CoefficientArray,
        scalars: MutableMapping[str, Any],
        challenges: ChallengeArray,
    ) -> None:
        """Add the α-scaled linear terms to the selector commitments' scalars.

        ``scalars`` must already hold Q_M, Q_1, Q_2, Q_3 and Q_C; a missing one
        raises KeyError.
        """
        alpha = challenges.alpha_powers[0]
        for position, label in _TERM_LABELS:
            scalars[label] = scalars[label] + linear_terms[position] * alpha
        scalars["Q_C"] = scalars["Q_C"] + alpha