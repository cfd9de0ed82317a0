import pytest

from plonkwidgets.arithmetic_widget import ArithmeticKernel
from plonkwidgets.containers import ChallengeArray, ChallengeIndex, PolyArray, PolyPtrMap, challenge_bit
from plonkwidgets.getters import EvaluationGetter, FFTGetter
from plonkwidgets.manifest import PolynomialIndex as I


def _challenges(alpha_base):
    return ChallengeArray(elements=[1, 0, 0, 0, 0], alpha_powers=[alpha_base])


def _evaluations(w_1, w_2, w_3, q_1, q_2, q_3, q_m, q_c):
    array = PolyArray()
    for index, value in (
        (I.W_1, w_1), (I.W_2, w_2), (I.W_3, w_3),
        (I.Q_1, q_1), (I.Q_2, q_2), (I.Q_3, q_3), (I.Q_M, q_m), (I.Q_C, q_c),
    ):
        array[index] = (value, 0)
    return array


def _gate_value(polynomials, getter, alpha_base=1, index=None):
    kernel = ArithmeticKernel()
    challenges = _challenges(alpha_base)
    terms = kernel.compute_linear_terms(getter, polynomials, challenges, index)
    return kernel.sum_linear_terms(getter, polynomials, challenges, terms, index)


def test_required_polynomial_ids():
    assert ArithmeticKernel().required_polynomial_ids() == {
        I.Q_1, I.Q_2, I.Q_3, I.Q_M, I.Q_C, I.W_1, I.W_2, I.W_3,
    }


def test_required_challenges_are_alpha_only():
    kernel = ArithmeticKernel()
    alpha_bit = challenge_bit(ChallengeIndex.ALPHA)
    assert kernel.QUOTIENT_REQUIRED_CHALLENGES == alpha_bit
    assert kernel.UPDATE_REQUIRED_CHALLENGES == alpha_bit


def test_linear_terms_hold_product_and_wires():
    polynomials = _evaluations(3, 5, 7, 0, 0, 0, 0, 0)
    terms = ArithmeticKernel().compute_linear_terms(EvaluationGetter(), polynomials, _challenges(1))
    assert terms[0] == 15
    assert (terms[1], terms[2], terms[3]) == (3, 5, 7)


def test_multiplication_gate_is_satisfied():
    # w_o = w_l.w_r + w_l + w_r + 1 with q_m = q_1 = q_2 = q_c = 1 and q_3 = -1
    polynomials = _evaluations(3, 5, 24, 1, 1, -1, 1, 1)
    assert _gate_value(polynomials, EvaluationGetter()) == 0


def test_addition_gate_is_satisfied():
    w_1, w_2, w_3 = 4, 9, 6
    polynomials = _evaluations(w_1, w_2, w_3, 1, 1, 1, 0, -(w_1 + w_2 + w_3))
    assert _gate_value(polynomials, EvaluationGetter()) == 0


def test_gate_value_scales_with_alpha():
    polynomials = _evaluations(2, 3, 4, 1, 1, 1, 1, 1)
    unscaled = _gate_value(polynomials, EvaluationGetter(), alpha_base=1)
    assert unscaled != 0
    assert _gate_value(polynomials, EvaluationGetter(), alpha_base=6) == 6 * unscaled


def test_fft_rows_satisfy_gate():
    rows = [(1, 2), (3, 4), (5, 6), (7, 8)]
    w_1 = [a for a, _ in rows]
    w_2 = [b for _, b in rows]
    w_3 = [a + b for a, b in rows]
    size = len(rows)
    polynomials = PolyPtrMap(
        {
            I.W_1: w_1, I.W_2: w_2, I.W_3: w_3,
            I.Q_1: [1] * size, I.Q_2: [1] * size, I.Q_3: [-1] * size,
            I.Q_M: [0] * size, I.Q_C: [0] * size,
        },
        block_mask=size - 1,
        index_shift=4,
    )
    values = [_gate_value(polynomials, FFTGetter(), index=row) for row in range(size)]
    assert values == [0] * size


def test_non_linear_terms_leave_quotient_unchanged():
    kernel = ArithmeticKernel()
    polynomials = _evaluations(1, 2, 3, 4, 5, 6, 7, 8)
    assert kernel.compute_non_linear_terms(EvaluationGetter(), polynomials, _challenges(1), 42) == 42


def test_update_kate_opening_scalars_adds_scaled_terms():
    kernel = ArithmeticKernel()
    polynomials = _evaluations(3, 5, 7, 0, 0, 0, 0, 0)
    terms = kernel.compute_linear_terms(EvaluationGetter(), polynomials, _challenges(1))
    scalars = {"Q_M": 0, "Q_1": 0, "Q_2": 0, "Q_3": 0, "Q_C": 0, "OTHER": 9}
    kernel.update_kate_opening_scalars(terms, scalars, _challenges(1))
    assert scalars == {
        "Q_M": terms[0], "Q_1": 3, "Q_2": 5, "Q_3": 7, "Q_C": 1, "OTHER": 9,
    }


def test_update_kate_opening_scalars_accumulates():
    kernel = ArithmeticKernel()
    polynomials = _evaluations(3, 5, 7, 0, 0, 0, 0, 0)
    terms = kernel.compute_linear_terms(EvaluationGetter(), polynomials, _challenges(1))
    once = {"Q_M": 0, "Q_1": 0, "Q_2": 0, "Q_3": 0, "Q_C": 0}
    twice = dict(once)
    kernel.update_kate_opening_scalars(terms, once, _challenges(2))
    kernel.update_kate_opening_scalars(terms, twice, _challenges(1))
    kernel.update_kate_opening_scalars(terms, twice, _challenges(1))
    assert once == twice


def test_update_kate_opening_scalars_missing_entry_raises():
    kernel = ArithmeticKernel()
    polynomials = _evaluations(3, 5, 7, 0, 0, 0, 0, 0)
    terms = kernel.compute_linear_terms(EvaluationGetter(), polynomials, _challenges(1))
    with pytest.raises(KeyError):
        kernel.update_kate_opening_scalars(terms, {"Q_M": 0}, _challenges(1))