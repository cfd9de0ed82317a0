from fractions import Fraction as F

import pytest

from plonkwidgets.arithmetic_widget import ArithmeticKernel
from plonkwidgets.manifest import STANDARD_POLYNOMIAL_MANIFEST
from plonkwidgets.transition_widget import (
    append_scalar_multiplication_inputs,
    compute_quotient_evaluation_contribution,
)


class FakeTranscript:
    def __init__(self, challenges, elements):
        self.challenges = challenges
        self.elements = elements

    def has_challenge(self, label):
        return label in self.challenges

    def get_num_challenges(self, label):
        return len(self.challenges[label])

    def get_challenge_field_element(self, label, index=0):
        return self.challenges[label][index]

    def get_field_element(self, label):
        return self.elements[label]


ALPHA = F(3)


def make_transcript(**overrides):
    w_1, w_2 = F(2), F(3)
    elements = {
        "w_1": w_1,
        "w_2": w_2,
        # Satisfies w1.w2 + w1 + w2 - w3 + 1 = 0.
        "w_3": w_1 * w_2 + w_1 + w_2 + 1,
        "z_perm": F(0),
        "z_perm_omega": F(0),
        "q_1": F(1),
        "q_2": F(1),
        "q_3": F(-1),
        "q_m": F(1),
        "q_c": F(1),
        "sigma_1": F(0),
        "sigma_2": F(0),
        "sigma_3": F(0),
    }
    elements.update(overrides)
    challenges = {"alpha": [ALPHA], "beta": [F(2), F(9)], "eta": [F(4)], "z": [F(29)]}
    return FakeTranscript(challenges, elements)


def evaluate(transcript, offset=F(5), alpha_base=F(7), **kwargs):
    return compute_quotient_evaluation_contribution(
        ArithmeticKernel(),
        STANDARD_POLYNOMIAL_MANIFEST,
        alpha_base,
        transcript,
        offset,
        **kwargs,
    )


def test_satisfied_gate_adds_nothing():
    result, _ = evaluate(make_transcript(), offset=F(5))
    assert result == 5


def test_constant_selector_adds_alpha_base():
    transcript = make_transcript(q_1=F(0), q_2=F(0), q_3=F(0), q_m=F(0), q_c=F(1))
    result, _ = evaluate(transcript, offset=F(5), alpha_base=F(7))
    assert result == 5 + 7


def test_gate_value_scales_with_alpha_base():
    transcript = make_transcript(q_c=F(2))
    base, _ = evaluate(transcript, offset=F(0), alpha_base=F(1))
    doubled, _ = evaluate(transcript, offset=F(0), alpha_base=F(2))
    assert doubled == 2 * base
    assert base != 0


def test_next_alpha_is_alpha_base_times_alpha():
    _, next_alpha = evaluate(make_transcript(), alpha_base=F(7))
    assert next_alpha == 7 * ALPHA


def test_more_relations_advance_alpha_further():
    _, next_alpha = evaluate(make_transcript(), alpha_base=F(7), num_relations=3)
    assert next_alpha == 7 * ALPHA ** 3


def test_missing_alpha_is_an_error():
    transcript = make_transcript()
    del transcript.challenges["alpha"]
    with pytest.raises(ValueError):
        evaluate(transcript)


def test_missing_optional_challenge_uses_random_source():
    transcript = make_transcript()
    del transcript.challenges["eta"]
    calls = []

    def random_element():
        calls.append(1)
        return F(11)

    result, _ = evaluate(transcript, offset=F(5), random_element=random_element)
    assert result == 5
    assert len(calls) == 1


def test_missing_optional_challenge_without_random_source_is_an_error():
    transcript = make_transcript()
    del transcript.challenges["eta"]
    with pytest.raises(ValueError):
        evaluate(transcript)


def test_missing_opening_propagates():
    transcript = make_transcript()
    del transcript.elements["q_m"]
    with pytest.raises(KeyError):
        evaluate(transcript)


def test_append_scalar_multiplication_inputs_advances_alpha():
    result = append_scalar_multiplication_inputs(ArithmeticKernel(), F(7), make_transcript())
    assert result == 7 * ALPHA


def test_append_scalar_multiplication_inputs_requires_alpha():
    transcript = make_transcript()
    del transcript.challenges["alpha"]
    with pytest.raises(ValueError):
        append_scalar_multiplication_inputs(ArithmeticKernel(), F(7), transcript)