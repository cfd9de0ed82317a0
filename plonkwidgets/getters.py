"""Access to challenges and polynomial values for widgets.

Challenges are loaded from a Fiat-Shamir transcript. Polynomial values come
either from opening evaluations (verifier side) or from coset-FFT forms
(prover side).
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Protocol

from .containers import ChallengeArray, ChallengeIndex, PolyArray, PolyPtrMap, challenge_bit
from .manifest import EvaluationType, PolynomialIndex, PolynomialManifest

FFT_LABEL_SUFFIX = "_fft"
SHIFTED_LABEL_SUFFIX = "_omega"
FFT_INDEX_SHIFT = 4


class Transcript(Protocol):
    """What the getters need from a Fiat-Shamir transcript."""

    def has_challenge(self, label: str) -> bool: ...

    def get_num_challenges(self, label: str) -> int: ...

    def get_challenge_field_element(self, label: str, index: int = 0) -> Any: ...

    def get_field_element(self, label: str) -> Any: ...


# (transcript label, slot in the challenge array, index within that label)
_CHALLENGE_SOURCES = (
    ("alpha", ChallengeIndex.ALPHA, 0),
    ("beta", ChallengeIndex.BETA, 0),
    ("beta", ChallengeIndex.GAMMA, 1),
    ("eta", ChallengeIndex.ETA, 0),
    ("z", ChallengeIndex.ZETA, 0),
)


def get_challenges(
    transcript: Transcript,
    alpha_base: Any,
    required_challenges: int,
    num_relations: int,
    random_element: Optional[Callable[[], Any]] = None,
) -> ChallengeArray:
    """Load alpha, beta, gamma, eta and zeta and compute powers of α.

    ``required_challenges`` is a bitmask of challenges that must be present in
    the transcript; a missing required challenge raises ValueError. A missing
    optional challenge is filled with ``random_element()``. The result holds
    ``num_relations`` powers of α starting at ``alpha_base``.
    """
    if num_relations < 1:
        raise ValueError(f"a widget needs at least one relation, got {num_relations}")

    challenges = ChallengeArray()
    for label, slot, position in _CHALLENGE_SOURCES:
        if transcript.has_challenge(label):
            available = transcript.get_num_challenges(label)
            if position >= available:
                raise IndexError(
                    f"challenge {label!r} has {available} values, index {position} requested"
                )
            challenges.elements[slot] = transcript.get_challenge_field_element(label, position)
        elif required_challenges & challenge_bit(slot):
            raise ValueError(f"required challenge {label!r} is missing from the transcript")
        elif random_element is None:
            raise ValueError(
                f"challenge {label!r} is missing and no random element source was given"
            )
        else:
            challenges.elements[slot] = random_element()

    alpha = challenges.elements[ChallengeIndex.ALPHA]
    powers = [alpha_base]
    for _ in range(1, num_relations):
        powers.append(powers[-1] * alpha)
    challenges.alpha_powers = powers
    return challenges


def update_alpha(challenges: ChallengeArray) -> Any:
    """Return the α power that the next widget starts from."""
    if not challenges.alpha_powers:
        raise ValueError("challenge array holds no powers of alpha")
    return challenges.alpha_powers[-1] * challenges.elements[ChallengeIndex.ALPHA]


def get_polynomial_evaluations(manifest: PolynomialManifest, transcript: Transcript) -> PolyArray:
    """Read every manifest polynomial's opening (and shifted opening) from the transcript.

    Each slot holds (value at ʓ, value at ʓ.ω); the second is zero for
    polynomials that need no shifted evaluation.
    """
    result = PolyArray()
    for info in manifest:
        value = transcript.get_field_element(info.polynomial_label)
        if info.requires_shifted_evaluation:
            shifted = transcript.get_field_element(info.polynomial_label + SHIFTED_LABEL_SUFFIX)
        else:
            shifted = value - value
        result[info.index] = (value, shifted)
    return result


def get_polynomials(
    manifest: PolynomialManifest,
    polynomial_store: Mapping[str, Any],
    required_ids: Iterable[PolynomialIndex],
    large_domain_size: int,
) -> PolyPtrMap:
    """Collect the coset-FFT forms of the required polynomials from a store.

    Raises KeyError if a required polynomial's FFT form is not in the store.
    """
    if large_domain_size < 1:
        raise ValueError(f"large domain size must be positive, got {large_domain_size}")
    wanted = {PolynomialIndex(index) for index in required_ids}
    result = PolyPtrMap(block_mask=large_domain_size - 1, index_shift=FFT_INDEX_SHIFT)
    for info in manifest:
        if info.index in wanted:
            label = info.polynomial_label + FFT_LABEL_SUFFIX
            try:
                result.coefficients[info.index] = polynomial_store[label]
            except KeyError:
                raise KeyError(f"polynomial {label!r} is not in the store") from None
    return result


class EvaluationGetter:
    """Reads values from a PolyArray of opening evaluations."""

    __slots__ = ()

    def get_value(
        self,
        polynomials: PolyArray,
        evaluation_type: EvaluationType,
        index: PolynomialIndex,
        position: Optional[int] = None,
    ) -> Any:
        """Return the opening of polynomial ``index`` at ʓ or at ʓ.ω.

        Evaluations have a single row, so ``position`` must be None or 0.
        """
        if position not in (None, 0):
            raise ValueError(f"evaluations have a single row, got position {position}")
        value, shifted = polynomials[index]
        return shifted if evaluation_type is EvaluationType.SHIFTED else value


class FFTGetter:
    """Reads values from coset-FFT polynomials held in a PolyPtrMap."""

    __slots__ = ()

    def get_value(
        self,
        polynomials: PolyPtrMap,
        evaluation_type: EvaluationType,
        index: PolynomialIndex,
        position: Optional[int] = None,
    ) -> Any:
        """Return row ``position`` of polynomial ``index``; shifted rows wrap in the domain."""
        if position is None:
            raise ValueError("a row position is required for coset-FFT values")
        polynomial = polynomials[index]
        if evaluation_type is EvaluationType.SHIFTED:
            return polynomial[(position + polynomials.index_shift) & polynomials.block_mask]
        return polynomial[position]