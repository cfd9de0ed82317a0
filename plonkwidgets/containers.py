"""Containers for challenges, polynomial values and coefficients used by widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator

from .manifest import PolynomialIndex


class ChallengeIndex(IntEnum):
    """Slot of each Fiat-Shamir challenge in a challenge array."""

    ALPHA = 0
    BETA = 1
    GAMMA = 2
    ETA = 3
    ZETA = 4
    MAX_NUM_CHALLENGES = 5


def challenge_bit(index: ChallengeIndex) -> int:
    """Return the bitmask flag for a challenge."""
    position = int(index)
    if not 0 <= position < ChallengeIndex.MAX_NUM_CHALLENGES:
        raise ValueError(f"not a challenge index: {index!r}")
    return 1 << position


CHALLENGE_BIT_ALPHA = challenge_bit(ChallengeIndex.ALPHA)
CHALLENGE_BIT_BETA = challenge_bit(ChallengeIndex.BETA)
CHALLENGE_BIT_GAMMA = challenge_bit(ChallengeIndex.GAMMA)
CHALLENGE_BIT_ETA = challenge_bit(ChallengeIndex.ETA)
CHALLENGE_BIT_ZETA = challenge_bit(ChallengeIndex.ZETA)

_NUM_SLOTS = int(PolynomialIndex.MAX_NUM_POLYNOMIALS)


@dataclass
class ChallengeArray:
    """Challenge values by ChallengeIndex, plus successive powers of α."""

    elements: list[Any] = field(
        default_factory=lambda: [0] * int(ChallengeIndex.MAX_NUM_CHALLENGES)
    )
    alpha_powers: list[Any] = field(default_factory=list)


class PolyArray:
    """Fixed-size table of (value, shifted value) pairs indexed by PolynomialIndex."""

    def __init__(self, zero: Any = 0) -> None:
        self._pairs: list[tuple[Any, Any]] = [(zero, zero)] * _NUM_SLOTS

    @staticmethod
    def _slot(index: int) -> int:
        position = int(index)
        if not 0 <= position < _NUM_SLOTS:
            raise IndexError(f"polynomial index {index!r} out of range")
        return position

    def __getitem__(self, index: int) -> tuple[Any, Any]:
        return self._pairs[self._slot(index)]

    def __setitem__(self, index: int, value: tuple[Any, Any]) -> None:
        first, second = value
        self._pairs[self._slot(index)] = (first, second)

    def __len__(self) -> int:
        return _NUM_SLOTS

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._pairs)


class CoefficientArray:
    """Fixed-size table of field values indexed by PolynomialIndex."""

    def __init__(self, zero: Any = 0) -> None:
        self._values: list[Any] = [zero] * _NUM_SLOTS

    @staticmethod
    def _slot(index: int) -> int:
        position = int(index)
        if not 0 <= position < _NUM_SLOTS:
            raise IndexError(f"coefficient index {index!r} out of range")
        return position

    def __getitem__(self, index: int) -> Any:
        return self._values[self._slot(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._values[self._slot(index)] = value

    def __len__(self) -> int:
        return _NUM_SLOTS

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)


@dataclass
class PolyPtrMap:
    """Polynomials in coset-FFT form keyed by PolynomialIndex, with shift parameters."""

    coefficients: dict[PolynomialIndex, Any] = field(default_factory=dict)
    block_mask: int = 0
    index_shift: int = 0

    def __getitem__(self, index: PolynomialIndex) -> Any:
        return self.coefficients[PolynomialIndex(index)]