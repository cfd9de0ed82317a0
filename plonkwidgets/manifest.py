"""Polynomial manifests: which polynomials a proof system commits to and opens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator


class PolynomialSource(Enum):
    """Where a polynomial comes from."""

    WITNESS = "witness"
    SELECTOR = "selector"
    PERMUTATION = "permutation"
    OTHER = "other"


class EvaluationType(Enum):
    """Whether a value is taken at X or at X.ω."""

    NON_SHIFTED = "non_shifted"
    SHIFTED = "shifted"


class PolynomialIndex(IntEnum):
    """Slot of each polynomial in fixed-size polynomial containers."""

    Q_1 = 0
    Q_2 = 1
    Q_3 = 2
    Q_4 = 3
    Q_5 = 4
    Q_M = 5
    Q_C = 6
    Q_ARITHMETIC = 7
    Q_FIXED_BASE = 8
    Q_RANGE = 9
    Q_SORT = 10
    Q_LOGIC = 11
    TABLE_1 = 12
    TABLE_2 = 13
    TABLE_3 = 14
    TABLE_4 = 15
    TABLE_INDEX = 16
    TABLE_TYPE = 17
    Q_ELLIPTIC = 18
    Q_AUX = 19
    SIGMA_1 = 20
    SIGMA_2 = 21
    SIGMA_3 = 22
    SIGMA_4 = 23
    ID_1 = 24
    ID_2 = 25
    ID_3 = 26
    ID_4 = 27
    W_1 = 28
    W_2 = 29
    W_3 = 30
    W_4 = 31
    S = 32
    Z = 33
    Z_LOOKUP = 34
    LAGRANGE_FIRST = 35
    LAGRANGE_LAST = 36
    MAX_NUM_POLYNOMIALS = 37


@dataclass(frozen=True)
class PolynomialDescriptor:
    """Labels and properties of one polynomial in a manifest."""

    commitment_label: str
    polynomial_label: str
    requires_shifted_evaluation: bool
    source: PolynomialSource
    index: PolynomialIndex


class PolynomialManifest:
    """An ordered, immutable list of polynomial descriptors."""

    def __init__(self, descriptors: Iterable[PolynomialDescriptor] = ()) -> None:
        self._descriptors: tuple[PolynomialDescriptor, ...] = tuple(descriptors)

    @classmethod
    def for_composer(cls, composer: str) -> "PolynomialManifest":
        """Return the manifest for a composer: 'standard', 'turbo' or 'plookup'."""
        name = str(composer).strip().lower()
        try:
            return _MANIFESTS_BY_COMPOSER[name]
        except KeyError:
            raise ValueError(f"no polynomial manifest for composer {composer!r}") from None

    def get(self, index: int) -> PolynomialDescriptor:
        """Return the descriptor at the position given by ``index``."""
        return self[index]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> PolynomialDescriptor:
        position = int(index)
        if position < 0:
            raise IndexError(f"manifest index {position} out of range")
        return self._descriptors[position]

    def __iter__(self) -> Iterator[PolynomialDescriptor]:
        return iter(self._descriptors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialManifest):
            return NotImplemented
        return self._descriptors == other._descriptors

    def __repr__(self) -> str:
        return f"PolynomialManifest({list(self._descriptors)!r})"


def _describe(
    commitment_label: str, shifted: bool, source: PolynomialSource, index: PolynomialIndex,
    polynomial_label: str | None = None,
) -> PolynomialDescriptor:
    return PolynomialDescriptor(
        commitment_label,
        polynomial_label if polynomial_label is not None else commitment_label.lower(),
        shifted,
        source,
        index,
    )


_W = PolynomialSource.WITNESS
_SEL = PolynomialSource.SELECTOR
_PERM = PolynomialSource.PERMUTATION
_I = PolynomialIndex

STANDARD_POLYNOMIAL_MANIFEST = PolynomialManifest(
    [
        _describe("W_1", False, _W, _I.W_1),
        _describe("W_2", False, _W, _I.W_2),
        _describe("W_3", False, _W, _I.W_3),
        _describe("Z_PERM", True, _W, _I.Z),
        _describe("Q_1", False, _SEL, _I.Q_1),
        _describe("Q_2", False, _SEL, _I.Q_2),
        _describe("Q_3", False, _SEL, _I.Q_3),
        _describe("Q_M", False, _SEL, _I.Q_M),
        _describe("Q_C", False, _SEL, _I.Q_C),
        _describe("SIGMA_1", False, _PERM, _I.SIGMA_1),
        _describe("SIGMA_2", False, _PERM, _I.SIGMA_2),
        _describe("SIGMA_3", False, _PERM, _I.SIGMA_3),
    ]
)

TURBO_POLYNOMIAL_MANIFEST = PolynomialManifest(
    [
        _describe("W_1", True, _W, _I.W_1),
        _describe("W_2", True, _W, _I.W_2),
        _describe("W_3", True, _W, _I.W_3),
        _describe("W_4", True, _W, _I.W_4),
        _describe("Z_PERM", True, _W, _I.Z),
        _describe("Q_1", False, _SEL, _I.Q_1),
        _describe("Q_2", False, _SEL, _I.Q_2),
        _describe("Q_3", False, _SEL, _I.Q_3),
        _describe("Q_4", False, _SEL, _I.Q_4),
        _describe("Q_5", False, _SEL, _I.Q_5),
        _describe("Q_M", False, _SEL, _I.Q_M),
        _describe("Q_C", False, _SEL, _I.Q_C),
        _describe("Q_ARITHMETIC", False, _SEL, _I.Q_ARITHMETIC, "q_arith"),
        _describe("Q_RANGE", False, _SEL, _I.Q_RANGE),
        _describe("Q_FIXED_BASE", False, _SEL, _I.Q_FIXED_BASE),
        _describe("Q_LOGIC", False, _SEL, _I.Q_LOGIC),
        _describe("SIGMA_1", False, _PERM, _I.SIGMA_1),
        _describe("SIGMA_2", False, _PERM, _I.SIGMA_2),
        _describe("SIGMA_3", False, _PERM, _I.SIGMA_3),
        _describe("SIGMA_4", False, _PERM, _I.SIGMA_4),
    ]
)

ULTRA_POLYNOMIAL_MANIFEST = PolynomialManifest(
    [
        _describe("W_1", True, _W, _I.W_1),
        _describe("W_2", True, _W, _I.W_2),
        _describe("W_3", True, _W, _I.W_3),
        _describe("W_4", True, _W, _I.W_4),
        _describe("S", True, _W, _I.S),
        _describe("Z_PERM", True, _W, _I.Z),
        _describe("Z_LOOKUP", True, _W, _I.Z_LOOKUP),
        _describe("Q_1", False, _SEL, _I.Q_1),
        _describe("Q_2", False, _SEL, _I.Q_2),
        _describe("Q_3", False, _SEL, _I.Q_3),
        _describe("Q_4", False, _SEL, _I.Q_4),
        _describe("Q_M", False, _SEL, _I.Q_M),
        _describe("Q_C", False, _SEL, _I.Q_C),
        _describe("Q_ARITHMETIC", False, _SEL, _I.Q_ARITHMETIC, "q_arith"),
        _describe("Q_SORT", False, _SEL, _I.Q_SORT),
        _describe("Q_ELLIPTIC", False, _SEL, _I.Q_ELLIPTIC),
        _describe("Q_AUX", False, _SEL, _I.Q_AUX),
        _describe("SIGMA_1", False, _PERM, _I.SIGMA_1),
        _describe("SIGMA_2", False, _PERM, _I.SIGMA_2),
        _describe("SIGMA_3", False, _PERM, _I.SIGMA_3),
        _describe("SIGMA_4", False, _PERM, _I.SIGMA_4),
        _describe("TABLE_1", True, _SEL, _I.TABLE_1, "table_value_1"),
        _describe("TABLE_2", True, _SEL, _I.TABLE_2, "table_value_2"),
        _describe("TABLE_3", True, _SEL, _I.TABLE_3, "table_value_3"),
        _describe("TABLE_4", True, _SEL, _I.TABLE_4, "table_value_4"),
        _describe("TABLE_TYPE", False, _SEL, _I.TABLE_TYPE),
        _describe("ID_1", False, _PERM, _I.ID_1),
        _describe("ID_2", False, _PERM, _I.ID_2),
        _describe("ID_3", False, _PERM, _I.ID_3),
        _describe("ID_4", False, _PERM, _I.ID_4),
    ]
)

STANDARD_MANIFEST_SIZE = len(STANDARD_POLYNOMIAL_MANIFEST)
TURBO_MANIFEST_SIZE = len(TURBO_POLYNOMIAL_MANIFEST)
ULTRA_MANIFEST_SIZE = len(ULTRA_POLYNOMIAL_MANIFEST)

_MANIFESTS_BY_COMPOSER = {
    "standard": STANDARD_POLYNOMIAL_MANIFEST,
    "turbo": TURBO_POLYNOMIAL_MANIFEST,
    "plookup": ULTRA_POLYNOMIAL_MANIFEST,
}