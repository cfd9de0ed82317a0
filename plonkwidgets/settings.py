"""Per-composer prover and verifier parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HasherType(Enum):
    """Hash used to drive the Fiat-Shamir transcript."""

    PEDERSEN_BLAKE3S = "pedersen_blake3s"
    PLOOKUP_PEDERSEN_BLAKE3S = "plookup_pedersen_blake3s"
    KECCAK256 = "keccak256"


def requires_shifted_wire(wire_shift_settings: int, wire_index: int) -> bool:
    """Return True if bit ``wire_index`` of ``wire_shift_settings`` is set."""
    if wire_index < 0:
        raise ValueError(f"wire index must be non-negative, got {wire_index}")
    return (wire_shift_settings >> wire_index) & 1 == 1


@dataclass(frozen=True)
class Settings:
    """Fixed parameters of one proof system flavour.

    ``hasher`` is None where the flavour leaves the transcript hash to the caller.
    """

    name: str
    hasher: HasherType | None
    num_challenge_bytes: int
    program_width: int
    num_shifted_wire_evaluations: int
    wire_shift_settings: int
    permutation_shift: int = 30
    permutation_mask: int = 0xC0000000
    num_roots_cut_out_of_vanishing_polynomial: int = 4
    is_plookup: bool = False

    def requires_shifted_wire(self, wire_index: int) -> bool:
        """Return True if wire ``wire_index`` needs an evaluation at X.ω."""
        return requires_shifted_wire(self.wire_shift_settings, wire_index)


STANDARD_SETTINGS = Settings(
    name="standard",
    hasher=None,
    num_challenge_bytes=16,
    program_width=3,
    num_shifted_wire_evaluations=1,
    wire_shift_settings=0b0100,
)

TURBO_SETTINGS = Settings(
    name="turbo",
    hasher=HasherType.PEDERSEN_BLAKE3S,
    num_challenge_bytes=16,
    program_width=4,
    num_shifted_wire_evaluations=4,
    wire_shift_settings=0b1111,
)

ULTRA_SETTINGS = Settings(
    name="ultra",
    hasher=HasherType.PLOOKUP_PEDERSEN_BLAKE3S,
    num_challenge_bytes=16,
    program_width=4,
    num_shifted_wire_evaluations=4,
    wire_shift_settings=0b1111,
)

ULTRA_TO_STANDARD_SETTINGS = Settings(
    name="ultra_to_standard",
    hasher=HasherType.PEDERSEN_BLAKE3S,
    num_challenge_bytes=16,
    program_width=4,
    num_shifted_wire_evaluations=4,
    wire_shift_settings=0b1111,
)

ULTRA_WITH_KECCAK_SETTINGS = Settings(
    name="ultra_with_keccak",
    hasher=HasherType.KECCAK256,
    num_challenge_bytes=32,
    program_width=4,
    num_shifted_wire_evaluations=4,
    wire_shift_settings=0b1111,
)

_SETTINGS_BY_NAME = {
    settings.name: settings
    for settings in (
        STANDARD_SETTINGS,
        TURBO_SETTINGS,
        ULTRA_SETTINGS,
        ULTRA_TO_STANDARD_SETTINGS,
        ULTRA_WITH_KECCAK_SETTINGS,
    )
}


def settings_for(name: str) -> Settings:
    """Return the settings called ``name`` (e.g. 'standard', 'ultra_with_keccak')."""
    key = str(name).strip().lower().replace("-", "_")
    try:
        return _SETTINGS_BY_NAME[key]
    except KeyError:
        raise ValueError(f"unknown settings {name!r}") from None