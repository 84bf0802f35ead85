"""Pinned verification policy.

These values define what a published ISeeFortune winning number means.
They are deliberately not read from the environment or config files:
changing either one changes every verification result.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from iseefortune_verifier.rng.types import RNG_VERSION_V1, U64_MAX


class VerifierParams(BaseModel):
    """Policy applied by the CLI and the vector runner."""

    model_config = ConfigDict(frozen=True)

    rng_version: Literal["v1"] = Field(
        default=RNG_VERSION_V1,
        description="Algorithm version that published results are checked against.",
    )
    modulus: int = Field(
        default=10,
        ge=1,
        description="Exclusive upper bound of the winning number (digits 0-9).",
    )

    @field_validator("modulus")
    @classmethod
    def _modulus_fits_u64(cls, value: int) -> int:
        if value > U64_MAX:
            raise ValueError("modulus must fit in u64")
        return value


# Default instance for easy import
DEFAULT_VERIFIER_PARAMS = VerifierParams()


def get_verifier_params() -> VerifierParams:
    """Get the pinned verification policy."""
    return DEFAULT_VERIFIER_PARAMS


__all__ = [
    "VerifierParams",
    "DEFAULT_VERIFIER_PARAMS",
    "get_verifier_params",
]
