"""Winning-number verification.

Provides:
- The frozen v1 algorithm (slot + blockhash -> winning number)
- A closed registry of algorithm versions selected by tag
"""

from __future__ import annotations

from .registry import SUPPORTED_VERSIONS, get_algorithm, is_supported, verify
from .types import (
    RNG_VERSION_V1,
    InvalidEncodingError,
    InvalidLengthError,
    InvalidModulusError,
    InvalidSlotError,
    UnsupportedVersionError,
    VerificationError,
    VerificationResult,
    VerifyDebug,
    VersionMismatchError,
)

__all__ = [
    "RNG_VERSION_V1",
    "SUPPORTED_VERSIONS",
    "get_algorithm",
    "is_supported",
    "verify",
    "VerificationError",
    "InvalidModulusError",
    "InvalidSlotError",
    "InvalidEncodingError",
    "InvalidLengthError",
    "VersionMismatchError",
    "UnsupportedVersionError",
    "VerificationResult",
    "VerifyDebug",
]
