"""Type definitions, constants and errors for winning-number verification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


RNG_VERSION_V1 = "v1"

U64_MAX = 2**64 - 1

SLOT_BYTES = 8  # u64, little-endian
BLOCKHASH_BYTES = 32
MESSAGE_BYTES = SLOT_BYTES + BLOCKHASH_BYTES

DIGEST_BYTES = 32  # SHA-256
MAX_DIGEST_SUM = DIGEST_BYTES * 255


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


class VerificationError(Exception):
    """Base class for every verification failure."""

    kind = "VerificationError"


class InvalidModulusError(VerificationError):
    """Raised when the modulus is zero or outside the u64 range."""

    kind = "InvalidModulus"


class InvalidSlotError(VerificationError):
    """Raised when the slot does not fit in an unsigned 64-bit integer."""

    kind = "InvalidSlot"


class InvalidEncodingError(VerificationError):
    """Raised when the blockhash text is not valid base58."""

    kind = "InvalidEncoding"


class InvalidLengthError(VerificationError):
    """Raised when the decoded blockhash is not exactly 32 bytes."""

    kind = "InvalidLength"

    def __init__(self, actual_length: int, expected_length: int = BLOCKHASH_BYTES):
        self.actual_length = actual_length
        self.expected_length = expected_length
        super().__init__(
            f"decoded blockhash must be {expected_length} bytes, got {actual_length}"
        )


class VersionMismatchError(VerificationError):
    """Raised when a declared rng_version does not match the pinned one."""

    kind = "VersionMismatch"

    def __init__(
        self,
        actual: str,
        expected: str,
        vector_name: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.actual = actual
        self.expected = expected
        self.vector_name = vector_name
        if message is None:
            subject = f"vector '{vector_name}' uses" if vector_name else "got"
            message = f"{subject} unsupported rng_version {actual!r} (expected {expected!r})"
        super().__init__(message)


class UnsupportedVersionError(VersionMismatchError):
    """Raised when no algorithm is registered for a version tag."""

    kind = "UnsupportedVersion"


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class VerifyDebug:
    """Every intermediate value of one verification, hex-encoded lowercase."""

    decoded_len: int
    slot_le_hex: str
    blockhash_hex: str
    message_hex: str
    digest_hex: str
    digest_sum: int
    modulus: int


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a successful verification."""

    rng_version: str
    slot: int
    blockhash: str
    modulus: int
    winning_number: int
    debug: VerifyDebug

    def to_dict(self, include_debug: bool = False) -> Dict[str, Any]:
        """Render the result in the published JSON shape."""
        out: Dict[str, Any] = {
            "rng_version": self.rng_version,
            "slot": self.slot,
            "blockhash": self.blockhash,
            "winning_number": self.winning_number,
        }
        if include_debug:
            out["debug"] = {
                "digest_sha256": self.debug.digest_hex,
                "digest_sum_u64": self.debug.digest_sum,
            }
        return out


__all__ = [
    "RNG_VERSION_V1",
    "U64_MAX",
    "SLOT_BYTES",
    "BLOCKHASH_BYTES",
    "MESSAGE_BYTES",
    "DIGEST_BYTES",
    "MAX_DIGEST_SUM",
    "VerificationError",
    "InvalidModulusError",
    "InvalidSlotError",
    "InvalidEncodingError",
    "InvalidLengthError",
    "VersionMismatchError",
    "UnsupportedVersionError",
    "VerifyDebug",
    "VerificationResult",
]
