"""ISeeFortune RNG, version v1.

Re-derives the winning number published for a draw:

1. base58-decode the blockhash (Bitcoin/Solana alphabet) -> 32 bytes
2. message = slot as u64 little-endian (8 bytes) || blockhash bytes (32 bytes)
3. digest = SHA256(message)
4. winning_number = sum(digest bytes) % modulus

The byte layout, digest and reduction rule are frozen for "v1". Any change
to them is a new version and must be registered under a new tag.

Everything here is pure: no I/O, no logging, no shared state.
"""

from __future__ import annotations

import hashlib
from typing import Tuple

import base58

from .types import (
    BLOCKHASH_BYTES,
    DIGEST_BYTES,
    MESSAGE_BYTES,
    RNG_VERSION_V1,
    SLOT_BYTES,
    U64_MAX,
    InvalidEncodingError,
    InvalidLengthError,
    InvalidModulusError,
    InvalidSlotError,
    VerificationResult,
    VerifyDebug,
)

RNG_VERSION = RNG_VERSION_V1

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_modulus(modulus: int) -> int:
    """Return the modulus if it is an integer in [1, 2**64 - 1].

    Raises:
        InvalidModulusError: On zero, negative, oversized or non-integer input
    """
    if not _is_int(modulus):
        raise InvalidModulusError(f"modulus must be an integer, got {type(modulus).__name__}")
    if modulus <= 0:
        raise InvalidModulusError(f"modulus must be > 0, got {modulus}")
    if modulus > U64_MAX:
        raise InvalidModulusError(f"modulus must fit in u64, got {modulus}")
    return modulus


def encode_slot(slot: int) -> bytes:
    """Encode a slot as 8 little-endian bytes.

    Raises:
        InvalidSlotError: If the slot is not an integer in [0, 2**64 - 1]
    """
    if not _is_int(slot):
        raise InvalidSlotError(f"slot must be an integer, got {type(slot).__name__}")
    if slot < 0:
        raise InvalidSlotError(f"slot must be >= 0, got {slot}")
    if slot > U64_MAX:
        raise InvalidSlotError(f"slot must fit in u64, got {slot}")
    return slot.to_bytes(SLOT_BYTES, "little")


def decode_blockhash(blockhash: str) -> bytes:
    """Decode base58 blockhash text into exactly 32 raw bytes.

    The text must consist solely of alphabet characters; surrounding
    whitespace is not tolerated.

    Raises:
        InvalidEncodingError: On a character outside the base58 alphabet
        InvalidLengthError: If the decoded value is not 32 bytes long
    """
    if not isinstance(blockhash, str):
        raise InvalidEncodingError(
            f"invalid base58 blockhash: expected text, got {type(blockhash).__name__}"
        )
    for pos, char in enumerate(blockhash):
        if char not in _ALPHABET:
            raise InvalidEncodingError(
                f"invalid base58 blockhash: invalid character {char!r} at position {pos}"
            )

    try:
        raw = base58.b58decode(blockhash, alphabet=base58.BITCOIN_ALPHABET)
    except ValueError as e:
        raise InvalidEncodingError(f"invalid base58 blockhash: {e}") from e

    if len(raw) != BLOCKHASH_BYTES:
        raise InvalidLengthError(len(raw))
    return raw


def build_message(slot: int, blockhash_bytes: bytes) -> bytes:
    """Concatenate slot_le_bytes || blockhash_bytes (40 bytes)."""
    if len(blockhash_bytes) != BLOCKHASH_BYTES:
        raise InvalidLengthError(len(blockhash_bytes))
    return _concat(encode_slot(slot), bytes(blockhash_bytes))


def _concat(slot_le: bytes, blockhash_bytes: bytes) -> bytes:
    message = slot_le + blockhash_bytes
    assert len(message) == MESSAGE_BYTES
    return message


def reduce_digest(digest: bytes, modulus: int) -> Tuple[int, int]:
    """Sum the digest bytes and reduce modulo ``modulus``.

    Returns:
        (digest_sum, winning_number)
    """
    validate_modulus(modulus)
    return _reduce(digest, modulus)


def _reduce(digest: bytes, modulus: int) -> Tuple[int, int]:
    total = sum(digest)
    return total, total % modulus


def verify(slot: int, blockhash: str, modulus: int) -> VerificationResult:
    """Recompute the winning number for a slot and base58 blockhash.

    Args:
        slot: Solana slot used as RNG input (u64)
        blockhash: Solana blockhash, base58
        modulus: Exclusive upper bound of the winning number (> 0)

    Returns:
        VerificationResult with the winning number and every intermediate value

    Raises:
        InvalidModulusError: modulus is zero or out of range
        InvalidSlotError: slot is negative or does not fit in u64
        InvalidEncodingError: blockhash is not base58
        InvalidLengthError: blockhash does not decode to 32 bytes
    """
    validate_modulus(modulus)
    slot_le = encode_slot(slot)
    blockhash_bytes = decode_blockhash(blockhash)

    # inputs are validated above; assemble without re-checking
    message = _concat(slot_le, blockhash_bytes)
    digest = hashlib.sha256(message).digest()
    assert len(digest) == DIGEST_BYTES

    total, winning_number = _reduce(digest, modulus)

    return VerificationResult(
        rng_version=RNG_VERSION,
        slot=slot,
        blockhash=blockhash,
        modulus=modulus,
        winning_number=winning_number,
        debug=VerifyDebug(
            decoded_len=len(blockhash_bytes),
            slot_le_hex=slot_le.hex(),
            blockhash_hex=blockhash_bytes.hex(),
            message_hex=message.hex(),
            digest_hex=digest.hex(),
            digest_sum=total,
            modulus=modulus,
        ),
    )


__all__ = [
    "RNG_VERSION",
    "validate_modulus",
    "encode_slot",
    "decode_blockhash",
    "build_message",
    "reduce_digest",
    "verify",
]
