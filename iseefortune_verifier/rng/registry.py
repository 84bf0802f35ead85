"""Versioned RNG algorithms, selected by tag.

The set is closed: a tag either maps to exactly one algorithm or is
rejected. There is no default fallback, so a record tagged with a future
version can never be checked against the v1 byte layout.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from . import v1
from .types import RNG_VERSION_V1, UnsupportedVersionError, VerificationResult

RngAlgorithm = Callable[[int, str, int], VerificationResult]

_ALGORITHMS: Mapping[str, RngAlgorithm] = MappingProxyType({
    v1.RNG_VERSION: v1.verify,
})

SUPPORTED_VERSIONS: Tuple[str, ...] = tuple(sorted(_ALGORITHMS))


def is_supported(rng_version: str) -> bool:
    return rng_version in _ALGORITHMS


def get_algorithm(rng_version: str) -> RngAlgorithm:
    """Look up the algorithm registered for a version tag.

    Raises:
        UnsupportedVersionError: If the tag is unknown
    """
    try:
        return _ALGORITHMS[rng_version]
    except (KeyError, TypeError):
        raise UnsupportedVersionError(
            actual=rng_version,
            expected=", ".join(SUPPORTED_VERSIONS),
            message=(
                f"unsupported rng_version {rng_version!r}; "
                f"supported: {', '.join(SUPPORTED_VERSIONS)}"
            ),
        ) from None


def verify(
    slot: int,
    blockhash: str,
    modulus: int,
    *,
    rng_version: str = RNG_VERSION_V1,
) -> VerificationResult:
    """Verify using the algorithm registered under ``rng_version``."""
    algorithm = get_algorithm(rng_version)
    return algorithm(slot, blockhash, modulus)


__all__ = [
    "RngAlgorithm",
    "SUPPORTED_VERSIONS",
    "is_supported",
    "get_algorithm",
    "verify",
]
