"""Structured audit logging for verification runs.

Records every intermediate value needed to reproduce a verification
by hand, so a disputed draw can be traced from the log alone.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from iseefortune_verifier.rng.types import VerificationError, VerificationResult


def _truncate(value: str, keep: int = 16) -> str:
    if len(value) <= keep:
        return value
    return value[:keep] + "..."


class VerificationAuditLogger:
    """Structured logger for the verification audit trail."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize the audit logger.

        Args:
            logger: Optional logger instance (creates one if not provided)
        """
        self.logger = logger or logging.getLogger("iseefortune.audit")

    def log_verification(self, result: VerificationResult) -> None:
        """Log a successful verification with its intermediate values.

        Args:
            result: Verification outcome
        """
        self.logger.debug({
            "event": "verification",
            "rng_version": result.rng_version,
            "slot": result.slot,
            "blockhash": _truncate(result.blockhash),
            "digest_sha256": _truncate(result.debug.digest_hex),
            "digest_sum": result.debug.digest_sum,
            "modulus": result.modulus,
            "winning_number": result.winning_number,
        })

    def log_failure(
        self,
        rng_version: str,
        slot: object,
        error: VerificationError,
        vector_name: Optional[str] = None,
    ) -> None:
        """Log a rejected verification.

        Args:
            rng_version: Version the caller asked for
            slot: Slot as supplied by the caller
            error: The raised verification error
            vector_name: Test vector name, when run from a vector file
        """
        event = {
            "event": "verification_failed",
            "rng_version": rng_version,
            "slot": slot,
            "error_kind": error.kind,
            "error": str(error),
        }
        if vector_name is not None:
            event["vector"] = vector_name
        self.logger.warning(event)

    def log_vector_run(self, total: int, passed: int, failed: int) -> None:
        self.logger.info({
            "event": "vector_run_complete",
            "total": total,
            "passed": passed,
            "failed": failed,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })


__all__ = ["VerificationAuditLogger"]
