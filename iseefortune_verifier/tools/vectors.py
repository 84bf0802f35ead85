"""Run frozen RNG test vectors against the verifier.

Each record pins a slot, a blockhash and the winning number the live
service published for them. Records declaring a version other than the
pinned one abort the run: a v2 record must never be checked with v1 rules.

Usage:
    python -m iseefortune_verifier.tools.vectors [PATH]
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from iseefortune_verifier.audit.logging import VerificationAuditLogger
from iseefortune_verifier.config import VerifierParams, get_verifier_params, load_settings
from iseefortune_verifier.rng import registry
from iseefortune_verifier.rng.types import U64_MAX, VerificationError, VersionMismatchError
from iseefortune_verifier.shared.logging import setup_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_VERSION_MISMATCH = 2


class VectorFileError(Exception):
    """Raised when a vector file cannot be read or parsed."""

    pass


class RngVector(BaseModel):
    """One frozen test vector."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1)
    rng_version: str
    # JSON-safe producers write large slots as decimal strings
    slot: int = Field(ge=0, strict=True)
    blockhash: str
    expected_winning_number: int = Field(ge=0, strict=True)

    @field_validator("slot", mode="before")
    @classmethod
    def _parse_decimal_slot(cls, value: object) -> object:
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)
        return value

    @field_validator("slot")
    @classmethod
    def _slot_fits_u64(cls, value: int) -> int:
        if value > U64_MAX:
            raise ValueError("slot must fit in u64")
        return value


_VECTOR_LIST = TypeAdapter(List[RngVector])


@dataclass(frozen=True)
class VectorOutcome:
    name: str
    expected: int
    actual: Optional[int] = None
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.expected

    def describe(self) -> str:
        if self.passed:
            return f"ok   {self.name}"
        if self.error is not None:
            return f"FAIL {self.name}: {self.error}"
        return f"FAIL {self.name}: expected {self.expected}, got {self.actual}"


@dataclass
class VectorReport:
    outcomes: List[VectorOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.total > 0 and self.failed == 0

    def failures(self) -> List[VectorOutcome]:
        return [o for o in self.outcomes if not o.passed]


def load_vectors(path: Path | str) -> List[RngVector]:
    """Load and validate a JSON array of vector records.

    Raises:
        VectorFileError: File missing or unreadable, invalid JSON,
            a record failing validation, or no records at all
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise VectorFileError(f"failed to read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise VectorFileError(f"failed to parse {path}: {e}") from e

    try:
        vectors = _VECTOR_LIST.validate_python(data)
    except PydanticValidationError as e:
        raise VectorFileError(f"invalid vector record in {path}: {e}") from e

    if not vectors:
        raise VectorFileError(f"{path} is empty; add at least one test vector")
    return vectors


def check_vector(
    vector: RngVector,
    *,
    params: Optional[VerifierParams] = None,
    audit: Optional[VerificationAuditLogger] = None,
) -> VectorOutcome:
    """Verify one record with the pinned modulus.

    Raises:
        VersionMismatchError: If the record's rng_version is not the pinned one
    """
    params = params or get_verifier_params()
    audit = audit or VerificationAuditLogger()

    if vector.rng_version != params.rng_version:
        raise VersionMismatchError(
            actual=vector.rng_version,
            expected=params.rng_version,
            vector_name=vector.name,
        )

    try:
        result = registry.verify(
            vector.slot,
            vector.blockhash,
            params.modulus,
            rng_version=vector.rng_version,
        )
    except VerificationError as e:
        audit.log_failure(vector.rng_version, vector.slot, e, vector_name=vector.name)
        return VectorOutcome(
            name=vector.name,
            expected=vector.expected_winning_number,
            error=f"{e.kind}: {e}",
        )

    audit.log_verification(result)
    return VectorOutcome(
        name=vector.name,
        expected=vector.expected_winning_number,
        actual=result.winning_number,
    )


def run_vectors(
    vectors: Iterable[RngVector],
    *,
    params: Optional[VerifierParams] = None,
    audit: Optional[VerificationAuditLogger] = None,
) -> VectorReport:
    """Check every record, preserving input order.

    A version mismatch propagates and aborts the run.
    """
    params = params or get_verifier_params()
    audit = audit or VerificationAuditLogger()

    report = VectorReport()
    for vector in vectors:
        report.outcomes.append(check_vector(vector, params=params, audit=audit))

    audit.log_vector_run(report.total, report.passed, report.failed)
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Load .env if not in test mode
    if os.environ.get("ISEEFORTUNE_TEST_MODE") != "true":
        load_dotenv()

    try:
        settings = load_settings()
    except PydanticValidationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return EXIT_FAILED
    setup_logging(settings.logging)

    parser = argparse.ArgumentParser(
        prog="iseefortune-vectors",
        description="Check ISeeFortune RNG test vectors against this verifier",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=settings.vectors_path,
        help=f"vector file (default: {settings.vectors_path})",
    )
    args = parser.parse_args(argv)

    try:
        vectors = load_vectors(args.path)
        report = run_vectors(vectors)
    except VectorFileError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILED
    except VersionMismatchError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_VERSION_MISMATCH

    for outcome in report.outcomes:
        print(outcome.describe())

    if not report.ok:
        print(f"{report.failed} of {report.total} vector(s) failed", file=sys.stderr)
        return EXIT_FAILED

    print(f"OK: {report.total} vector(s) passed")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
