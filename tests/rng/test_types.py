"""Tests for result types and the error taxonomy."""

from __future__ import annotations

import json

import pytest

from iseefortune_verifier.rng.types import (
    InvalidEncodingError,
    InvalidLengthError,
    InvalidModulusError,
    InvalidSlotError,
    UnsupportedVersionError,
    VerificationError,
    VersionMismatchError,
)
from iseefortune_verifier.rng.v1 import verify


class TestErrorTaxonomy:
    """Each failure kind is distinguishable."""

    @pytest.mark.parametrize(
        "cls,kind",
        [
            (InvalidModulusError, "InvalidModulus"),
            (InvalidSlotError, "InvalidSlot"),
            (InvalidEncodingError, "InvalidEncoding"),
            (InvalidLengthError, "InvalidLength"),
            (VersionMismatchError, "VersionMismatch"),
            (UnsupportedVersionError, "UnsupportedVersion"),
        ],
    )
    def test_kinds(self, cls, kind):
        assert issubclass(cls, VerificationError)
        assert cls.kind == kind

    def test_invalid_length_message(self):
        err = InvalidLengthError(31)
        assert err.actual_length == 31
        assert err.expected_length == 32
        assert str(err) == "decoded blockhash must be 32 bytes, got 31"

    def test_version_mismatch_with_vector(self):
        err = VersionMismatchError(actual="v2", expected="v1", vector_name="future")
        assert err.vector_name == "future"
        assert "vector 'future'" in str(err)
        assert "'v2'" in str(err)

    def test_version_mismatch_without_vector(self):
        err = VersionMismatchError(actual="v2", expected="v1")
        assert err.vector_name is None
        assert str(err).startswith("got unsupported rng_version")


class TestResultToDict:
    """Tests for the published JSON shape."""

    def test_without_debug(self):
        out = verify(123456789, "4wBqpZM9xaSheZzJSMawUKKwhdpChKbZ5eu5ky4Vigw", 10).to_dict()
        assert list(out) == ["rng_version", "slot", "blockhash", "winning_number"]
        assert out["rng_version"] == "v1"
        assert out["winning_number"] == 7

    def test_with_debug(self):
        out = verify(0, "1" * 32, 10).to_dict(include_debug=True)
        assert out["debug"] == {
            "digest_sha256": "2c34ce1df23b838c5abf2a7f6437cca3d3067ed509ff25f11df6b11b582b51eb",
            "digest_sum_u64": 3899,
        }

    def test_json_serializable(self):
        out = verify(2**64 - 1, "1" * 32, 10).to_dict(include_debug=True)
        assert json.loads(json.dumps(out))["slot"] == 2**64 - 1
