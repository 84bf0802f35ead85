"""Command-line verifier entrypoint.

Recomputes an ISeeFortune winning number from a slot and a Solana
blockhash and prints it as JSON. The modulus is pinned by policy and is
not a flag.
"""

import argparse
import json
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from iseefortune_verifier.audit.logging import VerificationAuditLogger
from iseefortune_verifier.config import get_verifier_params, load_settings
from iseefortune_verifier.rng import registry
from iseefortune_verifier.rng.types import VerificationError
from iseefortune_verifier.shared.logging import get_logger, setup_logging

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iseefortune-verify",
        description="Verify ISeeFortune winning number from slot + Solana blockhash",
    )
    parser.add_argument("--slot", type=int, required=True, help="Slot used in RNG (u64)")
    parser.add_argument("--blockhash", type=str, required=True, help="Solana blockhash (base58)")
    parser.add_argument("--debug", action="store_true", help="Show full debug output")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Load .env if not in test mode
    if os.environ.get("ISEEFORTUNE_TEST_MODE") != "true":
        load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except PydanticValidationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return EXIT_ERROR
    setup_logging(settings.logging)
    log = get_logger("cli")
    audit = VerificationAuditLogger()
    params = get_verifier_params()

    log.debug({"verify_request": {"slot": args.slot, "rng_version": params.rng_version}})

    try:
        result = registry.verify(
            args.slot,
            args.blockhash,
            params.modulus,
            rng_version=params.rng_version,
        )
    except VerificationError as e:
        audit.log_failure(params.rng_version, args.slot, e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    audit.log_verification(result)
    print(json.dumps(result.to_dict(include_debug=args.debug), indent=2))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
