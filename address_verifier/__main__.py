"""CLI interface for verifying a single address."""

import argparse
import json
import sys

from address_verifier.core.config import settings
from address_verifier.core.logging import configure_logging, get_logger
from address_verifier.core.verification import (
    RequestsTransport,
    VerificationOrchestrator,
)
from address_verifier.models.address import Address

logger = get_logger(module="cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="address-verifier",
        description="Standardize and geocode an address with SmartyStreets",
    )
    parser.add_argument("--street1", help="First street line")
    parser.add_argument("--street2", help="Second street line")
    parser.add_argument("--city", help="City or locality")
    parser.add_argument("--state", help="State or administrative area")
    parser.add_argument("--postal-code", help="ZIP or postal code")
    parser.add_argument("--country", help="Country code, e.g. US or FR")
    parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Verify even if a recent attempt is recorded",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the verification CLI."""
    args = build_parser().parse_args(argv)

    configure_logging(
        level="debug" if args.verbose else settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
    )

    if not settings.SMARTY_AUTH_ID or not settings.SMARTY_AUTH_TOKEN:
        logger.error(
            "missing_credentials", hint="set SMARTY_AUTH_ID and SMARTY_AUTH_TOKEN"
        )
        return 2

    address = Address(
        street1=args.street1,
        street2=args.street2,
        city=args.city,
        state=args.state,
        postal_code=args.postal_code,
        country=args.country,
    )

    config = settings.to_verification_config()
    logger.debug("verification_config", config=config.to_dict())

    transport = RequestsTransport(timeout=settings.SMARTY_TIMEOUT)
    try:
        service = VerificationOrchestrator(
            config,
            transport=transport,
            resolver=settings.country_resolver(),
        )
        outcome = service.verify(address, force_reverify=args.force)
    finally:
        transport.close()

    output = {
        "verified": outcome.verified,
        "result": outcome.result,
        "address": address.model_dump(mode="json"),
    }
    print(json.dumps(output, indent=2))
    return 0 if outcome.verified else 1


if __name__ == "__main__":
    sys.exit(main())
