"""SmartyStreets address verification service.

This module provides the verification entry point that:
- Gates records on lock state, re-verification cooldown and country blacklist
- Routes US addresses to the US Street API and the rest internationally
- Applies accepted standardization and geocoding results to the record
- Stamps attempt bookkeeping whenever the provider is contacted
"""

import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import NamedTuple

from address_verifier.core.logging import get_logger
from address_verifier.core.verification import metrics
from address_verifier.core.verification.config import VerificationConfig
from address_verifier.core.verification.constants import SERVICE_NAME
from address_verifier.core.verification.eligibility import (
    CountryResolver,
    EligibilityGate,
)
from address_verifier.core.verification.errors import TransportError
from address_verifier.core.verification.interpreter import (
    OUTCOME_TRANSPORT_ERROR,
    Interpretation,
    ResponseInterpreter,
)
from address_verifier.core.verification.request_builder import (
    RequestBuilder,
    choose_route,
)
from address_verifier.core.verification.transport import (
    RequestsTransport,
    Transport,
)
from address_verifier.models.address import Address

logger = get_logger(module="verification_service")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class VerificationOutcome(NamedTuple):
    """Whether the address verified, plus the provider result summary."""

    verified: bool
    result: str


class VerificationOrchestrator:
    """Standardizes and geocodes addresses through SmartyStreets."""

    def __init__(
        self,
        config: VerificationConfig,
        transport: Transport | None = None,
        resolver: CountryResolver | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the orchestrator.

        Args:
            config: Credentials, thresholds and routing options
            transport: HTTP transport; defaults to a requests-backed one
            resolver: Resolves blacklist identifiers to country names
            clock: Source of the current time
        """
        self.config = config
        self.transport: Transport = transport or RequestsTransport()
        self.clock = clock
        self.gate = EligibilityGate(config.blacklist, resolver)
        self.builder = RequestBuilder(config)
        self.interpreter = ResponseInterpreter(
            config.standardization_policy, config.geocode_policy
        )

    def verify(
        self, address: Address | None, force_reverify: bool = False
    ) -> VerificationOutcome:
        """Standardize and geocode ``address`` in place.

        Args:
            address: Record to verify; mutated when the provider is contacted
            force_reverify: Verify even inside the re-verification cooldown

        Returns:
            VerificationOutcome of (verified, result summary). Ineligible
            records return ``(False, "")`` untouched.
        """
        now = self.clock()
        skip_reason = self.gate.skip_reason(address, force_reverify, now)
        if skip_reason is not None or address is None:
            logger.debug("verification_skipped", reason=skip_reason)
            metrics.record_skipped(skip_reason or "missing")
            return VerificationOutcome(False, "")

        route = choose_route(address, self.config.default_to_us)
        request = self.builder.build(address, route)
        logger.info("verification_request", route=route.value, url=request.url)

        started = time.perf_counter()
        try:
            response = self.transport.send(request)
        except TransportError as e:
            interpretation = Interpretation(
                verified=False, summary=str(e), outcome=OUTCOME_TRANSPORT_ERROR
            )
        except Exception as e:
            # The message may carry the request URL and credentials
            error_type = type(e).__name__
            logger.error("unexpected_transport_error", error_type=error_type)
            interpretation = Interpretation(
                verified=False,
                summary=f"Unexpected error: {error_type}",
                outcome=OUTCOME_TRANSPORT_ERROR,
            )
        else:
            interpretation = self.interpreter.interpret(
                response.status_code, response.reason, response.body, route, now
            )
        finally:
            metrics.record_request(route.value, time.perf_counter() - started)

        if not interpretation.update.is_empty:
            address.apply(interpretation.update)
        self._stamp_attempt(address, now)
        metrics.record_outcome(interpretation.outcome)

        logger.info(
            "verification_complete",
            route=route.value,
            verified=interpretation.verified,
            outcome=interpretation.outcome,
            result=interpretation.summary,
        )
        return VerificationOutcome(interpretation.verified, interpretation.summary)

    @staticmethod
    def _stamp_attempt(address: Address, now: datetime) -> None:
        address.standardize_attempted_service = SERVICE_NAME
        address.standardize_attempted_at = now
        address.geocode_attempted_service = SERVICE_NAME
        address.geocode_attempted_at = now


# Singleton instance
_verification_service: VerificationOrchestrator | None = None


def get_verification_service() -> VerificationOrchestrator:
    """Get or create the singleton verification service instance.

    The instance is built from environment settings on first use.

    Returns:
        VerificationOrchestrator instance
    """
    global _verification_service
    if _verification_service is None:
        from address_verifier.core.config import settings

        _verification_service = VerificationOrchestrator(
            settings.to_verification_config(),
            transport=RequestsTransport(timeout=settings.SMARTY_TIMEOUT),
            resolver=settings.country_resolver(),
        )
        logger.info(
            "verification_service_created",
            config=_verification_service.config.to_dict(),
        )
    return _verification_service
