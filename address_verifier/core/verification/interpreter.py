"""Interpretation of provider responses.

The first candidate returned by the provider is authoritative. Its
standardization and geocoding results are judged independently: either can
write fields onto the record, but the call only counts as verified when both
are accepted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from http import HTTPStatus

from pydantic import ValidationError

from address_verifier.core.logging import get_logger
from address_verifier.core.verification.constants import (
    INVALID_RESPONSE_RESULT,
    NO_MATCH_RESULT,
    RESULT_TEMPLATE,
    VERIFIED_STATUS,
)
from address_verifier.core.verification.policy import PrecisionPolicy
from address_verifier.core.verification.request_builder import RouteKind
from address_verifier.models.address import AddressUpdate, GeoPoint
from address_verifier.models.smarty import Candidate, parse_first_candidate

logger = get_logger(module="verification_interpreter")

OUTCOME_VERIFIED = "verified"
OUTCOME_REJECTED = "rejected"
OUTCOME_NO_MATCH = "no_match"
OUTCOME_HTTP_ERROR = "http_error"
OUTCOME_INVALID_RESPONSE = "invalid_response"
OUTCOME_TRANSPORT_ERROR = "transport_error"


@dataclass
class Interpretation:
    """Result of interpreting one provider response."""

    verified: bool
    summary: str
    outcome: str
    update: AddressUpdate = field(default_factory=AddressUpdate)


class ResponseInterpreter:
    """Turns a provider response into field updates and a result summary."""

    def __init__(
        self,
        standardization_policy: PrecisionPolicy,
        geocode_policy: PrecisionPolicy,
    ):
        self.standardization_policy = standardization_policy
        self.geocode_policy = geocode_policy

    def interpret(
        self,
        status_code: int,
        status_description: str,
        body: str,
        route: RouteKind,
        now: datetime,
    ) -> Interpretation:
        """Interpret a provider response.

        Args:
            status_code: HTTP status returned by the provider
            status_description: HTTP reason phrase, used as the summary on error
            body: Raw response body
            route: Route the request was sent on
            now: Timestamp written into ``standardized_at``/``geocoded_at``

        Returns:
            Interpretation with verification flag, summary and field updates
        """
        if status_code != HTTPStatus.OK:
            logger.warning(
                "provider_http_error",
                status_code=status_code,
                status_description=status_description,
            )
            return Interpretation(
                verified=False, summary=status_description, outcome=OUTCOME_HTTP_ERROR
            )

        try:
            candidate = parse_first_candidate(body)
        except ValidationError as e:
            logger.warning(
                "provider_response_invalid",
                error_count=e.error_count(),
                route=route.value,
            )
            return Interpretation(
                verified=False,
                summary=INVALID_RESPONSE_RESULT,
                outcome=OUTCOME_INVALID_RESPONSE,
            )

        if candidate is None:
            return Interpretation(
                verified=False, summary=NO_MATCH_RESULT, outcome=OUTCOME_NO_MATCH
            )

        return self._interpret_candidate(candidate, route, now)

    def _interpret_candidate(
        self, candidate: Candidate, route: RouteKind, now: datetime
    ) -> Interpretation:
        verified = True
        update = AddressUpdate()
        analysis = candidate.analysis
        metadata = candidate.metadata

        if analysis.verification_status == VERIFIED_STATUS and (
            self.standardization_policy.accepts(analysis.address_precision)
        ):
            if route is RouteKind.INTERNATIONAL:
                self._map_international(candidate, update)
            else:
                self._map_domestic(candidate, update)
            update.standardized_at = now
        else:
            logger.info(
                "standardization_rejected",
                verification_status=analysis.verification_status,
                address_precision=analysis.address_precision,
            )
            verified = False

        update.geocode_attempted_result = metadata.geocode_precision
        point = None
        if self.geocode_policy.accepts(metadata.geocode_precision):
            point = self._geo_point(candidate)
        if point is not None:
            update.geo_point = point
            update.geocoded_at = now
        else:
            logger.info(
                "geocode_rejected",
                geocode_precision=metadata.geocode_precision,
                latitude=metadata.latitude,
                longitude=metadata.longitude,
            )
            verified = False

        summary = RESULT_TEMPLATE.format(
            verification_status=analysis.verification_status,
            address_precision=analysis.address_precision,
            geocode_precision=metadata.geocode_precision,
        )
        return Interpretation(
            verified=verified,
            summary=summary,
            outcome=OUTCOME_VERIFIED if verified else OUTCOME_REJECTED,
            update=update,
        )

    @staticmethod
    def _geo_point(candidate: Candidate) -> GeoPoint | None:
        """Candidate point, or None when coordinates are missing or invalid."""
        latitude = candidate.metadata.latitude
        longitude = candidate.metadata.longitude
        if latitude is None or longitude is None:
            return None
        try:
            return GeoPoint(latitude=latitude, longitude=longitude)
        except ValidationError:
            return None

    @staticmethod
    def _map_international(candidate: Candidate, update: AddressUpdate) -> None:
        components = candidate.components
        city = components.dependent_locality
        update.street1 = candidate.address1
        # The provider repeats the locality in address2 when there is no second line
        update.street2 = None if candidate.address2 == city else candidate.address2
        update.city = city
        update.state = components.administrative_area
        update.postal_code = components.postal_code

    @staticmethod
    def _map_domestic(candidate: Candidate, update: AddressUpdate) -> None:
        components = candidate.components
        update.street1 = candidate.delivery_line_1
        update.street2 = candidate.delivery_line_2
        update.city = components.city_name
        update.county = components.county_name
        update.state = components.state_abbreviation
        update.postal_code = f"{components.zipcode}-{components.plus4_code}"
