"""Shared fixtures for verification tests."""

import json
from datetime import UTC, datetime
from typing import Any, Callable

import pytest

from address_verifier.core.verification import (
    ProviderRequest,
    TransportResponse,
    VerificationConfig,
    VerificationOrchestrator,
)
from address_verifier.models.address import Address

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


class FakeTransport:
    """Transport that records requests and replays a canned response."""

    def __init__(self, response: TransportResponse | None = None):
        self.response = response or TransportResponse(200, "OK", "[]")
        self.error: Exception | None = None
        self.requests: list[ProviderRequest] = []

    def send(self, request: ProviderRequest) -> TransportResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def respond(self, status_code: int, reason: str, body: Any) -> None:
        """Set the next response; non-string bodies are JSON encoded."""
        if not isinstance(body, str):
            body = json.dumps(body)
        self.response = TransportResponse(status_code, reason, body)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def build_us_candidate(**overrides: Any) -> dict[str, Any]:
    """A verified US Street API candidate."""
    candidate = {
        "delivery_line_1": "1600 Amphitheatre Pkwy",
        "delivery_line_2": "",
        "components": {
            "city_name": "Mountain View",
            "county_name": "Santa Clara",
            "state_abbreviation": "CA",
            "zipcode": "94043",
            "plus4_code": "1351",
        },
        "analysis": {
            "verification_status": "verified",
            "address_precision": "DeliveryPoint",
        },
        "metadata": {
            "geocode_precision": "Premise",
            "latitude": 37.42240,
            "longitude": -122.08421,
        },
    }
    return _merge(candidate, overrides)


def build_international_candidate(**overrides: Any) -> dict[str, Any]:
    """A verified International Street API candidate."""
    candidate = {
        "address1": "10 Rue de Rivoli",
        "address2": "75004 Paris",
        "components": {
            "dependent_locality": "Paris",
            "administrative_area": "Ile-de-France",
            "postal_code": "75004",
        },
        "analysis": {
            "verification_status": "verified",
            "address_precision": "Premise",
        },
        "metadata": {
            "geocode_precision": "Premise",
            "latitude": 48.85540,
            "longitude": 2.36010,
        },
    }
    return _merge(candidate, overrides)


@pytest.fixture
def now() -> datetime:
    """Fixed current time."""
    return FIXED_NOW


@pytest.fixture
def verification_config() -> VerificationConfig:
    """Configuration accepting street-level precisions."""
    return VerificationConfig(
        auth_id="test-id",
        auth_token="test-token",
        acceptable_standardization_precisions={"Premise", "DeliveryPoint"},
        acceptable_geocode_precisions={"Premise", "DeliveryPoint"},
        default_to_us=True,
    )


@pytest.fixture
def transport() -> FakeTransport:
    """Transport returning an empty candidate list by default."""
    return FakeTransport()


@pytest.fixture
def make_orchestrator(
    verification_config: VerificationConfig, transport: FakeTransport, now: datetime
) -> Callable[..., VerificationOrchestrator]:
    """Factory for orchestrators with the fake transport and fixed clock."""

    def factory(**kwargs: Any) -> VerificationOrchestrator:
        kwargs.setdefault("transport", transport)
        kwargs.setdefault("clock", lambda: now)
        config = kwargs.pop("config", verification_config)
        return VerificationOrchestrator(config, **kwargs)

    return factory


@pytest.fixture
def us_address() -> Address:
    """Unverified US address."""
    return Address(
        street1="1600 Amphitheatre Parkway",
        city="Mountain View",
        state="CA",
        postal_code="94043",
        country="US",
    )


@pytest.fixture
def fr_address() -> Address:
    """Unverified French address."""
    return Address(
        street1="10 rue de rivoli",
        city="Paris",
        postal_code="75004",
        country="FR",
    )


@pytest.fixture
def us_candidate() -> Callable[..., dict[str, Any]]:
    """Factory for US candidates with nested overrides."""
    return build_us_candidate


@pytest.fixture
def international_candidate() -> Callable[..., dict[str, Any]]:
    """Factory for international candidates with nested overrides."""
    return build_international_candidate
