"""Provider request construction for the US and International Street APIs."""

from dataclasses import dataclass, field
from enum import Enum

from address_verifier.core.verification.config import VerificationConfig
from address_verifier.core.verification.constants import DOMESTIC_COUNTRY
from address_verifier.models.address import Address


class RouteKind(str, Enum):
    """Which provider schema a verification uses."""

    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


def choose_route(address: Address, default_to_us: bool) -> RouteKind:
    """Pick the provider route for ``address``.

    US addresses use the domestic API, as do addresses with no country when
    ``default_to_us`` is set. Everything else goes international.
    """
    if address.country == DOMESTIC_COUNTRY:
        return RouteKind.DOMESTIC
    if not address.country and default_to_us:
        return RouteKind.DOMESTIC
    return RouteKind.INTERNATIONAL


@dataclass(frozen=True)
class ProviderRequest:
    """A read-only GET against one of the provider endpoints."""

    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"


class RequestBuilder:
    """Builds provider query parameters for a route."""

    def __init__(self, config: VerificationConfig):
        self.config = config

    def build(self, address: Address, route: RouteKind) -> ProviderRequest:
        """Build the request for ``address`` on ``route``.

        Args:
            address: Address whose input fields are submitted
            route: Domestic or international schema

        Returns:
            ProviderRequest carrying URL, query parameters and headers
        """
        if route is RouteKind.DOMESTIC:
            url = self.config.us_street_url
            params = self._domestic_params(address)
        else:
            url = self.config.international_street_url
            params = self._international_params(address)

        params["auth-id"] = self.config.auth_id
        params["auth-token"] = self.config.auth_token
        return ProviderRequest(
            url=url,
            params=params,
            headers={"Accept": "application/json"},
        )

    @staticmethod
    def _domestic_params(address: Address) -> dict[str, str]:
        params: dict[str, str] = {}
        if address.street1 or address.street2:
            # Lines are joined without a separator
            params["street"] = (address.street1 or "") + (address.street2 or "")
        if address.city:
            params["city"] = address.city
        if address.state:
            params["state"] = address.state
        if address.postal_code:
            params["zipcode"] = address.postal_code
        return params

    @staticmethod
    def _international_params(address: Address) -> dict[str, str]:
        params: dict[str, str] = {}
        if address.street1:
            params["address1"] = address.street1
        if address.street2:
            params["address2"] = address.street2
        if address.city:
            params["locality"] = address.city
        if address.state:
            params["administrative_area"] = address.state
        if address.postal_code:
            params["postal_code"] = address.postal_code
        params["country"] = address.country or ""
        return params
