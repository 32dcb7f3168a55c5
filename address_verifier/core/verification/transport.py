"""HTTP transport used to reach the provider."""

from dataclasses import dataclass
from typing import Protocol

import requests

from address_verifier.core.logging import get_logger
from address_verifier.core.verification.errors import TransportError
from address_verifier.core.verification.request_builder import ProviderRequest

logger = get_logger(module="verification_transport")


@dataclass(frozen=True)
class TransportResponse:
    """Status line and body of a provider response."""

    status_code: int
    reason: str
    body: str


class Transport(Protocol):
    """Sends a provider request and returns the raw response."""

    def send(self, request: ProviderRequest) -> TransportResponse:
        """Send ``request``.

        Raises:
            TransportError: If no HTTP response was received
        """
        ...


class RequestsTransport:
    """Transport backed by a ``requests`` session."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        """Initialize the transport.

        Args:
            session: Optional session to reuse connections across calls
            timeout: Optional per-request timeout in seconds; None waits indefinitely
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: ProviderRequest) -> TransportResponse:
        """Send ``request`` and return the status line and body.

        Error messages from requests embed the query string, credentials
        included, so only the exception class is logged or re-raised.
        """
        try:
            response = self.session.request(
                request.method,
                request.url,
                params=request.params,
                headers=request.headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            error_type = type(e).__name__
            logger.warning(
                "provider_request_timeout", url=request.url, error_type=error_type
            )
            raise TransportError(f"Request timed out: {error_type}") from e
        except requests.RequestException as e:
            error_type = type(e).__name__
            logger.warning(
                "provider_request_failed", url=request.url, error_type=error_type
            )
            raise TransportError(f"Request failed: {error_type}") from e

        return TransportResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            body=response.text,
        )

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()
