"""Exceptions raised inside the verification package.

None of these escape ``VerificationOrchestrator.verify``; they mark the seams
where collaborators (country lookup, HTTP transport) can fail.
"""


class VerificationError(Exception):
    """Base class for verification errors."""


class CountryNotFoundError(VerificationError, LookupError):
    """Raised when a blacklist identifier cannot be resolved to a country."""

    def __init__(self, identifier: str, reason: str | None = None):
        message = f"Country not found for identifier '{identifier}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.identifier = identifier


class TransportError(VerificationError):
    """Raised when the provider could not be reached at all."""
