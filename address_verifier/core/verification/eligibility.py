"""Eligibility checks run before any provider request.

A record is only sent to the provider when it exists, is not locked, is not
inside the re-verification cooldown and does not belong to a blacklisted
country.
"""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Protocol

from redis import Redis, RedisError

from address_verifier.core.logging import get_logger
from address_verifier.core.verification.constants import REVERIFY_COOLDOWN
from address_verifier.core.verification.errors import CountryNotFoundError
from address_verifier.models.address import Address

logger = get_logger(module="verification_eligibility")

SKIP_MISSING = "missing"
SKIP_LOCKED = "locked"
SKIP_COOLDOWN = "cooldown"
SKIP_BLACKLISTED = "blacklisted"


def _as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class CountryResolver(Protocol):
    """Resolves a blacklist identifier to a country name."""

    def resolve(self, identifier: str) -> str:
        """Return the country for ``identifier``.

        Raises:
            CountryNotFoundError: If the identifier cannot be resolved
        """
        ...


class PassthroughCountryResolver:
    """Treats each identifier as the country value itself."""

    def resolve(self, identifier: str) -> str:
        if not identifier:
            raise CountryNotFoundError(identifier, "empty identifier")
        return identifier


class MappingCountryResolver:
    """Resolves identifiers from an in-memory lookup table."""

    def __init__(self, countries: Mapping[str, str]):
        self.countries = dict(countries)

    def resolve(self, identifier: str) -> str:
        try:
            return self.countries[identifier]
        except KeyError:
            raise CountryNotFoundError(identifier) from None


class RedisCountryResolver:
    """Resolves identifiers from a Redis hash of identifier -> country name."""

    def __init__(self, redis_client: Redis, hash_key: str = "countries"):
        """Initialize the resolver.

        Args:
            redis_client: Redis client created with ``decode_responses=True``
            hash_key: Name of the hash holding the lookup table
        """
        self.redis_client = redis_client
        self.hash_key = hash_key

    def resolve(self, identifier: str) -> str:
        try:
            country = self.redis_client.hget(self.hash_key, identifier)
        except RedisError as e:
            raise CountryNotFoundError(identifier, f"lookup failed: {e}") from e
        if not country:
            raise CountryNotFoundError(identifier)
        if isinstance(country, bytes):
            country = country.decode("utf-8")
        return str(country)


class EligibilityGate:
    """Decides whether an address may be (re-)verified right now."""

    def __init__(
        self,
        blacklist: Iterable[str] = (),
        resolver: CountryResolver | None = None,
    ):
        self.blacklist = tuple(blacklist)
        self.resolver: CountryResolver = resolver or PassthroughCountryResolver()

    def is_eligible(
        self, address: Address | None, force_reverify: bool, now: datetime
    ) -> bool:
        """Return True if ``address`` may be sent to the provider at ``now``."""
        return self.skip_reason(address, force_reverify, now) is None

    def skip_reason(
        self, address: Address | None, force_reverify: bool, now: datetime
    ) -> str | None:
        """Return why ``address`` is ineligible, or None if it is eligible.

        Args:
            address: Record to check
            force_reverify: Bypass the cooldown
            now: Current time; naive values here and on the record are UTC

        Returns:
            One of ``missing``, ``locked``, ``cooldown``, ``blacklisted`` or None
        """
        if address is None:
            return SKIP_MISSING
        if address.is_geo_point_locked:
            return SKIP_LOCKED

        last_attempt = address.geocode_attempted_at
        if (
            last_attempt is not None
            and not force_reverify
            and _as_utc(last_attempt) >= _as_utc(now) - REVERIFY_COOLDOWN
        ):
            return SKIP_COOLDOWN

        if self.is_blacklisted(address.country):
            return SKIP_BLACKLISTED
        return None

    def is_blacklisted(self, country: str | None) -> bool:
        """Check ``country`` against every resolvable blacklist entry."""
        for identifier in self.blacklist:
            try:
                blacklisted_country = self.resolver.resolve(identifier)
            except CountryNotFoundError as e:
                logger.warning("blacklist_entry_unresolved", error=str(e))
                continue
            if blacklisted_country == country:
                return True
        return False
