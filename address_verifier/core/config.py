"""Application configuration."""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from redis import Redis

from address_verifier.core.verification.config import VerificationConfig
from address_verifier.core.verification.constants import (
    INTERNATIONAL_STREET_URL,
    PRECISION_LEVELS,
    US_STREET_URL,
)
from address_verifier.core.verification.eligibility import (
    CountryResolver,
    PassthroughCountryResolver,
    RedisCountryResolver,
)
from address_verifier.core.verification.policy import PrecisionMatchMode

PrecisionList = Annotated[list[str], NoDecode]


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    # SmartyStreets credentials
    SMARTY_AUTH_ID: str = ""
    SMARTY_AUTH_TOKEN: str = ""

    # Acceptance thresholds (JSON list or comma separated)
    SMARTY_ADDRESS_PRECISIONS: PrecisionList = Field(
        default_factory=lambda: list(PRECISION_LEVELS),
        description="Acceptable standardization precisions",
    )
    SMARTY_GEOCODE_PRECISIONS: PrecisionList = Field(
        default_factory=lambda: list(PRECISION_LEVELS),
        description="Acceptable geocoding precisions",
    )
    SMARTY_PRECISION_MATCH_MODE: PrecisionMatchMode = (
        PrecisionMatchMode.EXACT_MEMBERSHIP
    )

    # Routing
    SMARTY_BLACKLIST: str = Field(
        default="",
        description="Comma separated country identifiers that are never verified",
    )
    SMARTY_DEFAULT_TO_US: bool = True
    SMARTY_US_STREET_URL: str = US_STREET_URL
    SMARTY_INTERNATIONAL_STREET_URL: str = INTERNATIONAL_STREET_URL

    # Transport
    SMARTY_TIMEOUT: float | None = Field(default=None, gt=0)

    # Country lookup for blacklist identifiers
    COUNTRY_LOOKUP_REDIS_URL: str | None = None
    COUNTRY_LOOKUP_KEY: str = "countries"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @field_validator(
        "SMARTY_ADDRESS_PRECISIONS", "SMARTY_GEOCODE_PRECISIONS", mode="before"
    )
    @classmethod
    def split_precisions(cls, value: Any) -> Any:
        """Accept a JSON list or a comma separated string."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value

    @field_validator("SMARTY_ADDRESS_PRECISIONS", "SMARTY_GEOCODE_PRECISIONS")
    @classmethod
    def validate_precisions(cls, value: list[str]) -> list[str]:
        """Validate precision names against the provider's tiers."""
        unknown = [item for item in value if item not in PRECISION_LEVELS]
        if unknown:
            raise ValueError(
                f"Unknown precision levels {unknown}; "
                f"expected any of {list(PRECISION_LEVELS)}"
            )
        return value

    @property
    def blacklist_ids(self) -> tuple[str, ...]:
        """Blacklist identifiers with blanks removed."""
        return tuple(
            item.strip() for item in self.SMARTY_BLACKLIST.split(",") if item.strip()
        )

    def to_verification_config(self) -> VerificationConfig:
        """Build the verification value object from these settings."""
        return VerificationConfig(
            auth_id=self.SMARTY_AUTH_ID,
            auth_token=self.SMARTY_AUTH_TOKEN,
            acceptable_standardization_precisions=frozenset(
                self.SMARTY_ADDRESS_PRECISIONS
            ),
            acceptable_geocode_precisions=frozenset(self.SMARTY_GEOCODE_PRECISIONS),
            blacklist=self.blacklist_ids,
            default_to_us=self.SMARTY_DEFAULT_TO_US,
            precision_match_mode=self.SMARTY_PRECISION_MATCH_MODE,
            us_street_url=self.SMARTY_US_STREET_URL,
            international_street_url=self.SMARTY_INTERNATIONAL_STREET_URL,
        )

    def country_resolver(self) -> CountryResolver:
        """Resolver for blacklist identifiers.

        Uses the Redis lookup table when ``COUNTRY_LOOKUP_REDIS_URL`` is set,
        otherwise identifiers are taken to be country values.
        """
        if self.COUNTRY_LOOKUP_REDIS_URL:
            client = Redis.from_url(
                self.COUNTRY_LOOKUP_REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
            return RedisCountryResolver(client, self.COUNTRY_LOOKUP_KEY)
        return PassthroughCountryResolver()


# Create settings instance
settings = Settings()
