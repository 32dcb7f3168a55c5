"""Tests for application configuration settings."""

import os
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from address_verifier.core.config import Settings
from address_verifier.core.verification import (
    PassthroughCountryResolver,
    PrecisionMatchMode,
    RedisCountryResolver,
)
from address_verifier.core.verification.constants import (
    PRECISION_LEVELS,
    US_STREET_URL,
)


def make_settings(**env: str) -> Settings:
    """Build settings from the given environment only."""
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestDefaults:
    """Default settings values."""

    def test_should_have_empty_credentials(self):
        settings = make_settings()
        assert settings.SMARTY_AUTH_ID == ""
        assert settings.SMARTY_AUTH_TOKEN == ""

    def test_should_accept_every_precision_by_default(self):
        settings = make_settings()
        assert settings.SMARTY_ADDRESS_PRECISIONS == list(PRECISION_LEVELS)
        assert settings.SMARTY_GEOCODE_PRECISIONS == list(PRECISION_LEVELS)

    def test_should_default_routing(self):
        settings = make_settings()
        assert settings.SMARTY_DEFAULT_TO_US is True
        assert settings.SMARTY_US_STREET_URL == US_STREET_URL
        assert settings.blacklist_ids == ()
        assert settings.SMARTY_TIMEOUT is None


class TestPrecisionParsing:
    """Precision list environment parsing."""

    def test_should_split_comma_separated_values(self):
        settings = make_settings(SMARTY_ADDRESS_PRECISIONS="Premise, DeliveryPoint,")
        assert settings.SMARTY_ADDRESS_PRECISIONS == ["Premise", "DeliveryPoint"]

    def test_should_parse_json_list(self):
        settings = make_settings(SMARTY_GEOCODE_PRECISIONS='["Thoroughfare"]')
        assert settings.SMARTY_GEOCODE_PRECISIONS == ["Thoroughfare"]

    def test_should_reject_unknown_precision(self):
        with pytest.raises(ValidationError, match="Unknown precision levels"):
            make_settings(SMARTY_GEOCODE_PRECISIONS="Rooftop")

    def test_should_parse_match_mode(self):
        settings = make_settings(SMARTY_PRECISION_MATCH_MODE="non_empty_accepts_any")
        assert (
            settings.SMARTY_PRECISION_MATCH_MODE
            is PrecisionMatchMode.NON_EMPTY_ACCEPTS_ANY
        )

    def test_should_reject_unknown_match_mode(self):
        with pytest.raises(ValidationError):
            make_settings(SMARTY_PRECISION_MATCH_MODE="fuzzy")


class TestVerificationConfig:
    """Conversion into the verification value object."""

    def test_should_carry_settings_through(self):
        settings = make_settings(
            SMARTY_AUTH_ID="id",
            SMARTY_AUTH_TOKEN="token",
            SMARTY_ADDRESS_PRECISIONS="Premise",
            SMARTY_BLACKLIST="country-1, ,country-2",
            SMARTY_DEFAULT_TO_US="false",
        )

        config = settings.to_verification_config()

        assert config.auth_id == "id"
        assert config.auth_token == "token"
        assert config.acceptable_standardization_precisions == frozenset({"Premise"})
        assert config.blacklist == ("country-1", "country-2")
        assert config.default_to_us is False

    def test_should_reject_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            make_settings(SMARTY_TIMEOUT="0")


class TestCountryResolver:
    """Blacklist resolver selection."""

    def test_should_pass_through_without_redis(self):
        resolver = make_settings().country_resolver()
        assert isinstance(resolver, PassthroughCountryResolver)

    def test_should_use_redis_when_configured(self):
        settings = make_settings(
            COUNTRY_LOOKUP_REDIS_URL="redis://cache:6379/2",
            COUNTRY_LOOKUP_KEY="country_names",
        )
        client = MagicMock()

        with patch(
            "address_verifier.core.config.Redis.from_url", return_value=client
        ) as from_url:
            resolver = settings.country_resolver()

        assert isinstance(resolver, RedisCountryResolver)
        assert resolver.redis_client is client
        assert resolver.hash_key == "country_names"
        assert from_url.call_args[0][0] == "redis://cache:6379/2"
        assert from_url.call_args.kwargs["decode_responses"] is True
