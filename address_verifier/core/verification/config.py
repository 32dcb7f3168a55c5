"""Configuration value object for address verification."""

from dataclasses import dataclass, field
from typing import Any

from address_verifier.core.verification.constants import (
    INTERNATIONAL_STREET_URL,
    PRECISION_LEVELS,
    US_STREET_URL,
)
from address_verifier.core.verification.policy import (
    PrecisionMatchMode,
    PrecisionPolicy,
)


@dataclass(frozen=True)
class VerificationConfig:
    """Verification configuration.

    Passed explicitly into the orchestrator so that every call sees one
    consistent snapshot of credentials and thresholds.
    """

    auth_id: str = ""
    auth_token: str = ""
    acceptable_standardization_precisions: frozenset[str] = field(
        default_factory=lambda: frozenset(PRECISION_LEVELS)
    )
    acceptable_geocode_precisions: frozenset[str] = field(
        default_factory=lambda: frozenset(PRECISION_LEVELS)
    )
    blacklist: tuple[str, ...] = ()
    default_to_us: bool = True
    precision_match_mode: PrecisionMatchMode = PrecisionMatchMode.EXACT_MEMBERSHIP
    us_street_url: str = US_STREET_URL
    international_street_url: str = INTERNATIONAL_STREET_URL

    def __post_init__(self) -> None:
        """Normalize collection fields and validate precision names."""
        # Accept any iterable from callers; store immutable copies
        object.__setattr__(
            self,
            "acceptable_standardization_precisions",
            frozenset(self.acceptable_standardization_precisions),
        )
        object.__setattr__(
            self,
            "acceptable_geocode_precisions",
            frozenset(self.acceptable_geocode_precisions),
        )
        object.__setattr__(self, "blacklist", tuple(self.blacklist))
        object.__setattr__(
            self, "precision_match_mode", PrecisionMatchMode(self.precision_match_mode)
        )
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a precision name is not a known provider tier
        """
        for name in (
            "acceptable_standardization_precisions",
            "acceptable_geocode_precisions",
        ):
            unknown = getattr(self, name) - set(PRECISION_LEVELS)
            if unknown:
                raise ValueError(
                    f"{name} contains unknown precision levels: {sorted(unknown)}"
                )

    @property
    def standardization_policy(self) -> PrecisionPolicy:
        """Policy applied to the candidate's address precision."""
        return PrecisionPolicy(
            self.acceptable_standardization_precisions, self.precision_match_mode
        )

    @property
    def geocode_policy(self) -> PrecisionPolicy:
        """Policy applied to the candidate's geocode precision."""
        return PrecisionPolicy(
            self.acceptable_geocode_precisions, self.precision_match_mode
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary with credentials masked."""
        return {
            "auth_id": self.auth_id,
            "auth_token": "***" if self.auth_token else "",
            "acceptable_standardization_precisions": sorted(
                self.acceptable_standardization_precisions
            ),
            "acceptable_geocode_precisions": sorted(self.acceptable_geocode_precisions),
            "blacklist": list(self.blacklist),
            "default_to_us": self.default_to_us,
            "precision_match_mode": self.precision_match_mode.value,
            "us_street_url": self.us_street_url,
            "international_street_url": self.international_street_url,
        }
