"""Response models for the SmartyStreets street address APIs.

Both the US Street API and the International Street API return a JSON array
of candidates. The two schemas overlap enough to share one model; fields a
route does not return simply parse to their defaults.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class SmartyBaseModel(BaseModel):
    """Lenient base: unknown provider keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat explicit JSON nulls as absent so field defaults apply."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class CandidateAnalysis(SmartyBaseModel):
    """Verification analysis for a candidate."""

    verification_status: str = ""
    address_precision: str = ""


class CandidateMetadata(SmartyBaseModel):
    """Geocoding metadata for a candidate."""

    geocode_precision: str = ""
    latitude: float | None = None
    longitude: float | None = None


class CandidateComponents(SmartyBaseModel):
    """Address components.

    International responses fill ``dependent_locality``,
    ``administrative_area`` and ``postal_code``; US responses fill the
    remaining fields.
    """

    # International Street API
    dependent_locality: str = ""
    administrative_area: str = ""
    postal_code: str = ""

    # US Street API
    city_name: str = ""
    county_name: str = ""
    state_abbreviation: str = ""
    zipcode: str = ""
    plus4_code: str = ""


class Candidate(SmartyBaseModel):
    """One provider-proposed match for the submitted address."""

    # International Street API
    address1: str = ""
    address2: str = ""

    # US Street API
    delivery_line_1: str = ""
    delivery_line_2: str = ""

    analysis: CandidateAnalysis = Field(default_factory=CandidateAnalysis)
    metadata: CandidateMetadata = Field(default_factory=CandidateMetadata)
    components: CandidateComponents = Field(default_factory=CandidateComponents)


CandidateArray = TypeAdapter(list[Any])


def parse_first_candidate(body: str | bytes) -> Candidate | None:
    """Parse a response body, validating only the authoritative first candidate.

    Later candidates are never used, so a malformed one does not spoil the
    response.

    Returns:
        The first candidate, or None for an empty array

    Raises:
        ValidationError: If the body is not a JSON array or its first element
            is not a candidate object
    """
    candidates = CandidateArray.validate_json(body)
    if not candidates:
        return None
    return Candidate.model_validate(candidates[0])
