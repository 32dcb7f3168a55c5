"""Address record model written back by the verification service."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """Geographic point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ...,
        title="Latitude",
        description="Latitude in decimal degrees",
        examples=[40.7128],
        ge=-90,
        le=90,
    )
    longitude: float = Field(
        ...,
        title="Longitude",
        description="Longitude in decimal degrees",
        examples=[-74.0060],
        ge=-180,
        le=180,
    )


class Address(BaseModel):
    """A location's postal address plus its standardization/geocoding state.

    The record is owned by the caller. The verification service mutates it
    in place, so assignments are validated just like construction.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Support ORM mode
        validate_assignment=True,  # Validate on attribute assignment
        extra="forbid",
        json_schema_extra={
            "example": {
                "street1": "1600 Amphitheatre Pkwy",
                "city": "Mountain View",
                "state": "CA",
                "postal_code": "94043",
                "country": "US",
            }
        },
    )

    is_geo_point_locked: bool | None = Field(
        default=None,
        title="Geo Point Locked",
        description="When true the record must never be modified by verification",
    )

    street1: str | None = Field(default=None, examples=["1600 Amphitheatre Pkwy"])
    street2: str | None = Field(default=None, examples=["Suite 100"])
    city: str | None = Field(default=None, examples=["Mountain View"])
    county: str | None = Field(default=None, examples=["Santa Clara"])
    state: str | None = Field(default=None, examples=["CA"])
    postal_code: str | None = Field(default=None, examples=["94043-1351"])
    country: str | None = Field(default=None, examples=["US"])

    geo_point: GeoPoint | None = Field(
        default=None,
        title="Geographic Point",
        description="Latitude/longitude resolved by geocoding",
    )

    standardized_at: datetime | None = None
    standardize_attempted_at: datetime | None = None
    standardize_attempted_service: str | None = None

    geocoded_at: datetime | None = None
    geocode_attempted_at: datetime | None = None
    geocode_attempted_service: str | None = None
    geocode_attempted_result: str | None = Field(
        default=None,
        title="Geocode Attempted Result",
        description="Last geocode precision reported by the provider, accepted or not",
        examples=["Premise"],
    )

    def set_geo_point_from_lat_long(self, latitude: float, longitude: float) -> None:
        """Set the geographic point from a latitude/longitude pair."""
        self.geo_point = GeoPoint(latitude=latitude, longitude=longitude)

    def apply(self, update: "AddressUpdate") -> None:
        """Copy the explicitly-set fields of ``update`` onto this record.

        Fields the update never set are left alone; fields it set to ``None``
        are cleared.

        Args:
            update: Field changes produced by response interpretation
        """
        for field_name in sorted(update.model_fields_set):
            setattr(self, field_name, getattr(update, field_name))


class AddressUpdate(BaseModel):
    """Address update model with all fields optional.

    Only fields that were explicitly assigned are applied to an ``Address``.
    """

    street1: str | None = None
    street2: str | None = None
    city: str | None = None
    county: str | None = None
    state: str | None = None
    postal_code: str | None = None
    geo_point: GeoPoint | None = None
    standardized_at: datetime | None = None
    geocoded_at: datetime | None = None
    geocode_attempted_result: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether the update carries no field changes."""
        return not self.model_fields_set
