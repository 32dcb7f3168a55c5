"""Constants for SmartyStreets address verification."""

from datetime import timedelta

SERVICE_NAME = "SmartyStreets"

US_STREET_URL = "https://api.smartystreets.com/street-address"
INTERNATIONAL_STREET_URL = "https://international-street.api.smartystreets.com/verify"

# Precision tiers reported by the provider, coarsest first
PRECISION_LEVELS: tuple[str, ...] = (
    "AdministrativeArea",
    "Locality",
    "Thoroughfare",
    "Premise",
    "DeliveryPoint",
)

# A prior attempt this recent blocks a new one unless forced
REVERIFY_COOLDOWN = timedelta(seconds=30)

VERIFIED_STATUS = "verified"
DOMESTIC_COUNTRY = "US"

NO_MATCH_RESULT = "No Match"
INVALID_RESPONSE_RESULT = "Invalid Response"
RESULT_TEMPLATE = (
    "Verified: {verification_status}; Address Precision: {address_precision}; "
    "Geocoding Precision {geocode_precision}"
)
