"""Data models package."""

from .address import Address, AddressUpdate, GeoPoint
from .smarty import (
    Candidate,
    CandidateAnalysis,
    CandidateArray,
    CandidateComponents,
    CandidateMetadata,
    parse_first_candidate,
)

__all__ = [
    "Address",
    "AddressUpdate",
    "GeoPoint",
    "Candidate",
    "CandidateAnalysis",
    "CandidateArray",
    "CandidateComponents",
    "CandidateMetadata",
    "parse_first_candidate",
]
