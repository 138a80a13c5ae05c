"""Data models for the Bargain Finder API"""

from .raw_listing import RawListing, parse_number, parse_timestamp
from .listing import ClassifiedListing, TagLabel
from .search import (
    ErrorResponse,
    PropertiesResponse,
    ProbeResponse,
    RefinementCriteria,
    SearchType,
)

__all__ = [
    "RawListing",
    "parse_number",
    "parse_timestamp",
    "ClassifiedListing",
    "TagLabel",
    "ErrorResponse",
    "PropertiesResponse",
    "ProbeResponse",
    "RefinementCriteria",
    "SearchType",
]
