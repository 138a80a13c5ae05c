"""
Search-type filters applied to raw provider listings.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from bargain_finder.models import RawListing, SearchType
from .classifier import BargainClassifier

logger = logging.getLogger(__name__)

FIXER_KEYWORD = "sold as is"


def filter_fixer_properties(records: List[Any]) -> List[Any]:
    """Listings whose description says they are sold as is."""
    return [
        record for record in records
        if FIXER_KEYWORD in RawListing.wrap(record).description.lower()
    ]


def _has_coordinates(record: Any) -> bool:
    listing = RawListing.wrap(record)
    return bool(listing.latitude) and bool(listing.longitude)


def filter_school_properties(records: List[Any]) -> List[Any]:
    """
    Listings near highly rated schools.

    Placeholder: passes through every listing that has coordinates until a
    school rating source is integrated.
    """
    return [record for record in records if _has_coordinates(record)]


def filter_subway_properties(records: List[Any]) -> List[Any]:
    """
    Listings within a short walk of a subway station.

    Placeholder: passes through every listing that has coordinates until a
    transit station source is integrated.
    """
    return [record for record in records if _has_coordinates(record)]


class SearchFilter:
    """Dispatch raw listings to the filter for a search type."""

    def __init__(self, classifier: Optional[BargainClassifier] = None):
        self.classifier = classifier or BargainClassifier()
        self._filters: Dict[SearchType, Callable[[List[Any], datetime], List[Any]]] = {
            SearchType.BARGAIN: self.classifier.filter_bargains,
            SearchType.FIXER: lambda records, now: filter_fixer_properties(records),
            SearchType.SCHOOL: lambda records, now: filter_school_properties(records),
            SearchType.SUBWAY: lambda records, now: filter_subway_properties(records),
        }

    def apply(self, records: List[Any], search_type: Any, now: datetime) -> List[Any]:
        """
        Filter listings for a search type.

        Args:
            records: Raw provider listings
            search_type: SearchType or its string value; unknown values mean bargain
            now: Reference time for date-based criteria

        Returns:
            Matching listings in input order
        """
        resolved = SearchType.parse(search_type)
        filtered = self._filters[resolved](records, now)
        logger.info(f"Filtered to {len(filtered)} properties matching {resolved.value} criteria")
        return filtered


def filter_listings(records: List[Any], search_type: Any, now: datetime) -> List[Any]:
    """Filter listings for a search type with the default classifier."""
    return SearchFilter().apply(records, search_type, now)
