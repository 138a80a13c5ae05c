"""Bargain classification and search-type filtering"""

from .classifier import BargainClassifier, get_bargain_tags, is_bargain, one_year_before
from .geo import haversine_km, walking_minutes
from .search_filters import (
    SearchFilter,
    filter_fixer_properties,
    filter_listings,
    filter_school_properties,
    filter_subway_properties,
)

__all__ = [
    "BargainClassifier",
    "get_bargain_tags",
    "is_bargain",
    "one_year_before",
    "haversine_km",
    "walking_minutes",
    "SearchFilter",
    "filter_fixer_properties",
    "filter_listings",
    "filter_school_properties",
    "filter_subway_properties",
]
