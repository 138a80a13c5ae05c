"""Search services"""

from .formatter import ADDRESS_PLACEHOLDER, ListingFormatter, ListingURLBuilder, format_address, format_listing
from .search_service import SearchService, utc_now

__all__ = [
    "ADDRESS_PLACEHOLDER",
    "ListingFormatter",
    "ListingURLBuilder",
    "format_address",
    "format_listing",
    "SearchService",
    "utc_now",
]
