"""
Formatting of raw provider listings into ClassifiedListing results.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from bargain_finder.models import ClassifiedListing, RawListing, SearchType
from bargain_finder.services.bargains import BargainClassifier

ADDRESS_PLACEHOLDER = "Address not available"


class ListingURLBuilder:
    """Build public listing page URLs"""

    BASE_URL = "https://www.realtor.ca/real-estate"

    def build_listing_url(self, mls_number: str) -> str:
        """
        Build URL for a listing's public page.

        Args:
            mls_number: MLS number of the listing (may be empty)

        Returns:
            Listing page URL
        """
        return f"{self.BASE_URL}/{mls_number}"


def format_address(address: Optional[Dict[str, Any]]) -> str:
    """
    Render an address sub-record as a single line.

    Street parts (number, name, suffix, unit) are space-joined; the street,
    city, state and zip are then comma-joined. Missing parts are skipped.

    Args:
        address: Provider ``address`` record

    Returns:
        Formatted address, or a placeholder if no part is present
    """
    if not isinstance(address, dict) or not address:
        return ADDRESS_PLACEHOLDER

    street_parts = []
    if address.get("streetNumber"):
        street_parts.append(str(address["streetNumber"]))
    if address.get("streetName"):
        street_parts.append(str(address["streetName"]))
    if address.get("streetSuffix"):
        street_parts.append(str(address["streetSuffix"]))
    if address.get("unitNumber"):
        street_parts.append(f"Unit {address['unitNumber']}")

    street_address = " ".join(street_parts)

    address_parts = []
    if street_address:
        address_parts.append(street_address)
    for key in ("city", "state", "zip"):
        if address.get(key):
            address_parts.append(str(address[key]))

    return ", ".join(address_parts) or ADDRESS_PLACEHOLDER


class ListingFormatter:
    """Turn raw listings into the shape returned to clients."""

    def __init__(
        self,
        classifier: Optional[BargainClassifier] = None,
        url_builder: Optional[ListingURLBuilder] = None
    ):
        self.classifier = classifier or BargainClassifier()
        self.url_builder = url_builder or ListingURLBuilder()

    def format_listing(self, record: Any, search_type: Any, now: datetime) -> ClassifiedListing:
        """
        Format one raw listing.

        Args:
            record: Provider listing record
            search_type: Search the listing was returned for; tags are only
                computed for bargain searches
            now: Reference time for bargain criteria

        Returns:
            ClassifiedListing with defaults for any missing field
        """
        listing = RawListing.wrap(record)
        tags = []
        if SearchType.parse(search_type) is SearchType.BARGAIN:
            tags = self.classifier.get_tags(listing, now)

        mls_number = listing.mls_number
        return ClassifiedListing(
            mls_number=mls_number,
            address=format_address(listing.address),
            asking_price=listing.asking_price,
            property_type=listing.property_type or "Unknown",
            thumbnail=listing.thumbnail,
            realtor_ca_link=self.url_builder.build_listing_url(mls_number),
            tags=tags,
        )


def format_listing(record: Any, search_type: Any, now: datetime) -> ClassifiedListing:
    """Format one raw listing with the default classifier."""
    return ListingFormatter().format_listing(record, search_type, now)
