"""
Refinement filter for classified listings.

This module narrows an already-fetched result list by price range, property
type and tag without another provider request.
"""

from typing import List, Optional

from bargain_finder.models import ClassifiedListing, RefinementCriteria


def _label_text(label) -> str:
    return str(getattr(label, "value", label))


class ListingFilter:
    """Filters classified listings based on refinement criteria.

    Each filter is independent; ``apply`` AND-combines the ones that are set.
    """

    def apply(
        self,
        listings: List[ClassifiedListing],
        criteria: RefinementCriteria
    ) -> List[ClassifiedListing]:
        """Apply every criterion that is set.

        Args:
            listings: Listings to narrow
            criteria: Refinement criteria; unset fields are ignored

        Returns:
            Listings passing all set criteria, in input order
        """
        filtered = self.filter_by_price(
            listings,
            min_price=criteria.min_price,
            max_price=criteria.max_price
        )
        if criteria.property_type:
            filtered = self.filter_by_property_type(filtered, criteria.property_type)
        if criteria.tag:
            filtered = self.filter_by_tag(filtered, criteria.tag)
        return filtered

    def filter_by_price(
        self,
        listings: List[ClassifiedListing],
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
    ) -> List[ClassifiedListing]:
        """Filter listings by price range.

        Listings without a price (zero or missing) pass both bounds, since an
        unpublished price says nothing about the range.

        Args:
            listings: List of listings to filter
            min_price: Minimum price (inclusive), None for no minimum
            max_price: Maximum price (inclusive), None for no maximum

        Returns:
            List of listings that meet the price criteria
        """
        filtered = []

        for listing in listings:
            price = listing.asking_price

            if not price:
                filtered.append(listing)
                continue

            if min_price is not None and price < min_price:
                continue

            if max_price is not None and price > max_price:
                continue

            filtered.append(listing)

        return filtered

    def filter_by_property_type(
        self,
        listings: List[ClassifiedListing],
        property_type: str
    ) -> List[ClassifiedListing]:
        """Filter listings whose property type contains the pattern (case-insensitive)."""
        pattern_lower = property_type.lower()
        return [
            listing for listing in listings
            if listing.property_type and pattern_lower in listing.property_type.lower()
        ]

    def filter_by_tag(
        self,
        listings: List[ClassifiedListing],
        tag: str
    ) -> List[ClassifiedListing]:
        """Filter listings with at least one tag containing the pattern (case-insensitive)."""
        pattern_lower = tag.lower()
        return [
            listing for listing in listings
            if any(pattern_lower in _label_text(label).lower() for label in listing.tags)
        ]

    def unique_property_types(self, listings: List[ClassifiedListing]) -> List[str]:
        """Distinct non-empty property types in first-seen order."""
        return list(dict.fromkeys(
            listing.property_type for listing in listings if listing.property_type
        ))

    def unique_tags(self, listings: List[ClassifiedListing]) -> List[str]:
        """Distinct tags across all listings in first-seen order."""
        return list(dict.fromkeys(
            _label_text(label) for listing in listings for label in listing.tags
        ))
