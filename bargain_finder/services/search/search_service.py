"""
Search service - fetch, filter and format listings for one search.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from bargain_finder.config import RepliersConfig
from bargain_finder.filtering import ListingFilter
from bargain_finder.models import ClassifiedListing, RefinementCriteria, SearchType
from bargain_finder.services.bargains import BargainClassifier, SearchFilter
from bargain_finder.services.repliers import RepliersClient
from .formatter import ListingFormatter

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SearchService:
    """
    Run one properties search.

    1. Fetches active listings from the provider
    2. Applies the search-type filter
    3. Formats each match (tags only for bargain searches)
    4. Optionally narrows the result with refinement criteria
    """

    def __init__(
        self,
        config: Optional[RepliersConfig] = None,
        client_factory: Optional[Callable[[], RepliersClient]] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.config = config
        self.client_factory = client_factory or (lambda: RepliersClient.from_settings(self.config))
        self.clock = clock
        classifier = BargainClassifier()
        self.search_filter = SearchFilter(classifier)
        self.formatter = ListingFormatter(classifier)
        self.listing_filter = ListingFilter()

    async def search(
        self,
        search_type: Optional[str] = None,
        criteria: Optional[RefinementCriteria] = None
    ) -> List[ClassifiedListing]:
        """
        Search the provider and return classified listings.

        Args:
            search_type: bargain, fixer, school or subway (default bargain)
            criteria: Optional refinement applied to the formatted result

        Returns:
            Classified listings in provider order

        Raises:
            ConfigError: No provider API key is configured
            UpstreamError: The provider request failed
        """
        resolved = SearchType.parse(search_type)
        client = self.client_factory()

        async with client:
            listings = await client.fetch_listings()

        logger.info(f"Received {len(listings)} listings from API for search type: {resolved.value}")

        # One reference time for the whole batch
        now = self.clock()
        matches = self.search_filter.apply(listings, resolved, now)
        properties = [self.formatter.format_listing(record, resolved, now) for record in matches]

        if criteria is not None and not criteria.is_empty():
            properties = self.listing_filter.apply(properties, criteria)
            logger.info(f"Refined to {len(properties)} properties")

        return properties
