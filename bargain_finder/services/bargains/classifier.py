"""
Bargain classification for provider listings.

Seven independent predicates are evaluated per listing. A listing is a
bargain when at least one of them holds, and each satisfied predicate
contributes one tag. The reference time ``now`` is always passed in so a
whole batch is judged against the same instant.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, List, Optional

from bargain_finder.models import RawListing, TagLabel, parse_timestamp

logger = logging.getLogger(__name__)


def one_year_before(now: datetime) -> datetime:
    """Midnight of the same calendar day one year before ``now``.

    Feb 29 has no counterpart in the previous year and rolls over to Mar 1.
    """
    try:
        return datetime(now.year - 1, now.month, now.day)
    except ValueError:
        return datetime(now.year - 1, 3, 1)


class BargainClassifier:
    """
    Tag listings that look like below-market or distressed opportunities.

    Criteria:
    1. On the market for at least 60 days
    2. A listing was terminated within the past calendar year
    3. Asking less than the previous purchase price
    4. Asking at least double the previous purchase price
    5. Possession within the next 30 days
    6. A conditional sale expired without closing
    7. Estate sale mentioned in the description
    """

    MIN_DAYS_ON_MARKET = 60
    QUICK_POSSESSION_DAYS = 30
    HUGE_PROFIT_MULTIPLIER = 2
    ESTATE_KEYWORD = "estate"

    def days_on_market(self, listing: RawListing, now: datetime) -> float:
        """
        Days the listing has been on the market.

        Uses the provider's ``simpleDaysOnMarket`` when present (an explicit 0
        is kept), otherwise whole days elapsed since ``listDate``, otherwise 0.
        """
        reported = listing.simple_days_on_market
        if reported is not None:
            return reported

        list_date = listing.list_date
        if list_date is None:
            return 0
        return (now - list_date) // timedelta(days=1)

    def is_long_time_no_sold(self, listing: RawListing, now: datetime) -> bool:
        return self.days_on_market(listing, now) >= self.MIN_DAYS_ON_MARKET

    def is_reposted(self, listing: RawListing, now: datetime) -> bool:
        terminated = listing.terminated_date
        return terminated is not None and terminated >= one_year_before(now)

    def _comparable_prices(self, listing: RawListing) -> Optional[tuple]:
        original = listing.original_price
        current = listing.list_price
        if not original or not current or current <= 0:
            return None
        return current, original

    def is_selling_at_loss(self, listing: RawListing) -> bool:
        prices = self._comparable_prices(listing)
        if prices is None:
            return False
        current, original = prices
        return current < original

    def is_selling_at_huge_profit(self, listing: RawListing) -> bool:
        prices = self._comparable_prices(listing)
        if prices is None:
            return False
        current, original = prices
        return current >= original * self.HUGE_PROFIT_MULTIPLIER

    def is_quick_close(self, listing: RawListing, now: datetime) -> bool:
        possession = listing.possession_date
        if possession is None:
            return False
        deadline = now + timedelta(days=self.QUICK_POSSESSION_DAYS)
        return now <= possession <= deadline

    def is_deal_fell_through(self, listing: RawListing) -> bool:
        return bool(listing.conditional_expiry_date) and not listing.closed_date

    def is_estate_sale(self, listing: RawListing) -> bool:
        return self.ESTATE_KEYWORD in listing.description.lower()

    def get_tags(self, record: Any, now: datetime) -> List[TagLabel]:
        """
        Evaluate every criterion for one listing.

        Args:
            record: Provider listing record (dict or RawListing)
            now: Reference time for all date comparisons

        Returns:
            Labels of the satisfied criteria, in criterion order
        """
        listing = RawListing.wrap(record)
        now = parse_timestamp(now) or now
        checks = [
            (TagLabel.LONG_TIME_NO_SOLD, self.is_long_time_no_sold(listing, now)),
            (TagLabel.REPOSTED, self.is_reposted(listing, now)),
            (TagLabel.SELLING_AT_A_LOSS, self.is_selling_at_loss(listing)),
            (TagLabel.SELLING_AT_HUGE_PROFIT, self.is_selling_at_huge_profit(listing)),
            (TagLabel.QUICKY, self.is_quick_close(listing, now)),
            (TagLabel.LAST_DEAL_FELL_THROUGH, self.is_deal_fell_through(listing)),
            (TagLabel.ESTATE_SELL, self.is_estate_sale(listing)),
        ]
        return [label for label, matched in checks if matched]

    def is_bargain(self, record: Any, now: datetime) -> bool:
        """A listing is a bargain when any criterion holds."""
        return bool(self.get_tags(record, now))

    def filter_bargains(self, records: List[Any], now: datetime) -> List[Any]:
        """Keep the records that satisfy at least one criterion, in input order."""
        bargains = [record for record in records if self.is_bargain(record, now)]
        logger.debug(f"{len(bargains)} of {len(records)} listings matched bargain criteria")
        return bargains


_default_classifier = BargainClassifier()


def get_bargain_tags(record: Any, now: datetime) -> List[TagLabel]:
    """Tags for one listing using the default classifier."""
    return _default_classifier.get_tags(record, now)


def is_bargain(record: Any, now: datetime) -> bool:
    """Whether one listing satisfies any bargain criterion."""
    return _default_classifier.is_bargain(record, now)
