"""
Tests for the search service pipeline.
"""

import pytest
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

from bargain_finder.config import RepliersConfig
from bargain_finder.error_handling import ConfigError, UpstreamError
from bargain_finder.models import RefinementCriteria, TagLabel
from bargain_finder.services.search import SearchService


NOW = datetime(2025, 6, 15, 12, 0, 0)


def make_client(listings=None, error=None):
    """Build a stand-in RepliersClient usable as an async context manager."""
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    client.fetch_listings = AsyncMock(return_value=listings or [], side_effect=error)
    return client


def make_service(client):
    return SearchService(client_factory=lambda: client, clock=lambda: NOW)


RECORDS = [
    {
        "mlsNumber": "T1",
        "listPrice": 800000,
        "timestamps": {"possessionDate": (NOW + timedelta(days=14)).isoformat()},
        "details": {"propertyType": "Detached"},
    },
    {"mlsNumber": "T2", "listPrice": 300000, "simpleDaysOnMarket": 5},
    {"mlsNumber": "T3", "listPrice": 300000, "simpleDaysOnMarket": 80, "details": {"propertyType": "Condo"}},
]


@pytest.mark.asyncio
async def test_bargain_search_uses_injected_clock():
    client = make_client(RECORDS)

    result = await make_service(client).search("bargain")

    assert [listing.mls_number for listing in result] == ["T1", "T3"]
    assert result[0].tags == [TagLabel.QUICKY.value]
    assert result[1].tags == [TagLabel.LONG_TIME_NO_SOLD.value]
    client.fetch_listings.assert_awaited_once()
    client.__aexit__.assert_awaited_once()


@pytest.mark.asyncio
async def test_refinement_is_applied_after_formatting():
    client = make_client(RECORDS)

    result = await make_service(client).search(
        "bargain", RefinementCriteria(property_type="condo")
    )

    assert [listing.mls_number for listing in result] == ["T3"]


@pytest.mark.asyncio
async def test_unknown_search_type_is_bargain():
    result = await make_service(make_client(RECORDS)).search("penthouse")

    assert [listing.mls_number for listing in result] == ["T1", "T3"]


@pytest.mark.asyncio
async def test_upstream_error_propagates():
    client = make_client(error=UpstreamError.from_response(500, "oops"))

    with pytest.raises(UpstreamError):
        await make_service(client).search("bargain")


@pytest.mark.asyncio
async def test_missing_key_raises_config_error():
    service = SearchService(config=RepliersConfig(api_key=None), clock=lambda: NOW)

    with pytest.raises(ConfigError):
        await service.search("bargain")


@pytest.mark.asyncio
async def test_empty_provider_response():
    assert await make_service(make_client([])).search("fixer") == []
