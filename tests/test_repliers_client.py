"""
Tests for the Repliers listings client.

The HTTP session is replaced with a small fake so no network is used.
"""

import json
import pytest
import aiohttp
from hypothesis import given, settings, strategies as st

from bargain_finder.config import RepliersConfig
from bargain_finder.error_handling import ConfigError, UpstreamError
from bargain_finder.services.repliers import RepliersClient, extract_listings


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse"""

    def __init__(self, status=200, body=""):
        self.status = status
        self._body = body

    async def text(self):
        return self._body

    async def json(self, content_type="application/json"):
        return json.loads(self._body)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Stand-in for aiohttp.ClientSession that records requests"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def get(self, url, params=None, headers=None):
        self.requests.append({"url": url, "params": params, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        self.closed = True


LISTINGS = [{"mlsNumber": "W1"}, {"mlsNumber": "W2"}]

# Strategy for generating lists of raw records
records = st.lists(
    st.fixed_dictionaries({"mlsNumber": st.from_regex(r'[A-Z][0-9]{7}', fullmatch=True)}),
    min_size=1,
    max_size=10
)


@given(items=records)
@settings(max_examples=100)
def test_envelopes_yield_same_listings(items):
    """
    **Property: Envelope normalization**

    The same records wrapped under listings, results or data, or sent as a
    bare array, are extracted identically.
    """
    assert extract_listings({"listings": items}) == items
    assert extract_listings({"results": items}) == items
    assert extract_listings({"data": items}) == items
    assert extract_listings(items) == items


def test_first_non_empty_envelope_wins():
    assert extract_listings({"listings": [], "results": LISTINGS}) == LISTINGS
    assert extract_listings({"listings": LISTINGS, "data": [{"mlsNumber": "X"}]}) == LISTINGS


def test_unrecognized_envelope_is_empty():
    assert extract_listings({"count": 0}) == []
    assert extract_listings({"listings": None}) == []
    assert extract_listings(None) == []
    assert extract_listings("listings") == []


def test_missing_api_key_raises_config_error():
    with pytest.raises(ConfigError):
        RepliersClient(api_key=None)
    with pytest.raises(ConfigError):
        RepliersClient(api_key="")


def test_from_settings_uses_config():
    config = RepliersConfig(api_key="key", base_url="https://example.test/", province="BC", status="U")
    client = RepliersClient.from_settings(config)

    assert client.api_key == "key"
    assert client.base_url == "https://example.test"
    assert client.province == "BC"
    assert client.status == "U"


def test_from_settings_without_key_raises_before_any_request():
    with pytest.raises(ConfigError):
        RepliersClient.from_settings(RepliersConfig(api_key=None))


@pytest.mark.asyncio
async def test_fetch_listings_request_shape():
    session = FakeSession(FakeResponse(200, json.dumps({"listings": LISTINGS})))
    client = RepliersClient(api_key="secret", session=session)

    result = await client.fetch_listings()

    assert result == LISTINGS
    request = session.requests[0]
    assert request["url"] == "https://api.repliers.io/listings"
    assert request["params"] == {"province": "ON", "status": "A"}
    assert request["headers"]["REPLIERS-API-KEY"] == "secret"
    assert request["headers"]["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_bare_array_response():
    session = FakeSession(FakeResponse(200, json.dumps(LISTINGS)))
    client = RepliersClient(api_key="secret", session=session)

    assert await client.fetch_listings() == LISTINGS


@pytest.mark.asyncio
async def test_non_success_status_raises_upstream_error():
    session = FakeSession(FakeResponse(401, '{"message": "Invalid API key"}'))
    client = RepliersClient(api_key="bad", session=session)

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_listings()

    error = exc_info.value
    assert error.status == 401
    assert error.body == '{"message": "Invalid API key"}'
    assert str(error) == 'Repliers API error: 401 - {"message": "Invalid API key"}'
    assert error.to_response() == {
        "error": 'Repliers API error: 401 - {"message": "Invalid API key"}',
        "details": '{"message": "Invalid API key"}',
    }


@pytest.mark.asyncio
async def test_invalid_json_raises_upstream_error():
    session = FakeSession(FakeResponse(200, "<html>maintenance</html>"))
    client = RepliersClient(api_key="secret", session=session)

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_listings()

    assert exc_info.value.status == 200


@pytest.mark.asyncio
async def test_transport_failure_raises_upstream_error():
    session = FakeSession(error=aiohttp.ClientConnectionError("connection refused"))
    client = RepliersClient(api_key="secret", session=session)

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_listings()

    assert exc_info.value.status is None
    assert "connection refused" in str(exc_info.value)


@pytest.mark.asyncio
async def test_injected_session_is_not_closed():
    session = FakeSession(FakeResponse(200, "[]"))

    async with RepliersClient(api_key="secret", session=session) as client:
        assert await client.fetch_listings() == []

    assert session.closed is False
