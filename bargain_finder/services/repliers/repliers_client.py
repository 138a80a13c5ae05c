"""
Repliers API Client - Fetches active listings for a fixed province from the
Repliers listings API. One request per search; no caching and no retries.
"""

import asyncio
import logging
import aiohttp
from typing import Optional, Dict, List, Any

from bargain_finder.config import RepliersConfig, get_settings
from bargain_finder.error_handling import ConfigError, UpstreamError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Repliers API key not configured. Please set REPLIERS_API_KEY in .env file"
)

# Envelope keys the provider has been seen to use, in priority order
ENVELOPE_KEYS = ("listings", "results", "data")


def extract_listings(payload: Any) -> List[Any]:
    """
    Pull the listing array out of a provider response.

    The provider may wrap results under ``listings``, ``results`` or ``data``,
    or return a bare array. The first non-empty wrapped list wins.

    Args:
        payload: Decoded JSON response body

    Returns:
        List of raw listing records (empty if none could be found)
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ENVELOPE_KEYS:
            value = payload.get(key)
            if isinstance(value, list) and value:
                return value
    return []


class RepliersClient:
    """
    Repliers listings API client.

    Usage:
        async with RepliersClient.from_settings() as client:
            listings = await client.fetch_listings()
    """

    DEFAULT_BASE_URL = "https://api.repliers.io"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        province: str = "ON",
        status: str = "A",
        timeout_seconds: float = 30.0,
        session: Optional[aiohttp.ClientSession] = None
    ):
        if not api_key:
            raise ConfigError(MISSING_KEY_MESSAGE)

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.province = province
        self.status = status
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, config: Optional[RepliersConfig] = None) -> "RepliersClient":
        """Build a client from the current environment configuration."""
        config = config or get_settings().repliers
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            province=config.province,
            status=config.status,
            timeout_seconds=config.timeout_seconds,
        )

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the session if this client created it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _ensure_session(self):
        """Ensure we have an open session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True

    def _headers(self) -> Dict[str, str]:
        return {
            "REPLIERS-API-KEY": self.api_key,
            "Content-Type": "application/json"
        }

    def _params(self) -> Dict[str, str]:
        # Status must be 'A' (Active) or 'U' (Unknown)
        return {"province": self.province, "status": self.status}

    async def fetch_listings(self) -> List[Any]:
        """
        Fetch active listings for the configured province.

        Returns:
            Raw listing records with the response envelope removed

        Raises:
            ConfigError: No API key is configured
            UpstreamError: The provider returned a non-success status, could not
                be reached, or returned a body that is not JSON
        """
        if not self.api_key:
            raise ConfigError(MISSING_KEY_MESSAGE)

        await self._ensure_session()
        url = f"{self.base_url}/listings"

        try:
            async with self._session.get(
                url,
                params=self._params(),
                headers=self._headers()
            ) as response:
                if response.status < 200 or response.status >= 300:
                    error_text = await response.text()
                    raise UpstreamError.from_response(response.status, error_text)

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise UpstreamError(
                        f"Repliers API returned invalid JSON: {e}",
                        status=response.status
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Repliers API request failed: {e}")
            raise UpstreamError(f"Repliers API request failed: {e}", body=str(e)) from e

        listings = extract_listings(data)
        logger.debug(f"Extracted {len(listings)} listings from {type(data).__name__} response")
        return listings
