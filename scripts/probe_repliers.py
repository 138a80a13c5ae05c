#!/usr/bin/env python3
"""Check the Repliers API key and report how many listings each search type returns."""

import asyncio
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from bargain_finder.error_handling import BargainFinderError
from bargain_finder.models import SearchType
from bargain_finder.services.bargains import SearchFilter
from bargain_finder.services.repliers import RepliersClient
from bargain_finder.services.search import utc_now


async def probe():
    try:
        async with RepliersClient.from_settings() as client:
            listings = await client.fetch_listings()
    except BargainFinderError as e:
        print(f'Error: {e}')
        sys.exit(1)

    print(f'Received {len(listings)} listings')

    now = utc_now()
    search_filter = SearchFilter()
    for search_type in SearchType:
        matches = search_filter.apply(listings, search_type, now)
        print(f'  {search_type.value}: {len(matches)} matches')

if __name__ == '__main__':
    asyncio.run(probe())
