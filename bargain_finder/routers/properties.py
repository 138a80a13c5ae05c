"""
Property search routes.
"""

import logging
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional

from bargain_finder.config import get_settings
from bargain_finder.error_handling import BargainFinderError
from bargain_finder.models import (
    ErrorResponse,
    PropertiesResponse,
    ProbeResponse,
    RefinementCriteria,
)
from bargain_finder.services.search import SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test", response_model=ProbeResponse)
async def probe():
    """Verify the server is running and whether the provider key is configured."""
    settings = get_settings()
    return ProbeResponse(
        message="Backend server is running!",
        api_key_configured=settings.api_key_configured
    )


@router.get(
    "/properties",
    response_model=PropertiesResponse,
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}
)
async def search_properties(
    type: Optional[str] = Query("bargain", description="Search type: bargain, fixer, school, subway"),
    min_price: Optional[float] = Query(None, description="Minimum asking price (inclusive)"),
    max_price: Optional[float] = Query(None, description="Maximum asking price (inclusive)"),
    property_type: Optional[str] = Query(None, description="Property type substring"),
    tag: Optional[str] = Query(None, description="Tag substring")
):
    """
    Search listings from the provider.

    1. Fetches active listings for the configured province
    2. Filters them for the search type
    3. Formats each match, tagging bargain criteria
    4. Applies any refinement parameters
    """
    criteria = RefinementCriteria(
        min_price=min_price,
        max_price=max_price,
        property_type=property_type,
        tag=tag
    )

    try:
        service = SearchService()
        properties = await service.search(type, criteria)
    except BargainFinderError as e:
        logger.error(f"Error fetching properties: {e}")
        return JSONResponse(status_code=e.status_code, content=e.to_response())
    except Exception as e:
        logger.exception(f"Unexpected error fetching properties: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return PropertiesResponse(properties=properties)
