"""Repliers listings API integration"""

from .repliers_client import RepliersClient, extract_listings

__all__ = ["RepliersClient", "extract_listings"]
