"""
Filtering module for classified listings.

This module provides functionality to narrow classified listings by price
range, property type and tag.
"""

from .listing_filter import ListingFilter

__all__ = ['ListingFilter']
