"""Bargain Finder - Ontario listings tagged with bargain criteria."""

__version__ = "0.1.0"
