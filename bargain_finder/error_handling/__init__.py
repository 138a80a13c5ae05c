"""
Error handling module for the bargain finder.

Defines the error kinds raised while talking to the listings provider.
"""

from .errors import BargainFinderError, ConfigError, UpstreamError

__all__ = ['BargainFinderError', 'ConfigError', 'UpstreamError']
