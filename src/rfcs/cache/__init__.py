"""
Cache Package

Local byte store and the cache-or-fetch policy built on it.
"""

from .store import CacheStore
from .resolver import CacheOrFetchResolver

__all__ = [
    "CacheStore",
    "CacheOrFetchResolver",
]
