"""
Component Wiring

Builds stores, fetchers and resolvers from ``Settings``. The cache directory
is resolved once per process and passed down explicitly.

When no cache directory can be determined the resolvers run without a store:
every lookup goes to the network and nothing is written locally.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .cache.resolver import CacheOrFetchResolver
from .cache.store import CacheStore
from .config import Settings, get_settings, resolve_cache_directory
from .content.repository import RFCContentRepository
from .core.errors import CacheError
from .index.repository import RFCIndexRepository, load_rfc_repository
from .remote.fetcher import HttpFetcher
from .remote.formats import UrlTable

logger = logging.getLogger("rfcs.dependencies")


def build_fetcher(settings: Settings) -> HttpFetcher:
    return HttpFetcher(
        urls=UrlTable(
            index_base_url=settings.index_base_url,
            content_base_url=settings.content_base_url,
        ),
        timeout=settings.http_timeout,
    )


def _build_store(cache_dir: Optional[Path]) -> Optional[CacheStore]:
    return CacheStore(cache_dir) if cache_dir is not None else None


def build_index_resolver(
    cache_dir: Optional[Path],
    fetcher: HttpFetcher,
) -> CacheOrFetchResolver:
    return CacheOrFetchResolver(_build_store(cache_dir), fetcher)


def build_content_resolver(
    cache_dir: Optional[Path],
    fetcher: HttpFetcher,
) -> CacheOrFetchResolver:
    # Index files have fixed names and bodies are keyed by bare numbers, so
    # both stores can share one directory.
    return CacheOrFetchResolver(_build_store(cache_dir), fetcher)


@lru_cache
def get_cache_directory() -> Optional[Path]:
    """
    Resolve the cache directory once, or None when it cannot be determined.
    """
    try:
        return resolve_cache_directory(get_settings().cache_dir)
    except CacheError as exc:
        logger.warning("Local cache disabled: %s", exc)
        return None


@lru_cache
def get_fetcher() -> HttpFetcher:
    return build_fetcher(get_settings())


def close_fetcher() -> None:
    """Close the shared fetcher if one was created."""
    if get_fetcher.cache_info().currsize:
        get_fetcher().close()
        get_fetcher.cache_clear()


def get_rfc_repository() -> RFCIndexRepository:
    """Load the index for this process (cache first, network otherwise)."""
    return load_rfc_repository(
        build_index_resolver(get_cache_directory(), get_fetcher())
    )


def get_content_repository() -> RFCContentRepository:
    return RFCContentRepository(
        build_content_resolver(get_cache_directory(), get_fetcher())
    )
