"""
Cache-or-Fetch Resolver

Prefers the local cache over the network. On a miss, fetches once, writes the
result back on a best-effort basis and returns it. There is no retry loop and
no freshness check.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .store import CacheStore
from ..core.errors import CacheError
from ..remote.formats import RemoteFormat

logger = logging.getLogger("rfcs.resolver")


class Fetcher(Protocol):
    def fetch(self, key: str, fmt: RemoteFormat) -> bytes: ...


class CacheOrFetchResolver:
    """
    Binds one cache store to one fetcher.

    The same class serves the index document and document bodies; only the
    store, the fetcher and the keys differ. Without a store every resolve is
    a miss and nothing is written.
    """

    def __init__(self, store: Optional[CacheStore], fetcher: Fetcher) -> None:
        self.store = store
        self.fetcher = fetcher

    def resolve(self, key: str, fmt: RemoteFormat) -> bytes:
        """
        Return the content for ``key``, from cache when present.

        An unreadable cache entry is treated as a miss. A failed cache write
        is logged and skipped, since the content itself was obtained.

        Raises
        ------
        FetchError
            If the cache misses and the remote fetch fails.
        """
        cached = None
        if self.store is not None:
            try:
                cached = self.store.get(key)
            except CacheError as exc:
                logger.warning("Ignoring unreadable cache entry %r: %s", key, exc)

        if cached is not None:
            return cached

        logger.debug("Cache miss: %r (%s)", key, fmt.value)
        content = self.fetcher.fetch(key, fmt)

        if self.store is None:
            return content

        try:
            self.store.put(key, content)
        except CacheError as exc:
            logger.warning("Could not cache %r: %s", key, exc)

        return content
