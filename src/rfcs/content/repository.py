"""
RFC Content Repository

Retrieves full RFC bodies through the cache-or-fetch resolver. Bodies are
returned as opaque bytes; nothing here parses them.
"""

from __future__ import annotations

import logging

from ..cache.resolver import CacheOrFetchResolver
from ..core.errors import ValidationError
from ..remote.formats import ContentFormat

logger = logging.getLogger("rfcs.content")


class RFCContentRepository:
    def __init__(
        self,
        resolver: CacheOrFetchResolver,
        fmt: ContentFormat = ContentFormat.TEXT,
    ) -> None:
        self.resolver = resolver
        self.fmt = fmt

    def find_by_number(self, number: int) -> bytes:
        """
        Return the body of RFC ``number``.

        The cache key is the decimal number with no padding or extension, so
        ``rfc791.txt`` is stored as ``791``.

        Raises
        ------
        ValidationError
            If ``number`` is not positive. No I/O has happened.

        FetchError
            If the body is not cached and cannot be downloaded.
        """
        if number <= 0:
            raise ValidationError(f"RFC number must be positive; got {number}")

        logger.debug("Retrieving RFC %d (%s)", number, self.fmt.value)
        return self.resolver.resolve(str(number), self.fmt)
