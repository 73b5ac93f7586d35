"""
Remote Fetcher

Blocking HTTP retrieval of index documents and document bodies.

The fetcher performs no caching; see ``rfcs.cache.resolver`` for the
cache-or-fetch policy layered on top of it.
"""

from __future__ import annotations

from typing import Optional
import logging

import httpx

from .formats import RemoteFormat, UrlTable
from ..core.errors import FetchError

logger = logging.getLogger("rfcs.fetcher")


class HttpFetcher:
    """
    Synchronous fetcher that downloads the full body of one resource per call.
    """

    def __init__(
        self,
        urls: Optional[UrlTable] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Parameters
        ----------
        urls : Optional[UrlTable]
            URL mapping table. Defaults to the public rfc-editor.org layout.

        client : Optional[httpx.Client]
            Pre-configured client, e.g. one built on ``httpx.MockTransport``
            in tests. A new client is created when omitted.

        timeout : float
            HTTP timeout in seconds for a client created here.
        """
        self.urls = urls or UrlTable()
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch(self, key: str, fmt: RemoteFormat) -> bytes:
        """
        Download the resource identified by ``key`` in format ``fmt``.

        Raises
        ------
        FetchError
            On an unsupported format, a transport error, or a non-2xx status.
        """
        url = self.urls.url_for(key, fmt)
        logger.debug("Fetching %s", url)

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(
                "Fetch failed (%s): url=%s, error=%s",
                type(exc).__name__,
                url,
                str(exc),
            )
            raise FetchError(
                f"Failed to fetch {url}: {type(exc).__name__}"
            ) from exc

        return response.content

    def close(self) -> None:
        self._client.close()
