"""
Remote Resource Formats

Pure mapping tables from a (key, format) pair to a remote URL and, for the
index, to the local cache file name. Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..core.errors import FetchError


DEFAULT_INDEX_BASE_URL = "https://www.rfc-editor.org/in-notes"
DEFAULT_CONTENT_BASE_URL = "https://www.rfc-editor.org/rfc"


class IndexFormat(str, Enum):
    XML = "xml"
    ASCII = "ascii"

    @property
    def file_name(self) -> str:
        """Cache file name, also the last path segment of the remote URL."""
        return _INDEX_FILE_NAMES[self]


_INDEX_FILE_NAMES = {
    IndexFormat.XML: "rfc-index.xml",
    IndexFormat.ASCII: "rfc-index.txt",
}


class ContentFormat(str, Enum):
    TEXT = "txt"
    PS = "ps"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return self.value


RemoteFormat = Union[IndexFormat, ContentFormat]


@dataclass(frozen=True)
class UrlTable:
    """
    Deterministic URL derivation for every supported format.

    Index formats ignore the key: there is exactly one index document per
    format. Content formats expect the decimal document number as key.
    """

    index_base_url: str = DEFAULT_INDEX_BASE_URL
    content_base_url: str = DEFAULT_CONTENT_BASE_URL

    def url_for(self, key: str, fmt: RemoteFormat) -> str:
        if isinstance(fmt, IndexFormat):
            return f"{self.index_base_url.rstrip('/')}/{fmt.file_name}"

        if isinstance(fmt, ContentFormat):
            return f"{self.content_base_url.rstrip('/')}/rfc{key}.{fmt.extension}"

        raise FetchError(f"No URL available for format: {fmt!r}")
