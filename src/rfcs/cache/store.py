"""
Filesystem Cache Store

Key -> bytes persistence in a single local directory. One instance holds the
index documents (keyed by file name per format), another holds document
bodies (keyed by decimal document number).

Key Properties
--------------
- A missing entry reads as ``None``, never as an error
- Writes go through a temporary file and an atomic rename, so a reader in
  another process sees either the old file or the complete new one
- No locking and no expiry: an entry is trusted once written
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..core.errors import CacheError

logger = logging.getLogger("rfcs.cache")


class CacheStore:
    """
    Directory-backed byte store.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        """
        Parameters
        ----------
        directory : Union[str, Path]
            Directory holding the cache files. Created on first ``put``.
        """
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    # ------------------------------------------------------------------
    # Internal Helpers
    # ------------------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        if not key or key in (".", "..") or "/" in key or "\\" in key:
            raise CacheError(f"Invalid cache key: {key!r}")
        return self._directory / key

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[bytes]:
        """
        Return the cached bytes for ``key``, or None if absent.

        Raises
        ------
        CacheError
            If the entry exists but cannot be read.
        """
        path = self._path_for(key)

        try:
            data = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CacheError(
                f"Failed to read cache entry {path}: {type(exc).__name__}"
            ) from exc

        logger.debug("Cache hit: %s (%d bytes)", path, len(data))
        return data

    def put(self, key: str, data: bytes) -> None:
        """
        Store ``data`` under ``key``, replacing any existing entry.

        Raises
        ------
        CacheError
            If the directory cannot be created or the file cannot be written.
        """
        path = self._path_for(key)

        try:
            self._directory.mkdir(parents=True, exist_ok=True)

            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory,
                prefix=f".{key}.",
                suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise CacheError(
                f"Failed to write cache entry {path}: {type(exc).__name__}"
            ) from exc

        logger.debug("Cached %s (%d bytes)", path, len(data))
