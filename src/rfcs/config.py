"""
Runtime Configuration

Settings are read from the environment (prefix ``RFCS_``) and an optional
``.env`` file. The cache directory is resolved exactly once, at startup, and
the resulting path is handed to every cache store; stores never consult the
environment themselves.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.errors import CacheError


CACHE_SUBDIRECTORY = "rfc"


class Settings(BaseSettings):
    cache_dir: Optional[Path] = None

    index_base_url: str = "https://www.rfc-editor.org/in-notes"
    content_base_url: str = "https://www.rfc-editor.org/rfc"

    http_timeout: float = Field(default=30.0, gt=0)  # seconds

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="RFCS_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# ---------------------------------------------------------------------
# Cache Directory Resolution
# ---------------------------------------------------------------------

def _home_directory(environ: Mapping[str, str]) -> Optional[Path]:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        pass

    for var in ("HOME", "USERPROFILE"):
        value = environ.get(var)
        if value:
            return Path(value)
    return None


def resolve_cache_directory(
    override: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Determine the local cache directory.

    Precedence
    ----------
    1. ``override`` (normally ``Settings.cache_dir``)
    2. ``$XDG_CACHE_HOME/rfc``
    3. ``<home>/.cache/rfc``

    Parameters
    ----------
    override : Optional[Path]
        Explicit directory. Returned unchanged when set.

    environ : Optional[Mapping[str, str]]
        Environment to read. Defaults to ``os.environ``.

    Returns
    -------
    Path
        The directory. It is not created here.

    Raises
    ------
    CacheError
        If no candidate can be determined.
    """
    if override:
        return Path(override)

    if environ is None:
        environ = os.environ

    xdg_cache_home = environ.get("XDG_CACHE_HOME")
    if xdg_cache_home:
        return Path(xdg_cache_home) / CACHE_SUBDIRECTORY

    home = _home_directory(environ)
    if home is not None:
        return home / ".cache" / CACHE_SUBDIRECTORY

    raise CacheError("Cannot determine the cache directory.")
