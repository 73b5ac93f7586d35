"""
Error Taxonomy

This module defines the exceptions raised by the rfcs package and the
single boundary where they are turned into user-facing messages.

Design Goals
------------
- One base class so callers can catch everything the package raises
- Low-level causes preserved through exception chaining
- Full tracebacks logged internally, short messages shown to users
"""

from __future__ import annotations

import logging

logger = logging.getLogger("rfcs.errors")


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class RFCSError(RuntimeError):
    """Base exception for all rfcs failures."""


class ParseError(RFCSError):
    """Raised when the index document does not match the expected schema."""


class FetchError(RFCSError):
    """Raised when a remote resource cannot be retrieved."""


class CacheError(RFCSError):
    """Raised when the cache directory is unresolvable or unusable."""


class ValidationError(RFCSError, ValueError):
    """Raised when a query argument is outside its recognized values."""


# ---------------------------------------------------------------------
# Error Boundary
# ---------------------------------------------------------------------

def handle_cli_error(exc: Exception) -> str:
    """
    Log an exception that reached the command-line boundary.

    Parameters
    ----------
    exc : Exception
        The exception that aborted the command.

    Returns
    -------
    str
        A one-line message suitable for display to the user.
    """
    # Traceback only when debugging; the message is always enough to act on
    logger.debug("Command failed", exc_info=exc)

    if isinstance(exc, RFCSError):
        logger.debug("%s: %s", type(exc).__name__, exc)
        return str(exc)

    logger.error("Unexpected %s: %s", type(exc).__name__, exc)
    return f"unexpected error: {type(exc).__name__}: {exc}"
