"""
Index Package

Entity model, parser and query facade for the RFC Editor XML index.
"""

from .models import (
    DocumentEntry,
    DocumentIdentifier,
    GroupEntry,
    PublicationDate,
    RFC,
    RFCIndex,
    sort_by_publication_date,
)
from .parser import parse_index
from .repository import RFCIndexRepository, load_rfc_repository
from .selectors import QuerySelector, RFCCategory, RFCStream

__all__ = [
    "DocumentEntry",
    "DocumentIdentifier",
    "GroupEntry",
    "PublicationDate",
    "RFC",
    "RFCIndex",
    "sort_by_publication_date",
    "parse_index",
    "RFCIndexRepository",
    "load_rfc_repository",
    "QuerySelector",
    "RFCCategory",
    "RFCStream",
]
