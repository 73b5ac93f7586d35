"""
RFC Index Entity Model

This module defines the in-memory representation of the RFC Editor index
(``rfc-index.xml``) and the public ``RFC`` projection returned by queries.

Every entity is immutable once constructed. Relationship references are kept
exactly as the source records them: ``obsoleted_by`` on one entry does not
imply a matching ``obsoletes`` on the other.
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import core_schema

from ..core.errors import ParseError


# ---------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------

SERIES_PREFIXES = ("RFC", "STD", "BCP", "FYI")

_DOCUMENT_ID_PATTERN = re.compile(r"^(RFC|STD|BCP|FYI)([0-9]+)$")


class DocumentIdentifier(str):
    """
    Series prefix plus zero-padded number, e.g. ``RFC0791`` or ``STD0005``.

    Two identifiers are equal iff their strings are equal; ``RFC0005`` and
    ``STD0005`` are unrelated.
    """

    def __new__(cls, value: str) -> "DocumentIdentifier":
        value = str(value)
        if _DOCUMENT_ID_PATTERN.match(value) is None:
            raise ValueError(f"Invalid document identifier: {value!r}")
        return super().__new__(cls, value)

    @classmethod
    def build(cls, prefix: str, number: int) -> "DocumentIdentifier":
        if prefix not in SERIES_PREFIXES:
            raise ValueError(f"Unknown series prefix: {prefix!r}")
        if number < 0:
            raise ValueError(f"Document number must be non-negative; got {number}")
        return cls(f"{prefix}{number:04d}")

    @property
    def prefix(self) -> str:
        return self[:3]

    @property
    def number(self) -> int:
        return int(self[3:])

    def __repr__(self) -> str:
        return f"DocumentIdentifier({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
        )


# ---------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@total_ordering
class PublicationDate(BaseModel):
    """
    Publication date with optional day precision.

    ``day == 0`` means only the month is known. Ordering is by year, then
    month, then day, so a month-only date sorts first within its month.
    """

    year: int
    month: int = Field(..., ge=1, le=12)
    day: int = Field(default=0, ge=0, le=31)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_index(
        cls,
        month_name: str,
        year: int,
        day: int = 0,
    ) -> "PublicationDate":
        """
        Build a date from the index vocabulary (full English month names).

        Raises
        ------
        ParseError
            If ``month_name`` is not an exact month name.
        """
        try:
            month = MONTH_NAMES.index(month_name) + 1
        except ValueError:
            raise ParseError(f"Unrecognized month name: {month_name!r}") from None
        return cls(year=year, month=month, day=day)

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def _sort_key(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublicationDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.day == 0:
            return f"{self.month_name} {self.year}"
        return f"{self.day} {self.month_name} {self.year}"


# ---------------------------------------------------------------------
# Public Projection
# ---------------------------------------------------------------------

class RFC(BaseModel):
    """
    Summary of one RFC as handed to the presentation layer.
    """

    number: int = Field(..., ge=0)
    document_id: str
    title: str
    publication_date: PublicationDate

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_template_fields(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "document_id": self.document_id,
            "title": self.title,
            "publication_date": self.publication_date,
        }


def sort_by_publication_date(rfcs: Iterable[RFC]) -> List[RFC]:
    """Stable sort, oldest first."""
    return sorted(rfcs, key=lambda rfc: rfc.publication_date)


# ---------------------------------------------------------------------
# Index Entries
# ---------------------------------------------------------------------

_FROZEN = ConfigDict(frozen=True, extra="forbid")


class Author(BaseModel):
    name: str
    title: Optional[str] = None
    organization: Optional[str] = None
    org_abbrev: Optional[str] = None

    model_config = _FROZEN


class FileFormat(BaseModel):
    file_format: str
    char_count: Optional[int] = Field(default=None, ge=0)
    page_count: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


class DocumentEntry(BaseModel):
    """
    One ``<rfc-entry>`` of the index.
    """

    doc_id: DocumentIdentifier
    title: str
    date: PublicationDate

    authors: Tuple[Author, ...] = ()
    formats: Tuple[FileFormat, ...] = ()
    keywords: Tuple[str, ...] = ()
    abstract: Optional[str] = None
    draft: Optional[str] = None
    notes: Optional[str] = None

    obsoletes: Tuple[DocumentIdentifier, ...] = ()
    obsoleted_by: Tuple[DocumentIdentifier, ...] = ()
    updates: Tuple[DocumentIdentifier, ...] = ()
    updated_by: Tuple[DocumentIdentifier, ...] = ()
    is_also: Tuple[DocumentIdentifier, ...] = ()
    see_also: Tuple[DocumentIdentifier, ...] = ()

    current_status: str = ""
    publication_status: str = ""
    stream: str = ""
    area: Optional[str] = None
    wg_acronym: Optional[str] = None
    errata_url: Optional[str] = None

    model_config = _FROZEN

    def is_obsolete(self) -> bool:
        return len(self.obsoleted_by) > 0

    def is_obsoleted_by(self, other: "DocumentEntry") -> bool:
        """True iff ``other`` is listed in this entry's ``obsoleted_by``."""
        return other.doc_id in self.obsoleted_by

    def is_updated_by(self, other: "DocumentEntry") -> bool:
        """True iff ``other`` is listed in this entry's ``updated_by``."""
        return other.doc_id in self.updated_by

    def to_rfc(self) -> RFC:
        return RFC(
            number=self.doc_id.number,
            document_id=str(self.doc_id),
            title=self.title,
            publication_date=self.date,
        )


class GroupEntry(BaseModel):
    """
    One ``<std-entry>``, ``<bcp-entry>`` or ``<fyi-entry>``.
    """

    doc_id: DocumentIdentifier
    title: Optional[str] = None
    is_also: Tuple[DocumentIdentifier, ...] = ()

    model_config = _FROZEN

    def includes(self, entry: DocumentEntry) -> bool:
        return entry.doc_id in self.is_also


class NotIssuedEntry(BaseModel):
    """An RFC number that was reserved but never published."""

    doc_id: DocumentIdentifier

    model_config = _FROZEN


# ---------------------------------------------------------------------
# Root Aggregate
# ---------------------------------------------------------------------

class RFCIndex:
    """
    Read-only collection of every entry parsed from one index document.

    Entries keep their document order. Lookups by identifier go through
    per-collection dictionaries built once at construction.
    """

    def __init__(
        self,
        rfc_entries: Sequence[DocumentEntry] = (),
        std_entries: Sequence[GroupEntry] = (),
        bcp_entries: Sequence[GroupEntry] = (),
        fyi_entries: Sequence[GroupEntry] = (),
        not_issued_entries: Sequence[NotIssuedEntry] = (),
    ) -> None:
        self._rfc_entries = tuple(rfc_entries)
        self._std_entries = tuple(std_entries)
        self._bcp_entries = tuple(bcp_entries)
        self._fyi_entries = tuple(fyi_entries)
        self._not_issued_entries = tuple(not_issued_entries)

        # First occurrence wins for duplicate identifiers
        self._rfcs_by_id: Dict[str, DocumentEntry] = {}
        for entry in self._rfc_entries:
            self._rfcs_by_id.setdefault(entry.doc_id, entry)

        self._groups_by_id: Dict[str, GroupEntry] = {}
        for group in self._std_entries + self._bcp_entries + self._fyi_entries:
            self._groups_by_id.setdefault(group.doc_id, group)

    @property
    def rfc_entries(self) -> Tuple[DocumentEntry, ...]:
        return self._rfc_entries

    @property
    def std_entries(self) -> Tuple[GroupEntry, ...]:
        return self._std_entries

    @property
    def bcp_entries(self) -> Tuple[GroupEntry, ...]:
        return self._bcp_entries

    @property
    def fyi_entries(self) -> Tuple[GroupEntry, ...]:
        return self._fyi_entries

    @property
    def not_issued_entries(self) -> Tuple[NotIssuedEntry, ...]:
        return self._not_issued_entries

    def get_rfc(self, doc_id: str) -> Optional[DocumentEntry]:
        return self._rfcs_by_id.get(doc_id)

    def get_group(self, doc_id: str) -> Optional[GroupEntry]:
        """Look up an STD, BCP or FYI entry; the prefix selects the series."""
        return self._groups_by_id.get(doc_id)

    def __len__(self) -> int:
        return len(self._rfc_entries)
