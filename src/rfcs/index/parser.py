"""
RFC Index Parser

Deserializes ``rfc-index.xml`` into an ``RFCIndex``.

Elements are matched by local name, so documents with or without the
``http://www.rfc-editor.org/rfc-index`` namespace parse identically. Elements
the model does not carry are ignored. Any schema violation aborts the whole
parse; a partial index is never returned.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from .models import (
    Author,
    DocumentEntry,
    DocumentIdentifier,
    FileFormat,
    GroupEntry,
    NotIssuedEntry,
    PublicationDate,
    RFCIndex,
)
from ..core.errors import ParseError

logger = logging.getLogger("rfcs.parser")


# ---------------------------------------------------------------------
# Element Helpers
# ---------------------------------------------------------------------

def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: ET.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def _required_text(element: ET.Element, name: str, context: str) -> str:
    value = _text(element, name)
    if not value:
        raise ParseError(f"{context}: missing required <{name}>")
    return value


def _int(value: str, what: str, context: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(f"{context}: {what} is not an integer: {value!r}") from None


def _doc_id(value: str, context: str) -> DocumentIdentifier:
    try:
        return DocumentIdentifier(value)
    except ValueError as exc:
        raise ParseError(f"{context}: {exc}") from None


def _doc_refs(element: ET.Element, name: str, context: str) -> Tuple[DocumentIdentifier, ...]:
    container = _child(element, name)
    if container is None:
        return ()
    return tuple(
        _doc_id((ref.text or "").strip(), context)
        for ref in _children(container, "doc-id")
    )


# ---------------------------------------------------------------------
# Entry Parsers
# ---------------------------------------------------------------------

def _parse_date(element: ET.Element, context: str) -> PublicationDate:
    date = _child(element, "date")
    if date is None:
        raise ParseError(f"{context}: missing required <date>")

    month = _required_text(date, "month", context)
    year = _int(_required_text(date, "year", context), "year", context)

    day_text = _text(date, "day")
    day = _int(day_text, "day", context) if day_text else 0

    return PublicationDate.from_index(month, year, day)


def _parse_authors(element: ET.Element) -> Tuple[Author, ...]:
    authors = []
    for author in _children(element, "author"):
        name = _text(author, "name")
        if not name:
            continue
        authors.append(
            Author(
                name=name,
                title=_text(author, "title"),
                organization=_text(author, "organization"),
                org_abbrev=_text(author, "org-abbrev"),
            )
        )
    return tuple(authors)


def _parse_formats(element: ET.Element, context: str) -> Tuple[FileFormat, ...]:
    formats = []
    for fmt in _children(element, "format"):
        file_format = _required_text(fmt, "file-format", context)
        char_count = _text(fmt, "char-count")
        page_count = _text(fmt, "page-count")
        formats.append(
            FileFormat(
                file_format=file_format,
                char_count=_int(char_count, "char-count", context) if char_count else None,
                page_count=_int(page_count, "page-count", context) if page_count else None,
            )
        )
    return tuple(formats)


def _parse_keywords(element: ET.Element) -> Tuple[str, ...]:
    container = _child(element, "keywords")
    if container is None:
        return ()
    return tuple(
        kw.text.strip()
        for kw in _children(container, "kw")
        if kw.text and kw.text.strip()
    )


def _parse_abstract(element: ET.Element) -> Optional[str]:
    container = _child(element, "abstract")
    if container is None:
        return None
    paragraphs = [
        " ".join("".join(p.itertext()).split())
        for p in _children(container, "p")
    ]
    return "\n\n".join(p for p in paragraphs if p) or None


def _parse_rfc_entry(element: ET.Element) -> DocumentEntry:
    doc_id = _doc_id(_required_text(element, "doc-id", "rfc-entry"), "rfc-entry")
    context = f"rfc-entry {doc_id}"

    return DocumentEntry(
        doc_id=doc_id,
        title=_required_text(element, "title", context),
        date=_parse_date(element, context),
        authors=_parse_authors(element),
        formats=_parse_formats(element, context),
        keywords=_parse_keywords(element),
        abstract=_parse_abstract(element),
        draft=_text(element, "draft"),
        notes=_text(element, "notes"),
        obsoletes=_doc_refs(element, "obsoletes", context),
        obsoleted_by=_doc_refs(element, "obsoleted-by", context),
        updates=_doc_refs(element, "updates", context),
        updated_by=_doc_refs(element, "updated-by", context),
        is_also=_doc_refs(element, "is-also", context),
        see_also=_doc_refs(element, "see-also", context),
        current_status=_text(element, "current-status") or "",
        publication_status=_text(element, "publication-status") or "",
        stream=_text(element, "stream") or "",
        area=_text(element, "area"),
        wg_acronym=_text(element, "wg_acronym"),
        errata_url=_text(element, "errata-url"),
    )


def _group_parser(prefix: str) -> Callable[[ET.Element], GroupEntry]:
    tag = f"{prefix.lower()}-entry"

    def parse(element: ET.Element) -> GroupEntry:
        doc_id = _doc_id(_required_text(element, "doc-id", tag), tag)
        if doc_id.prefix != prefix:
            raise ParseError(f"{tag}: identifier {doc_id} does not start with {prefix}")
        context = f"{tag} {doc_id}"
        return GroupEntry(
            doc_id=doc_id,
            title=_text(element, "title"),
            is_also=_doc_refs(element, "is-also", context),
        )

    return parse


def _parse_not_issued_entry(element: ET.Element) -> NotIssuedEntry:
    context = "rfc-not-issued-entry"
    return NotIssuedEntry(doc_id=_doc_id(_required_text(element, "doc-id", context), context))


_ENTRY_PARSERS: Dict[str, Callable[[ET.Element], object]] = {
    "rfc-entry": _parse_rfc_entry,
    "std-entry": _group_parser("STD"),
    "bcp-entry": _group_parser("BCP"),
    "fyi-entry": _group_parser("FYI"),
    "rfc-not-issued-entry": _parse_not_issued_entry,
}


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def parse_index(data: bytes) -> RFCIndex:
    """
    Parse an RFC Editor XML index.

    Parameters
    ----------
    data : bytes
        Raw ``rfc-index.xml`` content.

    Returns
    -------
    RFCIndex
        The complete, immutable index.

    Raises
    ------
    ParseError
        If the document is not well-formed XML, has an unexpected root, or
        any entry violates the schema.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ParseError(f"Malformed index document: {exc}") from exc

    if _local_name(root.tag) != "rfc-index":
        raise ParseError(f"Unexpected root element: <{_local_name(root.tag)}>")

    collected: Dict[str, list] = {name: [] for name in _ENTRY_PARSERS}

    for element in root:
        name = _local_name(element.tag)
        parser = _ENTRY_PARSERS.get(name)
        if parser is None:
            continue
        try:
            collected[name].append(parser(element))
        except PydanticValidationError as exc:
            raise ParseError(f"Invalid <{name}>: {exc}") from exc

    index = RFCIndex(
        rfc_entries=collected["rfc-entry"],
        std_entries=collected["std-entry"],
        bcp_entries=collected["bcp-entry"],
        fyi_entries=collected["fyi-entry"],
        not_issued_entries=collected["rfc-not-issued-entry"],
    )

    logger.info(
        "Parsed RFC index: %d RFCs, %d STD, %d BCP, %d FYI",
        len(index.rfc_entries),
        len(index.std_entries),
        len(index.bcp_entries),
        len(index.fyi_entries),
    )
    return index
