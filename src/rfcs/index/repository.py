"""
RFC Repository (Query Facade)

Answers metadata queries against a parsed ``RFCIndex``. Every query returns
a new list of ``RFC`` projections in index order; sorting, if wanted, is left
to the caller (see ``sort_by_publication_date``).

A query that names an RFC or group absent from the index returns an empty
list rather than raising.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Union

from .models import DocumentIdentifier, RFC, RFCIndex
from .parser import parse_index
from .query import (
    EntryPredicate,
    any_entry,
    in_stream,
    member_of,
    not_obsolete,
    obsoleted_by,
    obsoleting,
    select,
    to_rfcs,
    updated_by,
    updating,
    with_current_status,
)
from .selectors import QuerySelector, RFCCategory, RFCStream
from ..cache.resolver import CacheOrFetchResolver
from ..core.errors import ValidationError
from ..remote.formats import IndexFormat

logger = logging.getLogger("rfcs.repository")


class RFCIndexRepository:
    """
    Read-only query interface over one ``RFCIndex``.
    """

    def __init__(self, index: RFCIndex) -> None:
        self.index = index

        self._dispatch: Dict[str, Callable[[QuerySelector], List[RFC]]] = {
            "all": lambda s: self.find_all(),
            "exclude_obsolete": lambda s: self.find_non_obsolete(),
            "obsoleted_by": lambda s: self.find_obsoleted_by(s.number),
            "obsolete": lambda s: self.find_obsolete(s.number),
            "updated_by": lambda s: self.find_updated_by(s.number),
            "update": lambda s: self.find_update(s.number),
            "std": lambda s: self.find_by_std_number(s.number),
            "bcp": lambda s: self.find_by_bcp_number(s.number),
            "fyi": lambda s: self.find_by_fyi_number(s.number),
            "category": lambda s: self.find_by_category(s.category),
            "stream": lambda s: self.find_by_stream(s.stream),
        }

    # ------------------------------------------------------------------
    # Internal Helpers
    # ------------------------------------------------------------------

    def _find(self, predicate: EntryPredicate) -> List[RFC]:
        return to_rfcs(select(self.index.rfc_entries, predicate))

    def _find_related(
        self,
        number: int,
        relation: Callable,
    ) -> List[RFC]:
        if number < 0:
            return []
        target = self.index.get_rfc(DocumentIdentifier.build("RFC", number))
        if target is None:
            logger.debug("RFC %d not in index", number)
            return []
        return self._find(relation(target))

    def _find_members(self, prefix: str, number: int) -> List[RFC]:
        if number < 0:
            return []
        group = self.index.get_group(DocumentIdentifier.build(prefix, number))
        if group is None:
            logger.debug("%s %d not in index", prefix, number)
            return []
        return self._find(member_of(group))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[RFC]:
        return self._find(any_entry)

    def find_non_obsolete(self) -> List[RFC]:
        return self._find(not_obsolete)

    def find_obsoleted_by(self, number: int) -> List[RFC]:
        """RFCs that RFC ``number`` obsoletes."""
        return self._find_related(number, obsoleted_by)

    def find_obsolete(self, number: int) -> List[RFC]:
        """RFCs that obsolete RFC ``number``."""
        return self._find_related(number, obsoleting)

    def find_updated_by(self, number: int) -> List[RFC]:
        """RFCs that RFC ``number`` updates."""
        return self._find_related(number, updated_by)

    def find_update(self, number: int) -> List[RFC]:
        """RFCs that update RFC ``number``."""
        return self._find_related(number, updating)

    def find_by_std_number(self, number: int) -> List[RFC]:
        return self._find_members("STD", number)

    def find_by_bcp_number(self, number: int) -> List[RFC]:
        return self._find_members("BCP", number)

    def find_by_fyi_number(self, number: int) -> List[RFC]:
        return self._find_members("FYI", number)

    def find_by_category(self, category: Union[str, RFCCategory]) -> List[RFC]:
        category = RFCCategory.parse(category)
        return self._find(with_current_status(category.label))

    def find_by_stream(self, stream: Union[str, RFCStream]) -> List[RFC]:
        stream = RFCStream.parse(stream)
        return self._find(in_stream(stream.label))

    def find(self, selector: QuerySelector) -> List[RFC]:
        """Run the query named by ``selector``."""
        return self._dispatch[selector.kind](selector)


# ---------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------

def load_rfc_repository(
    resolver: CacheOrFetchResolver,
    fmt: Optional[IndexFormat] = None,
) -> RFCIndexRepository:
    """
    Obtain the index (cache first, network otherwise) and parse it.

    Parameters
    ----------
    resolver : CacheOrFetchResolver
        Resolver bound to the index cache store and fetcher.

    fmt : Optional[IndexFormat]
        Index format. Only ``IndexFormat.XML`` can be parsed.

    Raises
    ------
    ValidationError
        If ``fmt`` is not a parseable format. No I/O has happened.

    FetchError
        If the index is not cached and cannot be downloaded.

    ParseError
        If the index document is malformed.
    """
    fmt = fmt or IndexFormat.XML
    if fmt is not IndexFormat.XML:
        raise ValidationError(f"Index format {fmt.value!r} cannot be parsed")

    data = resolver.resolve(fmt.file_name, fmt)
    return RFCIndexRepository(parse_index(data))
