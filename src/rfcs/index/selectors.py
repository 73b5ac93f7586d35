"""
Query Selectors

Public enumerations for category and stream queries, and ``QuerySelector``,
the tagged value that names exactly one query to run.

Raw user input is validated here, before any index is loaded or any network
or cache access happens.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.errors import ValidationError


# ---------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------

class RFCCategory(str, Enum):
    PROPOSED_STANDARD = "proposed-standard"
    DRAFT_STANDARD = "draft-standard"
    INTERNET_STANDARD = "internet-standard"
    EXPERIMENTAL = "experimental"
    INFORMATIONAL = "informational"
    HISTORIC = "historic"
    BEST_CURRENT_PRACTICE = "bcp"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union[str, "RFCCategory"]) -> "RFCCategory":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown category: {value}") from None

    @property
    def label(self) -> str:
        """The ``current-status`` string used by the index."""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    RFCCategory.PROPOSED_STANDARD: "PROPOSED STANDARD",
    RFCCategory.DRAFT_STANDARD: "DRAFT STANDARD",
    RFCCategory.INTERNET_STANDARD: "INTERNET STANDARD",
    RFCCategory.EXPERIMENTAL: "EXPERIMENTAL",
    RFCCategory.INFORMATIONAL: "INFORMATIONAL",
    RFCCategory.HISTORIC: "HISTORIC",
    RFCCategory.BEST_CURRENT_PRACTICE: "BEST CURRENT PRACTICE",
    RFCCategory.UNKNOWN: "UNKNOWN",
}


class RFCStream(str, Enum):
    IETF = "ietf"
    IAB = "iab"
    IRTF = "irtf"
    INDEPENDENT = "independent"
    LEGACY = "legacy"

    @classmethod
    def parse(cls, value: Union[str, "RFCStream"]) -> "RFCStream":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown stream: {value}") from None

    @property
    def label(self) -> str:
        """The ``stream`` string used by the index."""
        return _STREAM_LABELS[self]


_STREAM_LABELS = {
    RFCStream.IETF: "IETF",
    RFCStream.IAB: "IAB",
    RFCStream.IRTF: "IRTF",
    RFCStream.INDEPENDENT: "INDEPENDENT",
    RFCStream.LEGACY: "Legacy",
}


# ---------------------------------------------------------------------
# Selector
# ---------------------------------------------------------------------

SelectorKind = Literal[
    "all",
    "exclude_obsolete",
    "obsoleted_by",
    "obsolete",
    "updated_by",
    "update",
    "std",
    "bcp",
    "fyi",
    "category",
    "stream",
]

NUMBERED_KINDS = ("obsoleted_by", "obsolete", "updated_by", "update", "std", "bcp", "fyi")


class QuerySelector(BaseModel):
    """
    One query against the index.

    ``number`` is set for the numbered kinds, ``category`` and ``stream`` for
    their own kinds, and nothing else is set.
    """

    kind: SelectorKind = "all"
    number: Optional[int] = None
    category: Optional[RFCCategory] = None
    stream: Optional[RFCStream] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_argument(self) -> "QuerySelector":
        if self.kind in NUMBERED_KINDS:
            if not self.number:
                raise ValueError(f"'{self.kind}' requires a non-zero number")
        elif self.number is not None:
            raise ValueError(f"'{self.kind}' does not take a number")

        if (self.kind == "category") != (self.category is not None):
            raise ValueError("'category' must be set exactly for the category kind")
        if (self.kind == "stream") != (self.stream is not None):
            raise ValueError("'stream' must be set exactly for the stream kind")
        return self

    @classmethod
    def from_options(
        cls,
        exclude_obsolete: bool = False,
        obsoleted_by: int = 0,
        obsolete: int = 0,
        updated_by: int = 0,
        update: int = 0,
        std: int = 0,
        bcp: int = 0,
        fyi: int = 0,
        category: Optional[str] = None,
        stream: Optional[str] = None,
    ) -> "QuerySelector":
        """
        Build a selector from flag-style options.

        Category and stream are validated first, whether or not they end up
        selected. When several options are set, the first in parameter order
        wins; when none is set, every RFC is selected. A negative number is
        passed through unchanged and selects nothing.

        Raises
        ------
        ValidationError
            If ``category`` or ``stream`` is not a recognized value.
        """
        parsed_category = RFCCategory.parse(category) if category else None
        parsed_stream = RFCStream.parse(stream) if stream else None

        if exclude_obsolete:
            return cls(kind="exclude_obsolete")

        numbered = (
            ("obsoleted_by", obsoleted_by),
            ("obsolete", obsolete),
            ("updated_by", updated_by),
            ("update", update),
            ("std", std),
            ("bcp", bcp),
            ("fyi", fyi),
        )
        for kind, number in numbered:
            if number:
                return cls(kind=kind, number=number)

        if parsed_category is not None:
            return cls(kind="category", category=parsed_category)
        if parsed_stream is not None:
            return cls(kind="stream", stream=parsed_stream)

        return cls(kind="all")
