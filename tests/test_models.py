import pytest
from pydantic import ValidationError as PydanticValidationError

from rfcs.core.errors import ParseError
from rfcs.index.models import (
    DocumentEntry,
    DocumentIdentifier,
    GroupEntry,
    PublicationDate,
    RFC,
    sort_by_publication_date,
)


class TestDocumentIdentifier:
    """Tests for identifier construction and decomposition."""

    def test_build_pads_to_four_digits(self):
        assert DocumentIdentifier.build("RFC", 791) == "RFC0791"
        assert DocumentIdentifier.build("STD", 5) == "STD0005"

    def test_build_keeps_longer_numbers(self):
        assert DocumentIdentifier.build("RFC", 10000) == "RFC10000"

    def test_prefix_and_number(self):
        doc_id = DocumentIdentifier("BCP0014")
        assert doc_id.prefix == "BCP"
        assert doc_id.number == 14

    def test_equality_is_string_equality(self):
        assert DocumentIdentifier("RFC0005") != DocumentIdentifier("STD0005")
        assert DocumentIdentifier("RFC0005") == "RFC0005"

    @pytest.mark.parametrize("value", ["RFC", "XYZ0001", "RFC07a1", "rfc0791", "RFC-001", ""])
    def test_invalid_identifiers_rejected(self, value):
        with pytest.raises(ValueError):
            DocumentIdentifier(value)

    def test_negative_number_rejected(self):
        with pytest.raises(ValueError):
            DocumentIdentifier.build("RFC", -1)

    def test_unknown_prefix_rejected(self):
        with pytest.raises(ValueError):
            DocumentIdentifier.build("IEN", 1)

    def test_pydantic_field_validation(self):
        with pytest.raises(PydanticValidationError):
            GroupEntry(doc_id="STDXXXX")


class TestPublicationDate:
    """Tests for date construction, ordering and rendering."""

    def test_ordering(self):
        month_only = PublicationDate(year=1981, month=1, day=0)
        mid_month = PublicationDate(year=1981, month=1, day=15)
        next_month = PublicationDate(year=1981, month=2, day=1)

        assert month_only < mid_month < next_month
        assert next_month > month_only
        assert sorted([next_month, mid_month, month_only]) == [month_only, mid_month, next_month]

    def test_year_dominates(self):
        assert PublicationDate(year=1980, month=12, day=31) < PublicationDate(year=1981, month=1)

    def test_from_index_month_names(self):
        date = PublicationDate.from_index("September", 1981)
        assert (date.year, date.month, date.day) == (1981, 9, 0)

    @pytest.mark.parametrize("token", ["january", "Jan", "Sept", "13", ""])
    def test_from_index_rejects_other_tokens(self, token):
        with pytest.raises(ParseError):
            PublicationDate.from_index(token, 1981)

    def test_out_of_range_month_rejected(self):
        with pytest.raises(PydanticValidationError):
            PublicationDate(year=1981, month=13)

    def test_immutable(self):
        date = PublicationDate(year=1981, month=9)
        with pytest.raises(PydanticValidationError):
            date.year = 1982

    def test_str(self):
        assert str(PublicationDate(year=1981, month=9)) == "September 1981"
        assert str(PublicationDate(year=1990, month=4, day=1)) == "1 April 1990"


def _entry(doc_id, **kwargs):
    return DocumentEntry(
        doc_id=doc_id,
        title=f"Title of {doc_id}",
        date=PublicationDate(year=2000, month=1),
        **kwargs,
    )


class TestDocumentEntry:
    """Tests for relationship predicates on a single entry."""

    def test_is_obsoleted_by_reads_own_list_only(self):
        old = _entry("RFC0760", obsoleted_by=("RFC0791",))
        new = _entry("RFC0791")

        assert old.is_obsoleted_by(new)
        assert not new.is_obsoleted_by(old)

    def test_obsoletes_list_is_not_consulted(self):
        old = _entry("RFC0001")
        claims = _entry("RFC6864", obsoletes=("RFC0001",))

        assert not old.is_obsoleted_by(claims)
        assert not old.is_obsolete()

    def test_is_updated_by(self):
        base = _entry("RFC0791", updated_by=("RFC1349",))
        assert base.is_updated_by(_entry("RFC1349"))
        assert not base.is_updated_by(_entry("RFC2474"))

    def test_to_rfc(self):
        rfc = _entry("RFC0791").to_rfc()
        assert rfc == RFC(
            number=791,
            document_id="RFC0791",
            title="Title of RFC0791",
            publication_date=PublicationDate(year=2000, month=1),
        )

    def test_group_includes(self):
        group = GroupEntry(doc_id="STD0005", is_also=("RFC0791",))
        assert group.includes(_entry("RFC0791"))
        assert not group.includes(_entry("RFC0792"))


def test_sort_by_publication_date_is_stable():
    def rfc(number, year, month, day=0):
        return RFC(
            number=number,
            document_id=f"RFC{number:04d}",
            title=str(number),
            publication_date=PublicationDate(year=year, month=month, day=day),
        )

    rfcs = [rfc(3, 1990, 4), rfc(1, 1981, 1, 15), rfc(2, 1981, 1), rfc(4, 1990, 4)]
    ordered = sort_by_publication_date(rfcs)

    assert [r.number for r in ordered] == [2, 1, 3, 4]
    # Input is untouched
    assert [r.number for r in rfcs] == [3, 1, 2, 4]
