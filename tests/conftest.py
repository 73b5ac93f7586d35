"""
Shared fixtures: a namespaced sample index with deliberately one-sided
relationships, a bare minimal index, and fetcher and store doubles.
"""

import pytest
from unittest.mock import MagicMock

from rfcs.cache.store import CacheStore
from rfcs.index.parser import parse_index
from rfcs.index.repository import RFCIndexRepository
from rfcs.remote.fetcher import HttpFetcher

# Relationships are deliberately not all symmetric:
# - RFC6864 claims to obsolete RFC0001, but RFC0001 has no <obsoleted-by>
# - RFC2474 claims to update RFC0791, but RFC0791's <updated-by> omits it
SAMPLE_INDEX_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rfc-index xmlns="http://www.rfc-editor.org/rfc-index">
  <bcp-entry>
    <doc-id>BCP0014</doc-id>
    <is-also><doc-id>RFC2119</doc-id></is-also>
  </bcp-entry>
  <fyi-entry>
    <doc-id>FYI0001</doc-id>
    <title>F.Y.I. on F.Y.I.</title>
  </fyi-entry>
  <std-entry>
    <doc-id>STD0005</doc-id>
    <title>Internet Protocol</title>
    <is-also>
      <doc-id>RFC0791</doc-id>
      <doc-id>RFC0792</doc-id>
    </is-also>
  </std-entry>
  <rfc-entry>
    <doc-id>RFC0001</doc-id>
    <title>Host Software</title>
    <author><name>S. Crocker</name></author>
    <date><month>April</month><year>1969</year></date>
    <current-status>UNKNOWN</current-status>
    <publication-status>UNKNOWN</publication-status>
    <stream>Legacy</stream>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC0760</doc-id>
    <title>DoD standard Internet Protocol</title>
    <author><name>J. Postel</name></author>
    <date><month>January</month><year>1980</year></date>
    <obsoleted-by><doc-id>RFC0791</doc-id></obsoleted-by>
    <current-status>UNKNOWN</current-status>
    <publication-status>UNKNOWN</publication-status>
    <stream>Legacy</stream>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC0791</doc-id>
    <title>Internet Protocol</title>
    <author><name>J. Postel</name></author>
    <date><month>September</month><year>1981</year></date>
    <format>
      <file-format>ASCII</file-format>
      <char-count>97779</char-count>
      <page-count>51</page-count>
    </format>
    <keywords><kw>IP</kw><kw></kw></keywords>
    <obsoletes><doc-id>RFC0760</doc-id></obsoletes>
    <updated-by>
      <doc-id>RFC1349</doc-id>
      <doc-id>RFC6864</doc-id>
    </updated-by>
    <is-also><doc-id>STD0005</doc-id></is-also>
    <current-status>INTERNET STANDARD</current-status>
    <publication-status>INTERNET STANDARD</publication-status>
    <stream>Legacy</stream>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC1149</doc-id>
    <title>Standard for the transmission of IP datagrams on avian carriers</title>
    <author><name>D. Waitzman</name></author>
    <date><day>1</day><month>April</month><year>1990</year></date>
    <current-status>EXPERIMENTAL</current-status>
    <publication-status>EXPERIMENTAL</publication-status>
    <stream>Legacy</stream>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC1349</doc-id>
    <title>Type of Service in the Internet Protocol Suite</title>
    <author><name>P. Almquist</name></author>
    <date><month>July</month><year>1992</year></date>
    <obsoleted-by><doc-id>RFC2474</doc-id></obsoleted-by>
    <updates><doc-id>RFC0791</doc-id></updates>
    <current-status>PROPOSED STANDARD</current-status>
    <publication-status>PROPOSED STANDARD</publication-status>
    <stream>Legacy</stream>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC2119</doc-id>
    <title>Key words for use in RFCs to Indicate Requirement Levels</title>
    <author><name>S. Bradner</name></author>
    <date><month>March</month><year>1997</year></date>
    <is-also><doc-id>BCP0014</doc-id></is-also>
    <current-status>BEST CURRENT PRACTICE</current-status>
    <publication-status>BEST CURRENT PRACTICE</publication-status>
    <stream>IETF</stream>
    <abstract><p>This document defines these words as they should be
      interpreted in IETF documents.</p></abstract>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC2474</doc-id>
    <title>Definition of the Differentiated Services Field (DS Field) in the IPv4 and IPv6 Headers</title>
    <author><name>K. Nichols</name></author>
    <date><month>December</month><year>1998</year></date>
    <obsoletes><doc-id>RFC1349</doc-id></obsoletes>
    <updates><doc-id>RFC0791</doc-id></updates>
    <current-status>PROPOSED STANDARD</current-status>
    <publication-status>PROPOSED STANDARD</publication-status>
    <stream>IETF</stream>
    <area>int</area>
    <wg_acronym>diffserv</wg_acronym>
  </rfc-entry>
  <rfc-entry>
    <doc-id>RFC6864</doc-id>
    <title>Updated Specification of the IPv4 ID Field</title>
    <author><name>J. Touch</name></author>
    <date><month>February</month><year>2013</year></date>
    <obsoletes><doc-id>RFC0001</doc-id></obsoletes>
    <updates><doc-id>RFC0791</doc-id></updates>
    <current-status>PROPOSED STANDARD</current-status>
    <publication-status>PROPOSED STANDARD</publication-status>
    <stream>IETF</stream>
  </rfc-entry>
  <rfc-not-issued-entry>
    <doc-id>RFC0849</doc-id>
  </rfc-not-issued-entry>
</rfc-index>
"""

MINIMAL_INDEX_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<rfc-index>
  <rfc-entry>
    <doc-id>RFC0001</doc-id>
    <title>Host Software</title>
    <date><month>January</month><year>1981</year></date>
    <current-status>UNKNOWN</current-status>
  </rfc-entry>
</rfc-index>
"""


@pytest.fixture
def sample_index_xml():
    return SAMPLE_INDEX_XML


@pytest.fixture
def sample_index():
    return parse_index(SAMPLE_INDEX_XML)


@pytest.fixture
def repository(sample_index):
    return RFCIndexRepository(sample_index)


@pytest.fixture
def mock_fetcher():
    mock = MagicMock(spec=HttpFetcher)
    mock.fetch.return_value = SAMPLE_INDEX_XML
    return mock


@pytest.fixture
def spy_store(tmp_path):
    return MagicMock(wraps=CacheStore(tmp_path / "cache"))


@pytest.fixture
def minimal_index_xml():
    return MINIMAL_INDEX_XML
