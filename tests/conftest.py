from __future__ import annotations

import pytest
from defusedxml import ElementTree

from numplan.compiler import build_phone_metadata_collection
from numplan.registry import MetadataRegistry

SHORT_NUMBER_DOCUMENT = """
<phoneNumberMetadata>
  <territories>
    <territory id="US" countryCode="1" internationalPrefix="011" nationalPrefix="1"
               mainCountryForCode="true">
      <generalDesc><nationalNumberPattern>[13-689]\\d{9}|2[0-35-9]\\d{8}</nationalNumberPattern></generalDesc>
      <emergency>
        <nationalNumberPattern>11[29]|911</nationalNumberPattern>
        <exampleNumber>911</exampleNumber>
      </emergency>
    </territory>
    <territory id="BR" countryCode="55" internationalPrefix="00(?:1[45]|2[135]|[34]1|43)"
               nationalPrefix="0">
      <generalDesc><nationalNumberPattern>[1-9]\\d{7,9}</nationalNumberPattern></generalDesc>
      <emergency>
        <nationalNumberPattern>(?:1(?:12|28|9[023])|911)$</nationalNumberPattern>
        <exampleNumber>190</exampleNumber>
      </emergency>
    </territory>
    <territory id="AO" countryCode="244" internationalPrefix="00">
      <generalDesc><nationalNumberPattern>[29]\\d{8}</nationalNumberPattern></generalDesc>
      <fixedLine><nationalNumberPattern>2\\d(?:[26-9]\\d|\\d[26-9])\\d{5}</nationalNumberPattern></fixedLine>
      <mobile><nationalNumberPattern>9[1-3]\\d{7}</nationalNumberPattern></mobile>
    </territory>
  </territories>
</phoneNumberMetadata>
"""


def parse_xml(xml: str):
    return ElementTree.fromstring(xml)


@pytest.fixture()
def xml():
    return parse_xml


@pytest.fixture(scope="session")
def short_number_registry() -> MetadataRegistry:
    root = parse_xml(SHORT_NUMBER_DOCUMENT)
    return MetadataRegistry.from_metadata(build_phone_metadata_collection(root))


@pytest.fixture()
def short_number_root():
    return parse_xml(SHORT_NUMBER_DOCUMENT)
