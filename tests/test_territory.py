"""Tests for territory attribute loading and formatting-rule placeholders."""

from __future__ import annotations

import pytest

from numplan.compiler import (
    get_domestic_carrier_code_formatting_rule_from_element,
    get_national_prefix,
    get_national_prefix_formatting_rule_from_element,
    load_territory_tag_metadata,
    substitute_formatting_rule,
)
from numplan.errors import MetadataError, MissingAttributeError, PatternError


def test_get_national_prefix(xml) -> None:
    assert get_national_prefix(xml("<territory nationalPrefix='00'/>")) == "00"
    assert get_national_prefix(xml("<territory/>")) == ""


def test_load_territory_tag_metadata(xml) -> None:
    element = xml(
        "<territory countryCode='33' leadingDigits='2' internationalPrefix='00'"
        " preferredInternationalPrefix='0011' nationalPrefixForParsing='0'"
        " nationalPrefixTransformRule='9$1'"
        " preferredExtnPrefix=' x' mainCountryForCode='true'"
        " leadingZeroPossible='true'/>"
    )
    builder = load_territory_tag_metadata("FR", element, "0")

    assert builder.id == "FR"
    assert builder.country_code == 33
    assert builder.leading_digits == "2"
    assert builder.international_prefix == "00"
    assert builder.preferred_international_prefix == "0011"
    assert builder.national_prefix_for_parsing == "0"
    assert builder.national_prefix_transform_rule == "9$1"
    assert builder.national_prefix == "0"
    assert builder.preferred_extn_prefix == " x"
    assert builder.main_country_for_code is True
    assert builder.leading_zero_possible is True


def test_load_territory_tag_metadata_sets_boolean_fields_to_false_by_default(xml) -> None:
    element = xml("<territory countryCode='33' internationalPrefix='00'/>")
    builder = load_territory_tag_metadata("FR", element, "")
    assert builder.main_country_for_code is False
    assert builder.leading_zero_possible is False


def test_national_prefix_for_parsing_defaults_to_national_prefix(xml) -> None:
    element = xml("<territory countryCode='33' internationalPrefix='00'/>")
    builder = load_territory_tag_metadata("FR", element, "00")
    assert builder.national_prefix == "00"
    assert builder.national_prefix_for_parsing == builder.national_prefix


def test_national_prefix_for_parsing_whitespace_is_removed(xml) -> None:
    element = xml(
        "<territory countryCode='7' internationalPrefix='810'"
        " nationalPrefixForParsing=' 8 ( 0 )? '/>"
    )
    builder = load_territory_tag_metadata("RU", element, "8")
    assert builder.national_prefix_for_parsing == "8(0)?"


def test_load_territory_tag_metadata_with_required_attributes_only(xml) -> None:
    builder = load_territory_tag_metadata("FR", xml("<territory countryCode='33' internationalPrefix='00'/>"), "")
    assert builder.national_prefix == ""
    assert builder.national_prefix_for_parsing == ""


def test_missing_country_code_is_fatal(xml) -> None:
    with pytest.raises(MissingAttributeError) as excinfo:
        load_territory_tag_metadata("FR", xml("<territory internationalPrefix='00'/>"), "")
    assert excinfo.value.attribute == "countryCode"


def test_missing_international_prefix_is_fatal(xml) -> None:
    with pytest.raises(MissingAttributeError) as excinfo:
        load_territory_tag_metadata("FR", xml("<territory countryCode='33'/>"), "")
    assert excinfo.value.attribute == "internationalPrefix"


def test_non_numeric_country_code_is_rejected(xml) -> None:
    with pytest.raises(MetadataError):
        load_territory_tag_metadata("FR", xml("<territory countryCode='3x' internationalPrefix='00'/>"), "")


def test_invalid_international_prefix_pattern(xml) -> None:
    with pytest.raises(PatternError):
        load_territory_tag_metadata("FR", xml("<territory countryCode='33' internationalPrefix='0(0'/>"), "")


def test_get_national_prefix_formatting_rule_from_element(xml) -> None:
    element = xml("<territory nationalPrefixFormattingRule='$NP$FG'/>")
    assert get_national_prefix_formatting_rule_from_element(element, "0") == "0${1}"


def test_get_domestic_carrier_code_formatting_rule_from_element(xml) -> None:
    element = xml("<territory carrierCodeFormattingRule='$NP$CC $FG'/>")
    assert get_domestic_carrier_code_formatting_rule_from_element(element, "0") == "0$CC ${1}"


def test_formatting_rules_default_to_empty(xml) -> None:
    element = xml("<territory/>")
    assert get_national_prefix_formatting_rule_from_element(element, "0") == ""
    assert get_domestic_carrier_code_formatting_rule_from_element(element, "0") == ""


def test_substitute_formatting_rule_keeps_carrier_code_token() -> None:
    assert substitute_formatting_rule("$NP $CC ($FG)", "0") == "0 $CC (${1})"
    assert substitute_formatting_rule("($FG)", "0") == "(${1})"


def test_explicit_empty_national_prefix_for_parsing_is_kept(xml) -> None:
    element = xml(
        "<territory countryCode='33' internationalPrefix='00' nationalPrefix='0'"
        " nationalPrefixForParsing=''/>"
    )
    builder = load_territory_tag_metadata("FR", element, "0")
    assert builder.national_prefix == "0"
    assert builder.national_prefix_for_parsing == ""
