"""Territory-level attributes and formatting-rule placeholders."""

from __future__ import annotations

import logging

from numplan.compiler.patterns import validate_re
from numplan.errors import MetadataError, MissingAttributeError
from numplan.models import PhoneMetadataBuilder
from numplan.tree import Element, get_attribute, get_bool_attribute, has_attribute

logger = logging.getLogger(__name__)

COUNTRY_CODE = "countryCode"
LEADING_DIGITS = "leadingDigits"
INTERNATIONAL_PREFIX = "internationalPrefix"
PREFERRED_INTERNATIONAL_PREFIX = "preferredInternationalPrefix"
NATIONAL_PREFIX = "nationalPrefix"
NATIONAL_PREFIX_FOR_PARSING = "nationalPrefixForParsing"
NATIONAL_PREFIX_TRANSFORM_RULE = "nationalPrefixTransformRule"
PREFERRED_EXTN_PREFIX = "preferredExtnPrefix"
MAIN_COUNTRY_FOR_CODE = "mainCountryForCode"
LEADING_ZERO_POSSIBLE = "leadingZeroPossible"
NATIONAL_PREFIX_FORMATTING_RULE = "nationalPrefixFormattingRule"
CARRIER_CODE_FORMATTING_RULE = "carrierCodeFormattingRule"
NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING = "nationalPrefixOptionalWhenFormatting"

NATIONAL_PREFIX_TOKEN = "$NP"
FIRST_GROUP_TOKEN = "$FG"
CARRIER_CODE_TOKEN = "$CC"
FIRST_GROUP_PLACEHOLDER = "${1}"


def get_national_prefix(element: Element) -> str:
    return get_attribute(element, NATIONAL_PREFIX)


def substitute_formatting_rule(rule: str, national_prefix: str) -> str:
    """Resolve ``$NP`` and ``$FG`` in a formatting rule.

    ``$CC`` is left in place; it is replaced per number when formatting with a
    carrier code.
    """

    rule = rule.replace(NATIONAL_PREFIX_TOKEN, national_prefix, 1)
    return rule.replace(FIRST_GROUP_TOKEN, FIRST_GROUP_PLACEHOLDER, 1)


def get_national_prefix_formatting_rule_from_element(element: Element, national_prefix: str) -> str:
    rule = get_attribute(element, NATIONAL_PREFIX_FORMATTING_RULE)
    return substitute_formatting_rule(rule, national_prefix)


def get_domestic_carrier_code_formatting_rule_from_element(
    element: Element, national_prefix: str
) -> str:
    rule = get_attribute(element, CARRIER_CODE_FORMATTING_RULE)
    return substitute_formatting_rule(rule, national_prefix)


def _parse_country_code(element: Element) -> int:
    if not has_attribute(element, COUNTRY_CODE):
        raise MissingAttributeError(COUNTRY_CODE, element.tag)
    raw = get_attribute(element, COUNTRY_CODE).strip()
    try:
        return int(raw)
    except ValueError:
        raise MetadataError(f"{COUNTRY_CODE} must be an integer, got {raw!r}") from None


def load_territory_tag_metadata(
    region_code: str, element: Element, national_prefix: str
) -> PhoneMetadataBuilder:
    """Read the attributes of a ``territory`` element into a fresh builder.

    Args:
        region_code: Region identifier recorded as the metadata id.
        element: The ``territory`` element.
        national_prefix: National prefix digits already read from ``element``.

    Raises:
        MissingAttributeError: If ``countryCode`` or ``internationalPrefix``
            is absent.
        PatternError: If a prefix pattern does not compile.
    """

    builder = PhoneMetadataBuilder(id=region_code)
    builder.country_code = _parse_country_code(element)
    if has_attribute(element, LEADING_DIGITS):
        builder.leading_digits = validate_re(get_attribute(element, LEADING_DIGITS))
    if not has_attribute(element, INTERNATIONAL_PREFIX):
        raise MissingAttributeError(INTERNATIONAL_PREFIX, element.tag)
    builder.international_prefix = validate_re(get_attribute(element, INTERNATIONAL_PREFIX))
    if has_attribute(element, PREFERRED_INTERNATIONAL_PREFIX):
        builder.preferred_international_prefix = get_attribute(element, PREFERRED_INTERNATIONAL_PREFIX)
    if has_attribute(element, NATIONAL_PREFIX_FOR_PARSING):
        builder.national_prefix_for_parsing = validate_re(
            get_attribute(element, NATIONAL_PREFIX_FOR_PARSING), True
        )
    if has_attribute(element, NATIONAL_PREFIX_TRANSFORM_RULE):
        builder.national_prefix_transform_rule = validate_re(
            get_attribute(element, NATIONAL_PREFIX_TRANSFORM_RULE)
        )
    if national_prefix:
        builder.national_prefix = national_prefix
        if not has_attribute(element, NATIONAL_PREFIX_FOR_PARSING):
            builder.national_prefix_for_parsing = national_prefix
    if has_attribute(element, PREFERRED_EXTN_PREFIX):
        builder.preferred_extn_prefix = get_attribute(element, PREFERRED_EXTN_PREFIX)
    builder.main_country_for_code = get_bool_attribute(element, MAIN_COUNTRY_FOR_CODE)
    builder.leading_zero_possible = get_bool_attribute(element, LEADING_ZERO_POSSIBLE)
    logger.debug("Loaded territory attributes for %s (+%s)", region_code, builder.country_code)
    return builder


__all__ = [
    "get_domestic_carrier_code_formatting_rule_from_element",
    "get_national_prefix",
    "get_national_prefix_formatting_rule_from_element",
    "load_territory_tag_metadata",
    "substitute_formatting_rule",
]
