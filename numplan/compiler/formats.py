"""Compilation of ``availableFormats`` rules."""

from __future__ import annotations

import logging

from numplan.compiler.patterns import validate_re
from numplan.compiler.territory import (
    CARRIER_CODE_FORMATTING_RULE,
    NATIONAL_PREFIX_FORMATTING_RULE,
    NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
    get_domestic_carrier_code_formatting_rule_from_element,
    get_national_prefix_formatting_rule_from_element,
)
from numplan.errors import StructuralError
from numplan.models import NOT_APPLICABLE, NumberFormatBuilder, PhoneMetadataBuilder
from numplan.tree import (
    Element,
    children_named,
    find_path,
    get_attribute,
    get_bool_attribute,
    has_attribute,
    text_of,
)

logger = logging.getLogger(__name__)

AVAILABLE_FORMATS = "availableFormats"
NUMBER_FORMAT = "numberFormat"
FORMAT = "format"
INTL_FORMAT = "intlFormat"
LEADING_DIGITS = "leadingDigits"
PATTERN = "pattern"


def _read_pattern(number_format_element: Element) -> str:
    if not has_attribute(number_format_element, PATTERN):
        return ""
    return validate_re(get_attribute(number_format_element, PATTERN))


def set_leading_digits_patterns(number_format_element: Element, format_builder: NumberFormatBuilder) -> None:
    """Append every ``leadingDigits`` child, keeping document order."""

    for element in children_named(number_format_element, LEADING_DIGITS):
        format_builder.leading_digits_patterns.append(validate_re(text_of(element), True))


def load_national_format(
    builder: PhoneMetadataBuilder,
    number_format_element: Element,
    format_builder: NumberFormatBuilder,
) -> str:
    """Set the single national template of a rule and return it.

    Raises:
        StructuralError: If the rule has zero or several ``format`` children.
    """

    format_builder.pattern = _read_pattern(number_format_element)
    format_elements = children_named(number_format_element, FORMAT)
    if len(format_elements) != 1:
        raise StructuralError(
            f"Invalid number of {FORMAT} patterns ({len(format_elements)}) "
            f"for country {builder.id or '?'}"
        )
    national_format = text_of(format_elements[0])
    format_builder.format = national_format
    return national_format


def load_international_format(
    builder: PhoneMetadataBuilder, number_format_element: Element, national_format: str
) -> bool:
    """Append the international variant of a rule to ``builder``.

    Without an ``intlFormat`` child the national template is reused. An
    ``intlFormat`` of ``NA`` means the rule must not be used internationally.

    Returns:
        True when the element defines its own ``intlFormat``.

    Raises:
        StructuralError: If more than one ``intlFormat`` child is present.
    """

    intl_elements = children_named(number_format_element, INTL_FORMAT)
    if len(intl_elements) > 1:
        raise StructuralError(
            f"Invalid number of {INTL_FORMAT} patterns ({len(intl_elements)}) "
            f"for country {builder.id or '?'}"
        )

    intl_builder = NumberFormatBuilder(pattern=_read_pattern(number_format_element))
    set_leading_digits_patterns(number_format_element, intl_builder)

    if not intl_elements:
        intl_builder.format = national_format
        builder.intl_number_format.append(intl_builder.build())
        return False

    intl_format = text_of(intl_elements[0])
    if intl_format != NOT_APPLICABLE:
        intl_builder.format = intl_format
        builder.intl_number_format.append(intl_builder.build())
    return True


def load_available_formats(
    builder: PhoneMetadataBuilder,
    element: Element,
    national_prefix: str,
    national_prefix_formatting_rule: str,
    national_prefix_optional_when_formatting: bool,
) -> None:
    """Compile every ``availableFormats/numberFormat`` rule of a territory.

    Args:
        builder: Metadata being assembled for the territory.
        element: The ``territory`` element.
        national_prefix: National prefix used to resolve ``$NP``.
        national_prefix_formatting_rule: Territory default, already resolved.
        national_prefix_optional_when_formatting: Territory default.
    """

    carrier_code_formatting_rule = get_domestic_carrier_code_formatting_rule_from_element(
        element, national_prefix
    )
    builder.intl_number_format.clear()

    for number_format_element in find_path(element, AVAILABLE_FORMATS, NUMBER_FORMAT):
        format_builder = NumberFormatBuilder()
        set_leading_digits_patterns(number_format_element, format_builder)
        national_format = load_national_format(builder, number_format_element, format_builder)

        if has_attribute(number_format_element, NATIONAL_PREFIX_FORMATTING_RULE):
            format_builder.national_prefix_formatting_rule = (
                get_national_prefix_formatting_rule_from_element(number_format_element, national_prefix)
            )
        else:
            format_builder.national_prefix_formatting_rule = national_prefix_formatting_rule

        format_builder.national_prefix_optional_when_formatting = get_bool_attribute(
            number_format_element,
            NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
            national_prefix_optional_when_formatting,
        )

        if has_attribute(number_format_element, CARRIER_CODE_FORMATTING_RULE):
            format_builder.domestic_carrier_code_formatting_rule = (
                get_domestic_carrier_code_formatting_rule_from_element(number_format_element, national_prefix)
            )
        else:
            format_builder.domestic_carrier_code_formatting_rule = carrier_code_formatting_rule

        builder.number_format.append(format_builder.build())

        staged = len(builder.intl_number_format)
        if not load_international_format(builder, number_format_element, national_format):
            del builder.intl_number_format[staged:]

    logger.debug(
        "Compiled %d formats (%d international) for %s",
        len(builder.number_format),
        len(builder.intl_number_format),
        builder.id or "?",
    )


__all__ = [
    "load_available_formats",
    "load_international_format",
    "load_national_format",
    "set_leading_digits_patterns",
]
