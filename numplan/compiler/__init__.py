"""Compiler turning territory elements into :class:`~numplan.models.PhoneMetadata`."""

from .collection import (
    build_country_code_to_region_code_map,
    build_phone_metadata,
    build_phone_metadata_collection,
)
from .descriptions import is_valid_number_type, load_general_desc, process_phone_number_desc_element
from .formats import (
    load_available_formats,
    load_international_format,
    load_national_format,
    set_leading_digits_patterns,
)
from .patterns import validate_re
from .territory import (
    get_domestic_carrier_code_formatting_rule_from_element,
    get_national_prefix,
    get_national_prefix_formatting_rule_from_element,
    load_territory_tag_metadata,
    substitute_formatting_rule,
)

__all__ = [
    "build_country_code_to_region_code_map",
    "build_phone_metadata",
    "build_phone_metadata_collection",
    "get_domestic_carrier_code_formatting_rule_from_element",
    "get_national_prefix",
    "get_national_prefix_formatting_rule_from_element",
    "is_valid_number_type",
    "load_available_formats",
    "load_general_desc",
    "load_international_format",
    "load_national_format",
    "load_territory_tag_metadata",
    "process_phone_number_desc_element",
    "set_leading_digits_patterns",
    "substitute_formatting_rule",
    "validate_re",
]
