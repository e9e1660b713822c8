"""Number-type descriptors and their inheritance from the general descriptor."""

from __future__ import annotations

import logging
from typing import Optional

from numplan.compiler.patterns import validate_re
from numplan.errors import StructuralError
from numplan.models import NOT_APPLICABLE, NUMBER_TYPE_FIELDS, PhoneMetadataBuilder, PhoneNumberDesc
from numplan.tree import Element, children_named, text_of

logger = logging.getLogger(__name__)

GENERAL_DESC = "generalDesc"
EMERGENCY = "emergency"
POSSIBLE_NUMBER_PATTERN = "possibleNumberPattern"
NATIONAL_NUMBER_PATTERN = "nationalNumberPattern"
EXAMPLE_NUMBER = "exampleNumber"

_KNOWN_CHILDREN = frozenset(
    {GENERAL_DESC, EMERGENCY, "availableFormats", "areaCodeOptional", "noInternationalDialling"}
)


def is_valid_number_type(number_type: str) -> bool:
    """Return whether ``number_type`` names one of the ten number categories."""

    return number_type in NUMBER_TYPE_FIELDS


def _single_child(element: Element, name: str) -> Optional[Element]:
    children = children_named(element, name)
    if len(children) > 1:
        raise StructuralError(
            f"Invalid number of <{name}> elements ({len(children)}) in <{element.tag}>"
        )
    return children[0] if children else None


def _pattern_from(element: Element, name: str, inherited: str) -> str:
    child = _single_child(element, name)
    if child is None:
        return inherited
    return validate_re(text_of(child), True)


def process_phone_number_desc_element(
    general_desc: Optional[PhoneNumberDesc],
    territory_element: Element,
    number_type: str,
    lite_build: bool = False,
) -> PhoneNumberDesc:
    """Resolve the descriptor for ``number_type`` inside a territory.

    A missing element means the region has no numbers of that type. A present
    element inherits whichever pattern it leaves out from ``general_desc``.

    Raises:
        StructuralError: If the type element, or one of its patterns, appears
            more than once.
    """

    element = _single_child(territory_element, number_type)
    if element is None:
        return PhoneNumberDesc(NOT_APPLICABLE, NOT_APPLICABLE)

    parent = general_desc if general_desc is not None else PhoneNumberDesc()
    possible = _pattern_from(element, POSSIBLE_NUMBER_PATTERN, parent.possible_number_pattern)
    national = _pattern_from(element, NATIONAL_NUMBER_PATTERN, parent.national_number_pattern)

    example = NOT_APPLICABLE
    if lite_build:
        example = ""
    else:
        example_element = _single_child(element, EXAMPLE_NUMBER)
        if example_element is not None:
            example = text_of(example_element)
    return PhoneNumberDesc(possible, national, example)


def load_general_desc(
    builder: PhoneMetadataBuilder, territory_element: Element, lite_build: bool = False
) -> PhoneMetadataBuilder:
    """Populate the general, typed and emergency descriptors of ``builder``."""

    general_desc = process_phone_number_desc_element(None, territory_element, GENERAL_DESC, lite_build)
    builder.general_desc = general_desc

    for child in territory_element:
        if child.tag not in _KNOWN_CHILDREN and not is_valid_number_type(child.tag):
            logger.debug("Ignoring unknown element <%s> in territory %s", child.tag, builder.id or "?")

    for number_type in NUMBER_TYPE_FIELDS:
        desc = process_phone_number_desc_element(general_desc, territory_element, number_type, lite_build)
        builder.set_number_desc(number_type, desc)
    builder.emergency = process_phone_number_desc_element(
        general_desc, territory_element, EMERGENCY, lite_build
    )

    builder.same_mobile_and_fixed_line_pattern = (
        builder.mobile.national_number_pattern == builder.fixed_line.national_number_pattern
    )
    return builder


__all__ = [
    "is_valid_number_type",
    "load_general_desc",
    "process_phone_number_desc_element",
]
