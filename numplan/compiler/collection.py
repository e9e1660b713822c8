"""Compilation of whole territories and metadata documents."""

from __future__ import annotations

from typing import Iterable

from numplan.compiler.descriptions import load_general_desc
from numplan.compiler.formats import load_available_formats
from numplan.compiler.territory import (
    NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
    get_domestic_carrier_code_formatting_rule_from_element,
    get_national_prefix,
    get_national_prefix_formatting_rule_from_element,
    load_territory_tag_metadata,
)
from numplan.errors import MetadataError
from numplan.logger import bind_context, get_logger, info_domain, log_event, reset_context
from numplan.models import PhoneMetadata
from numplan.tree import Element, find_path, get_attribute, get_bool_attribute

logger = get_logger(__name__)

TERRITORIES = "territories"
TERRITORY = "territory"
ID = "id"


def build_phone_metadata(element: Element, lite_build: bool = False) -> PhoneMetadata:
    """Compile a single ``territory`` element into :class:`PhoneMetadata`.

    Any :class:`~numplan.errors.MetadataError` aborts the territory and is
    re-raised after being logged with the region id.
    """

    region_code = get_attribute(element, ID)
    tokens = bind_context(region=region_code or "?")
    try:
        national_prefix = get_national_prefix(element)
        builder = load_territory_tag_metadata(region_code, element, national_prefix)
        national_prefix_formatting_rule = get_national_prefix_formatting_rule_from_element(
            element, national_prefix
        )
        builder.national_prefix_formatting_rule = national_prefix_formatting_rule
        builder.domestic_carrier_code_formatting_rule = (
            get_domestic_carrier_code_formatting_rule_from_element(element, national_prefix)
        )
        load_available_formats(
            builder,
            element,
            national_prefix,
            national_prefix_formatting_rule,
            get_bool_attribute(element, NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING),
        )
        load_general_desc(builder, element, lite_build)
        metadata = builder.build()
    except MetadataError as exc:
        log_event(
            "WARNING",
            __name__,
            f"Territory compilation failed: {exc}",
            stage="TERRITORY_FAILED",
            exc_info=exc,
        )
        raise
    finally:
        reset_context(tokens)
    logger.debug("Compiled territory", region=region_code, payload={"country_code": metadata.country_code})
    return metadata


def build_phone_metadata_collection(root: Element, lite_build: bool = False) -> list[PhoneMetadata]:
    """Compile every ``territories/territory`` element under ``root`` in order."""

    territories = find_path(root, TERRITORIES, TERRITORY)
    collection = [build_phone_metadata(territory, lite_build) for territory in territories]
    info_domain(
        __name__,
        "Metadata collection compiled",
        stage="COLLECTION_BUILT",
        territories=len(collection),
        lite_build=lite_build,
    )
    return collection


def build_country_code_to_region_code_map(
    metadata_collection: Iterable[PhoneMetadata],
) -> dict[int, list[str]]:
    """Group region ids by country calling code.

    The region flagged ``main_country_for_code`` comes first; the rest keep
    their input order.
    """

    country_code_to_regions: dict[int, list[str]] = {}
    for metadata in metadata_collection:
        regions = country_code_to_regions.setdefault(metadata.country_code, [])
        if metadata.main_country_for_code:
            regions.insert(0, metadata.id)
        else:
            regions.append(metadata.id)
    return country_code_to_regions


__all__ = [
    "build_country_code_to_region_code_map",
    "build_phone_metadata",
    "build_phone_metadata_collection",
]
