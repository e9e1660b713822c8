"""Region-keyed lookup of compiled metadata."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from numplan.compiler.collection import build_country_code_to_region_code_map
from numplan.errors import MetadataError
from numplan.models import PhoneMetadata


class MetadataRegistry:
    """Read-only view over metadata for many regions.

    Populate it once, then hand the same instance to every caller. Nothing
    mutates it after construction, so concurrent readers need no locking.
    """

    __slots__ = ("_by_region", "_by_country_code")

    def __init__(self, by_region: Mapping[str, PhoneMetadata]) -> None:
        self._by_region: Mapping[str, PhoneMetadata] = MappingProxyType(dict(by_region))
        country_map = build_country_code_to_region_code_map(self._by_region.values())
        self._by_country_code: Mapping[int, tuple[str, ...]] = MappingProxyType(
            {code: tuple(regions) for code, regions in country_map.items()}
        )

    @classmethod
    def from_metadata(cls, metadata_collection: Iterable[PhoneMetadata]) -> "MetadataRegistry":
        """Index ``metadata_collection`` by region id.

        Raises:
            MetadataError: If two records share a region id.
        """

        by_region: dict[str, PhoneMetadata] = {}
        for metadata in metadata_collection:
            if metadata.id in by_region:
                raise MetadataError(f"Duplicate metadata for region {metadata.id!r}")
            by_region[metadata.id] = metadata
        return cls(by_region)

    def get_metadata_for_region(self, region_code: str | None) -> Optional[PhoneMetadata]:
        if not region_code:
            return None
        return self._by_region.get(region_code.upper())

    def country_code_to_region_codes(self, country_code: int) -> tuple[str, ...]:
        return self._by_country_code.get(country_code, ())

    @property
    def region_codes(self) -> frozenset[str]:
        return frozenset(self._by_region)

    def __contains__(self, region_code: object) -> bool:
        return isinstance(region_code, str) and region_code.upper() in self._by_region

    def __len__(self) -> int:
        return len(self._by_region)


__all__ = ["MetadataRegistry"]
