"""Emergency number matching against compiled metadata."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional

import phonenumbers

from numplan.registry import MetadataRegistry

logger = logging.getLogger(__name__)

_PLUS_CHARS = "+\uFF0B"
_STAR_SIGN = "*"
_SEPARATORS = re.compile(
    "[\\s\\-\u2010-\u2015\u2212\u30FC\uFF0D.\uFF0E/\uFF0F()\uFF08\uFF09\\[\\]~\u2053\u223C\uFF5E]+"
)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _normalize(number: str, allow_leading_star: bool) -> Optional[str]:
    """Reduce dialed input to ASCII digits, or ``None`` if it cannot be a short number."""

    candidate = number.lstrip()
    if not candidate or candidate[0] in _PLUS_CHARS:
        return None
    candidate = _SEPARATORS.sub("", candidate)
    if allow_leading_star and candidate.startswith(_STAR_SIGN):
        candidate = candidate[1:]
    candidate = phonenumbers.normalize_digits_only(candidate, keep_non_digits=True)
    if not candidate or not (candidate.isascii() and candidate.isdigit()):
        return None
    return candidate


class ShortNumberMatcher:
    """Classify dialed strings as emergency numbers for a region.

    Whether extra trailing digits still reach an emergency service is encoded
    in each region's emergency pattern: ``911`` tolerates a suffix while
    ``911$`` does not. The matcher applies the same logic everywhere.
    """

    def __init__(self, registry: MetadataRegistry) -> None:
        self._registry = registry

    def connects_to_emergency_number(self, number: str, region_code: str) -> bool:
        """Return whether dialing ``number`` would reach an emergency service."""

        return self._matches_emergency_number(number, region_code, allow_prefix_match=True)

    def is_emergency_number(self, number: str, region_code: str) -> bool:
        """Return whether ``number`` is exactly an emergency number."""

        return self._matches_emergency_number(number, region_code, allow_prefix_match=False)

    def _matches_emergency_number(self, number: str, region_code: str, *, allow_prefix_match: bool) -> bool:
        normalized = _normalize(number, allow_leading_star=not allow_prefix_match)
        if normalized is None:
            return False
        metadata = self._registry.get_metadata_for_region(region_code)
        if metadata is None:
            logger.debug("No metadata for region %s", region_code)
            return False
        if not metadata.emergency.has_numbers:
            return False
        pattern = _compile(metadata.emergency.national_number_pattern)
        if allow_prefix_match:
            return pattern.match(normalized) is not None
        return pattern.fullmatch(normalized) is not None


__all__ = ["ShortNumberMatcher"]
