"""Numbering plan metadata compiler and short number matching."""

from .bootstrap import build_registry
from .errors import MetadataError, MissingAttributeError, PatternError, StructuralError
from .models import NOT_APPLICABLE, NumberFormat, PhoneMetadata, PhoneNumberDesc
from .registry import MetadataRegistry
from .shortnumbers import ShortNumberMatcher

__all__ = [
    "MetadataError",
    "MetadataRegistry",
    "MissingAttributeError",
    "NOT_APPLICABLE",
    "NumberFormat",
    "PatternError",
    "PhoneMetadata",
    "PhoneNumberDesc",
    "ShortNumberMatcher",
    "StructuralError",
    "build_registry",
]
