"""Errors raised while compiling numbering plan metadata."""

from __future__ import annotations


class MetadataError(RuntimeError):
    """Raised when a territory document cannot be compiled."""


class PatternError(MetadataError, ValueError):
    """Raised when an embedded regular expression does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class StructuralError(MetadataError):
    """Raised when an element has the wrong number of required children."""


class MissingAttributeError(MetadataError):
    """Raised when a required territory attribute is absent."""

    def __init__(self, attribute: str, element: str = "territory") -> None:
        super().__init__(f"Required attribute {attribute!r} is missing on <{element}>")
        self.attribute = attribute
        self.element = element


__all__ = ["MetadataError", "MissingAttributeError", "PatternError", "StructuralError"]
