"""Validation of regular expressions embedded in metadata documents."""

from __future__ import annotations

import re

from numplan.errors import PatternError

_WHITESPACE = re.compile(r"\s")


def validate_re(pattern: str, remove_whitespace: bool = False) -> str:
    """Return ``pattern`` after checking that it compiles.

    Args:
        pattern: Raw regular expression text taken from the document.
        remove_whitespace: Drop every whitespace character before compiling.

    Raises:
        PatternError: If the (possibly stripped) pattern is not valid syntax.
    """

    if remove_whitespace:
        pattern = _WHITESPACE.sub("", pattern)
    try:
        re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc
    return pattern


__all__ = ["validate_re"]
