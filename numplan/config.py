"""Compiler configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_LOG_NOISE_MODES = {"low", "debug"}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Options controlling metadata compilation and its logging."""

    lite_build: bool
    log_level: str
    log_noise: str


def _optional_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    if not stripped:
        return default
    return stripped


def _parse_bool_env(name: str, default: bool) -> bool:
    raw = _optional_env(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise RuntimeError(f"{name} must be a boolean value")


def _parse_choice_env(name: str, default: str, choices: set[str], *, upper: bool = False) -> str:
    raw = _optional_env(name, default) or default
    value = raw.upper() if upper else raw.lower()
    if value not in choices:
        raise RuntimeError(f"{name} must be one of: {', '.join(sorted(choices))}")
    return value


def load_config(env_file: str | None = None) -> CompilerConfig:
    """Load configuration from the provided .env file (or default location)."""

    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    config = CompilerConfig(
        lite_build=_parse_bool_env("NUMPLAN_LITE_BUILD", False),
        log_level=_parse_choice_env("NUMPLAN_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True),
        log_noise=_parse_choice_env("NUMPLAN_LOG_NOISE", "low", _LOG_NOISE_MODES),
    )
    logger.debug("Loaded compiler config: %s", config)
    return config


__all__ = ["CompilerConfig", "load_config"]
