from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from logging import Filter
from typing import Any, Dict, Mapping, MutableMapping

from rich.console import Console
from rich.logging import RichHandler


_REGION: ContextVar[str | None] = ContextVar("region", default=None)
_DOCUMENT: ContextVar[str | None] = ContextVar("document", default=None)


class _ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that merges contextvars with per-call extras."""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        extra: Dict[str, Any] = dict(kwargs.get("extra") or {})

        module_name = self.extra.get("module_name") or self.logger.name
        extra.setdefault("module_name", module_name)

        region = kwargs.pop("region", None) or extra.pop("region", None)
        document = kwargs.pop("document", None) or extra.pop("document", None)
        stage = kwargs.pop("stage", None) or extra.pop("stage", None)
        payload = kwargs.pop("payload", None) or extra.pop("payload", None)

        if region is None:
            region = _REGION.get()
        if document is None:
            document = _DOCUMENT.get()

        if region is not None:
            extra.setdefault("region", region)
        if document is not None:
            extra.setdefault("document", document)
        if stage is not None:
            extra.setdefault("stage", stage)
        if payload is not None:
            extra.setdefault("payload", payload)

        kwargs["extra"] = extra
        return msg, kwargs


class _CompactFormatter(logging.Formatter):
    """Formatter that renders compact records for RichHandler."""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        time_str = self.formatTime(record, self.datefmt)
        module_name = getattr(record, "module_name", record.name)
        level = record.levelname
        message = record.message

        context_parts: list[str] = []
        document = getattr(record, "document", None)
        region = getattr(record, "region", None)
        stage = getattr(record, "stage", None)
        payload = getattr(record, "payload", None)

        if document:
            context_parts.append(f"doc={document}")
        if region:
            context_parts.append(f"region={region}")
        if stage:
            context_parts.append(f"stage={stage}")
        if payload:
            payload_repr = _stringify_payload(payload)
            if payload_repr:
                context_parts.append(payload_repr)

        context_suffix = f" ({', '.join(context_parts)})" if context_parts else ""

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"

        return f"[{time_str}] [{level}] [{module_name}] {message}{context_suffix}"


def _stringify_payload(payload: Any) -> str:
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    try:
        return json.dumps(payload, ensure_ascii=False, default=str)
    except TypeError:
        return str(payload)


class _DomainInfoFilter(Filter):
    """Allow INFO records only when marked as domain milestones."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        if record.levelno != logging.INFO:
            return True
        return bool(getattr(record, "domain", False))


def setup_logging(level: str | None = None, noise: str | None = None) -> logging.Logger:
    """Configure the ``numplan`` logger once.

    ``level`` and ``noise`` fall back to ``NUMPLAN_LOG_LEVEL`` and
    ``NUMPLAN_LOG_NOISE``.
    """

    root = logging.getLogger("numplan")
    if getattr(root, "_numplan_configured", False):
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    log_level_name = (level or os.getenv("NUMPLAN_LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, log_level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root.setLevel(log_level)

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_level=False,
        show_path=False,
        markup=False,
    )
    console_handler.setFormatter(_CompactFormatter(datefmt="%H:%M:%S"))

    noise_mode = (noise or os.getenv("NUMPLAN_LOG_NOISE", "low")).strip().lower() or "low"
    if noise_mode != "debug":
        console_handler.addFilter(_DomainInfoFilter())

    root.addHandler(console_handler)

    root._numplan_configured = True  # type: ignore[attr-defined]
    return root


def get_logger(name: str) -> logging.LoggerAdapter:
    base = logging.getLogger(name)
    return _ContextLoggerAdapter(base, {"module_name": name})


def info_domain(
    module: str,
    message: str,
    *,
    stage: str | None = None,
    **context: Any,
) -> None:
    """Log a milestone INFO message visible in console output."""

    logger = get_logger(module)
    extra: Dict[str, Any] = {"domain": True}
    if stage:
        extra["stage"] = stage
    if context:
        extra["payload"] = context
    logger.info(message, extra=extra)


def log_event(
    level: str | int,
    module: str,
    message: str,
    *,
    stage: str | None = None,
    exc_info: Any | None = None,
) -> None:
    logger = get_logger(module)
    kwargs: Dict[str, Any] = {}
    if stage:
        kwargs["stage"] = stage
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = int(level)
    logger.log(level_value, message, exc_info=exc_info, **kwargs)


def bind_context(*, region: str | None = None, document: str | None = None) -> Dict[str, Any]:
    tokens: Dict[str, Any] = {}
    if region is not None:
        tokens["region"] = _REGION.set(region)
    if document is not None:
        tokens["document"] = _DOCUMENT.set(document)
    return tokens


def reset_context(tokens: Mapping[str, Any]) -> None:
    region_token = tokens.get("region")
    if region_token is not None:
        _REGION.reset(region_token)
    document_token = tokens.get("document")
    if document_token is not None:
        _DOCUMENT.reset(document_token)


__all__ = [
    "setup_logging",
    "get_logger",
    "info_domain",
    "log_event",
    "bind_context",
    "reset_context",
]
