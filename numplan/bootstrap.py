"""One-time construction of the metadata registry."""

from __future__ import annotations

from numplan.compiler.collection import build_phone_metadata_collection
from numplan.config import CompilerConfig, load_config
from numplan.logger import bind_context, info_domain, reset_context, setup_logging
from numplan.registry import MetadataRegistry
from numplan.tree import Element


def build_registry(
    root: Element,
    config: CompilerConfig | None = None,
    *,
    document_name: str | None = None,
) -> MetadataRegistry:
    """Compile ``root`` and freeze the result into a registry.

    Call this once at startup and pass the registry to every consumer.
    """

    config = config or load_config()
    setup_logging(config.log_level, config.log_noise)
    info_domain(__name__, "Config loaded", stage="CONFIG_OK", lite_build=config.lite_build)

    tokens = bind_context(document=document_name) if document_name else {}
    try:
        collection = build_phone_metadata_collection(root, lite_build=config.lite_build)
        registry = MetadataRegistry.from_metadata(collection)
    finally:
        reset_context(tokens)

    info_domain(__name__, "Metadata registry ready", stage="REGISTRY_READY", regions=len(registry))
    return registry


__all__ = ["build_registry"]
