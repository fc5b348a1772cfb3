"""YAML provider catalog — builds a ProviderRegistry from a declarative file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from provmatrix.errors import CatalogError
from provmatrix.providers.capability import Capability, DocumentationNote, ProviderType
from provmatrix.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent.parent / "config" / "providers.yaml"


class ProviderSpec(BaseModel):
    """One catalog entry: how a provider registers itself."""

    types: list[ProviderType] = Field(min_length=1)
    capabilities: list[Capability] = Field(default_factory=list)
    notes: dict[Capability, DocumentationNote] = Field(default_factory=dict)


def registry_from_mapping(
    data: dict[str, Any], source: Path | str | None = None,
) -> ProviderRegistry:
    """Build a registry from an already-parsed catalog mapping."""
    providers = data.get("providers")
    if not isinstance(providers, dict):
        raise CatalogError("expected a 'providers' mapping", source)

    registry = ProviderRegistry()
    for name, raw in providers.items():
        if not isinstance(name, str):
            raise CatalogError(
                f"provider name {name!r} must be a string (quote it in YAML)", source,
            )
        try:
            spec = ProviderSpec.model_validate(raw or {})
        except ValidationError as exc:
            raise CatalogError(f"invalid provider '{name}': {exc}", source) from exc

        for provider_type in dict.fromkeys(spec.types):
            registry.register(name, provider_type, spec.capabilities, spec.notes)

    logger.debug("Catalog defines %d providers", len(providers))
    return registry


def load_catalog(path: Path | str | None = None) -> ProviderRegistry:
    """Load a provider catalog YAML file into a fresh registry."""
    if path is None:
        path = DEFAULT_CATALOG_PATH
    path = Path(path)

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise CatalogError("catalog file not found", path) from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"invalid YAML: {exc}", path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"cannot read catalog: {exc}", path) from exc

    if not isinstance(raw, dict):
        raise CatalogError("catalog root must be a mapping", path)

    registry = registry_from_mapping(raw, source=path)
    logger.info("Loaded %d providers from %s", len(registry.names), path)
    return registry
