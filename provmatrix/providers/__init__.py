"""Provider registry, capability model and YAML catalog."""

from __future__ import annotations

from provmatrix.providers.capability import Capability, DocumentationNote, ProviderType
from provmatrix.providers.registry import NO_PROVIDER, ProviderRegistry

__all__ = [
    "NO_PROVIDER",
    "Capability",
    "DocumentationNote",
    "ProviderRegistry",
    "ProviderType",
]
