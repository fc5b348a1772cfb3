"""provmatrix — provider capability matrix generator for documentation."""

from __future__ import annotations

__version__ = "1.0.0"

from provmatrix.matrix.builder import build_matrix  # noqa: E402
from provmatrix.matrix.models import FeatureDefinition, FeatureEntry, FeatureMatrix  # noqa: E402
from provmatrix.providers.capability import Capability, DocumentationNote  # noqa: E402
from provmatrix.providers.registry import NO_PROVIDER, ProviderRegistry  # noqa: E402

__all__ = [
    "NO_PROVIDER",
    "Capability",
    "DocumentationNote",
    "FeatureDefinition",
    "FeatureEntry",
    "FeatureMatrix",
    "ProviderRegistry",
    "build_matrix",
]
