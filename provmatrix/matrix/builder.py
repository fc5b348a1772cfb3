"""Matrix builder — merges notes, probes and provider types into a FeatureMatrix.

Precedence per feature: explicit note > probe result > absence.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from provmatrix.matrix.features import FEATURES, FeatureSpec, ResolutionMode
from provmatrix.matrix.models import FeatureEntry, FeatureMatrix, ProviderFeatureMap
from provmatrix.providers.capability import Capability, DocumentationNote, ProviderType
from provmatrix.providers.registry import NO_PROVIDER, ProviderRegistry

logger = logging.getLogger(__name__)


def provider_names(registry: ProviderRegistry) -> list[str]:
    """Sorted union of registrar and DNS provider names, sentinel excluded."""
    names = registry.registrar_names | registry.dns_provider_names
    return sorted(n for n in names if n != NO_PROVIDER)


def resolve_entry(
    spec: FeatureSpec,
    provider: str,
    registry: ProviderRegistry,
    notes: Mapping[Capability, DocumentationNote],
) -> FeatureEntry | None:
    """Resolve one feature for one provider; ``None`` means no entry."""
    if spec.mode == ResolutionMode.PROVIDER_TYPE:
        if spec.provider_type == ProviderType.REGISTRAR:
            return FeatureEntry(has_feature=registry.is_registrar(provider))
        return FeatureEntry(has_feature=registry.is_dns_provider(provider))

    note = notes.get(spec.capability)
    if note is not None:
        return FeatureEntry.from_note(note)

    if spec.mode == ResolutionMode.DOC_ONLY:
        return None

    supported = registry.has_capability(provider, spec.capability)
    if spec.mode == ResolutionMode.INVERTED_CAPABILITY:
        supported = not supported
    return FeatureEntry(has_feature=supported)


def _build_feature_map(
    provider: str,
    registry: ProviderRegistry,
    features: Sequence[FeatureSpec],
) -> ProviderFeatureMap:
    notes = registry.notes_for(provider)
    feature_map: ProviderFeatureMap = {}
    for spec in features:
        entry = resolve_entry(spec, provider, registry, notes)
        if entry is not None:
            feature_map[spec.name] = entry
    return feature_map


def build_matrix(
    registry: ProviderRegistry,
    features: Sequence[FeatureSpec] = FEATURES,
) -> FeatureMatrix:
    """Build the full capability matrix for every registered provider."""
    providers: dict[str, ProviderFeatureMap] = {}
    for name in provider_names(registry):
        providers[name] = _build_feature_map(name, registry, features)
        logger.debug("Resolved %d features for %s", len(providers[name]), name)

    logger.info(
        "Built feature matrix: %d providers x %d features",
        len(providers), len(features),
    )
    return FeatureMatrix(
        features=tuple(f.definition for f in features),
        providers=providers,
    )
