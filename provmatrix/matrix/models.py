"""Matrix models — immutable per-run values handed to the renderer."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, field_validator

from provmatrix.providers.capability import DocumentationNote


class FeatureDefinition(BaseModel, frozen=True):
    """A matrix row: display name plus tooltip description."""

    name: str
    description: str


class FeatureEntry(BaseModel, frozen=True):
    """Resolved value of one feature for one provider.

    ``has_feature`` is only ``None`` when copied from a note whose opinion is
    still pending.
    """

    has_feature: bool | None
    comment: str = ""

    @classmethod
    def from_note(cls, note: DocumentationNote) -> FeatureEntry:
        return cls(has_feature=note.has_feature, comment=note.comment)

    @property
    def state(self) -> str:
        """Display state: ``yes``, ``no`` or ``unknown``."""
        if self.has_feature is None:
            return "unknown"
        return "yes" if self.has_feature else "no"


ProviderFeatureMap = dict[str, FeatureEntry]


class FeatureMatrix(BaseModel, frozen=True):
    """Ordered feature rows and one feature map per provider (sorted by name).

    Both levels of ``providers`` are read-only views.
    """

    features: tuple[FeatureDefinition, ...]
    providers: Mapping[str, Mapping[str, FeatureEntry]]

    @field_validator("providers", mode="after")
    @classmethod
    def _freeze_providers(
        cls, value: Mapping[str, Mapping[str, FeatureEntry]],
    ) -> Mapping[str, Mapping[str, FeatureEntry]]:
        return MappingProxyType({k: MappingProxyType(dict(v)) for k, v in value.items()})

    @property
    def provider_names(self) -> list[str]:
        return list(self.providers)

    def entry(self, provider: str, feature: str) -> FeatureEntry | None:
        """Entry for a provider/feature pair, ``None`` when absent."""
        return self.providers.get(provider, {}).get(feature)
