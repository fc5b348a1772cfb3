"""Provider registry — type sets, capabilities and documentation notes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from provmatrix.errors import DuplicateProviderError
from provmatrix.providers.capability import Capability, DocumentationNote, ProviderType

logger = logging.getLogger(__name__)

# Reserved name meaning "no provider"; registered like any other registrar
# but never shown in documentation output.
NO_PROVIDER = "NONE"


class ProviderRegistry:
    """Holds every registered registrar and DNS provider.

    A name may be registered once per provider type. Capabilities and notes
    from both registrations of the same name are merged.
    """

    def __init__(self) -> None:
        self._types: dict[ProviderType, set[str]] = {t: set() for t in ProviderType}
        self._capabilities: dict[str, set[Capability]] = {}
        self._notes: dict[str, dict[Capability, DocumentationNote]] = {}

    def register(
        self,
        name: str,
        provider_type: ProviderType,
        capabilities: Iterable[Capability] = (),
        notes: Mapping[Capability, DocumentationNote] | None = None,
    ) -> None:
        members = self._types[provider_type]
        if name in members:
            raise DuplicateProviderError(name, provider_type.value)
        members.add(name)
        self._capabilities.setdefault(name, set()).update(capabilities)
        if notes:
            self._notes.setdefault(name, {}).update(notes)
        logger.debug("Registered %s provider %s", provider_type.value, name)

    def register_registrar(
        self,
        name: str,
        capabilities: Iterable[Capability] = (),
        notes: Mapping[Capability, DocumentationNote] | None = None,
    ) -> None:
        self.register(name, ProviderType.REGISTRAR, capabilities, notes)

    def register_dns_provider(
        self,
        name: str,
        capabilities: Iterable[Capability] = (),
        notes: Mapping[Capability, DocumentationNote] | None = None,
    ) -> None:
        self.register(name, ProviderType.DNS, capabilities, notes)

    @property
    def registrar_names(self) -> frozenset[str]:
        return frozenset(self._types[ProviderType.REGISTRAR])

    @property
    def dns_provider_names(self) -> frozenset[str]:
        return frozenset(self._types[ProviderType.DNS])

    @property
    def names(self) -> list[str]:
        """Sorted union of all registered names, sentinel included."""
        return sorted(self.registrar_names | self.dns_provider_names)

    def is_registrar(self, name: str) -> bool:
        return name in self._types[ProviderType.REGISTRAR]

    def is_dns_provider(self, name: str) -> bool:
        return name in self._types[ProviderType.DNS]

    def types_of(self, name: str) -> list[ProviderType]:
        return [t for t in ProviderType if name in self._types[t]]

    def capabilities_of(self, name: str) -> frozenset[Capability]:
        return frozenset(self._capabilities.get(name, ()))

    def has_capability(self, name: str, capability: Capability) -> bool:
        """Probe whether a provider declared a capability. Unknown names never do."""
        return capability in self._capabilities.get(name, ())

    def notes_for(self, name: str) -> dict[Capability, DocumentationNote]:
        """Documentation notes for a provider (empty when it has none)."""
        return dict(self._notes.get(name, {}))
