"""Shared test fixtures."""

import pytest

from provmatrix.providers.capability import Capability, DocumentationNote
from provmatrix.providers.registry import NO_PROVIDER, ProviderRegistry


@pytest.fixture
def foo_registry():
    """DNS-only provider 'Foo': SRV yes, PTR no, cannot use NO_PURGE, no notes."""
    registry = ProviderRegistry()
    registry.register_dns_provider(
        "Foo", capabilities=[Capability.CAN_USE_SRV, Capability.CANT_USE_NOPURGE],
    )
    return registry


@pytest.fixture
def sample_registry():
    registry = ProviderRegistry()
    registry.register_registrar(NO_PROVIDER)
    registry.register_registrar("REGONLY")
    registry.register_dns_provider(
        "ZETA",
        capabilities=[Capability.CAN_USE_ALIAS, Capability.CAN_USE_CAA],
        notes={
            Capability.DOC_DUAL_HOST: DocumentationNote.cannot("no apex NS control"),
            Capability.CAN_USE_PTR: DocumentationNote.unknown("pending review"),
        },
    )
    registry.register_registrar(
        "BOTH",
        notes={Capability.DOC_CREATE_DOMAINS: DocumentationNote.cannot("registration first")},
    )
    registry.register_dns_provider(
        "BOTH",
        capabilities=[Capability.CAN_USE_SRV],
        notes={
            Capability.DOC_OFFICIALLY_SUPPORTED: DocumentationNote.can(),
            Capability.CAN_USE_SRV: DocumentationNote.cannot("SRV weights ignored"),
            Capability.CANT_USE_NOPURGE: DocumentationNote.can("full zone rebuild"),
        },
    )
    return registry


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text(
        "providers:\n"
        "  NONE:\n"
        "    types: [registrar]\n"
        "  ALPHA:\n"
        "    types: [dns]\n"
        "    capabilities: [can_use_srv, can_use_ptr]\n"
        "    notes:\n"
        "      doc_dual_host: {has_feature: true, comment: 'Apex NS editable'}\n"
        "  BETA:\n"
        "    types: [registrar, dns]\n"
        "    capabilities: [cant_use_nopurge]\n"
        "    notes:\n"
        "      can_use_alias: {has_feature: null, comment: '<pending>'}\n",
        encoding="utf-8",
    )
    return path
