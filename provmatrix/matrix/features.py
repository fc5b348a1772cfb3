"""Feature table — the fixed, ordered rows of the capability matrix.

Each row names how its value is resolved for a provider:

- ``CAPABILITY``: a note wins; otherwise the capability probe. Always present.
- ``DOC_ONLY``: present only when a note exists. Never probed.
- ``PROVIDER_TYPE``: membership in the registrar or DNS type set. Notes ignored.
- ``INVERTED_CAPABILITY``: like ``CAPABILITY`` but the probe is negated. The
  row reads positively ("no_purge is supported") while the capability is the
  negative "cannot use NO_PURGE"; the double negative is intentional.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator

from provmatrix.matrix.models import FeatureDefinition
from provmatrix.providers.capability import Capability, ProviderType


class ResolutionMode(StrEnum):
    CAPABILITY = "capability"
    DOC_ONLY = "doc_only"
    PROVIDER_TYPE = "provider_type"
    INVERTED_CAPABILITY = "inverted_capability"


class FeatureSpec(BaseModel, frozen=True):
    """One matrix row and the rule that resolves it."""

    definition: FeatureDefinition
    mode: ResolutionMode
    capability: Capability | None = None
    provider_type: ProviderType | None = None

    @model_validator(mode="after")
    def _check_reference(self) -> FeatureSpec:
        if self.mode == ResolutionMode.PROVIDER_TYPE:
            if self.provider_type is None:
                raise ValueError(f"{self.name}: provider_type row needs a provider_type")
        elif self.capability is None:
            raise ValueError(f"{self.name}: {self.mode} row needs a capability")
        return self

    @property
    def name(self) -> str:
        return self.definition.name


def _row(
    name: str,
    description: str,
    mode: ResolutionMode,
    *,
    capability: Capability | None = None,
    provider_type: ProviderType | None = None,
) -> FeatureSpec:
    return FeatureSpec(
        definition=FeatureDefinition(name=name, description=description),
        mode=mode,
        capability=capability,
        provider_type=provider_type,
    )


FEATURES: tuple[FeatureSpec, ...] = (
    _row(
        "Official Support",
        "This means the provider is actively used at Stack Exchange, bugs are more "
        "likely to be fixed, and failing integration tests will block a release. "
        "See below for details",
        ResolutionMode.DOC_ONLY,
        capability=Capability.DOC_OFFICIALLY_SUPPORTED,
    ),
    _row(
        "Registrar",
        "The provider has registrar capabilities to set nameservers for zones",
        ResolutionMode.PROVIDER_TYPE,
        provider_type=ProviderType.REGISTRAR,
    ),
    _row(
        "DNS Provider",
        "Can manage and serve DNS zones",
        ResolutionMode.PROVIDER_TYPE,
        provider_type=ProviderType.DNS,
    ),
    _row(
        "ALIAS",
        "Provider supports some kind of ALIAS, ANAME or flattened CNAME record type",
        ResolutionMode.CAPABILITY,
        capability=Capability.CAN_USE_ALIAS,
    ),
    _row(
        "SRV",
        "Driver has explicitly implemented SRV record management",
        ResolutionMode.CAPABILITY,
        capability=Capability.CAN_USE_SRV,
    ),
    _row(
        "PTR",
        "Provider supports adding PTR records for reverse lookup zones",
        ResolutionMode.CAPABILITY,
        capability=Capability.CAN_USE_PTR,
    ),
    _row(
        "CAA",
        "Provider can manage CAA records",
        ResolutionMode.CAPABILITY,
        capability=Capability.CAN_USE_CAA,
    ),
    _row(
        "dual host",
        "This provider is recommended for use in 'dual hosting' scenarios. Usually "
        "this means the provider allows full control over the apex NS records",
        ResolutionMode.DOC_ONLY,
        capability=Capability.DOC_DUAL_HOST,
    ),
    _row(
        "create-domains",
        "This means the provider can automatically create domains that do not "
        "currently exist on your account. The 'dnscontrol create-domains' command "
        "will initialize any missing domains",
        ResolutionMode.DOC_ONLY,
        capability=Capability.DOC_CREATE_DOMAINS,
    ),
    _row(
        "no_purge",
        "indicates you can use NO_PURGE macro to prevent deleting records not managed "
        "by dnscontrol. A few providers that generate the entire zone from scratch "
        "have a problem implementing this.",
        ResolutionMode.INVERTED_CAPABILITY,
        capability=Capability.CANT_USE_NOPURGE,
    ),
)

FEATURE_DEFINITIONS: tuple[FeatureDefinition, ...] = tuple(f.definition for f in FEATURES)
