"""Capability model — probeable provider features and documentation notes."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Capability(StrEnum):
    """A named, probeable feature a provider may or may not support."""

    CAN_USE_ALIAS = "can_use_alias"         # ALIAS, ANAME or flattened CNAME
    CAN_USE_SRV = "can_use_srv"
    CAN_USE_PTR = "can_use_ptr"
    CAN_USE_CAA = "can_use_caa"
    CANT_USE_NOPURGE = "cant_use_nopurge"   # negative: provider rebuilds whole zones

    # Documentation-only: never probed, only ever set through notes
    DOC_OFFICIALLY_SUPPORTED = "doc_officially_supported"
    DOC_DUAL_HOST = "doc_dual_host"
    DOC_CREATE_DOMAINS = "doc_create_domains"


class ProviderType(StrEnum):
    """Classification of a provider registration."""

    REGISTRAR = "registrar"
    DNS = "dns"


class DocumentationNote(BaseModel, frozen=True):
    """A human-authored statement about one provider/capability pair.

    ``has_feature=None`` means the opinion is still pending; the note still
    takes precedence over any probe result.
    """

    has_feature: bool | None = None
    comment: str = ""

    @classmethod
    def can(cls, comment: str = "") -> DocumentationNote:
        return cls(has_feature=True, comment=comment)

    @classmethod
    def cannot(cls, comment: str = "") -> DocumentationNote:
        return cls(has_feature=False, comment=comment)

    @classmethod
    def unknown(cls, comment: str = "") -> DocumentationNote:
        return cls(has_feature=None, comment=comment)
