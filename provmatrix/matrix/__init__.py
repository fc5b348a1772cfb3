"""Capability matrix — feature table, models and builder."""

from __future__ import annotations

from provmatrix.matrix.builder import build_matrix, provider_names, resolve_entry
from provmatrix.matrix.features import FEATURES, FeatureSpec, ResolutionMode
from provmatrix.matrix.models import FeatureDefinition, FeatureEntry, FeatureMatrix

__all__ = [
    "FEATURES",
    "FeatureDefinition",
    "FeatureEntry",
    "FeatureMatrix",
    "FeatureSpec",
    "ResolutionMode",
    "build_matrix",
    "provider_names",
    "resolve_entry",
]
