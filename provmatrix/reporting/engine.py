"""Report engine — build, render and write the matrix in one pass."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Template

from provmatrix.matrix.builder import build_matrix
from provmatrix.providers.registry import ProviderRegistry
from provmatrix.reporting.html import render_html
from provmatrix.reporting.writer import write_report


def generate_report(
    registry: ProviderRegistry,
    output_path: Path | str,
    template: Template | None = None,
) -> Path:
    """Build the matrix from *registry* and write it to *output_path*."""
    matrix = build_matrix(registry)
    html = render_html(matrix, template)
    return write_report(html, output_path)
