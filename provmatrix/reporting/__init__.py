"""Static HTML rendering and file output for the capability matrix."""

from __future__ import annotations

from provmatrix.reporting.engine import generate_report
from provmatrix.reporting.html import load_template, render_html
from provmatrix.reporting.writer import write_report

__all__ = ["generate_report", "load_template", "render_html", "write_report"]
