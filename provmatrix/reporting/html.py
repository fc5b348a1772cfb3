"""HTML matrix renderer using Jinja2."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from provmatrix.errors import RenderError
from provmatrix.matrix.models import FeatureMatrix

TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "matrix.html.j2"


def load_template(
    template_dir: Path | str | None = None, name: str = TEMPLATE_NAME,
) -> Template:
    """Parse the matrix template into a reusable value."""
    env = Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATES_DIR)),
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.get_template(name)
    except TemplateError as exc:
        raise RenderError(f"Cannot load template '{name}': {exc}") from exc


def render_html(matrix: FeatureMatrix, template: Template | None = None) -> str:
    """Render the matrix as a single HTML table fragment."""
    if template is None:
        template = load_template()
    try:
        return template.render(matrix=matrix)
    except TemplateError as exc:
        raise RenderError(f"Failed to render feature matrix: {exc}") from exc
