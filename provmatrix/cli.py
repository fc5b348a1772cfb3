"""Typer CLI — generate and inspect the provider feature matrix."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from provmatrix import __version__
from provmatrix.errors import ProvMatrixError

app = typer.Typer(
    name="provmatrix",
    help="provmatrix — DNS provider capability matrix generator",
    no_args_is_help=True,
)
console = Console()

_CELL = {"yes": "[green]✓[/]", "no": "[red]✗[/]", "unknown": "[dim]-[/]"}


def _setup_logging(verbose: bool = False, config_level: str | None = None) -> None:
    if verbose:
        level = logging.DEBUG
    elif config_level:
        level = getattr(logging, config_level.upper(), logging.INFO)
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(config: str | None, catalog: str | None, verbose: bool = False):
    """Load settings and the provider registry, exiting on config or catalog errors."""
    from provmatrix.config import Settings
    from provmatrix.providers.catalog import load_catalog

    try:
        settings = Settings.load(config)
        _setup_logging(verbose, config_level=settings.log_level)
        registry = load_catalog(catalog or settings.catalog_path)
    except ProvMatrixError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(1) from exc
    return settings, registry


@app.command()
def generate(
    config: str | None = typer.Option(None, help="Path to config YAML"),
    catalog: str | None = typer.Option(None, help="Path to provider catalog YAML"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output HTML path"),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
):
    """Build the feature matrix and write the HTML fragment."""
    from provmatrix.reporting.engine import generate_report
    from provmatrix.reporting.html import load_template

    settings, registry = _load(config, catalog, verbose)
    output_path = Path(output) if output else settings.output_path

    try:
        template = load_template(settings.template_dir)
        written = generate_report(registry, output_path, template)
    except ProvMatrixError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    console.print(f"[green]Feature matrix written to[/] {written}")


@app.command()
def show(
    config: str | None = typer.Option(None, help="Path to config YAML"),
    catalog: str | None = typer.Option(None, help="Path to provider catalog YAML"),
):
    """Print the feature matrix as a table."""
    from provmatrix.matrix.builder import build_matrix

    _settings, registry = _load(config, catalog)
    matrix = build_matrix(registry)

    table = Table(title="Provider Feature Matrix")
    table.add_column("Provider", style="cyan", no_wrap=True)
    for feature in matrix.features:
        table.add_column(feature.name, justify="center")

    for name in matrix.provider_names:
        cells = []
        for feature in matrix.features:
            entry = matrix.entry(name, feature.name)
            cells.append(_CELL[entry.state] if entry else _CELL["unknown"])
        table.add_row(name, *cells)

    console.print(table)


@app.command(name="providers")
def list_providers(
    config: str | None = typer.Option(None, help="Path to config YAML"),
    catalog: str | None = typer.Option(None, help="Path to provider catalog YAML"),
):
    """List registered providers with their types and capabilities."""
    from provmatrix.providers.registry import NO_PROVIDER

    _settings, registry = _load(config, catalog)

    table = Table(title="Registered Providers")
    table.add_column("Name", style="cyan")
    table.add_column("Types", style="green")
    table.add_column("Capabilities", style="yellow")
    table.add_column("Notes", style="dim")

    for name in registry.names:
        if name == NO_PROVIDER:
            continue
        table.add_row(
            name,
            ", ".join(t.value for t in registry.types_of(name)),
            ", ".join(sorted(c.value for c in registry.capabilities_of(name))),
            ", ".join(sorted(c.value for c in registry.notes_for(name))),
        )

    console.print(table)


@app.command()
def version():
    """Show version."""
    console.print(f"provmatrix v{__version__}")


def main() -> None:
    app()
