"""Fonts commands - inspect the available icon fonts and import new legends."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from text_icons.api import IconFonts
from text_icons.exceptions import TextIconsError
from text_icons.fonts import FontRegistry
from text_icons.fonts.css import read_css_legend, write_legend

console = Console()


@click.command()
@click.pass_context
def fonts(ctx: click.Context) -> None:
    """List known icon fonts."""
    icon_fonts: IconFonts = ctx.obj["fonts"]
    registry = icon_fonts.registry

    table = Table(title=f"Icon fonts in {registry.font_directory}")
    table.add_column("Specifier", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Icons", style="yellow", justify="right")
    table.add_column("Font file", style="dim")

    count = 0
    for specifier in registry.specifiers:
        try:
            legend = icon_fonts.cache.load(None, specifier)
        except TextIconsError as e:
            table.add_row(specifier, "-", "-", f"[red]{escape(e.message)}[/red]")
            continue
        default = " (default)" if specifier == registry.default_specifier else ""
        table.add_row(
            f"{specifier}{default}",
            legend.version or "-",
            str(len(legend)),
            str(legend.font_path) if legend.font_path else "missing",
        )
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} fonts")


@click.command()
@click.argument("specifier")
@click.option("--filter", "pattern", help="Only keys containing this text")
@click.pass_context
def keys(ctx: click.Context, specifier: str, pattern: str | None) -> None:
    """List the icon keys of font SPECIFIER."""
    icon_fonts: IconFonts = ctx.obj["fonts"]

    try:
        legend = icon_fonts.cache.load(None, specifier)
    except TextIconsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1) from e

    table = Table(title=f"Icons in {specifier}")
    table.add_column("Key", style="cyan")
    table.add_column("Codepoint", style="yellow")

    count = 0
    for key in legend.keys():
        if pattern and pattern.lower() not in key.lower():
            continue
        table.add_row(f"{specifier}-{key}", f"U+{legend.codepoint(key):04X}")
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} icons")


@click.command("import-css")
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("specifier")
@click.option("--prefix", help="CSS class prefix (defaults to SPECIFIER)")
@click.option("--font-version", help="Version recorded in the legend")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Font directory to write into (defaults to the configured one)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing legend")
@click.pass_context
def import_css(
    ctx: click.Context,
    css_file: Path,
    specifier: str,
    prefix: str | None,
    font_version: str | None,
    output_dir: Path | None,
    force: bool,
) -> None:
    """Create the legend of font SPECIFIER from its stylesheet CSS_FILE.

    Example: text-icons import-css foundation-icons.css fi --font-version 3.0
    """
    icon_fonts: IconFonts = ctx.obj["fonts"]
    registry = FontRegistry(output_dir) if output_dir else icon_fonts.registry
    legend_path = registry.legend_path(specifier)

    if legend_path.exists() and not force:
        console.print(
            f"[red]Error:[/red] {escape(str(legend_path))} exists, use --force to replace it"
        )
        raise SystemExit(1)

    try:
        glyphs = read_css_legend(css_file, prefix or specifier)
    except TextIconsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1) from e

    write_legend(specifier, glyphs, legend_path, font_version)
    console.print(f"[green]Wrote[/green] {len(glyphs)} icons to {escape(str(legend_path))}")
    if registry.font_path(specifier) is None:
        folder = escape(str(legend_path.parent))
        console.print(f"[yellow]No font file yet:[/yellow] copy the .ttf into {folder}")
