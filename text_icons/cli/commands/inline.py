"""Inline command - scan text for <icon> tags."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from text_icons.api import IconFonts
from text_icons.exceptions import TextIconsError
from text_icons.parser import IconRef, to_markup

console = Console()


@click.command()
@click.argument("text")
@click.option("--markup", "show_markup", is_flag=True, help="Print the rewritten markup")
@click.pass_context
def inline(ctx: click.Context, text: str, show_markup: bool) -> None:
    """Resolve the <icon> tags in TEXT.

    Example: text-icons inline '<icon color="0099FF">fa-arrows</icon> move'
    """
    icon_fonts: IconFonts = ctx.obj["fonts"]

    try:
        segments = icon_fonts.parse_inline(None, text)
    except TextIconsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1) from e

    if show_markup:
        click.echo(to_markup(segments))
        return

    table = Table(title="Segments")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Content")
    table.add_column("Font", style="green")
    table.add_column("Attributes", style="yellow")

    for index, segment in enumerate(segments):
        if isinstance(segment, IconRef):
            attrs = " ".join(f"{k}={v}" for k, v in segment.attributes.items())
            table.add_row(
                str(index),
                "icon",
                f"{escape(segment.key)} (U+{segment.codepoint:04X})",
                segment.specifier,
                escape(attrs),
            )
        else:
            table.add_row(str(index), "text", escape(repr(segment.text)), "", "")

    console.print(table)
