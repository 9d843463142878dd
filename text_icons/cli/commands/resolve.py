"""Resolve command - look up a single icon key."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from text_icons.api import IconFonts
from text_icons.exceptions import TextIconsError

console = Console()


@click.command()
@click.argument("key")
@click.option("--set", "specifier", help="Icon font to use instead of the key prefix")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def resolve(ctx: click.Context, key: str, specifier: str | None, as_json: bool) -> None:
    """Print the font and codepoint of KEY (e.g. fa-beer)."""
    icon_fonts: IconFonts = ctx.obj["fonts"]

    try:
        icon = icon_fonts.resolve_icon(key, specifier)
    except TextIconsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1) from e

    if as_json:
        console.print_json(
            data={
                "specifier": icon.specifier,
                "key": icon.key,
                "codepoint": f"U+{icon.codepoint:04X}",
            }
        )
        return

    console.print(f"[bold]Font:[/bold] {icon.specifier}")
    console.print(f"[bold]Key:[/bold] {icon.key}")
    console.print(f"[bold]Codepoint:[/bold] U+{icon.codepoint:04X}")
