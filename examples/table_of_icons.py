#!/usr/bin/env python3
"""Print a small table of icons using the in-memory rendering context.

Run with: python examples/table_of_icons.py
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from text_icons import IconFonts, MemoryContext


def main() -> None:
    console = Console()
    fonts = IconFonts()
    page = MemoryContext()

    # Cell data as a table renderer would consume it
    table = Table(title="Cell data")
    table.add_column("Key", style="cyan")
    table.add_column("Font")
    table.add_column("Codepoint", style="yellow")
    table.add_column("Options", style="dim")
    for key in ("fa-beer", "fa-arrows", "octicon-mark-github"):
        cell = fonts.table_icon(page, key, color="0099FF")
        options = {k: v for k, v in cell.items() if k not in ("font", "content")}
        table.add_row(key, cell["font"], f"U+{ord(cell['content']):04X}", str(options))
    console.print(table)

    # Inline text, tokenized into runs by the host
    inline = fonts.make_icon(
        page, 'Cheers <icon color="F0A000">fa-beer</icon> <b>friends</b>!', inline_format=True
    )
    inline.render()
    for run in page.ops[-1].content:
        console.print(f"{run.font:>10}  {run.text!r}  color={run.color} styles={run.styles}")

    console.print(f"\nRegistered fonts: {sorted(page.fonts) or 'none (no .ttf files installed)'}")


if __name__ == "__main__":
    main()
