"""text-icons command line entry point."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from text_icons import __version__
from text_icons.api import IconFonts
from text_icons.cli.commands import fonts, import_css, inline, keys, resolve
from text_icons.config import LOG_LEVELS, Config
from text_icons.exceptions import ConfigError
from text_icons.log import setup_logging

console = Console()


@click.group()
@click.version_option(__version__, prog_name="text-icons")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Resolve icon font keys and inline <icon> tags."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    setup_logging(level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level
    ctx.obj["fonts"] = IconFonts(config)


cli.add_command(resolve)
cli.add_command(fonts)
cli.add_command(keys)
cli.add_command(inline)
cli.add_command(import_css)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
