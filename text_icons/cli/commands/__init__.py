"""CLI commands for text-icons."""

from text_icons.cli.commands.fonts import fonts, import_css, keys
from text_icons.cli.commands.inline import inline
from text_icons.cli.commands.resolve import resolve

__all__ = ["resolve", "fonts", "keys", "inline", "import_css"]
