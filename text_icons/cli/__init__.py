"""Command line interface for text-icons."""

from text_icons.cli.main import cli

__all__ = ["cli"]
