"""Icon font legends, their cache and key resolution."""

from text_icons.exceptions import FontNotFoundError
from text_icons.fonts.cache import LegendCache
from text_icons.fonts.legend import Legend, parse_legend, read_legend
from text_icons.fonts.resolver import FontRegistry, ResolvedIcon, strip_specifier, unicode

__all__ = [
    "FontNotFoundError",
    "FontRegistry",
    "Legend",
    "LegendCache",
    "ResolvedIcon",
    "parse_legend",
    "read_legend",
    "strip_specifier",
    "unicode",
]
