"""text-icons: icon font glyphs for text renderers.

Resolves icon keys such as ``"fa-beer"`` to the codepoint of the icon font
that draws them, and rewrites ``<icon>`` tags inside formatted text so that
any renderer with font-override tags can display them.

Example:
    >>> from text_icons import IconFonts
    >>> fonts = IconFonts()
    >>> fonts.resolve_icon("fa-beer").unicode
    '\\uf0fc'
"""

from text_icons.api import IconFonts
from text_icons.config import Config
from text_icons.context import MemoryContext, RenderContext, use_font
from text_icons.exceptions import (
    ConfigError,
    FontNotFoundError,
    IconKeyEmptyError,
    IconNotFoundError,
    InvalidKeyError,
    LegendFormatError,
    TextIconsError,
)
from text_icons.fonts import FontRegistry, Legend, LegendCache, ResolvedIcon
from text_icons.icon import Icon, InlineIcon
from text_icons.parser import IconRef, Literal, Segment

__version__ = "0.1.0"

__all__ = [
    # Main API
    "IconFonts",
    "Icon",
    "InlineIcon",
    "Config",
    # Fonts
    "FontRegistry",
    "Legend",
    "LegendCache",
    "ResolvedIcon",
    # Segments
    "Segment",
    "Literal",
    "IconRef",
    # Rendering contract
    "RenderContext",
    "MemoryContext",
    "use_font",
    # Exceptions
    "TextIconsError",
    "InvalidKeyError",
    "IconKeyEmptyError",
    "IconNotFoundError",
    "FontNotFoundError",
    "LegendFormatError",
    "ConfigError",
    # Metadata
    "__version__",
]
