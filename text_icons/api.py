"""High-level API for text-icons.

IconFonts owns the configuration, the font registry and the legend cache,
and exposes every operation a host needs::

    >>> from text_icons import IconFonts, MemoryContext
    >>> fonts = IconFonts()
    >>> fonts.resolve_icon("fa-beer").codepoint == 0xF0FC
    True
    >>> page = MemoryContext()
    >>> fonts.icon(page, "fa-beer", color="F0A000")
    Icon(fa-beer U+F0FC)

Share one IconFonts between all contexts of an application so that each
legend is read once.
"""

from __future__ import annotations

import logging
from typing import Any

from text_icons import parser
from text_icons.config import Config
from text_icons.context import RenderContext
from text_icons.fonts.cache import LegendCache
from text_icons.fonts.resolver import FontRegistry, ResolvedIcon
from text_icons.icon import Icon, InlineIcon, render_options

logger = logging.getLogger(__name__)


class IconFonts:
    """Entry point tying configuration, registry and cache together.

    Args:
        config: Settings; defaults to :meth:`Config.load`.
        cache: An existing cache to share. Built from ``config`` otherwise.
    """

    def __init__(self, config: Config | None = None, cache: LegendCache | None = None) -> None:
        self.config = config or Config.load()
        if cache is None:
            registry = FontRegistry(
                self.config.font_directory,
                default_specifier=self.config.default_specifier,
                specifiers=self.config.specifiers,
            )
            cache = LegendCache(registry)
        self.cache = cache

    @property
    def registry(self) -> FontRegistry:
        return self.cache.registry

    def resolve_icon(self, key: str, specifier: str | None = None) -> ResolvedIcon:
        """Look up a single key without rendering anything."""
        specifier, base_key = self.registry.split_key(key, specifier)
        legend = self.cache.load(None, specifier)
        return ResolvedIcon(specifier, base_key, legend.unicode(base_key))

    def parse_inline(self, context: RenderContext | None, text: str) -> list[parser.Segment]:
        """Scan ``text`` for icon tags and resolve them."""
        return parser.format(context, text, self.cache)

    def to_cell_data(self, key: str, **options: Any) -> dict[str, Any]:
        """Table cell data for ``key`` without a rendering context.

        With ``inline_format=True`` the key is text with icon tags and the
        result carries the rewritten markup as content.
        """
        return self._cell_data(None, key, options)

    def make_icon(self, context: RenderContext, key: str, **options: Any) -> Icon | InlineIcon:
        """Build an icon (or inline text) for ``context`` without drawing it."""
        if options.get("inline_format"):
            return self.inline_icon(context, key, **options)
        return Icon(key, context, self.cache, **options)

    def icon(self, context: RenderContext, key: str, **options: Any) -> Icon | InlineIcon:
        """Build and draw an icon."""
        made = self.make_icon(context, key, **options)
        made.render()
        return made

    def inline_icon(self, context: RenderContext, text: str, **options: Any) -> InlineIcon:
        options.pop("inline_format", None)
        return InlineIcon(text, context, self.cache, **options)

    def table_icon(self, context: RenderContext, key: str, **options: Any) -> dict[str, Any]:
        """Table cell data, registering the icon fonts with ``context``."""
        return self._cell_data(context, key, options)

    def _cell_data(
        self, context: RenderContext | None, key: str, options: dict[str, Any]
    ) -> dict[str, Any]:
        if not options.get("inline_format"):
            return Icon(key, context, self.cache, **options).format_hash()
        segments = parser.format(context, key, self.cache)
        logger.debug("Inline cell %r: %d segments", key, len(segments))
        return {
            **render_options(options),
            "content": parser.to_markup(segments),
            "inline_format": True,
        }
