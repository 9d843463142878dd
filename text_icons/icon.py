"""Icon requests: one icon, or a block of text with inline icons.

An :class:`Icon` resolves its key eagerly, so a bad key fails where the icon
is created rather than when it is drawn. An :class:`InlineIcon` hands its
text to the tag scanner and then to the host's formatted-text tokenizer.
"""

from __future__ import annotations

from typing import Any

from text_icons import parser
from text_icons.context import RenderContext, use_font
from text_icons.fonts.cache import LegendCache

# Options consumed here and never forwarded to the renderer
RESERVED_OPTIONS = ("set", "inline_format")


def render_options(options: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in options.items() if k not in RESERVED_OPTIONS}


class Icon:
    """A single resolved icon.

    Args:
        key: Icon key, e.g. ``"fa-beer"``.
        context: Host rendering context, or None for data-only use.
        cache: Legend cache to resolve through.
        **options: Render options. ``set`` forces the font; everything else
            is passed to the renderer.

    Raises:
        InvalidKeyError, IconKeyEmptyError, IconNotFoundError,
        FontNotFoundError: If the key cannot be resolved.
    """

    def __init__(
        self,
        key: str,
        context: RenderContext | None,
        cache: LegendCache,
        **options: Any,
    ) -> None:
        self.context = context
        self.options = options
        self.specifier, self.key = cache.registry.split_key(key, options.get("set"))
        self.legend = cache.load(context, self.specifier)
        self.unicode = self.legend.unicode(self.key)

    @property
    def codepoint(self) -> int:
        return ord(self.unicode)

    def format_hash(self) -> dict[str, Any]:
        """Cell data for embedding the icon in a table.

        ``color`` becomes ``text_color``, which is what table cells expect.
        """
        opts = render_options(self.options)
        color = opts.pop("color", None)
        if color is not None:
            opts["text_color"] = color
        return {"font": self.specifier, "content": self.unicode, **opts}

    def render(self) -> None:
        """Draw the icon in its own font, restoring the previous font after."""
        if self.context is None:
            raise ValueError("Icon was created without a rendering context")
        with use_font(self.context, self.specifier):
            self.context.draw_text(self.unicode, **render_options(self.options))

    def __repr__(self) -> str:
        return f"Icon({self.specifier}-{self.key} U+{self.codepoint:04X})"


class InlineIcon:
    """Formatted text with embedded ``<icon>`` tags."""

    def __init__(
        self,
        text: str,
        context: RenderContext,
        cache: LegendCache,
        **options: Any,
    ) -> None:
        self.context = context
        self.text = text
        self.options = {**options, "inline_format": True}
        self.segments = parser.format(context, text, cache)
        self.markup = parser.to_markup(self.segments)
        self.content = context.format_text(self.markup)

    def render(self) -> None:
        self.context.draw_formatted(self.content, **self.options)

    def __repr__(self) -> str:
        return f"InlineIcon({self.text!r})"
