"""Rendering context contract.

text-icons never draws anything itself. It hands codepoints and fonts to a
host rendering context (a PDF document, a canvas, a terminal) through the
small protocol below.

MemoryContext is a complete in-memory host. It records what would be drawn
and tokenizes formatted text, which makes it useful for tests, previews and
as a template for real adapters.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RenderContext(Protocol):
    """What text-icons needs from a host renderer."""

    font_name: str | None

    def register_font(self, name: str, path: Path) -> None:
        """Make the font file at ``path`` available under ``name``."""
        ...

    def draw_text(self, text: str, **options: Any) -> None:
        """Draw ``text`` at the cursor in the current font."""
        ...

    def format_text(self, markup: str) -> Any:
        """Tokenize inline formatting tags into renderable content."""
        ...

    def draw_formatted(self, content: Any, **options: Any) -> None:
        """Draw content produced by :meth:`format_text`."""
        ...


@contextmanager
def use_font(context: RenderContext, name: str) -> Iterator[RenderContext]:
    """Select ``name`` as the context's font for the duration of the block.

    The previous font is restored even if drawing fails.
    """
    previous = context.font_name
    context.font_name = name
    try:
        yield context
    finally:
        context.font_name = previous


@dataclass(frozen=True)
class TextRun:
    """A piece of formatted text with its resolved style."""

    text: str
    font: str | None = None
    size: str | None = None
    color: str | None = None
    styles: tuple[str, ...] = ()


@dataclass
class DrawOp:
    kind: str
    content: Any
    font: str | None
    options: dict[str, Any] = field(default_factory=dict)


_TAG_RE = re.compile(r"<(/?)(font|color|b|i|u|strong|em)((?:\s[^<>]*)?)>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([A-Za-z_][\w-]*)\s*=\s*(["'])(.*?)\2""")
_STYLE_ALIASES = {"strong": "b", "em": "i"}


class MemoryContext:
    """In-memory RenderContext that records fonts and draw operations."""

    def __init__(self, font_name: str | None = "Helvetica") -> None:
        self.font_name = font_name
        self.fonts: dict[str, Path] = {}
        self.register_calls: list[tuple[str, Path]] = []
        self.ops: list[DrawOp] = []

    def register_font(self, name: str, path: Path) -> None:
        self.fonts[name] = Path(path)
        self.register_calls.append((name, Path(path)))

    def draw_text(self, text: str, **options: Any) -> None:
        self.ops.append(DrawOp("text", text, self.font_name, dict(options)))

    def draw_formatted(self, content: Any, **options: Any) -> None:
        self.ops.append(DrawOp("formatted", content, self.font_name, dict(options)))

    def format_text(self, markup: str) -> list[TextRun]:
        """Split markup into TextRuns.

        Understands ``<font name=".." size="..">``, ``<color rgb="..">`` and
        ``<b>``/``<i>``/``<u>``. Unknown tags and unbalanced closing tags are
        kept as text.
        """
        runs: list[TextRun] = []
        stack: list[tuple[str, dict[str, str]]] = []
        pos = 0

        def flush(text: str) -> None:
            if text:
                runs.append(self._run(text, stack))

        for match in _TAG_RE.finditer(markup):
            flush(markup[pos:match.start()])
            closing, tag = match.group(1), match.group(2).lower()
            tag = _STYLE_ALIASES.get(tag, tag)
            if closing:
                if any(t == tag for t, _ in stack):
                    while stack:
                        if stack.pop()[0] == tag:
                            break
                else:
                    flush(match.group(0))
            else:
                attrs = {k.lower(): v for k, _q, v in _ATTR_RE.findall(match.group(3))}
                stack.append((tag, attrs))
            pos = match.end()
        flush(markup[pos:])
        return runs

    def _run(self, text: str, stack: list[tuple[str, dict[str, str]]]) -> TextRun:
        font = size = color = None
        styles: list[str] = []
        for tag, attrs in stack:
            if tag == "font":
                font = attrs.get("name", font)
                size = attrs.get("size", size)
            elif tag == "color":
                color = attrs.get("rgb", color)
            elif tag not in styles:
                styles.append(tag)
        return TextRun(text, font or self.font_name, size, color, tuple(styles))
