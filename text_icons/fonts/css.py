"""Build legend files from an icon font's stylesheet.

Icon fonts ship a CSS file mapping class names to codepoints::

    .fa-remove:before,
    .fa-close:before {
      content: "\\f00d";
    }

Every selector of the form ``.<prefix>-<name>:before`` (or ``::before``)
becomes one legend key ``<name>``. Aliased selectors sharing a rule each get
the rule's codepoint. Rules without a ``content`` escape are ignored.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from text_icons.exceptions import LegendFormatError
from text_icons.fonts.legend import VERSION_KEY

logger = logging.getLogger(__name__)

COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
RULE_RE = re.compile(r"(?P<selectors>[^{}]+)\{(?P<body>[^{}]*)\}")
CONTENT_RE = re.compile(
    r"""content\s*:\s*(?P<quote>["'])\\(?P<hex>[0-9a-fA-F]{1,6})\s*(?P=quote)"""
)


def legend_from_css(css: str, prefix: str) -> dict[str, str]:
    """Map icon keys to characters for every ``.<prefix>-*:before`` rule.

    Keys come out in stylesheet order; a key seen twice keeps its first
    codepoint.
    """
    selector_re = re.compile(rf"^\.{re.escape(prefix)}-(?P<name>[\w-]+)::?before$")
    glyphs: dict[str, str] = {}
    for rule in RULE_RE.finditer(COMMENT_RE.sub("", css)):
        content = CONTENT_RE.search(rule.group("body"))
        if content is None:
            continue
        codepoint = int(content.group("hex"), 16)
        if not 0 < codepoint <= 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            continue
        for selector in rule.group("selectors").split(","):
            match = selector_re.match(selector.strip())
            if match:
                glyphs.setdefault(match.group("name"), chr(codepoint))
    return glyphs


def read_css_legend(css_path: Path, prefix: str) -> dict[str, str]:
    """Read ``css_path`` and extract its icon table.

    Raises:
        LegendFormatError: If the stylesheet has no icon rules for ``prefix``.
    """
    glyphs = legend_from_css(css_path.read_text(encoding="utf-8"), prefix)
    if not glyphs:
        raise LegendFormatError(css_path, f"no '.{prefix}-*:before' rules with content")
    logger.info("Found %d icons with prefix %s in %s", len(glyphs), prefix, css_path)
    return glyphs


def write_legend(
    specifier: str,
    glyphs: dict[str, str],
    path: Path,
    version: str | None = None,
) -> Path:
    """Write ``glyphs`` as a ``<specifier>:`` legend file readable by read_legend."""
    table: dict[str, str] = {}
    if version:
        table[VERSION_KEY] = version
    table.update(glyphs)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        # Non-ASCII codepoints are written as \uXXXX escapes
        yaml.safe_dump({specifier: table}, f, allow_unicode=False, sort_keys=False)
    logger.info("Wrote legend %s: %d icons to %s", specifier, len(glyphs), path)
    return path
