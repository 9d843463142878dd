"""Inline ``<icon>`` tag scanner.

Turns text such as ``'Cheers <icon color="F0A000">fa-beer</icon>!'`` into an
ordered list of segments, resolving each icon to its font and codepoint.
Only the flat ``<icon ...>key</icon>`` form is recognised: tags never nest,
and anything that does not match (unclosed tags, stray ``</icon>``, other
angle brackets) stays literal text.

:func:`to_markup` then rewrites icons into the font-override tags understood
by the host's formatted-text tokenizer, leaving every other tag untouched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from text_icons.context import RenderContext
    from text_icons.fonts.cache import LegendCache

logger = logging.getLogger(__name__)

TAG_RE = re.compile(
    r"<icon(?P<attrs>\s[^<>]*)?>(?P<content>[^<]*)</icon>",
    re.IGNORECASE,
)
ATTR_RE = re.compile(r"""(?P<name>[A-Za-z_][\w-]*)\s*=\s*(?P<quote>["'])(?P<value>.*?)(?P=quote)""")
# Characters that would end a double-quoted value or open a tag in the output
UNSAFE_VALUE_RE = re.compile(r'["<>]')


@dataclass(frozen=True)
class Tag:
    """One raw ``<icon>`` occurrence before resolution."""

    start: int
    end: int
    content: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class IconRef:
    """A resolved icon occurrence.

    Attributes:
        unicode: Character drawn by the font.
        specifier: Font the icon belongs to.
        attributes: Tag attributes, verbatim (e.g. ``{"color": "0099FF"}``).
        key: The tag's original text, e.g. ``"fa-beer"``.
    """

    unicode: str
    specifier: str
    attributes: dict[str, str] = field(default_factory=dict)
    key: str = ""

    @property
    def codepoint(self) -> int:
        return ord(self.unicode)


Segment = Union[Literal, IconRef]


def parse_attributes(raw: str | None) -> dict[str, str]:
    """Read ``name="value"`` pairs from the inside of an opening tag.

    Names are kept as written; :func:`to_markup` matches them ignoring case.
    """
    if not raw:
        return {}
    return {m.group("name"): m.group("value") for m in ATTR_RE.finditer(raw)}


def scan(text: str) -> Iterator[Tag]:
    """Yield every well formed icon tag in ``text``, left to right."""
    for match in TAG_RE.finditer(text):
        yield Tag(
            start=match.start(),
            end=match.end(),
            content=match.group("content"),
            attributes=parse_attributes(match.group("attrs")),
        )


def format(context: RenderContext | None, text: str, cache: LegendCache) -> list[Segment]:
    """Split ``text`` into Literal and IconRef segments.

    Each tag's content is resolved through ``cache``: a prefix naming a known
    font is authoritative, otherwise the default font applies.

    Raises:
        InvalidKeyError: For an empty tag.
        IconKeyEmptyError: For a tag holding only a prefix (``fa-``).
        IconNotFoundError: For a key missing from its font.
        FontNotFoundError: For a font without legend data.
    """
    segments: list[Segment] = []
    pos = 0
    for tag in scan(text):
        if tag.start > pos:
            segments.append(Literal(text[pos:tag.start]))
        specifier, key = cache.registry.split_key(tag.content.strip())
        legend = cache.load(context, specifier)
        segments.append(
            IconRef(legend.unicode(key), specifier, dict(tag.attributes), tag.content)
        )
        pos = tag.end
    if pos < len(text):
        segments.append(Literal(text[pos:]))
    return segments


def _markup_attribute(attributes: dict[str, str], name: str) -> str | None:
    """Value of attribute ``name`` in any case, if safe to quote in markup."""
    for key, value in attributes.items():
        if key.lower() != name:
            continue
        if UNSAFE_VALUE_RE.search(value):
            logger.debug("Ignoring icon attribute %s=%r", key, value)
            return None
        return value
    return None


def to_markup(segments: list[Segment]) -> str:
    """Render segments back to text, icons as font-override tags."""
    parts = []
    for segment in segments:
        if isinstance(segment, Literal):
            parts.append(segment.text)
            continue
        content = segment.unicode
        if size := _markup_attribute(segment.attributes, "size"):
            content = f'<font size="{size}">{content}</font>'
        if color := _markup_attribute(segment.attributes, "color"):
            content = f'<color rgb="{color}">{content}</color>'
        parts.append(f'<font name="{segment.specifier}">{content}</font>')
    return "".join(parts)


def segments_to_text(segments: list[Segment]) -> str:
    """Plain text with each icon replaced by its original key."""
    return "".join(s.text if isinstance(s, Literal) else s.key for s in segments)
