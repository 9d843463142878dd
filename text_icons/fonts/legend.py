"""Icon font legends: the key to codepoint table of one font.

A legend lives in ``<font_directory>/<specifier>/<specifier>.yml`` and maps
base keys to the character the font draws for them::

    fa:
      __font_version__: 4.7.0
      beer: "\\uf0fc"
      arrows: U+F047
      heart: 0xF004

Values may be the character itself, an integer codepoint, or a ``U+XXXX`` /
``0xXXXX`` hex string. Keys starting with ``__`` are metadata.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from text_icons.exceptions import (
    FontNotFoundError,
    IconKeyEmptyError,
    IconNotFoundError,
    LegendFormatError,
)

logger = logging.getLogger(__name__)

VERSION_KEY = "__font_version__"
_HEX_RE = re.compile(r"^(?:U\+|0x)([0-9A-Fa-f]{1,6})$")


@dataclass(frozen=True, eq=False)
class Legend:
    """Immutable key to codepoint table for one icon font."""

    specifier: str
    glyphs: Mapping[str, str]
    legend_path: Path
    font_path: Path | None = None
    version: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.glyphs, MappingProxyType):
            object.__setattr__(self, "glyphs", MappingProxyType(dict(self.glyphs)))

    def unicode(self, key: str) -> str:
        """Return the character drawn for ``key``.

        Raises:
            IconKeyEmptyError: If ``key`` is empty.
            IconNotFoundError: If the legend has no such key.
        """
        if not key:
            raise IconKeyEmptyError(key, self.specifier)
        try:
            return self.glyphs[key]
        except KeyError:
            raise IconNotFoundError(self.specifier, key) from None

    def codepoint(self, key: str) -> int:
        return ord(self.unicode(key))

    def keys(self) -> list[str]:
        return sorted(self.glyphs)

    def __contains__(self, key: object) -> bool:
        return key in self.glyphs

    def __iter__(self) -> Iterator[str]:
        return iter(self.glyphs)

    def __len__(self) -> int:
        return len(self.glyphs)


def _to_char(value: Any, key: str, path: Path) -> str:
    if isinstance(value, bool):
        raise LegendFormatError(path, f"value for {key!r} is a boolean")
    if isinstance(value, int):
        codepoint = value
    elif isinstance(value, str):
        if len(value) == 1:
            return value
        match = _HEX_RE.match(value.strip())
        if not match:
            raise LegendFormatError(path, f"cannot read codepoint {value!r} for {key!r}")
        codepoint = int(match.group(1), 16)
    else:
        raise LegendFormatError(path, f"value for {key!r} has type {type(value).__name__}")

    if not 0 <= codepoint <= 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
        raise LegendFormatError(path, f"{codepoint:#x} for {key!r} is not a unicode scalar")
    return chr(codepoint)


def parse_legend(
    specifier: str, data: Any, legend_path: Path, font_path: Path | None = None
) -> Legend:
    """Build a Legend from the parsed content of a legend file.

    The table may sit under a top level ``<specifier>:`` key or be the whole
    document.
    """
    if isinstance(data, dict) and isinstance(data.get(specifier), dict):
        data = data[specifier]
    if not isinstance(data, dict):
        raise LegendFormatError(legend_path, "expected a mapping of icon keys")

    glyphs: dict[str, str] = {}
    version = None
    for raw_key, value in data.items():
        key = str(raw_key)
        if key == VERSION_KEY:
            version = str(value)
            continue
        if key.startswith("__"):
            continue
        glyphs[key] = _to_char(value, key, legend_path)

    return Legend(
        specifier=specifier,
        glyphs=glyphs,
        legend_path=legend_path,
        font_path=font_path,
        version=version,
    )


def read_legend(specifier: str, legend_path: Path, font_path: Path | None = None) -> Legend:
    """Read and parse one legend file.

    Raises:
        FontNotFoundError: If the legend file does not exist.
        LegendFormatError: If it is not valid YAML or holds bad values.
    """
    if not legend_path.is_file():
        raise FontNotFoundError(specifier, legend_path)

    try:
        data = yaml.safe_load(legend_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise LegendFormatError(legend_path, str(e)) from e

    legend = parse_legend(specifier, data, legend_path, font_path)
    logger.info("Read legend %s: %d icons from %s", specifier, len(legend), legend_path)
    if font_path is None:
        logger.warning("No font file found next to %s", legend_path)
    return legend
