"""Font resolution: which icon font a key belongs to, and where its data is.

The registry knows the set of supported fonts (configured explicitly or
discovered from the font directory) and the default font for keys without a
recognised prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from text_icons.exceptions import InvalidKeyError
from text_icons.fonts.legend import Legend

FONT_EXTENSIONS = (".ttf", ".otf")


@dataclass(frozen=True)
class ResolvedIcon:
    """Result of a punctual key lookup."""

    specifier: str
    key: str
    unicode: str

    @property
    def codepoint(self) -> int:
        return ord(self.unicode)


class FontRegistry:
    """Known icon fonts and the files backing them.

    Args:
        font_directory: Directory with one ``<specifier>/`` folder per font.
        default_specifier: Font used for keys without a known prefix.
        specifiers: Explicit list of supported fonts. When None, every folder
            of ``font_directory`` that holds a ``<name>.yml`` legend counts.
    """

    def __init__(
        self,
        font_directory: Path,
        default_specifier: str = "fa",
        specifiers: tuple[str, ...] | list[str] | None = None,
    ) -> None:
        self.font_directory = Path(font_directory)
        self.default_specifier = default_specifier
        self._specifiers = tuple(specifiers) if specifiers is not None else None

    @property
    def specifiers(self) -> tuple[str, ...]:
        """Supported font specifiers, discovered on first use unless configured."""
        if self._specifiers is None:
            self._specifiers = self._discover()
        return self._specifiers

    def _discover(self) -> tuple[str, ...]:
        if not self.font_directory.is_dir():
            return ()
        return tuple(
            sorted(
                d.name
                for d in self.font_directory.iterdir()
                if d.is_dir() and (d / f"{d.name}.yml").is_file()
            )
        )

    def legend_path(self, specifier: str) -> Path:
        return self.font_directory / specifier / f"{specifier}.yml"

    def font_path(self, specifier: str) -> Path | None:
        """First font file in the specifier's folder, or None."""
        folder = self.font_directory / specifier
        if not folder.is_dir():
            return None
        candidates = sorted(
            p for p in folder.iterdir() if p.suffix.lower() in FONT_EXTENSIONS
        )
        return candidates[0] if candidates else None

    def specifier_from_key(self, key: str) -> str:
        """Infer the font of ``key`` from its prefix.

        The prefix is everything before the first ``-``. It only counts when
        it names a known font; otherwise the default font is used.

        Raises:
            InvalidKeyError: If ``key`` is empty or not a string.
        """
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(key, "Icon key provided was empty")
        prefix, sep, _rest = key.partition("-")
        if sep and prefix in self.specifiers:
            return prefix
        return self.default_specifier

    def split_key(self, key: str, specifier: str | None = None) -> tuple[str, str]:
        """Split ``key`` into ``(specifier, base_key)``.

        An explicit ``specifier`` wins over the key's prefix. Only a single
        leading ``"<specifier>-"`` is removed.
        """
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(key, "Icon key provided was empty")
        specifier = specifier or self.specifier_from_key(key)
        return specifier, strip_specifier(key, specifier)


def strip_specifier(key: str, specifier: str) -> str:
    prefix = f"{specifier}-"
    return key[len(prefix):] if key.startswith(prefix) else key


def unicode(legend: Legend, key: str) -> str:
    """Look ``key`` up in ``legend``; see :meth:`Legend.unicode`."""
    return legend.unicode(key)
