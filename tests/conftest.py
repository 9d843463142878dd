"""Pytest configuration and shared fixtures for text-icons tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from text_icons.api import IconFonts
from text_icons.config import Config
from text_icons.context import MemoryContext
from text_icons.fonts import FontRegistry, LegendCache


FA_LEGEND = dedent(
    """
    fa:
      __font_version__: 4.7.0
      arrows: "\\uf047"
      arrow-up: "\\uf062"
      beer: "\\uf0fc"
      heart: U+F004
      star: 0xF005
    """
).lstrip()

OCTICON_LEGEND = dedent(
    """
    octicon:
      __font_version__: 4.4.0
      alert: "\\uf02d"
      mark-github: "\\uf00a"
    """
).lstrip()


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Font directory with fa and octicon legends plus placeholder font files."""
    root = tmp_path / "fonts"
    (root / "fa").mkdir(parents=True)
    (root / "fa" / "fa.yml").write_text(FA_LEGEND, encoding="utf-8")
    (root / "fa" / "fontawesome-webfont.ttf").write_bytes(b"\x00" * 16)
    (root / "octicon").mkdir()
    (root / "octicon" / "octicon.yml").write_text(OCTICON_LEGEND, encoding="utf-8")
    (root / "octicon" / "octicons.ttf").write_bytes(b"\x00" * 16)
    # Folder without a legend is not a font
    (root / "misc").mkdir()
    return root


@pytest.fixture
def registry(font_dir: Path) -> FontRegistry:
    return FontRegistry(font_dir, default_specifier="fa")


@pytest.fixture
def cache(registry: FontRegistry) -> LegendCache:
    return LegendCache(registry)


@pytest.fixture
def context() -> MemoryContext:
    return MemoryContext()


@pytest.fixture
def config(font_dir: Path) -> Config:
    return Config(font_directory=font_dir)


@pytest.fixture
def icon_fonts(config: Config) -> IconFonts:
    return IconFonts(config)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Isolate Config.load from the user's environment and home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in (
        "TEXT_ICONS_CONFIG",
        "TEXT_ICONS_FONT_DIR",
        "TEXT_ICONS_DEFAULT_SPECIFIER",
    ):
        monkeypatch.delenv(var, raising=False)
    return home
