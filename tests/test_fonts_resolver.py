"""Unit tests for text_icons.fonts.resolver.

Covers specifier inference from key prefixes, key splitting, font discovery
and font file lookup.
"""

from pathlib import Path

import pytest

from text_icons.exceptions import InvalidKeyError
from text_icons.fonts import FontRegistry, ResolvedIcon, strip_specifier


class TestSpecifierDiscovery:
    """Tests for the set of known fonts."""

    def test_specifiers_discovered_from_legend_folders(self, registry: FontRegistry) -> None:
        """Only folders holding <name>.yml count as fonts."""
        assert registry.specifiers == ("fa", "octicon")

    def test_explicit_specifiers_override_discovery(self, font_dir: Path) -> None:
        registry = FontRegistry(font_dir, specifiers=["octicon"])
        assert registry.specifiers == ("octicon",)

    def test_missing_font_directory_has_no_specifiers(self, tmp_path: Path) -> None:
        registry = FontRegistry(tmp_path / "missing")
        assert registry.specifiers == ()

    def test_legend_and_font_paths(self, registry: FontRegistry, font_dir: Path) -> None:
        assert registry.legend_path("fa") == font_dir / "fa" / "fa.yml"
        assert registry.font_path("fa") == font_dir / "fa" / "fontawesome-webfont.ttf"
        assert registry.font_path("misc") is None
        assert registry.font_path("nope") is None


class TestSpecifierFromKey:
    """Tests for FontRegistry.specifier_from_key."""

    def test_known_prefix_is_used(self, registry: FontRegistry) -> None:
        assert registry.specifier_from_key("fa-beer") == "fa"
        assert registry.specifier_from_key("octicon-mark-github") == "octicon"

    def test_no_prefix_falls_back_to_default(self, registry: FontRegistry) -> None:
        assert registry.specifier_from_key("beer") == "fa"

    def test_unknown_prefix_falls_back_to_default(self, registry: FontRegistry) -> None:
        """Only the text before the first '-' is considered, and only if known."""
        assert registry.specifier_from_key("arrow-up") == "fa"

    def test_configured_default_is_used(self, font_dir: Path) -> None:
        registry = FontRegistry(font_dir, default_specifier="octicon")
        assert registry.specifier_from_key("alert") == "octicon"

    def test_prefix_is_case_sensitive(self, registry: FontRegistry) -> None:
        assert registry.specifier_from_key("FA-beer") == "fa"
        assert registry.split_key("FA-beer") == ("fa", "FA-beer")

    @pytest.mark.parametrize("key", ["", None, 42])
    def test_empty_or_non_string_key_raises(self, registry: FontRegistry, key) -> None:
        with pytest.raises(InvalidKeyError):
            registry.specifier_from_key(key)


class TestSplitKey:
    """Tests for FontRegistry.split_key and strip_specifier."""

    def test_split_prefixed_key(self, registry: FontRegistry) -> None:
        assert registry.split_key("fa-beer") == ("fa", "beer")

    def test_split_bare_key(self, registry: FontRegistry) -> None:
        assert registry.split_key("beer") == ("fa", "beer")

    def test_explicit_specifier_wins(self, registry: FontRegistry) -> None:
        """An explicit specifier is used and only its own prefix is removed."""
        assert registry.split_key("alert", "octicon") == ("octicon", "alert")
        assert registry.split_key("octicon-alert", "octicon") == ("octicon", "alert")
        assert registry.split_key("fa-beer", "octicon") == ("octicon", "fa-beer")

    def test_prefix_only_leaves_empty_base_key(self, registry: FontRegistry) -> None:
        assert registry.split_key("fa-") == ("fa", "")

    def test_only_one_prefix_stripped(self) -> None:
        assert strip_specifier("fa-fa-beer", "fa") == "fa-beer"
        assert strip_specifier("beer-fa-", "fa") == "beer-fa-"

    def test_empty_key_raises(self, registry: FontRegistry) -> None:
        with pytest.raises(InvalidKeyError):
            registry.split_key("")


class TestResolvedIcon:
    def test_codepoint(self) -> None:
        icon = ResolvedIcon("fa", "beer", "\uf0fc")
        assert icon.codepoint == 0xF0FC
