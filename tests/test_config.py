"""Unit tests for text_icons.config.

Covers defaults, YAML loading, environment overrides and validation errors.
"""

from pathlib import Path
from textwrap import dedent

import pytest

from text_icons.config import DEFAULT_FONT_DIR, Config
from text_icons.exceptions import ConfigError


class TestDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.font_directory == DEFAULT_FONT_DIR
        assert config.default_specifier == "fa"
        assert config.specifiers is None
        assert config.log_level == "WARNING"

    def test_load_without_any_file(self, clean_env: Path) -> None:
        assert Config.load() == Config()

    def test_empty_default_specifier_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Config(default_specifier="")

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Config(log_level="LOUD")


class TestLoadFromFile:
    def test_load_full_file(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            dedent(
                f"""
                font_directory: {tmp_path / "fonts"}
                default_specifier: octicon
                specifiers: [fa, octicon]
                log_level: info
                """
            ),
            encoding="utf-8",
        )
        config = Config.load(config_file)
        assert config.font_directory == tmp_path / "fonts"
        assert config.default_specifier == "octicon"
        assert config.specifiers == ("fa", "octicon")
        assert config.log_level == "INFO"

    def test_empty_file_gives_defaults(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")
        assert Config.load(config_file) == Config()

    def test_env_var_points_to_file(
        self, clean_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "env.yaml"
        config_file.write_text("default_specifier: octicon\n", encoding="utf-8")
        monkeypatch.setenv("TEXT_ICONS_CONFIG", str(config_file))
        assert Config.load().default_specifier == "octicon"

    def test_home_config_used(self, clean_env: Path) -> None:
        config_file = clean_env / ".config" / "text-icons" / "config.yaml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text("log_level: DEBUG\n", encoding="utf-8")
        assert Config.load().log_level == "DEBUG"

    def test_missing_explicit_file(self, clean_env: Path, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            Config.load(tmp_path / "missing.yaml")

    def test_unknown_keys_rejected(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("font_dir: /tmp\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            Config.load(config_file)
        assert exc_info.value.details["unknown"] == ["font_dir"]

    def test_invalid_yaml_rejected(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("specifiers: [fa\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(config_file)

    def test_non_mapping_rejected(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- fa\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(config_file)

    def test_specifiers_must_be_list(self, clean_env: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "spec.yaml"
        config_file.write_text("specifiers: fa\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(config_file)


class TestEnvironmentOverrides:
    def test_env_overrides_file(
        self, clean_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("default_specifier: fa\n", encoding="utf-8")
        monkeypatch.setenv("TEXT_ICONS_FONT_DIR", str(tmp_path / "other"))
        monkeypatch.setenv("TEXT_ICONS_DEFAULT_SPECIFIER", "octicon")
        config = Config.load(config_file)
        assert config.font_directory == tmp_path / "other"
        assert config.default_specifier == "octicon"
