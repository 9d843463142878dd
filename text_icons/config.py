"""Configuration loading for text-icons.

Settings come from three layers, later ones winning:

1. Built-in defaults (bundled font directory, ``fa`` as default specifier)
2. A YAML file: explicit path, ``$TEXT_ICONS_CONFIG`` or
   ``~/.config/text-icons/config.yaml``
3. Environment overrides: ``TEXT_ICONS_FONT_DIR`` and
   ``TEXT_ICONS_DEFAULT_SPECIFIER``

Example config file::

    font_directory: ~/fonts/icons
    default_specifier: fa
    specifiers: [fa, octicon]
    log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from text_icons.exceptions import ConfigError

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_FONT_DIR = DATA_DIR / "fonts"
DEFAULT_CONFIG_PATH = Path("~/.config/text-icons/config.yaml")

CONFIG_ENV = "TEXT_ICONS_CONFIG"
FONT_DIR_ENV = "TEXT_ICONS_FONT_DIR"
DEFAULT_SPECIFIER_ENV = "TEXT_ICONS_DEFAULT_SPECIFIER"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Resolved text-icons settings.

    Attributes:
        font_directory: Directory holding one sub-directory per icon font.
        default_specifier: Font used when a key carries no known prefix.
        specifiers: Fixed list of known fonts, or None to discover them
            from ``font_directory``.
        log_level: Level passed to :func:`text_icons.log.setup_logging`.
    """

    font_directory: Path = field(default=DEFAULT_FONT_DIR)
    default_specifier: str = "fa"
    specifiers: tuple[str, ...] | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.default_specifier:
            raise ConfigError("default_specifier must not be empty")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log_level {self.log_level!r}",
                details={"allowed": LOG_LEVELS},
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from a parsed YAML mapping.

        Raises:
            ConfigError: On unknown keys or wrongly typed values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown config keys: {', '.join(unknown)}",
                details={"unknown": unknown},
            )

        values: dict[str, Any] = dict(data)
        if "font_directory" in values:
            values["font_directory"] = Path(str(values["font_directory"])).expanduser()
        if values.get("specifiers") is not None:
            specifiers = values["specifiers"]
            if isinstance(specifiers, str) or not isinstance(specifiers, list):
                raise ConfigError("specifiers must be a list of font names")
            values["specifiers"] = tuple(str(s) for s in specifiers)
        if "default_specifier" in values:
            values["default_specifier"] = str(values["default_specifier"])
        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()
        return cls(**values)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration from file and environment.

        Args:
            path: Explicit YAML file. Must exist when given.

        Returns:
            The merged Config.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        config_path = _config_path(path)
        config = cls()
        if config_path is not None:
            config = cls.from_dict(_read_yaml(config_path))

        overrides: dict[str, Any] = {}
        if font_dir := os.environ.get(FONT_DIR_ENV):
            overrides["font_directory"] = Path(font_dir).expanduser()
        if default := os.environ.get(DEFAULT_SPECIFIER_ENV):
            overrides["default_specifier"] = default
        return replace(config, **overrides) if overrides else config


def _config_path(path: Path | str | None) -> Path | None:
    if path is not None:
        explicit = Path(path).expanduser()
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    if env_path := os.environ.get(CONFIG_ENV):
        from_env = Path(env_path).expanduser()
        if not from_env.is_file():
            raise ConfigError(f"{CONFIG_ENV} points to a missing file: {from_env}")
        return from_env

    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a mapping at top level")
    return data
