"""Exception hierarchy for text-icons.

Every error raised by the package derives from TextIconsError and carries a
human readable ``message`` plus a ``details`` dict for programmatic use.
None of these are transient: they point at a bad key, a missing font or a
broken configuration, so callers should fix the input rather than retry.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class TextIconsError(Exception):
    """Base exception for all text-icons errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidKeyError(TextIconsError):
    """Raised when an icon key is empty or malformed."""

    def __init__(self, key: Any, reason: str | None = None) -> None:
        self.key = key
        message = reason or f"Invalid icon key: {key!r}"
        super().__init__(message, details={"key": key})


class IconKeyEmptyError(InvalidKeyError):
    """Raised when nothing is left of a key once its specifier is stripped."""

    def __init__(self, key: str = "", specifier: str | None = None) -> None:
        self.specifier = specifier
        reason = "Icon key provided was empty"
        if specifier:
            reason = f"Icon key {key!r} is empty after removing specifier {specifier!r}"
        super().__init__(key, reason)
        self.details["specifier"] = specifier


class IconNotFoundError(TextIconsError):
    """Raised when a key is not present in the legend of its font."""

    def __init__(self, specifier: str, key: str) -> None:
        self.specifier = specifier
        self.key = key
        super().__init__(
            f"No icon {key!r} in font {specifier!r}",
            details={"specifier": specifier, "key": key},
        )


class FontNotFoundError(TextIconsError):
    """Raised when no legend data exists for a font specifier."""

    def __init__(self, specifier: str, path: Path | None = None) -> None:
        self.specifier = specifier
        self.path = path
        message = f"No legend data for font {specifier!r}"
        if path is not None:
            message += f" (looked for {path})"
        super().__init__(message, details={"specifier": specifier, "path": path})


class LegendFormatError(TextIconsError):
    """Raised when a legend file exists but cannot be understood."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(
            f"Malformed legend {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ConfigError(TextIconsError):
    """Raised when the configuration file or environment is invalid."""


# Short names matching the error taxonomy used in the docs
InvalidKey = InvalidKeyError
IconKeyEmpty = IconKeyEmptyError
IconNotFound = IconNotFoundError
FontNotFound = FontNotFoundError
