"""
Error types for Jupiter design token resolution and theme configuration.

Class-string generation itself never raises: invalid values supplied by the
caller flow through into the output. The errors below cover the places where
a mistake can be caught before any class string is produced.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class JupiterError(Exception):
    """Base exception for all Jupiter design system errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class UnknownTokenError(JupiterError):
    """
    Raised when a name does not refer to a known token, palette field or preset.

    Examples:
    - ``VibeColors.with_overrides(primray="purple-600")``
    - ``resolve_theme("does-not-exist")``
    """

    pass


class TokenCoverageError(JupiterError):
    """
    Raised at import time when a lookup table misses members of its enum.

    A token added to an enum without a matching entry in every table that
    maps it would otherwise produce silently missing classes.
    """

    pass


class ThemeConfigError(JupiterError):
    """
    Raised when a theme configuration file cannot be used.

    Examples:
    - File missing and defaults disabled
    - Invalid TOML or YAML
    - Schema validation failure (unknown keys, non-string colors)
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the configuration file involved
        key: Optional dotted key within the file (e.g. ``theme.colors``)
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "jupiter.toml (theme.colors)"
        """
        if self.key:
            return f"{self.file} ({self.key})"
        return str(self.file)
