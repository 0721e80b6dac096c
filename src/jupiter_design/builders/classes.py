"""
Shared class-string helpers and the base style builder.

Every builder is a frozen dataclass. Setters return a new value via
``dataclasses.replace``; ``classes()`` turns the configuration into one
space-joined string with exact duplicates removed (first occurrence wins).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Self, TypeVar

from ..core.color import ColorProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


def split_classes(classes: str | Iterable[str]) -> tuple[str, ...]:
    """Split a class string (or iterable of class strings) into single classes."""
    if isinstance(classes, str):
        return tuple(classes.split())
    return tuple(token for item in classes for token in item.split())


def merge_classes(*fragments: str) -> str:
    """Join class fragments into one string without duplicates.

    Examples:
        >>> merge_classes("px-4 py-2", "", "px-4 rounded")
        'px-4 py-2 rounded'
    """
    seen: dict[str, None] = {}
    for fragment in fragments:
        for token in fragment.split():
            seen.setdefault(token, None)
    return " ".join(seen)


@dataclass(frozen=True)
class StyleBuilder:
    """Base for component style builders.

    Subclasses add their own fields and implement ``_fragments``.
    """

    colors: ColorProvider
    extra_classes: tuple[str, ...] = field(default=(), kw_only=True)

    def custom(self, *classes: str) -> Self:
        """Append custom classes."""
        return replace(self, extra_classes=self.extra_classes + split_classes(classes))

    def custom_classes(self, classes: str | Iterable[str]) -> Self:
        """Replace the custom classes (space-separated string or iterable)."""
        return replace(self, extra_classes=split_classes(classes))

    def _fragments(self) -> Iterator[str]:
        raise NotImplementedError

    def classes(self) -> str:
        """Build the final CSS class string."""
        return merge_classes(*self._fragments(), *self.extra_classes)

    def build(self) -> str:
        """Alias for ``classes()``."""
        return self.classes()

    def __str__(self) -> str:
        return self.classes()


def lookup_alias(aliases: Mapping[str, T], value: str, default: T, what: str) -> T:
    """Map a string prop to an enum member, falling back to ``default``."""
    found = aliases.get(value.strip().lower())
    if found is None:
        logger.debug("Unknown %s %r, using %s", what, value, default)
        return default
    return found
