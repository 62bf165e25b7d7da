"""
Case-insensitive, suffix-tolerant lookup of localized strings.

A key resolves against, in order: the key itself, ``KEY.TEXT``, ``KEY.ERROR``.
Misses are not errors; they degrade to a default (``[Key]`` unless given).
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .normalize import Localization
from .rules import LOOKUP_SUFFIXES, MISSING_KEY_TEMPLATE

T = TypeVar("T")


def resolve(key: str, localization: Localization) -> Optional[str]:
    """Return the stored value for ``key``, or None when every candidate misses."""
    upper = key.upper()
    for candidate in (upper, *(upper + suffix for suffix in LOOKUP_SUFFIXES)):
        if candidate in localization:
            return localization[candidate]
    return None


def localize_string_with_default(default: str, key: str, localization: Localization) -> str:
    value = resolve(key, localization)
    return default if value is None else value


def localize_string(key: str, localization: Localization) -> str:
    return localize_string_with_default(MISSING_KEY_TEMPLATE.format(key=key), key, localization)


def localize_text_with_default(
    default: str, key: str, localization: Localization, render: Callable[[str], T]
) -> T:
    return render(localize_string_with_default(default, key, localization))


def localize_text(key: str, localization: Localization, render: Callable[[str], T]) -> T:
    return render(localize_string(key, localization))
