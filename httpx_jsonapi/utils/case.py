"""Naming transforms for resource types and URL segments."""

from __future__ import annotations

import re
from typing import Callable

import inflection

Transform = Callable[[str], str]

# Loanwords that inflection would pluralise to "animes"/"mangas".
UNCOUNTABLE = frozenset({"anime", "manga"})

_WORD_BOUNDARY = re.compile(r"[-_\s]")


def identity(value: str) -> str:
    """Return the value unchanged."""
    return value


def camel(value: str) -> str:
    """Convert kebab-case or snake_case to camelCase.

    >>> camel("library-entries")
    'libraryEntries'
    """
    return inflection.camelize(inflection.underscore(value), False)


def kebab(value: str) -> str:
    """Convert camelCase to kebab-case (``libraryEntries`` -> ``library-entries``)."""
    return inflection.dasherize(inflection.underscore(value))


def snake(value: str) -> str:
    """Convert camelCase to snake_case (``libraryEntries`` -> ``library_entries``)."""
    return inflection.underscore(value)


def pluralize(value: str) -> str:
    """Pluralise the trailing word; words that are already plural are kept."""
    if _WORD_BOUNDARY.split(value)[-1].lower() in UNCOUNTABLE:
        return value
    return inflection.pluralize(value)


RESOURCE_CASES: dict[str, Transform] = {
    "kebab": kebab,
    "snake": snake,
    "none": identity,
}
