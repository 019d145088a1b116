"""Pure naming helpers for generated Java artifacts.

No I/O, deterministic, trivially unit-testable.
"""

from __future__ import annotations

import re

_JAVA_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_PACKAGE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

_ENTITY_SUFFIX: str = "Entity"
_SEEDER_SUFFIX: str = "Seeder"


def is_identifier(name: str) -> bool:
    """Return whether *name* is a legal Java identifier."""
    return bool(_JAVA_IDENTIFIER_RE.match(name))


def is_package_name(name: str) -> bool:
    """Return whether *name* is a dotted sequence of identifiers."""
    return bool(_PACKAGE_RE.match(name))


def capitalize(name: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def pluralize(word: str) -> str:
    """Naive English plural used for table and collection names.

    * consonant + ``y`` → ``ies`` (``category`` → ``categories``)
    * ``s``, ``x``, ``z``, ``ch``, ``sh`` → ``+es``
    * otherwise → ``+s``
    """
    if not word:
        return word
    lower = word.lower()
    if lower.endswith("y") and len(word) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def strip_entity_suffix(name: str) -> str:
    """``UserEntity`` → ``User``; other names pass through."""
    if name.endswith(_ENTITY_SUFFIX) and len(name) > len(_ENTITY_SUFFIX):
        return name[: -len(_ENTITY_SUFFIX)]
    return name


def normalize_seeder_name(name: str) -> str:
    """Capitalize *name* and make sure it ends in ``Seeder``."""
    capitalized = capitalize(name)
    if capitalized.endswith(_SEEDER_SUFFIX):
        return capitalized
    return capitalized + _SEEDER_SUFFIX
