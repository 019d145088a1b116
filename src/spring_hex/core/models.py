"""Domain models for spring-hex.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType


def _freeze(table: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(table or {}))


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HexConfig:
    """Validated project configuration.

    Satisfies :class:`~spring_hex.core.protocols.PatternSource`, so it
    can be handed straight to a
    :class:`~spring_hex.core.resolver.PathResolver`.
    """

    base_package: str
    """Root Java package every resolved path is prefixed with."""

    paths: Mapping[str, str] = field(default_factory=dict)
    """Hexagonal-mode overrides (key → pattern)."""

    crud: Mapping[str, str] = field(default_factory=dict)
    """CRUD-mode overrides (key → pattern)."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", _freeze(self.paths))
        object.__setattr__(self, "crud", _freeze(self.crud))

    def get_paths(self) -> Mapping[str, str]:
        return self.paths

    def get_crud(self) -> Mapping[str, str]:
        return self.crud


# ---------------------------------------------------------------------------
# Generation results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GeneratedFile:
    """One artifact a generator attempted to emit."""

    path: Path
    """Absolute or output-dir-relative target path."""

    created: bool
    """``False`` when the file already existed and was left untouched."""


@dataclass(frozen=True, slots=True)
class PatternRow:
    """One line of the effective pattern table, for display."""

    key: str
    pattern: str
    source: str
    """``"config"`` or ``"default"``."""

    example: str
    """Pattern resolved against a sample binding."""
