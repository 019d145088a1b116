"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class PatternSource(Protocol):
    """Supplier of user pattern overrides.

    Both methods return an empty mapping when the project configuration
    defines no overrides for that mode.
    """

    def get_paths(self) -> Mapping[str, str]:
        """Return hexagonal-mode overrides."""
        ...  # pragma: no cover

    def get_crud(self) -> Mapping[str, str]:
        """Return CRUD-mode overrides."""
        ...  # pragma: no cover


class StubStore(Protocol):
    """Contract for stub template lookup."""

    def load(self, stub_name: str) -> str:
        """Return the raw text of *stub_name* (e.g. ``"mvc/entity"``).

        Raises
        ------
        StubNotFoundError
            When no stub of that name exists.
        """
        ...  # pragma: no cover


class FileWriter(Protocol):
    """Contract for create-if-absent file emission."""

    def exists(self, path: Path) -> bool:
        """Return whether *path* is already present."""
        ...  # pragma: no cover

    def write(self, path: Path, content: str) -> bool:
        """Write *content* to *path* unless it exists.

        Returns ``True`` when the file was created.

        Raises
        ------
        GenerationError
            When the file system rejects the write.
        """
        ...  # pragma: no cover
