"""Packaged stub templates, read with :mod:`importlib.resources`.

Satisfies :class:`~spring_hex.core.protocols.StubStore` structurally.
A project may shadow any packaged stub by placing a file of the same
relative name under an override directory (``.spring-hex/stubs`` by
default).
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from spring_hex.exceptions import StubNotFoundError

logger = logging.getLogger(__name__)

STUB_PACKAGE: str = "spring_hex.stubs"
STUB_SUFFIX: str = ".stub"
PROJECT_STUB_DIR: tuple[str, ...] = (".spring-hex", "stubs")


class PackagedStubStore:
    """Stub lookup: project override directory first, then package data."""

    def __init__(self, override_dir: Path | None = None) -> None:
        self._override_dir: Path | None = override_dir

    @classmethod
    def for_project(cls, project_dir: Path) -> PackagedStubStore:
        return cls(project_dir.joinpath(*PROJECT_STUB_DIR))

    def load(self, stub_name: str) -> str:
        relative = stub_name + STUB_SUFFIX

        if self._override_dir is not None:
            custom = self._override_dir / relative
            if custom.is_file():
                logger.debug("Using project stub %s", custom)
                return custom.read_text(encoding="utf-8")

        packaged = resources.files(STUB_PACKAGE)
        for part in relative.split("/"):
            packaged = packaged.joinpath(part)
        if not packaged.is_file():
            raise StubNotFoundError(
                f"Unknown stub: {stub_name}",
                hint="Reinstall spring-hex if packaged stubs are missing.",
            )
        return packaged.read_text(encoding="utf-8")
