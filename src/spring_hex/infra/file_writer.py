"""Create-if-absent file emission.

Satisfies :class:`~spring_hex.core.protocols.FileWriter` structurally.
Existing files are never touched; :class:`OSError` is mapped to
:class:`~spring_hex.exceptions.GenerationError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from spring_hex.exceptions import GenerationError

logger = logging.getLogger(__name__)


class FileSystemWriter:
    """Write generated sources, creating parent directories as needed."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def write(self, path: Path, content: str) -> bool:
        if path.exists():
            logger.info("Skipping existing file %s", path)
            return False
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # "x" keeps the create-if-absent guarantee under a race.
            with path.open("x", encoding="utf-8") as fh:
                fh.write(content)
        except FileExistsError:
            logger.info("Skipping existing file %s", path)
            return False
        except OSError as exc:
            raise GenerationError(
                f"Cannot write {path}: {exc}",
                hint="Check that the output directory is writable.",
            ) from exc
        return True
