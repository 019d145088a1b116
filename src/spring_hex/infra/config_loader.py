"""Infrastructure: project configuration loading.

Reads ``.hexconfig.yml`` from the project directory and validates it
into a :class:`~spring_hex.core.models.HexConfig`.  This is the only
place where malformed configuration is detected; everything downstream
of it (the resolver, the generators) trusts its input.

Rules
-----
* Parsing via :func:`yaml.safe_load` only.
* Every failure surfaces as :class:`ConfigurationError` with a hint.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from spring_hex.core.models import HexConfig
from spring_hex.core.naming import is_package_name
from spring_hex.exceptions import ConfigurationError, config_file_hint

logger = logging.getLogger(__name__)

CONFIG_FILENAME: str = ".hexconfig.yml"

_BASE_PACKAGE_KEY: str = "base-package"
_PATHS_KEY: str = "paths"
_CRUD_KEY: str = "crud"


def config_path(project_dir: Path) -> Path:
    """Location of the configuration file for *project_dir*."""
    return project_dir / CONFIG_FILENAME


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* into a raw mapping; a missing file yields ``{}``."""
    if not path.is_file():
        logger.debug("No %s found at %s, using defaults", CONFIG_FILENAME, path)
        return {}

    try:
        with path.open(encoding="utf-8") as fh:
            raw: Any = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in {path}: {exc}",
            hint=config_file_hint(CONFIG_FILENAME),
        ) from exc
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read {path}: {exc}",
        ) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"{path} must contain a mapping at the top level.",
            hint=config_file_hint(CONFIG_FILENAME),
        )
    logger.debug("Loaded configuration from %s", path)
    return raw


def _pattern_table(raw: Mapping[str, Any], section: str) -> dict[str, str]:
    """Validate an optional ``key: pattern`` section."""
    table: Any = raw.get(section)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise ConfigurationError(
            f"'{section}' must be a mapping of key to pattern.",
            hint=config_file_hint(CONFIG_FILENAME),
        )

    patterns: dict[str, str] = {}
    for key, pattern in table.items():
        if not isinstance(pattern, str) or not pattern.strip():
            raise ConfigurationError(
                f"Pattern for '{section}.{key}' must be a non-empty string.",
                hint=config_file_hint(CONFIG_FILENAME),
            )
        patterns[str(key)] = pattern
    return patterns


def _base_package(raw: Mapping[str, Any], override: str | None) -> str:
    """Pick the CLI override, else the configured base package."""
    candidate: Any = override if override else raw.get(_BASE_PACKAGE_KEY)
    if candidate is None or (isinstance(candidate, str) and not candidate.strip()):
        raise ConfigurationError(
            "No base package configured.",
            hint="Pass --package com.example.app, or set "
            f"'{_BASE_PACKAGE_KEY}' in {CONFIG_FILENAME}.",
        )
    if not isinstance(candidate, str) or not is_package_name(candidate.strip()):
        raise ConfigurationError(
            f"Invalid base package: {candidate!r}",
            hint="Use a dotted Java package name, e.g. com.example.app",
        )
    return candidate.strip()


def load_config(project_dir: Path, base_package: str | None = None) -> HexConfig:
    """Load and validate the configuration for *project_dir*.

    Parameters
    ----------
    project_dir:
        Directory containing ``.hexconfig.yml`` (usually the output dir).
    base_package:
        Command-line override; wins over ``base-package`` in the file.

    Raises
    ------
    ConfigurationError
        For unreadable or malformed files, or a missing/illegal base
        package.
    """
    raw = read_config_file(config_path(project_dir))
    return HexConfig(
        base_package=_base_package(raw, base_package),
        paths=_pattern_table(raw, _PATHS_KEY),
        crud=_pattern_table(raw, _CRUD_KEY),
    )


def write_initial_config(project_dir: Path, base_package: str) -> Path:
    """Create ``.hexconfig.yml`` with *base_package* and empty override sections.

    Raises
    ------
    ConfigurationError
        If the file already exists or *base_package* is illegal.
    """
    path = config_path(project_dir)
    if path.exists():
        raise ConfigurationError(
            f"{path} already exists.",
            hint="Edit the existing file instead of re-running init.",
        )
    package = _base_package({}, base_package)

    body = yaml.safe_dump({_BASE_PACKAGE_KEY: package}, sort_keys=False)
    body += (
        "\n"
        "# Hexagonal package overrides, e.g.\n"
        "#   command: app.commands.{aggregate}\n"
        f"{_PATHS_KEY}: {{}}\n"
        "\n"
        "# CRUD package overrides, e.g.\n"
        '#   controller: "{name}.api"\n'
        f"{_CRUD_KEY}: {{}}\n"
    )
    try:
        project_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)
    return path
