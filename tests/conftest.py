"""Shared pytest fixtures and configuration for the spring-hex test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File-system tests write under ``tmp_path`` only.
* Build tools are never actually executed; ``subprocess.run`` is mocked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import pytest

from spring_hex.core.models import HexConfig
from spring_hex.core.resolver import PathResolver


class InMemoryStubStore:
    """Stub store returning canned templates keyed by stub name."""

    def __init__(self, stubs: Mapping[str, str] | None = None) -> None:
        self._stubs = dict(stubs or {})
        self.loaded: list[str] = []

    def load(self, stub_name: str) -> str:
        self.loaded.append(stub_name)
        return self._stubs.get(stub_name, "package {{PACKAGE}}; // " + stub_name)


class InMemoryWriter:
    """Create-if-absent writer recording files in a dict."""

    def __init__(self, existing: set[Path] | None = None) -> None:
        self.files: dict[Path, str] = {}
        self._existing = set(existing or ())

    def exists(self, path: Path) -> bool:
        return path in self._existing or path in self.files

    def write(self, path: Path, content: str) -> bool:
        if self.exists(path):
            return False
        self.files[path] = content
        return True


@pytest.fixture
def make_resolver() -> Callable[..., PathResolver]:
    """Factory: ``make_resolver(base, paths=..., crud=..., strict=...)``."""

    def _make(
        base_package: str = "com.example.app",
        *,
        paths: Mapping[str, str] | None = None,
        crud: Mapping[str, str] | None = None,
        strict: bool = False,
    ) -> PathResolver:
        config = HexConfig(base_package=base_package, paths=paths or {}, crud=crud or {})
        return PathResolver(config.base_package, config, strict=strict)

    return _make


@pytest.fixture
def resolver(make_resolver: Callable[..., PathResolver]) -> PathResolver:
    return make_resolver()


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """Drop handlers ``configure_logging`` attached during a CLI run."""
    yield
    logger = logging.getLogger("spring_hex")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
