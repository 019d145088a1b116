"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from spring_hex.core.models import GeneratedFile, HexConfig, PatternRow


class TestHexConfig:
    def test_defaults_are_empty(self) -> None:
        config = HexConfig(base_package="com.app")
        assert dict(config.get_paths()) == {}
        assert dict(config.get_crud()) == {}

    def test_frozen(self) -> None:
        config = HexConfig(base_package="com.app")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_package = "com.other"  # type: ignore[misc]

    def test_tables_are_copied(self) -> None:
        paths = {"model": "m"}
        config = HexConfig(base_package="com.app", paths=paths)
        paths["model"] = "changed"
        assert config.get_paths()["model"] == "m"

    def test_tables_are_read_only(self) -> None:
        config = HexConfig(base_package="com.app", crud={"entity": "e"})
        with pytest.raises(TypeError):
            config.crud["entity"] = "x"  # type: ignore[index]

    def test_equality(self) -> None:
        a = HexConfig(base_package="com.app", paths={"model": "m"})
        b = HexConfig(base_package="com.app", paths={"model": "m"})
        assert a.base_package == b.base_package
        assert dict(a.paths) == dict(b.paths)


class TestGeneratedFile:
    def test_fields(self) -> None:
        result = GeneratedFile(path=Path("X.java"), created=False)
        assert result.path == Path("X.java")
        assert result.created is False

    def test_frozen(self) -> None:
        result = GeneratedFile(path=Path("X.java"), created=True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.created = False  # type: ignore[misc]


class TestPatternRow:
    def test_fields(self) -> None:
        row = PatternRow(key="model", pattern="m", source="default", example="com.app.m")
        assert row.source == "default"
        assert row.example == "com.app.m"
