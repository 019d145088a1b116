"""Tests for naming helpers (core/naming.py)."""

from __future__ import annotations

import pytest

from spring_hex.core.naming import (
    capitalize,
    is_identifier,
    is_package_name,
    normalize_seeder_name,
    pluralize,
    strip_entity_suffix,
)


class TestCapitalize:
    def test_first_letter(self) -> None:
        assert capitalize("user") == "User"

    def test_keeps_rest(self) -> None:
        assert capitalize("orderItem") == "OrderItem"

    def test_empty(self) -> None:
        assert capitalize("") == ""


class TestPluralize:
    @pytest.mark.parametrize(
        ("word", "plural"),
        [
            ("user", "users"),
            ("category", "categories"),
            ("day", "days"),
            ("address", "addresses"),
            ("box", "boxes"),
            ("match", "matches"),
            ("wish", "wishes"),
            ("quiz", "quizes"),
        ],
    )
    def test_rules(self, word: str, plural: str) -> None:
        assert pluralize(word) == plural

    def test_empty(self) -> None:
        assert pluralize("") == ""


class TestSuffixes:
    def test_strip_entity_suffix(self) -> None:
        assert strip_entity_suffix("UserEntity") == "User"

    def test_strip_entity_suffix_passthrough(self) -> None:
        assert strip_entity_suffix("User") == "User"

    def test_bare_entity_is_kept(self) -> None:
        assert strip_entity_suffix("Entity") == "Entity"

    def test_normalize_seeder_appends(self) -> None:
        assert normalize_seeder_name("user") == "UserSeeder"

    def test_normalize_seeder_keeps_suffix(self) -> None:
        assert normalize_seeder_name("UserSeeder") == "UserSeeder"


class TestValidation:
    @pytest.mark.parametrize("name", ["User", "_x", "order2", "$ref"])
    def test_identifiers(self, name: str) -> None:
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["", "2fa", "user-name", "a.b", "a b"])
    def test_non_identifiers(self, name: str) -> None:
        assert not is_identifier(name)

    @pytest.mark.parametrize("name", ["com", "com.example.app", "io.x_y.z1"])
    def test_packages(self, name: str) -> None:
        assert is_package_name(name)

    @pytest.mark.parametrize("name", ["", "com.", ".com", "com..app", "com.1app", "com-app"])
    def test_non_packages(self, name: str) -> None:
        assert not is_package_name(name)
