"""Tests for package path resolution (core/resolver.py).

Coverage:
* Lookup precedence: config override → built-in default → key itself.
* Hexagonal, multi-variable, static, and CRUD resolution.
* Namespace composition.
* Placeholder batch population (hexagonal and CRUD), idempotence.
* ``--strict`` diagnostics are warnings only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from spring_hex.core.models import HexConfig
from spring_hex.core.patterns import CRUD_DEFAULTS, HEX_DEFAULTS, PathMode
from spring_hex.core.resolver import (
    CRUD_TOKENS,
    IdentityLookup,
    LookupChain,
    PathResolver,
    TableLookup,
    build_chain,
)

MakeResolver = Callable[..., PathResolver]


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_default_command_package(self, resolver: PathResolver) -> None:
        assert resolver.resolve("command", "order") == "com.example.app.domain.order.command"

    def test_override_replaces_default(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"command": "app.commands.{aggregate}"})
        assert resolver.resolve("command", "order") == "com.example.app.app.commands.order"

    def test_crud_controller(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver("com.app")
        assert resolver.resolve_crud("controller", "user") == "com.app.user.web"

    def test_unknown_key_is_literal(self, resolver: PathResolver) -> None:
        assert (
            resolver.resolve("totally-unknown-key", "order")
            == "com.example.app.totally-unknown-key"
        )

    def test_crud_batch_sets_exactly_five_tokens(self, resolver: PathResolver) -> None:
        batch: dict[str, str] = {}
        resolver.populate_crud_package_placeholders("product", batch)

        assert batch == {
            "{{PACKAGE_CRUD_MODEL}}": "com.example.app.product.model",
            "{{PACKAGE_CRUD_ENTITY}}": "com.example.app.product.entity",
            "{{PACKAGE_CRUD_REPOSITORY}}": "com.example.app.product.repository",
            "{{PACKAGE_CRUD_SERVICE}}": "com.example.app.product.service",
            "{{PACKAGE_CRUD_MAPPER}}": "com.example.app.product.mapper",
        }


# ---------------------------------------------------------------------------
# Lookup precedence
# ---------------------------------------------------------------------------

class TestLookupChain:
    def test_override_wins(self) -> None:
        chain = build_chain({"model": "custom"}, {"model": "default"})
        assert chain.pattern_for("model") == ("custom", "config")

    def test_default_when_not_overridden(self) -> None:
        chain = build_chain({}, {"model": "default"})
        assert chain.pattern_for("model") == ("default", "default")

    def test_identity_fallback(self) -> None:
        chain = build_chain({}, {})
        assert chain.pattern_for("anything") == ("anything", "key")

    def test_empty_string_override_still_wins(self) -> None:
        chain = build_chain({"model": ""}, {"model": "default"})
        assert chain.pattern_for("model") == ("", "config")

    def test_keys_lists_defaults_then_custom(self) -> None:
        chain = build_chain({"custom": "x", "model": "y"}, {"model": "a", "query": "b"})
        assert chain.keys() == ["model", "query", "custom"]

    def test_chain_is_frozen(self) -> None:
        chain = LookupChain(strategies=())
        with pytest.raises(AttributeError):
            chain.strategies = ()  # type: ignore[misc]

    def test_identity_is_last_strategy(self) -> None:
        chain = build_chain({}, {})
        assert [s.source for s in chain.strategies] == ["config", "default", "key"]
        assert isinstance(chain.strategies[-1], IdentityLookup)

    def test_identity_appended_when_missing(self) -> None:
        chain = LookupChain(strategies=(TableLookup(source="config", table={"a": "b"}),))
        assert isinstance(chain.strategies[-1], IdentityLookup)
        assert chain.pattern_for("other") == ("other", "key")
        assert chain.keys() == ["a"]


class TestPrecedence:
    def test_override_never_consults_default(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"model": "flat"})
        assert resolver.resolve("model", "order") == "com.example.app.flat"

    def test_crud_and_hex_tables_are_independent(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"service": "svc.{aggregate}"})
        assert resolver.resolve("service", "order") == "com.example.app.svc.order"
        assert resolver.resolve_crud("service", "order") == "com.example.app.order.service"

    def test_custom_key_from_config_only(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"policy": "domain.{aggregate}.policy"})
        assert resolver.resolve("policy", "order") == "com.example.app.domain.order.policy"

    def test_synthetic_default_tables(self) -> None:
        config = HexConfig(base_package="x")
        resolver = PathResolver(
            "x",
            config,
            hex_defaults={"model": "m.{aggregate}"},
            crud_defaults={},
        )
        assert resolver.resolve("model", "a") == "x.m.a"
        assert resolver.resolve_crud("model", "a") == "x.model"

    def test_pattern_accessor(self, resolver: PathResolver) -> None:
        assert resolver.pattern("port-in") == HEX_DEFAULTS["port-in"]
        assert resolver.pattern("entity", PathMode.CRUD) == CRUD_DEFAULTS["entity"]


# ---------------------------------------------------------------------------
# Expansion through the resolver
# ---------------------------------------------------------------------------

class TestResolveVariants:
    def test_adapter_with_category(self, resolver: PathResolver) -> None:
        result = resolver.resolve_vars(
            "adapter", {"aggregate": "order", "category": "messaging"}
        )
        assert result == "com.example.app.infrastructure.messaging.order"

    def test_resolve_vars_is_single_pass(self, resolver: PathResolver) -> None:
        result = resolver.resolve_vars(
            "adapter", {"aggregate": "{category}", "category": "billing"}
        )
        assert result == "com.example.app.infrastructure.billing.{category}"

    def test_resolve_leaves_other_placeholders(self, resolver: PathResolver) -> None:
        assert (
            resolver.resolve("adapter", "order")
            == "com.example.app.infrastructure.{category}.order"
        )

    @pytest.mark.parametrize("key", ["cqrs", "mediator", "domain-root", "adapter", "nope"])
    def test_static_equals_empty_bindings(self, resolver: PathResolver, key: str) -> None:
        assert resolver.resolve_static(key) == resolver.resolve_vars(key, {})

    def test_static_keeps_placeholders(self, resolver: PathResolver) -> None:
        assert resolver.resolve_static("model") == "com.example.app.domain.{aggregate}.model"

    @pytest.mark.parametrize("key", sorted(HEX_DEFAULTS))
    def test_every_hex_path_is_prefixed(self, resolver: PathResolver, key: str) -> None:
        assert resolver.resolve(key, "order").startswith("com.example.app.")

    def test_base_package_is_not_expanded(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver("com.{aggregate}")
        assert resolver.resolve("model", "order") == "com.{aggregate}.domain.order.model"

    def test_values_with_regex_characters(self, resolver: PathResolver) -> None:
        assert resolver.resolve("model", "a$1\\b") == "com.example.app.domain.a$1\\b.model"


# ---------------------------------------------------------------------------
# Placeholder batches
# ---------------------------------------------------------------------------

class TestPackagePlaceholders:
    def test_hexagonal_batch(self, resolver: PathResolver) -> None:
        batch: dict[str, str] = {}
        resolver.populate_package_placeholders("order", batch)

        assert batch == {
            "{{PACKAGE_MODEL}}": "com.example.app.domain.order.model",
            "{{PACKAGE_PORT_OUT}}": "com.example.app.domain.order.port.out",
            "{{PACKAGE_PORT_IN}}": "com.example.app.domain.order.port.in",
            "{{PACKAGE_CQRS}}": "com.example.app.domain.cqrs",
            "{{PACKAGE_MEDIATOR}}": "com.example.app.infrastructure.mediator",
            "{{PACKAGE_EVENT}}": "com.example.app.domain.order.event",
            "{{PACKAGE_DOMAIN_ROOT}}": "com.example.app.domain",
        }

    def test_preserves_existing_entries(self, resolver: PathResolver) -> None:
        batch = {"{{ENTITY_NAME}}": "Order"}
        resolver.populate_package_placeholders("order", batch)
        assert batch["{{ENTITY_NAME}}"] == "Order"
        assert len(batch) == 8

    def test_idempotent(self, resolver: PathResolver) -> None:
        once: dict[str, str] = {}
        resolver.populate_package_placeholders("order", once)
        twice: dict[str, str] = {}
        resolver.populate_package_placeholders("order", twice)
        resolver.populate_package_placeholders("order", twice)
        assert once == twice

    def test_static_tokens_ignore_aggregate_override(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"cqrs": "shared.{aggregate}.cqrs"})
        batch: dict[str, str] = {}
        resolver.populate_package_placeholders("order", batch)
        assert batch["{{PACKAGE_CQRS}}"] == "com.example.app.shared.{aggregate}.cqrs"

    def test_crud_batch_uses_overrides(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(crud={"mapper": "mapping.{name}"})
        batch: dict[str, str] = {}
        resolver.populate_crud_package_placeholders("user", batch)
        assert batch["{{PACKAGE_CRUD_MAPPER}}"] == "com.example.app.mapping.user"
        assert set(batch) == {token for token, _ in CRUD_TOKENS}


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

class TestDescribe:
    def test_marks_source(self, make_resolver: MakeResolver) -> None:
        resolver = make_resolver(paths={"command": "cmd.{aggregate}"})
        rows = {row.key: row for row in resolver.describe(PathMode.HEXAGONAL, {"aggregate": "order"})}

        assert rows["command"].source == "config"
        assert rows["command"].example == "com.example.app.cmd.order"
        assert rows["query"].source == "default"
        assert len(rows) == len(HEX_DEFAULTS)

    def test_crud_rows(self, resolver: PathResolver) -> None:
        rows = resolver.describe(PathMode.CRUD, {"name": "user"})
        assert [row.key for row in rows] == list(CRUD_DEFAULTS)


# ---------------------------------------------------------------------------
# Strict diagnostics
# ---------------------------------------------------------------------------

class TestStrictMode:
    def test_warns_on_unresolved(
        self,
        make_resolver: MakeResolver,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        resolver = make_resolver(strict=True)
        with caplog.at_level(logging.WARNING, logger="spring_hex"):
            result = resolver.resolve("adapter", "order")

        assert result == "com.example.app.infrastructure.{category}.order"
        assert "{category}" in caplog.text
        assert "adapter" in caplog.text

    def test_silent_when_fully_resolved(
        self,
        make_resolver: MakeResolver,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        resolver = make_resolver(strict=True)
        with caplog.at_level(logging.WARNING, logger="spring_hex"):
            resolver.resolve("model", "order")
        assert caplog.records == []

    def test_non_strict_never_warns(
        self,
        resolver: PathResolver,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="spring_hex"):
            resolver.resolve_static("model")
        assert caplog.records == []
