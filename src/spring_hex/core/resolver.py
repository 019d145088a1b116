"""Package path resolution: pattern lookup, expansion and composition.

A :class:`PathResolver` turns a semantic key plus variable bindings
into a fully-qualified Java package::

    resolver.resolve("command", "order")
    # -> "com.example.app.domain.order.command"

Pattern lookup walks an ordered chain of strategies (user override,
built-in default, then the key itself), so it is total: an unknown key
becomes a literal path segment instead of an error.  Expansion and
composition are equally total.  Nothing in this module raises.

Guarantees
----------
* Pure — no I/O, no ``print()``.
* Read-only after construction; safe to share within one command.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

from spring_hex.core.expander import (
    NAME_VAR,
    expand,
    expand_aggregate,
    find_unresolved,
)
from spring_hex.core.models import PatternRow
from spring_hex.core.patterns import CRUD_DEFAULTS, HEX_DEFAULTS, PathMode
from spring_hex.core.protocols import PatternSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lookup chain
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TableLookup:
    """Lookup strategy backed by a single pattern table."""

    source: str
    table: Mapping[str, str]

    def __call__(self, key: str) -> str | None:
        return self.table.get(key)

    def known_keys(self) -> tuple[str, ...]:
        return tuple(self.table)


IDENTITY_SOURCE: str = "key"


@dataclass(frozen=True, slots=True)
class IdentityLookup:
    """Final strategy: the key is its own pattern."""

    source: str = IDENTITY_SOURCE

    def __call__(self, key: str) -> str:
        return key

    def known_keys(self) -> tuple[str, ...]:
        return ()


Lookup = TableLookup | IdentityLookup


@dataclass(frozen=True, slots=True)
class LookupChain:
    """Ordered strategies; the first non-``None`` answer wins.

    The chain always ends with an :class:`IdentityLookup` (one is
    appended when missing), so every key resolves.
    """

    strategies: tuple[Lookup, ...]

    def __post_init__(self) -> None:
        if not self.strategies or not isinstance(self.strategies[-1], IdentityLookup):
            object.__setattr__(self, "strategies", (*self.strategies, IdentityLookup()))

    def pattern_for(self, key: str) -> tuple[str, str]:
        """Return ``(pattern, source)`` for *key*."""
        for strategy in self.strategies:
            pattern = strategy(key)
            if pattern is not None:
                return pattern, strategy.source
        raise AssertionError("lookup chain ended without an identity lookup")

    def keys(self) -> list[str]:
        """All keys known to any table; lower-precedence tables first."""
        seen: dict[str, None] = {}
        for strategy in reversed(self.strategies):
            seen.update(dict.fromkeys(strategy.known_keys()))
        return list(seen)


def build_chain(
    overrides: Mapping[str, str],
    defaults: Mapping[str, str],
) -> LookupChain:
    return LookupChain(
        strategies=(
            TableLookup(source="config", table=overrides),
            TableLookup(source="default", table=defaults),
            IdentityLookup(),
        ),
    )


# ---------------------------------------------------------------------------
# Placeholder batch tokens
# ---------------------------------------------------------------------------

HEX_AGGREGATE_TOKENS: tuple[tuple[str, str], ...] = (
    ("{{PACKAGE_MODEL}}", "model"),
    ("{{PACKAGE_PORT_OUT}}", "port-out"),
    ("{{PACKAGE_PORT_IN}}", "port-in"),
    ("{{PACKAGE_EVENT}}", "event"),
)

HEX_STATIC_TOKENS: tuple[tuple[str, str], ...] = (
    ("{{PACKAGE_CQRS}}", "cqrs"),
    ("{{PACKAGE_MEDIATOR}}", "mediator"),
    ("{{PACKAGE_DOMAIN_ROOT}}", "domain-root"),
)

CRUD_TOKENS: tuple[tuple[str, str], ...] = (
    ("{{PACKAGE_CRUD_MODEL}}", "model"),
    ("{{PACKAGE_CRUD_ENTITY}}", "entity"),
    ("{{PACKAGE_CRUD_REPOSITORY}}", "repository"),
    ("{{PACKAGE_CRUD_SERVICE}}", "service"),
    ("{{PACKAGE_CRUD_MAPPER}}", "mapper"),
)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class PathResolver:
    """Resolve semantic keys to fully-qualified packages.

    Parameters
    ----------
    base_package:
        Prefix for every resolved path.  Never itself expanded.
    source:
        Supplier of user overrides (see :class:`PatternSource`).
    hex_defaults, crud_defaults:
        Built-in tables.  Injectable so tests can use synthetic ones.
    strict:
        When ``True``, log a warning for every resolved path that still
        contains ``{placeholder}`` tokens.  Results are unchanged.
    """

    def __init__(
        self,
        base_package: str,
        source: PatternSource,
        *,
        hex_defaults: Mapping[str, str] = HEX_DEFAULTS,
        crud_defaults: Mapping[str, str] = CRUD_DEFAULTS,
        strict: bool = False,
    ) -> None:
        self._base_package: str = base_package
        self._chains: dict[PathMode, LookupChain] = {
            PathMode.HEXAGONAL: build_chain(source.get_paths(), hex_defaults),
            PathMode.CRUD: build_chain(source.get_crud(), crud_defaults),
        }
        self._strict: bool = strict

    @property
    def base_package(self) -> str:
        return self._base_package

    # ------------------------------------------------------------------
    # Pattern lookup
    # ------------------------------------------------------------------

    def pattern(self, key: str, mode: PathMode = PathMode.HEXAGONAL) -> str:
        """Return the pattern governing *key* in *mode*."""
        pattern, _ = self._chains[mode].pattern_for(key)
        return pattern

    # ------------------------------------------------------------------
    # Hexagonal mode
    # ------------------------------------------------------------------

    def resolve(self, key: str, aggregate: str) -> str:
        """Resolve *key* binding only ``{aggregate}``."""
        expanded = expand_aggregate(self.pattern(key), aggregate)
        return self._compose(key, expanded)

    def resolve_vars(self, key: str, variables: Mapping[str, str]) -> str:
        """Resolve *key* with an arbitrary set of bindings."""
        expanded = expand(self.pattern(key), variables)
        return self._compose(key, expanded)

    def resolve_static(self, key: str) -> str:
        """Resolve *key* with no bindings at all."""
        return self._compose(key, self.pattern(key))

    # ------------------------------------------------------------------
    # CRUD mode
    # ------------------------------------------------------------------

    def resolve_crud(self, key: str, name: str) -> str:
        """Resolve a CRUD-mode *key* binding ``{name}``."""
        expanded = expand(self.pattern(key, PathMode.CRUD), {NAME_VAR: name})
        return self._compose(key, expanded)

    # ------------------------------------------------------------------
    # Placeholder batches
    # ------------------------------------------------------------------

    def populate_package_placeholders(
        self,
        aggregate: str,
        out: MutableMapping[str, str],
    ) -> None:
        """Set the hexagonal ``{{PACKAGE_*}}`` tokens in *out*."""
        for token, key in HEX_AGGREGATE_TOKENS:
            out[token] = self.resolve(key, aggregate)
        for token, key in HEX_STATIC_TOKENS:
            out[token] = self.resolve_static(key)

    def populate_crud_package_placeholders(
        self,
        name: str,
        out: MutableMapping[str, str],
    ) -> None:
        """Set the ``{{PACKAGE_CRUD_*}}`` tokens in *out*."""
        for token, key in CRUD_TOKENS:
            out[token] = self.resolve_crud(key, name)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def describe(
        self,
        mode: PathMode,
        sample: Mapping[str, str],
    ) -> list[PatternRow]:
        """Return the effective table for *mode*, resolved against *sample*."""
        chain = self._chains[mode]
        rows: list[PatternRow] = []
        for key in chain.keys():
            pattern, source = chain.pattern_for(key)
            rows.append(
                PatternRow(
                    key=key,
                    pattern=pattern,
                    source=source,
                    example=self._base_package + "." + expand(pattern, sample),
                )
            )
        return rows

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def _compose(self, key: str, expanded: str) -> str:
        resolved = self._base_package + "." + expanded
        if self._strict:
            leftovers = find_unresolved(expanded)
            if leftovers:
                logger.warning(
                    "Unresolved placeholder(s) %s in package for '%s': %s",
                    ", ".join("{" + name + "}" for name in leftovers),
                    key,
                    resolved,
                )
        return resolved

