"""Built-in pattern tables for package resolution.

Each table maps a semantic key (``"model"``, ``"port-out"``, …) to a
pattern: a dotted package fragment with ``{variable}`` placeholders.
The tables are exposed as read-only mappings and injected into
:class:`~spring_hex.core.resolver.PathResolver`; nothing reads them as
ambient state.

Hexagonal keys bind ``{aggregate}`` (and ``{category}`` for adapters).
CRUD keys bind ``{name}``.  The two namespaces are independent: the
same key may mean different things in each.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class PathMode(str, Enum):
    """Which pattern namespace a lookup runs against."""

    HEXAGONAL = "hexagonal"
    CRUD = "crud"


HEX_DEFAULTS: Mapping[str, str] = MappingProxyType(
    {
        "model": "domain.{aggregate}.model",
        "command": "domain.{aggregate}.command",
        "query": "domain.{aggregate}.query",
        "event": "domain.{aggregate}.event",
        "event-listener": "infrastructure.event.{aggregate}",
        "dto": "domain.{aggregate}.dto",
        "port-in": "domain.{aggregate}.port.in",
        "port-out": "domain.{aggregate}.port.out",
        "persistence": "infrastructure.persistence.{aggregate}",
        "controller": "infrastructure.web.{aggregate}",
        "adapter": "infrastructure.{category}.{aggregate}",
        "config": "infrastructure.config",
        "mediator": "infrastructure.mediator",
        "cqrs": "domain.cqrs",
        "domain-root": "domain",
        "service": "domain.{aggregate}.service",
        "factory": "infrastructure.factory.{aggregate}",
        "seeder": "infrastructure.seeder",
    }
)

CRUD_DEFAULTS: Mapping[str, str] = MappingProxyType(
    {
        "model": "{name}.model",
        "entity": "{name}.entity",
        "repository": "{name}.repository",
        "mapper": "{name}.mapper",
        "service": "{name}.service",
        "controller": "{name}.web",
    }
)
