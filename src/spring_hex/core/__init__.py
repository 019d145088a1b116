"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O (collaborators are injected).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from spring_hex.core.generators import (
    CrudGenerator,
    FactoryGenerator,
    SeederGenerator,
    Workspace,
)
from spring_hex.core.models import GeneratedFile, HexConfig, PatternRow
from spring_hex.core.patterns import CRUD_DEFAULTS, HEX_DEFAULTS, PathMode
from spring_hex.core.protocols import FileWriter, PatternSource, StubStore
from spring_hex.core.resolver import PathResolver

__all__: list[str] = [
    "CRUD_DEFAULTS",
    "CrudGenerator",
    "FactoryGenerator",
    "FileWriter",
    "GeneratedFile",
    "HEX_DEFAULTS",
    "HexConfig",
    "PathMode",
    "PathResolver",
    "PatternRow",
    "PatternSource",
    "SeederGenerator",
    "StubStore",
    "Workspace",
]
