"""Generators that turn one command into a set of rendered Java sources.

Each generator resolves its target packages through a
:class:`~spring_hex.core.resolver.PathResolver`, builds the
``{{TOKEN}}`` replacement batch, renders stubs, and hands the results
to a :class:`~spring_hex.core.protocols.FileWriter`.  Stub lookup and
file emission are injected, so this module itself performs no I/O.

Guarantees
----------
* Only :class:`~spring_hex.exceptions.SpringHexError` subclasses escape
  (raised by the injected collaborators).
* Existing files are never overwritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from spring_hex.core import naming
from spring_hex.core.layout import resolve_output_path
from spring_hex.core.models import GeneratedFile
from spring_hex.core.protocols import FileWriter, StubStore
from spring_hex.core.renderer import leftover_tokens, render, token
from spring_hex.core.resolver import PathResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Workspace:
    """Collaborators shared by every generator in one invocation."""

    resolver: PathResolver
    stubs: StubStore
    writer: FileWriter
    output_dir: Path
    strict: bool = False


class _Generator:
    """Shared rendering and emission plumbing."""

    def __init__(self, workspace: Workspace) -> None:
        self._ws: Workspace = workspace

    @property
    def resolver(self) -> PathResolver:
        return self._ws.resolver

    def _target(self, class_name: str, package: str) -> Path:
        return resolve_output_path(self._ws.output_dir, class_name, package)

    def _emit(
        self,
        stub_name: str,
        class_name: str,
        package: str,
        replacements: dict[str, str],
    ) -> GeneratedFile:
        """Render *stub_name* with ``{{PACKAGE}}`` = *package* and write it."""
        file_replacements = dict(replacements)
        file_replacements[token("PACKAGE")] = package

        content = render(self._ws.stubs.load(stub_name), file_replacements)
        if self._ws.strict:
            leftovers = leftover_tokens(content)
            if leftovers:
                logger.warning(
                    "Stub '%s' left unrendered token(s): %s",
                    stub_name,
                    ", ".join(leftovers),
                )

        path = self._target(class_name, package)
        created = self._ws.writer.write(path, content)
        logger.debug("%s %s", "Created" if created else "Skipped", path)
        return GeneratedFile(path=path, created=created)

    def _emit_if_absent(
        self,
        stub_name: str,
        class_name: str,
        package: str,
        replacements: dict[str, str],
    ) -> GeneratedFile | None:
        """Like :meth:`_emit`, but render nothing when the target exists."""
        if self._ws.writer.exists(self._target(class_name, package)):
            return None
        return self._emit(stub_name, class_name, package, replacements)


# ---------------------------------------------------------------------------
# make:crud
# ---------------------------------------------------------------------------

class CrudGenerator(_Generator):
    """Layered MVC resource: model, entity, repository, mapper, service, controller."""

    def generate(
        self,
        entity_name: str,
        *,
        with_model: bool = True,
        with_service: bool = True,
        resources: bool = False,
    ) -> tuple[GeneratedFile, ...]:
        capitalized = naming.capitalize(entity_name)
        lower = entity_name.lower()
        plural = naming.pluralize(lower)

        replacements: dict[str, str] = {
            token("BASE_PACKAGE"): self.resolver.base_package,
            token("ENTITY_NAME"): capitalized,
            token("ENTITY_NAME_LOWER"): lower,
            token("ENTITY_NAME_PLURAL"): plural,
            token("TABLE_NAME"): plural,
        }
        self.resolver.populate_crud_package_placeholders(lower, replacements)

        plan: list[tuple[str, str, str]] = []
        if with_model:
            plan.append(("mvc/model", capitalized, "model"))
        plan.append(("mvc/entity", capitalized + "Entity", "entity"))
        plan.append(("mvc/repository", capitalized + "Repository", "repository"))
        plan.append(("mvc/mapper", capitalized + "Mapper", "mapper"))
        if with_service:
            stub = "mvc/service-resources" if resources else "mvc/service"
            plan.append((stub, capitalized + "Service", "service"))
        stub = "mvc/controller-resources" if resources else "mvc/controller"
        plan.append((stub, capitalized + "Controller", "controller"))

        return tuple(
            self._emit(stub_name, class_name, self.resolver.resolve_crud(key, lower), replacements)
            for stub_name, class_name, key in plan
        )


# ---------------------------------------------------------------------------
# make:factory
# ---------------------------------------------------------------------------

class FactoryGenerator(_Generator):
    """Datafaker-backed factory, plus its repository when missing."""

    def generate(
        self,
        entity_name: str,
        *,
        aggregate: str | None = None,
    ) -> tuple[GeneratedFile, ...]:
        base_name = naming.strip_entity_suffix(entity_name)
        capitalized = naming.capitalize(base_name)
        aggregate_lower = (aggregate or base_name).lower()

        factory_package = self.resolver.resolve("factory", aggregate_lower)
        repository_package = self.resolver.resolve("persistence", aggregate_lower)

        replacements: dict[str, str] = {
            token("BASE_PACKAGE"): self.resolver.base_package,
            token("ENTITY_NAME"): capitalized,
            token("AGGREGATE"): aggregate_lower,
            token("PACKAGE_REPOSITORY"): repository_package,
        }
        self.resolver.populate_package_placeholders(aggregate_lower, replacements)

        results = [
            self._emit("data/factory", capitalized + "Factory", factory_package, replacements),
        ]
        repository = self._emit_if_absent(
            "data/repository",
            capitalized + "Repository",
            repository_package,
            replacements,
        )
        if repository is not None:
            results.append(repository)
        return tuple(results)


# ---------------------------------------------------------------------------
# make:seeder
# ---------------------------------------------------------------------------

class SeederGenerator(_Generator):
    """Seeder class, plus the ``Seeder`` interface and ``SeedRunner``."""

    def generate(
        self,
        seeder_name: str,
        entity_name: str,
        *,
        aggregate: str | None = None,
    ) -> tuple[GeneratedFile, ...]:
        class_name = naming.normalize_seeder_name(seeder_name)
        entity_capitalized = naming.capitalize(entity_name)
        aggregate_lower = (aggregate or entity_name).lower()

        seeder_package = self.resolver.resolve_static("seeder")
        factory_package = self.resolver.resolve("factory", aggregate_lower)
        repository_package = self.resolver.resolve("persistence", aggregate_lower)

        replacements: dict[str, str] = {
            token("BASE_PACKAGE"): self.resolver.base_package,
            token("SEEDER_NAME"): class_name,
            token("ENTITY_NAME"): entity_capitalized,
            token("AGGREGATE"): aggregate_lower,
            token("PACKAGE_FACTORY"): factory_package,
            token("PACKAGE_REPOSITORY"): repository_package,
        }
        self.resolver.populate_package_placeholders(aggregate_lower, replacements)

        results = [
            self._emit("data/seeder", class_name, seeder_package, replacements),
        ]
        for stub_name, support_class in (
            ("data/seeder-interface", "Seeder"),
            ("data/seed-runner", "SeedRunner"),
        ):
            emitted = self._emit_if_absent(stub_name, support_class, seeder_package, {})
            if emitted is not None:
                results.append(emitted)
        return tuple(results)
