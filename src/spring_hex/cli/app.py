"""CLI application entry point and command routing for spring-hex.

This module is the **sole error boundary** for the entire application.
It catches :class:`~spring_hex.exceptions.SpringHexError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* User-supplied names are validated here, before they reach the core.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from spring_hex.cli import exit_codes
from spring_hex.cli.console import configure_logging, console, escape_markup
from spring_hex.core.models import GeneratedFile
from spring_hex.core.naming import is_identifier
from spring_hex.exceptions import InvalidNameError, SpringHexError, UsageError
from spring_hex.version import __version__

if TYPE_CHECKING:
    from spring_hex.core.generators import Workspace


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _project_options() -> argparse.ArgumentParser:
    """Options shared by every command that reads project configuration."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("."),
        help="Project root directory (default: current directory).",
    )
    parent.add_argument(
        "-p",
        "--package",
        default=None,
        help="Base package; overrides 'base-package' in .hexconfig.yml.",
    )
    parent.add_argument(
        "--strict",
        action="store_true",
        help="Warn when a resolved package still contains {placeholders}.",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``init``          — write ``.hexconfig.yml``
    * ``paths``         — show the effective package patterns
    * ``make:crud``     — layered CRUD resource
    * ``make:factory``  — data factory
    * ``make:seeder``   — database seeder
    * ``db:seed``       — run seeders through Maven/Gradle
    * ``doctor``        — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="spring-hex",
        description="CLI tool for generating hexagonal architecture "
        "scaffolding for Spring projects.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")
    project = _project_options()

    init = commands.add_parser("init", help="Create .hexconfig.yml.")
    init.add_argument("-o", "--output", type=Path, default=Path("."))
    init.add_argument("-p", "--package", default=None)

    paths = commands.add_parser(
        "paths",
        parents=[project],
        help="Show the effective package patterns.",
    )
    paths.add_argument("--crud", action="store_true", help="Show CRUD patterns.")
    paths.add_argument("-a", "--aggregate", default="order")
    paths.add_argument("--category", default="persistence")

    crud = commands.add_parser(
        "make:crud",
        parents=[project],
        help="Generate a simple MVC CRUD resource.",
    )
    crud.add_argument("entity", help="Entity name (e.g. User, Product).")
    crud.add_argument("--no-model", action="store_true", help="Skip domain model.")
    crud.add_argument("--no-service", action="store_true", help="Skip service layer.")
    crud.add_argument(
        "--resources",
        action="store_true",
        help="Generate CRUD endpoints and service methods.",
    )

    factory = commands.add_parser(
        "make:factory",
        parents=[project],
        help="Generate a data factory class using Datafaker.",
    )
    factory.add_argument("entity", help="Entity name (e.g. User, Product).")
    factory.add_argument("-a", "--aggregate", default=None)

    seeder = commands.add_parser(
        "make:seeder",
        parents=[project],
        help="Generate a database seeder class.",
    )
    seeder.add_argument("name", help="Seeder name (e.g. UserSeeder).")
    seeder.add_argument("--entity", required=True, help="Entity name (e.g. User).")
    seeder.add_argument("-a", "--aggregate", default=None)

    seed = commands.add_parser("db:seed", help="Run database seeders.")
    seed.add_argument("name", nargs="?", default=None, help="Seeder class to run.")
    seed.add_argument("--all", action="store_true", help="Run all seeders.")
    seed.add_argument("-o", "--output", type=Path, default=Path("."))

    doctor = commands.add_parser("doctor", help="Environment diagnostics.")
    doctor.add_argument("-o", "--output", type=Path, default=Path("."))

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_identifier(value: str, label: str) -> str:
    if not is_identifier(value):
        raise InvalidNameError(
            f"Invalid {label}: {value!r}",
            hint="Use a Java identifier: letters, digits and underscores, "
            "not starting with a digit.",
        )
    return value


def _workspace(args: argparse.Namespace) -> Workspace:
    """Build the per-invocation resolver and collaborators."""
    from spring_hex.core.generators import Workspace
    from spring_hex.core.resolver import PathResolver
    from spring_hex.infra.config_loader import load_config
    from spring_hex.infra.file_writer import FileSystemWriter
    from spring_hex.infra.stub_store import PackagedStubStore

    config = load_config(args.output, args.package)
    resolver = PathResolver(config.base_package, config, strict=args.strict)
    return Workspace(
        resolver=resolver,
        stubs=PackagedStubStore.for_project(args.output),
        writer=FileSystemWriter(),
        output_dir=args.output,
        strict=args.strict,
    )


def _report(results: Sequence[GeneratedFile], summary: str) -> int:
    for result in results:
        if result.created:
            console.print(f"[green]Created:[/green] {escape_markup(result.path)}")
        else:
            console.print(f"[yellow]Exists:[/yellow]  {escape_markup(result.path)}")
    created = sum(1 for result in results if result.created)
    console.print(f"\n[bold green]{summary}[/bold green] ({created} file(s) written)")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_init(args: argparse.Namespace) -> int:
    from spring_hex.infra.config_loader import write_initial_config

    package: str | None = args.package
    if package is None:
        from spring_hex.cli.prompts import prompt_base_package

        package = prompt_base_package()
    path = write_initial_config(args.output, package)
    console.print(f"[green]Created:[/green] {escape_markup(path)}")
    return exit_codes.SUCCESS


def _handle_paths(args: argparse.Namespace) -> int:
    from spring_hex.cli.console import print_table
    from spring_hex.core.expander import AGGREGATE_VAR, CATEGORY_VAR, NAME_VAR
    from spring_hex.core.patterns import PathMode

    ws = _workspace(args)
    if args.crud:
        mode = PathMode.CRUD
        sample = {NAME_VAR: args.aggregate}
    else:
        mode = PathMode.HEXAGONAL
        sample = {AGGREGATE_VAR: args.aggregate, CATEGORY_VAR: args.category}

    rows = [
        (
            escape_markup(row.key),
            escape_markup(row.pattern),
            "[cyan]config[/cyan]" if row.source == "config" else "[dim]default[/dim]",
            escape_markup(row.example),
        )
        for row in ws.resolver.describe(mode, sample)
    ]
    print_table(
        f"{mode.value} packages ({escape_markup(ws.resolver.base_package)})",
        ("Key", "Pattern", "Source", "Example"),
        rows,
    )
    return exit_codes.SUCCESS


def _handle_make_crud(args: argparse.Namespace) -> int:
    from spring_hex.core.generators import CrudGenerator

    entity = _require_identifier(args.entity, "entity name")
    results = CrudGenerator(_workspace(args)).generate(
        entity,
        with_model=not args.no_model,
        with_service=not args.no_service,
        resources=args.resources,
    )
    return _report(results, f"CRUD resource generated for {entity}.")


def _handle_make_factory(args: argparse.Namespace) -> int:
    from spring_hex.core.generators import FactoryGenerator

    entity = _require_identifier(args.entity, "entity name")
    aggregate = _require_identifier(args.aggregate, "aggregate") if args.aggregate else None
    results = FactoryGenerator(_workspace(args)).generate(entity, aggregate=aggregate)
    return _report(results, "Factory generated successfully!")


def _handle_make_seeder(args: argparse.Namespace) -> int:
    from spring_hex.core.generators import SeederGenerator

    name = _require_identifier(args.name, "seeder name")
    entity = _require_identifier(args.entity, "entity name")
    aggregate = _require_identifier(args.aggregate, "aggregate") if args.aggregate else None
    results = SeederGenerator(_workspace(args)).generate(name, entity, aggregate=aggregate)
    return _report(results, "Seeder generated successfully!")


def _announce_command(command: Sequence[str]) -> None:
    console.print(f"[dim]Executing:[/dim] {escape_markup(' '.join(command))}")


def _handle_db_seed(args: argparse.Namespace) -> int:
    from spring_hex.infra.build_tool import run_seed

    if args.name is None and not args.all:
        raise UsageError(
            "Specify a seeder name or use --all to run all seeders.",
            hint="spring-hex db:seed <SeederName>\n      spring-hex db:seed --all",
        )
    target = "all" if args.all else _require_identifier(args.name, "seeder name")

    console.print(f"Running seeder: [bold]{escape_markup(target)}[/bold]")
    _, returncode = run_seed(args.output, target, on_start=_announce_command)
    if returncode != exit_codes.SUCCESS:
        console.print(f"[bold red]Seeder exited with code {returncode}.[/bold red]")
    return returncode


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from spring_hex.cli.doctor import run_doctor

    return run_doctor(args.output)


_HANDLERS = {
    "init": _handle_init,
    "paths": _handle_paths,
    "make:crud": _handle_make_crud,
    "make:factory": _handle_make_factory,
    "make:seeder": _handle_make_seeder,
    "db:seed": _handle_db_seed,
    "doctor": _handle_doctor,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the spring-hex CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SpringHexError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
