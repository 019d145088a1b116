"""``spring-hex doctor`` — environment diagnostics command.

Gathers system and project information and renders a table summarising
whether the current directory is ready for scaffolding.

This module lives in the CLI layer — it may import from ``infra`` and
``core``.  No business logic resides here; it purely collects and
displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from spring_hex.cli import exit_codes
from spring_hex.cli.console import console, escape_markup, print_table
from spring_hex.exceptions import ConfigurationError
from spring_hex.infra.build_tool import probe
from spring_hex.infra.config_loader import CONFIG_FILENAME, config_path, load_config
from spring_hex.version import __version__

OK: str = "[green]OK[/green]"
WARN: str = "[yellow]WARN[/yellow]"
FAIL: str = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _spring_hex_version_check() -> tuple[str, str, str]:
    return "spring-hex", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _config_check(project_dir: Path) -> tuple[str, str, str]:
    """Return the configuration row.

    A missing file is only a warning (``--package`` still works); a
    present but malformed file fails.
    """
    path = config_path(project_dir)
    if not path.is_file():
        return CONFIG_FILENAME, "not found", WARN
    try:
        config = load_config(project_dir)
    except ConfigurationError as exc:
        return CONFIG_FILENAME, str(exc), FAIL
    overrides = len(config.paths) + len(config.crud)
    return CONFIG_FILENAME, f"{config.base_package} ({overrides} overrides)", OK


def _build_tool_check(project_dir: Path) -> tuple[str, str, str]:
    """Return the Maven/Gradle row; ``db:seed`` needs it, generators do not."""
    status = probe(project_dir)
    if status.tool is None:
        return "Build tool", "not detected", WARN
    if status.executable is None:
        return "Build tool", f"{status.tool.value} (no executable)", WARN
    return "Build tool", f"{status.tool.value}: {status.executable}", OK


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(project_dir: Path) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _spring_hex_version_check(),
        _python_version_check(),
        _config_check(project_dir),
        _build_tool_check(project_dir),
        _os_check(),
    ]

    # Values carry paths and config errors; only the status column is markup.
    rows = [(label, escape_markup(value), status) for label, value, status in checks]
    print_table("spring-hex doctor", ("Component", "Value", "Status"), rows)

    if any("FAIL" in status for _, _, status in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
