"""Interactive prompts for the CLI layer.

questionary is imported lazily so non-interactive commands keep
working without it.
"""

from __future__ import annotations

from typing import Any

from spring_hex.core.naming import is_package_name
from spring_hex.exceptions import EnvironmentError, UsageError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass the value on the command line (e.g. --package).",
        ) from exc
    return questionary


def _validate_package(text: str) -> bool | str:
    """questionary validator: ``True`` or an inline error message."""
    if is_package_name(text.strip()):
        return True
    return "Use a dotted Java package name, e.g. com.example.app"


def prompt_base_package(default: str = "") -> str:
    """Ask the user for the project's base package.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during the prompt.
    UsageError
        If the prompt is cancelled (``None`` return).
    """
    questionary = _import_questionary()

    answer: str | None = questionary.text(
        "Base package:",
        default=default,
        validate=_validate_package,
    ).ask()  # Returns None on Ctrl+C / Esc

    if answer is None:
        raise UsageError(
            "No base package entered.",
            hint="Run again, or pass --package com.example.app",
        )
    return answer.strip()
