"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence
from typing import Any

from spring_hex.exceptions import EnvironmentError

_MARKUP_RE = re.compile(r"(?<!\\)\[/?[a-z ]+\]")
_ESCAPED_RE = re.compile(r"\\(\[/?[a-z ]+\])")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Drop ``[bold]``-style Rich markup for plain output.

    Tags escaped by :func:`escape_markup` are kept as literal text.
    """
    return _ESCAPED_RE.sub(r"\1", _MARKUP_RE.sub("", text))


def escape_markup(value: object) -> str:
    """Escape user-supplied text before embedding it in Rich markup.

    Without Rich, tag-like text is backslash-escaped so that
    :func:`strip_markup` leaves it in place.
    """
    text = str(value)
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return _MARKUP_RE.sub(lambda match: "\\" + match.group(0), text)
    return escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def print_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Render *rows* as a Rich table, or an aligned plain table without Rich."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(title, columns, rows)
        return

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for index, column in enumerate(columns):
        table.add_column(column, style="bold" if index == 0 else None)
    for row in rows:
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()


def _print_plain_table(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    plain_rows = [[strip_markup(cell) for cell in row] for row in rows]
    widths = [
        max([len(column)] + [len(row[i]) for row in plain_rows])
        for i, column in enumerate(columns)
    ]
    total = sum(widths) + len(widths) - 1

    print(f"\n{title}", file=sys.stderr)
    print("=" * total, file=sys.stderr)
    print(" ".join(c.ljust(w) for c, w in zip(columns, widths)), file=sys.stderr)
    print("-" * total, file=sys.stderr)
    for row in plain_rows:
        print(" ".join(c.ljust(w) for c, w in zip(row, widths)), file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOGGER_NAME: str = "spring_hex"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``spring_hex`` logger.

    Uses :class:`rich.logging.RichHandler` when Rich is installed.
    Warnings (e.g. unresolved placeholders in ``--strict`` mode) are
    always shown; ``verbose`` lowers the threshold to DEBUG.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()

    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    else:
        handler = RichHandler(
            console=get_rich_console(),
            show_time=False,
            show_path=verbose,
        )
    logger.addHandler(handler)
    return logger
