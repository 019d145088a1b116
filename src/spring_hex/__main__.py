"""Allow ``python -m spring_hex`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m spring_hex`` behaves identically to the ``spring-hex``
console script.
"""

from __future__ import annotations

from spring_hex.cli.app import cli

if __name__ == "__main__":
    cli()
