"""Flat ``{{TOKEN}}`` substitution over stub text.

Same permissiveness as :mod:`spring_hex.core.expander`: literal
substring replacement, no escaping, unknown tokens left verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from spring_hex.core.expander import substitute

_TOKEN_RE = re.compile(r"\{\{([A-Z][A-Z0-9_]*)\}\}")


def token(name: str) -> str:
    """``"PACKAGE"`` → ``"{{PACKAGE}}"``."""
    return "{{" + name + "}}"


def render(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every ``{{TOKEN}}`` key of *replacements* in *template*.

    Keys are used exactly as given, braces included.
    """
    return substitute(template, replacements)


def leftover_tokens(text: str) -> tuple[str, ...]:
    """Names of ``{{TOKEN}}`` placeholders still present in *text*."""
    return tuple(dict.fromkeys(_TOKEN_RE.findall(text)))
