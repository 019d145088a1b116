"""Flat token substitution for package patterns and stub text.

Every function here is a pure string transformation.  Substitution is
literal substring matching, never regex-based, so values containing
regex metacharacters pass through untouched.

Semantics
---------
* Each bound variable is applied once; a value that itself contains a
  ``{token}`` is **not** re-expanded.
* Placeholders with no binding stay in the output verbatim.  Callers
  may expand partially and fill the rest later.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

AGGREGATE_VAR: str = "aggregate"
NAME_VAR: str = "name"
CATEGORY_VAR: str = "category"

# Only used to *report* leftovers; substitution never goes through it.
_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_-]*)\}")


def placeholder(name: str) -> str:
    """Return the ``{name}`` token for *name*."""
    return "{" + name + "}"


def expand(pattern: str, bindings: Mapping[str, str]) -> str:
    """Substitute every bound ``{name}`` in *pattern* in a single pass."""
    return substitute(
        pattern,
        {placeholder(name): value for name, value in bindings.items()},
    )


def substitute(text: str, replacements: Mapping[str, str]) -> str:
    """Replace each literal token key of *replacements* found in *text*.

    The text is scanned once, left to right.  At every step the earliest
    matching token is replaced and the replacement is emitted as-is,
    never scanned again.  This keeps substitution non-recursive no
    matter which order *replacements* iterates in.
    """
    if not replacements:
        return text

    pieces: list[str] = []
    cursor = 0
    while cursor < len(text):
        match = _next_token(text, cursor, replacements)
        if match is None:
            pieces.append(text[cursor:])
            break
        start, token = match
        pieces.append(text[cursor:start])
        pieces.append(replacements[token])
        cursor = start + len(token)
    return "".join(pieces)


def expand_aggregate(pattern: str, aggregate: str) -> str:
    """Convenience form of :func:`expand` binding only ``{aggregate}``."""
    return pattern.replace(placeholder(AGGREGATE_VAR), aggregate)


def find_unresolved(text: str) -> tuple[str, ...]:
    """Return the placeholder names still present in *text*, in order."""
    return tuple(_PLACEHOLDER_RE.findall(text))


def _next_token(
    text: str,
    start: int,
    replacements: Mapping[str, str],
) -> tuple[int, str] | None:
    """Locate the earliest token at or after *start*; longest wins a tie."""
    best: tuple[int, str] | None = None
    for token in replacements:
        if not token:
            continue
        index = text.find(token, start)
        if index == -1:
            continue
        if (
            best is None
            or index < best[0]
            or (index == best[0] and len(token) > len(best[1]))
        ):
            best = (index, token)
    return best
