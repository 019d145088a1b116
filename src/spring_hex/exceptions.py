"""Custom exception hierarchy for spring-hex.

All exceptions that cross layer boundaries must inherit from
:class:`SpringHexError`.  The path-resolution core never raises; these
types belong to the boundaries around it (configuration loading, name
validation, stub lookup, file emission, build-tool invocation).

Hierarchy
---------
SpringHexError
├── ConfigurationError
├── InvalidNameError
├── StubNotFoundError
├── GenerationError
├── BuildToolError
├── EnvironmentError
└── UsageError
"""

from __future__ import annotations


class SpringHexError(Exception):
    """Base exception for all spring-hex errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(SpringHexError):
    """Raised when ``.hexconfig.yml`` or the base package is unusable."""


# --- Input validation ------------------------------------------------------

class InvalidNameError(SpringHexError):
    """Raised when a user-supplied class or aggregate name is not legal."""


class UsageError(SpringHexError):
    """Raised when a command is invoked with an unusable argument combination."""


# --- Generation ------------------------------------------------------------

class StubNotFoundError(SpringHexError):
    """Raised when a stub template cannot be located."""


class GenerationError(SpringHexError):
    """Raised when a generated file cannot be written to disk."""


# --- Build tooling ---------------------------------------------------------

class BuildToolError(SpringHexError):
    """Raised when no build tool is detected or it fails to start."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(SpringHexError):
    """Raised when an optional runtime dependency is not available."""


def config_file_hint(filename: str) -> str:
    """Return guidance for fixing a broken or missing configuration file."""
    return "\n".join(
        (
            f"Check {filename} in the project directory, or run:",
            "    spring-hex init --package com.example.app",
        )
    )
