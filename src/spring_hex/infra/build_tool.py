"""Infrastructure: Maven/Gradle detection and seeder invocation.

Locates the project's build tool, prefers the project wrapper script
over a globally installed executable, and runs the Spring Boot seed
task with inherited I/O.

Rules
-----
* Executable lookup via :func:`shutil.which` and the project tree.
* No ``print()`` — callers handle user-facing output.
* The child process owns the terminal; its exit code is returned as-is.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from spring_hex.exceptions import BuildToolError

logger = logging.getLogger(__name__)


class BuildTool(str, Enum):
    MAVEN = "maven"
    GRADLE = "gradle"


_MARKERS: tuple[tuple[BuildTool, tuple[str, ...]], ...] = (
    (BuildTool.MAVEN, ("pom.xml",)),
    (BuildTool.GRADLE, ("build.gradle", "build.gradle.kts")),
)

_WRAPPERS: dict[BuildTool, str] = {
    BuildTool.MAVEN: "mvnw",
    BuildTool.GRADLE: "gradlew",
}

_GLOBAL_EXECUTABLES: dict[BuildTool, str] = {
    BuildTool.MAVEN: "mvn",
    BuildTool.GRADLE: "gradle",
}


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BuildToolStatus:
    """Result of probing a project directory.

    Attributes
    ----------
    tool : BuildTool | None
        Detected build tool, or ``None`` outside a Maven/Gradle project.
    executable : str | None
        Wrapper path or global executable to invoke.
    """

    tool: BuildTool | None
    executable: str | None

    @property
    def found(self) -> bool:
        return self.tool is not None and self.executable is not None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_build_tool(project_dir: Path) -> BuildTool | None:
    """Return the build tool whose marker file exists in *project_dir*."""
    for tool, markers in _MARKERS:
        if any((project_dir / marker).is_file() for marker in markers):
            return tool
    return None


def resolve_executable(project_dir: Path, tool: BuildTool) -> str | None:
    """Prefer ``./mvnw`` / ``./gradlew``; fall back to the global binary."""
    wrapper = _WRAPPERS[tool]
    if platform.system().lower() == "windows":
        candidates = (wrapper + ".cmd", wrapper + ".bat")
    else:
        candidates = (wrapper,)

    for candidate in candidates:
        path = project_dir / candidate
        if path.is_file():
            return str(path.resolve())

    return shutil.which(_GLOBAL_EXECUTABLES[tool])


def probe(project_dir: Path) -> BuildToolStatus:
    """Detect tool and executable without raising."""
    tool = detect_build_tool(project_dir)
    if tool is None:
        return BuildToolStatus(tool=None, executable=None)
    return BuildToolStatus(tool=tool, executable=resolve_executable(project_dir, tool))


# ---------------------------------------------------------------------------
# Seed command
# ---------------------------------------------------------------------------

def build_seed_command(executable: str, tool: BuildTool, target: str) -> list[str]:
    """Command line running the ``--seed=<target>`` Spring Boot task."""
    if tool is BuildTool.MAVEN:
        return [
            executable,
            "spring-boot:run",
            f"-Dspring-boot.run.arguments=--seed={target}",
        ]
    return [executable, "bootRun", f"--args=--seed={target}"]


def run_seed(
    project_dir: Path,
    target: str,
    *,
    on_start: Callable[[Sequence[str]], None] | None = None,
) -> tuple[list[str], int]:
    """Run the seeders named by *target* (a class name or ``"all"``).

    Parameters
    ----------
    on_start:
        Called with the command line just before the process starts.

    Returns
    -------
    tuple[list[str], int]
        The executed command and the child process exit code.

    Raises
    ------
    BuildToolError
        When no build tool is detected or the process cannot start.
    """
    status = probe(project_dir)
    if status.tool is None:
        raise BuildToolError(
            "No build tool detected.",
            hint="Ensure you are in a Maven or Gradle project directory.",
        )
    if status.executable is None:
        raise BuildToolError(
            f"No {status.tool.value} executable found.",
            hint=f"Add the {_WRAPPERS[status.tool]} wrapper or install "
            f"{_GLOBAL_EXECUTABLES[status.tool]} on PATH.",
        )

    command = build_seed_command(status.executable, status.tool, target)
    logger.debug("Executing: %s", " ".join(command))
    if on_start is not None:
        on_start(command)
    try:
        completed = subprocess.run(command, cwd=project_dir, check=False)
    except OSError as exc:
        raise BuildToolError(f"Error running seeder: {exc}") from exc
    return command, completed.returncode
