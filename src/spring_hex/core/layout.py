"""Maven/Gradle source layout helpers."""

from __future__ import annotations

from pathlib import Path

JAVA_SOURCE_ROOT: tuple[str, ...] = ("src", "main", "java")


def package_dir(output_dir: Path, package: str) -> Path:
    """Directory holding sources of *package* under *output_dir*."""
    return output_dir.joinpath(*JAVA_SOURCE_ROOT, *package.split("."))


def resolve_output_path(output_dir: Path, class_name: str, package: str) -> Path:
    """``output_dir/src/main/java/com/x/y/ClassName.java``."""
    return package_dir(output_dir, package) / f"{class_name}.java"
