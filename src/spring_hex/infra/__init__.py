"""Infrastructure layer — external system integration.

This layer wraps all interaction with the file system, YAML
configuration, packaged stub resources, and Maven/Gradle.  Every raw
third-party or OS exception must be caught here and re-raised as a
:class:`~spring_hex.exceptions.SpringHexError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from spring_hex.infra.build_tool import BuildTool, BuildToolStatus, probe, run_seed
from spring_hex.infra.config_loader import CONFIG_FILENAME, load_config, write_initial_config
from spring_hex.infra.file_writer import FileSystemWriter
from spring_hex.infra.stub_store import PackagedStubStore

__all__: list[str] = [
    "BuildTool",
    "BuildToolStatus",
    "CONFIG_FILENAME",
    "FileSystemWriter",
    "PackagedStubStore",
    "load_config",
    "probe",
    "run_seed",
    "write_initial_config",
]
