"""spring-hex — hexagonal architecture scaffolding for Spring projects.

Resolves target packages from a configurable pattern table and renders
stub templates into Java sources.
"""

from spring_hex.version import __version__

__all__: list[str] = ["__version__"]
