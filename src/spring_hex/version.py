"""Single source of truth for the spring-hex version string."""

__version__: str = "1.0.0"
