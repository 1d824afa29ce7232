"""Single source of truth for the mvn-quickstart version."""

__version__: str = "1.0.0"
