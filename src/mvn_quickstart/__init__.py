"""mvn-quickstart — scaffold Maven projects from a predefined archetype.

A thin command-line wrapper over ``mvn archetype:generate`` with a
strict layered architecture.
"""

from mvn_quickstart.version import __version__

__all__: list[str] = ["__version__"]
