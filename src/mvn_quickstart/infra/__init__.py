"""Infrastructure layer — external system integration.

This layer wraps all interaction with Maven and the operating system.
Every raw OS exception must be caught here and re-raised as a
:class:`~mvn_quickstart.exceptions.MvnQuickstartError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from mvn_quickstart.infra.maven_detector import (
    ArchetypeCacheStatus,
    MavenStatus,
    check_archetypes_installed,
    check_tool_available,
    detect_maven,
    require_archetypes_installed,
)
from mvn_quickstart.infra.maven_generator import (
    MavenBasePomGenerator,
    MavenQuickstartGenerator,
)

__all__: list[str] = [
    "ArchetypeCacheStatus",
    "MavenBasePomGenerator",
    "MavenQuickstartGenerator",
    "MavenStatus",
    "check_archetypes_installed",
    "check_tool_available",
    "detect_maven",
    "require_archetypes_installed",
]
