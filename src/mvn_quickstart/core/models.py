"""Domain models for mvn-quickstart.

All models are **frozen** dataclasses: immutable value objects built
once and threaded explicitly through the pipeline.  They carry zero I/O
and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from mvn_quickstart.constants import DEFAULT_VERSION


# ---------------------------------------------------------------------------
# Verbosity
# ---------------------------------------------------------------------------

class Verbosity(enum.Enum):
    """Effective output mode of a run."""

    NORMAL = "normal"
    QUIET = "quiet"
    MUTE = "mute"
    DEBUG = "debug"


# ---------------------------------------------------------------------------
# Package name normalization
# ---------------------------------------------------------------------------

_PACKAGE_SEPARATORS = str.maketrans({"-": ".", " ": "."})


def normalize_package_name(name: str) -> str:
    """Replace every dash and every space in *name* with a dot.

    ``"com-my package"`` becomes ``"com.my.package"``.  The result holds
    neither character, so applying the function twice changes nothing.
    """
    return name.translate(_PACKAGE_SEPARATORS)


# ---------------------------------------------------------------------------
# Project request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """Everything needed to generate one project."""

    artifact_id: str
    """Maven artifactId of the new project."""

    group_id: str
    """Maven groupId of the new project."""

    target_directory: Path
    """Absolute directory Maven runs in."""

    version: str = DEFAULT_VERSION
    """Project version."""

    package_name: str | None = None
    """Normalized Java package.  ``None`` for base-POM projects."""

    is_base_pom: bool = False
    """Generate a lone ``pom.xml`` instead of the quickstart tree."""

    quiet: bool = False
    mute: bool = False
    debug: bool = False

    @property
    def verbosity(self) -> Verbosity:
        """Single effective mode.  Debug wins over mute, mute over quiet."""
        if self.debug:
            return Verbosity.DEBUG
        if self.mute:
            return Verbosity.MUTE
        if self.quiet:
            return Verbosity.QUIET
        return Verbosity.NORMAL

    @property
    def shows_summary(self) -> bool:
        """Mute suppresses the summary even when debug is also requested."""
        return not self.mute

    @property
    def asks_confirmation(self) -> bool:
        return not (self.quiet or self.mute)

    @property
    def project_type(self) -> str:
        return "base POM" if self.is_base_pom else "standard"
