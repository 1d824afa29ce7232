"""Infrastructure: Maven preflight checks and platform guidance.

This module is responsible for locating the ``mvn`` executable, the
Maven home environment variable and the local archetype cache, and for
providing platform-specific installation guidance when Maven is
missing.

Rules
-----
* Detection via :func:`shutil.which` and the filesystem only, no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from mvn_quickstart.constants import (
    ARCHETYPE_CACHE_RELATIVE,
    MAVEN_EXECUTABLE,
    MAVEN_HOME_ENV,
)
from mvn_quickstart.exceptions import (
    ArchetypeCacheNotFoundError,
    MavenHomeNotSetError,
    MavenNotFoundError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Detection results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MavenStatus:
    """Result of a Maven detection probe.

    Attributes
    ----------
    found : bool
        Whether ``mvn`` was located on PATH.
    path : Path | None
        Absolute path to the ``mvn`` executable, or ``None``.
    maven_home : str | None
        Value of the Maven home variable, or ``None`` when unset or empty.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Maven on the current
        platform.  Empty when Maven is already present.
    """

    found: bool
    path: Path | None
    maven_home: str | None
    install_commands: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ArchetypeCacheStatus:
    """Result of probing the local archetype cache."""

    found: bool
    path: Path


# ---------------------------------------------------------------------------
# Maven executable and home
# ---------------------------------------------------------------------------

def detect_maven() -> MavenStatus:
    """Probe the system for ``mvn`` and the Maven home variable.

    Returns a :class:`MavenStatus` regardless of the outcome; the
    caller decides whether to abort or merely report.
    """
    result = shutil.which(MAVEN_EXECUTABLE)
    maven_home = os.environ.get(MAVEN_HOME_ENV) or None

    if result is not None:
        resolved = Path(result).resolve()
        logger.debug("Found %s at %s", MAVEN_EXECUTABLE, resolved)
        return MavenStatus(
            found=True,
            path=resolved,
            maven_home=maven_home,
            install_commands=(),
        )

    logger.debug("%s not found on PATH", MAVEN_EXECUTABLE)
    return MavenStatus(
        found=False,
        path=None,
        maven_home=maven_home,
        install_commands=_platform_install_commands(),
    )


def check_tool_available() -> MavenStatus:
    """Require both the ``mvn`` executable and the Maven home variable.

    Raises
    ------
    MavenNotFoundError
        When ``mvn`` is not on PATH.
    MavenHomeNotSetError
        When the Maven home variable is unset or empty.
    """
    status = detect_maven()
    if not status.found or status.path is None:
        hint_lines = ["Install Maven with one of:"]
        hint_lines.extend(f"    {cmd}" for cmd in status.install_commands)
        raise MavenNotFoundError(
            f"Maven is not installed: '{MAVEN_EXECUTABLE}' was not found on PATH.",
            hint="\n".join(hint_lines),
        )
    if status.maven_home is None:
        raise MavenHomeNotSetError(
            f"The {MAVEN_HOME_ENV} environment variable is not set.",
            hint=f"Point {MAVEN_HOME_ENV} at your Maven installation directory.",
        )
    return status


# ---------------------------------------------------------------------------
# Archetype cache
# ---------------------------------------------------------------------------

def archetype_cache_path() -> Path:
    """Return the archetype cache directory under the user's home."""
    return Path.home() / ARCHETYPE_CACHE_RELATIVE


def check_archetypes_installed() -> ArchetypeCacheStatus:
    """Report whether the archetype cache directory exists."""
    path = archetype_cache_path()
    found = path.is_dir()
    logger.debug("Archetype cache %s: %s", path, "found" if found else "missing")
    return ArchetypeCacheStatus(found=found, path=path)


def require_archetypes_installed() -> ArchetypeCacheStatus:
    """Return the cache status or raise :class:`ArchetypeCacheNotFoundError`."""
    status = check_archetypes_installed()
    if not status.found:
        raise ArchetypeCacheNotFoundError(
            f"Maven archetypes are not installed: {status.path} does not exist.",
            hint=(
                "Run 'mvn archetype:generate' once with network access "
                "to populate the local repository."
            ),
        )
    return status


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Apache.Maven",
            "choco install maven",
        )
    if system == "linux":
        return (
            "sudo apt install maven",
            "sudo dnf install maven",
            "sudo pacman -S maven",
        )
    if system == "darwin":
        return ("brew install maven",)
    return ("Download Maven from https://maven.apache.org/download.cgi",)
