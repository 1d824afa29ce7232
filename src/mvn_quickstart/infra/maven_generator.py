"""Maven-backed implementations of :class:`~mvn_quickstart.core.protocols.ProjectGenerator`.

This module is the **only** place in the codebase that spawns Maven.
The child process inherits stdin/stdout/stderr so Maven's own output
reaches the terminal, and runs inside the request's target directory.
"""

from __future__ import annotations

import abc
import logging
import shlex
import subprocess

from mvn_quickstart.constants import (
    BASE_POM_ARCHETYPE_ARTIFACT_ID,
    BASE_POM_ARCHETYPE_GROUP_ID,
    GENERATE_GOAL,
    MAVEN_EXECUTABLE,
    QUICKSTART_ARCHETYPE_ARTIFACT_ID,
    QUICKSTART_ARCHETYPE_GROUP_ID,
    QUICKSTART_ARCHETYPE_VERSION,
)
from mvn_quickstart.core.models import ProjectRequest, Verbosity
from mvn_quickstart.exceptions import MavenNotFoundError

logger = logging.getLogger(__name__)


def maven_verbosity_flags(verbosity: Verbosity) -> list[str]:
    """Map the effective verbosity to Maven's own flags."""
    if verbosity is Verbosity.DEBUG:
        return ["-X"]
    if verbosity is Verbosity.MUTE:
        return ["-q"]
    return []


def _define(name: str, value: str) -> str:
    return f"-D{name}={value}"


class _MavenArchetypeGenerator(abc.ABC):
    """Shared ``archetype:generate`` invocation.

    Subclasses pick the archetype coordinates and the project
    properties passed to it.
    """

    executable: str = MAVEN_EXECUTABLE

    def _project_properties(self, request: ProjectRequest) -> list[str]:
        return [
            _define("groupId", request.group_id),
            _define("artifactId", request.artifact_id),
            _define("version", request.version),
        ]

    @abc.abstractmethod
    def _archetype_properties(self) -> list[str]:
        """Coordinates of the archetype to generate from."""

    def build_command(self, request: ProjectRequest) -> list[str]:
        return [
            self.executable,
            *maven_verbosity_flags(request.verbosity),
            GENERATE_GOAL,
            *self._project_properties(request),
            *self._archetype_properties(),
            _define("interactiveMode", "false"),
        ]

    def generate(self, request: ProjectRequest) -> int:
        """Run Maven for *request* and return its exit status.

        Raises
        ------
        MavenNotFoundError
            When the executable cannot be started.
        """
        argv = self.build_command(request)
        logger.debug("Running in %s: %s", request.target_directory, shlex.join(argv))
        try:
            completed = subprocess.run(
                argv,
                cwd=str(request.target_directory),
                check=False,
            )
        except OSError as exc:
            raise MavenNotFoundError(
                f"Could not start '{self.executable}': {exc}",
                hint="Check that Maven is installed and on PATH.",
            ) from exc
        return completed.returncode


class MavenQuickstartGenerator(_MavenArchetypeGenerator):
    """Full project tree from ``maven-archetype-quickstart``."""

    def _project_properties(self, request: ProjectRequest) -> list[str]:
        properties = super()._project_properties(request)
        if request.package_name is not None:
            properties.append(_define("package", request.package_name))
        return properties

    def _archetype_properties(self) -> list[str]:
        return [
            _define("archetypeGroupId", QUICKSTART_ARCHETYPE_GROUP_ID),
            _define("archetypeArtifactId", QUICKSTART_ARCHETYPE_ARTIFACT_ID),
            _define("archetypeVersion", QUICKSTART_ARCHETYPE_VERSION),
        ]


class MavenBasePomGenerator(_MavenArchetypeGenerator):
    """A lone ``pom.xml`` from ``pom-root``.  No package, no pinned version."""

    def _archetype_properties(self) -> list[str]:
        return [
            _define("archetypeGroupId", BASE_POM_ARCHETYPE_GROUP_ID),
            _define("archetypeArtifactId", BASE_POM_ARCHETYPE_ARTIFACT_ID),
        ]
