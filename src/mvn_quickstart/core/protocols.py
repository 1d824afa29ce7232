"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the generation flow can be exercised without a
Maven installation.
"""

from __future__ import annotations

from typing import Protocol

from mvn_quickstart.core.models import ProjectRequest


class ProjectGenerator(Protocol):
    """Contract for project generation backends.

    Any object that implements :meth:`build_command` and :meth:`generate`
    with the correct signatures satisfies this protocol structurally (no
    explicit inheritance required).
    """

    def build_command(self, request: ProjectRequest) -> list[str]:
        """Return the full argument vector that would generate *request*."""
        ...  # pragma: no cover

    def generate(self, request: ProjectRequest) -> int:
        """Generate the project described by *request*.

        Blocks until the backend finishes and returns its exit status.

        Raises
        ------
        MavenNotFoundError
            When the backend executable cannot be started.
        """
        ...  # pragma: no cover
