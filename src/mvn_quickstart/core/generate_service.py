"""Core generation service — picks a generator and runs it.

This service delegates the actual Maven invocation to a
:class:`~mvn_quickstart.core.protocols.ProjectGenerator` injected at
construction time.  It is responsible for:

* Choosing the quickstart or base-POM generator.
* Turning a non-zero exit status into :class:`ExternalToolError`.

Guarantees
----------
* Pure orchestration: no subprocess, no ``print()``.
"""

from __future__ import annotations

import logging

from mvn_quickstart.core.models import ProjectRequest
from mvn_quickstart.core.protocols import ProjectGenerator
from mvn_quickstart.exceptions import ExternalToolError

logger = logging.getLogger(__name__)


class GenerateService:
    """Stateless service that drives project generation.

    Parameters
    ----------
    standard:
        Generator used for regular quickstart projects.
    base_pom:
        Generator used when the request asks for a base POM.
    """

    def __init__(self, standard: ProjectGenerator, base_pom: ProjectGenerator) -> None:
        self._standard: ProjectGenerator = standard
        self._base_pom: ProjectGenerator = base_pom

    def generator_for(self, request: ProjectRequest) -> ProjectGenerator:
        return self._base_pom if request.is_base_pom else self._standard

    def generate(self, request: ProjectRequest) -> int:
        """Generate *request* and return the backend's exit status.

        Raises
        ------
        ExternalToolError
            When the backend exits with a non-zero status.  The status
            is carried unchanged in ``returncode``.
        """
        returncode = self.generator_for(request).generate(request)
        logger.debug("Generator exited with status %d", returncode)
        if returncode != 0:
            if returncode < 0:
                message = f"Maven was killed by signal {-returncode}."
            else:
                message = f"Maven exited with status {returncode}."
            raise ExternalToolError(
                message,
                returncode=returncode,
                hint="Re-run with -D to see Maven's debug output.",
            )
        return returncode
