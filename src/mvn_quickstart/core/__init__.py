"""Core layer — request model, option resolution and generation flow.

Rules
-----
* No imports from ``cli``.
* No subprocess calls; those live in ``infra``.
* No user-facing output.
"""

from mvn_quickstart.core.generate_service import GenerateService
from mvn_quickstart.core.models import ProjectRequest, Verbosity, normalize_package_name
from mvn_quickstart.core.resolver import resolve_request

__all__: list[str] = [
    "GenerateService",
    "ProjectRequest",
    "Verbosity",
    "normalize_package_name",
    "resolve_request",
]
