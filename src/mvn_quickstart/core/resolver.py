"""Option resolution — parsed flag values to a :class:`ProjectRequest`.

The argument parser itself lives in the CLI layer; this module only
validates the values it produced, applies defaults and derives the
package name and target directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mvn_quickstart.constants import DEFAULT_VERSION
from mvn_quickstart.core.models import ProjectRequest, normalize_package_name
from mvn_quickstart.exceptions import MissingRequiredOptionError, TargetDirectoryError

logger = logging.getLogger(__name__)


def resolve_directory(directory: str | Path | None) -> Path:
    """Return the absolute directory Maven should run in.

    A supplied directory is created together with any missing
    ancestors.  Without one, the current working directory is used.

    Raises
    ------
    TargetDirectoryError
        When the path exists as a file or cannot be created.
    """
    if directory is None:
        return Path.cwd()
    path = Path(directory).expanduser().resolve()
    if not path.is_dir():
        logger.debug("Creating target directory %s", path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TargetDirectoryError(
            f"Cannot use {path} as the target directory: {exc.strerror or exc}",
            hint="Pass -d a directory you can write to, or a path that does not exist yet.",
        ) from exc
    return path


def resolve_request(
    *,
    artifact_id: str | None,
    group_id: str | None,
    version: str | None = None,
    package: str | None = None,
    base_pom: bool = False,
    directory: str | Path | None = None,
    quiet: bool = False,
    mute: bool = False,
    debug: bool = False,
) -> ProjectRequest:
    """Validate raw option values and build the request.

    Raises
    ------
    MissingRequiredOptionError
        When artifactId or groupId is missing or empty.  Nothing is
        created on disk in that case.
    """
    if not artifact_id or not group_id:
        missing = [
            flag
            for flag, value in (("-a (artifactId)", artifact_id), ("-g (groupId)", group_id))
            if not value
        ]
        raise MissingRequiredOptionError(
            f"Missing required option(s): {', '.join(missing)}.",
        )

    package_name: str | None = None
    if not base_pom:
        package_name = normalize_package_name(package or artifact_id)

    request = ProjectRequest(
        artifact_id=artifact_id,
        group_id=group_id,
        version=version or DEFAULT_VERSION,
        package_name=package_name,
        is_base_pom=base_pom,
        target_directory=resolve_directory(directory),
        quiet=quiet,
        mute=mute,
        debug=debug,
    )
    logger.debug("Resolved request: %s", request)
    return request
