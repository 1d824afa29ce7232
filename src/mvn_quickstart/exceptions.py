"""Custom exception hierarchy for mvn-quickstart.

All exceptions that cross layer boundaries must inherit from
:class:`MvnQuickstartError`.  Raw OS and subprocess exceptions must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
MvnQuickstartError
├── UsageError
│   ├── MissingRequiredOptionError
│   ├── UnknownOptionError
│   └── MissingValueError
├── PreconditionError
│   ├── MavenNotFoundError
│   ├── MavenHomeNotSetError
│   ├── ArchetypeCacheNotFoundError
│   └── TargetDirectoryError
├── ExternalToolError
└── EnvironmentError
"""

from __future__ import annotations

USAGE_HINT: str = "Run 'mvn-quickstart -h' for usage."


class MvnQuickstartError(Exception):
    """Base exception for all mvn-quickstart errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-line usage ----------------------------------------------------

class UsageError(MvnQuickstartError):
    """Raised when the command line cannot be turned into a request."""

    def __init__(self, message: str, *, hint: str | None = USAGE_HINT) -> None:
        super().__init__(message, hint=hint)


class MissingRequiredOptionError(UsageError):
    """Raised when ``-a`` or ``-g`` is absent or empty."""


class UnknownOptionError(UsageError):
    """Raised for a flag the parser does not recognise."""


class MissingValueError(UsageError):
    """Raised when a flag that takes a value is given none."""


# --- Preconditions ---------------------------------------------------------

class PreconditionError(MvnQuickstartError):
    """Raised when an external requirement of the run is not satisfied."""


class MavenNotFoundError(PreconditionError):
    """Raised when the ``mvn`` executable cannot be located or started."""


class MavenHomeNotSetError(PreconditionError):
    """Raised when the Maven home environment variable is missing."""


class ArchetypeCacheNotFoundError(PreconditionError):
    """Raised when no archetypes are cached in the local repository."""


class TargetDirectoryError(PreconditionError):
    """Raised when the target directory cannot be created."""


# --- External tool ---------------------------------------------------------

class ExternalToolError(MvnQuickstartError):
    """Raised when Maven exits with a non-zero status.

    The CLI boundary exits with :attr:`returncode` verbatim.
    """

    def __init__(self, message: str, *, returncode: int, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.returncode: int = returncode


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MvnQuickstartError):
    """Raised when an optional Python dependency is required but missing."""
