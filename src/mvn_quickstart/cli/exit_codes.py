"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  A
non-zero Maven status is forwarded as-is and has no constant.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — project generated, user declined, or check passed."""

GENERAL_ERROR: int = 1
"""A known MvnQuickstartError was caught. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

SIGNAL_BASE: int = 128
"""Shell convention: a child killed by signal N reports 128 + N."""


def from_returncode(returncode: int) -> int:
    """Translate a child process status into this process's exit code.

    :mod:`subprocess` reports death by signal N as ``-N``; the shell
    reports it as ``128 + N``.
    """
    if returncode < 0:
        return SIGNAL_BASE - returncode
    return returncode
