"""``mvn-quickstart -c`` — standalone archetype cache check.

Reports whether the local Maven repository holds the archetype cache
and exits without generating anything.
"""

from __future__ import annotations

from mvn_quickstart.cli import exit_codes
from mvn_quickstart.cli.console import console
from mvn_quickstart.infra.maven_detector import check_archetypes_installed


def run_archetype_check() -> int:
    """Report the archetype cache status.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when the cache exists,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    status = check_archetypes_installed()
    if status.found:
        console.print(f"[bold green]Archetypes found:[/bold green] {status.path}")
        return exit_codes.SUCCESS

    console.print(f"[bold red]Archetypes not found:[/bold red] {status.path}")
    return exit_codes.GENERAL_ERROR
