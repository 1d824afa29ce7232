"""Pre-generation summary of the resolved request.

Renders a Rich table listing the coordinates, project type, package
and directory Maven is about to use.  Falls back to plain stderr text
when Rich is not installed.  Nothing is printed in mute mode.
"""

from __future__ import annotations

import sys

from mvn_quickstart.cli.console import console
from mvn_quickstart.core.models import ProjectRequest


def summary_rows(request: ProjectRequest) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs describing *request*.

    The package row appears for standard projects only.
    """
    rows = [
        ("artifactId", request.artifact_id),
        ("groupId", request.group_id),
        ("version", request.version),
        ("type", request.project_type),
    ]
    if not request.is_base_pom and request.package_name is not None:
        rows.append(("package", request.package_name))
    rows.append(("directory", str(request.target_directory)))
    return rows


def _print_plain_summary(rows: list[tuple[str, str]]) -> None:
    """Render the summary without Rich."""
    print("\nProject to generate", file=sys.stderr)
    print("-" * 40, file=sys.stderr)
    for label, value in rows:
        print(f"{label:<12} {value}", file=sys.stderr)
    print(file=sys.stderr)


def print_summary(request: ProjectRequest) -> None:
    """Show the resolved request unless mute mode was requested."""
    if not request.shows_summary:
        return

    rows = summary_rows(request)
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_summary(rows)
        return

    table = Table(
        title="Project to generate",
        show_header=False,
        border_style="dim",
    )
    table.add_column("Field", style="bold cyan", min_width=12)
    table.add_column("Value")
    for label, value in rows:
        table.add_row(label, value)

    console.print()
    console.print(table)
    console.print()
