"""CLI application entry point and command routing for mvn-quickstart.

This module is the **sole error boundary** for the entire application.
It catches :class:`~mvn_quickstart.exceptions.MvnQuickstartError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* The pipeline is strictly linear: resolve → preflight → summary and
  confirmation → generate.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from mvn_quickstart.cli import exit_codes
from mvn_quickstart.cli.console import console, print_error
from mvn_quickstart.cli.logging_config import configure_logging
from mvn_quickstart.constants import DEFAULT_VERSION
from mvn_quickstart.core.generate_service import GenerateService
from mvn_quickstart.core.models import ProjectRequest
from mvn_quickstart.exceptions import (
    ExternalToolError,
    MissingValueError,
    MvnQuickstartError,
    UnknownOptionError,
    UsageError,
)
from mvn_quickstart.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _RaisingArgumentParser(argparse.ArgumentParser):
    """Parser that raises typed usage errors instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        if message.startswith("unrecognized arguments"):
            raise UnknownOptionError(f"Unknown option: {message.split(':', 1)[1].strip()}")
        if "expected one argument" in message:
            raise MissingValueError(f"Missing value: {message}")
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the single-dash, short-flag argument parser.

    ``-h`` prints usage and exits 0 through argparse itself.
    """
    parser = _RaisingArgumentParser(
        prog="mvn-quickstart",
        description="Scaffold a Maven project from the quickstart or base-POM archetype.",
        epilog="When both -m and -D are given, Maven runs with -X.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-a", dest="artifact_id", metavar="ARTIFACT_ID", help="artifactId (required)")
    parser.add_argument("-g", dest="group_id", metavar="GROUP_ID", help="groupId (required)")
    parser.add_argument(
        "-v",
        dest="version",
        metavar="VERSION",
        help=f"project version (default: {DEFAULT_VERSION})",
    )
    parser.add_argument(
        "-p",
        dest="package",
        metavar="PACKAGE",
        help="Java package, defaults to the artifactId (ignored with -b)",
    )
    parser.add_argument("-b", dest="base_pom", action="store_true", help="generate a base POM only")
    parser.add_argument(
        "-d",
        dest="directory",
        metavar="DIR",
        help="target directory, created if missing (default: current directory)",
    )
    parser.add_argument(
        "-q",
        dest="quiet",
        action="store_true",
        help="quiet: skip confirmation, keep summary and Maven output",
    )
    parser.add_argument(
        "-m",
        dest="mute",
        action="store_true",
        help="mute: skip confirmation, hide summary, run Maven with -q",
    )
    parser.add_argument("-D", dest="debug", action="store_true", help="debug: run Maven with -X")
    parser.add_argument(
        "-c",
        dest="check",
        action="store_true",
        help="only check that Maven archetypes are installed, then exit",
    )
    return parser


def _build_check_parser() -> argparse.ArgumentParser:
    """Parser that only looks for ``-c`` (and ``-D``) and ignores the rest.

    ``-c`` is standalone: it must run even when the remaining flags are
    incomplete or unknown.
    """
    parser = _RaisingArgumentParser(add_help=False)
    parser.add_argument("-c", dest="check", action="store_true")
    parser.add_argument("-D", dest="debug", action="store_true")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_generate_service() -> GenerateService:
    from mvn_quickstart.infra.maven_generator import (
        MavenBasePomGenerator,
        MavenQuickstartGenerator,
    )

    return GenerateService(
        standard=MavenQuickstartGenerator(),
        base_pom=MavenBasePomGenerator(),
    )


def _handle_check() -> int:
    """Dispatch the standalone ``-c`` archetype check."""
    from mvn_quickstart.cli.archetype_check import run_archetype_check

    return run_archetype_check()


def _run_preflight() -> None:
    from mvn_quickstart.infra.maven_detector import (
        check_tool_available,
        require_archetypes_installed,
    )

    check_tool_available()
    require_archetypes_installed()


def _handle_generate(request: ProjectRequest) -> int:
    """Preflight, summary, confirmation, then Maven.

    Flow:
    1. Verify Maven, its home variable and the archetype cache.
    2. Print the summary (unless mute).
    3. Ask for confirmation (unless quiet or mute); declining exits 0.
    4. Run the selected generator and forward its status.
    """
    from mvn_quickstart.cli.confirm_prompt import ConfirmState, confirm
    from mvn_quickstart.cli.summary import print_summary

    _run_preflight()
    print_summary(request)

    if confirm(request) is ConfirmState.DECLINED:
        console.print("[yellow]Aborted. Nothing was generated.[/yellow]")
        return exit_codes.SUCCESS

    code = _build_generate_service().generate(request)
    if request.shows_summary:
        console.print(
            f"\n[bold green]Project generated.[/bold green]  "
            f"{request.target_directory / request.artifact_id}"
        )
    return code


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mvn-quickstart CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from mvn_quickstart.core.resolver import resolve_request

    if argv is None:
        argv = sys.argv[1:]

    standalone, _ = _build_check_parser().parse_known_args(argv)
    if standalone.check:
        configure_logging(standalone.debug)
        return _handle_check()

    args = _build_parser().parse_args(argv)
    configure_logging(args.debug)

    request = resolve_request(
        artifact_id=args.artifact_id,
        group_id=args.group_id,
        version=args.version,
        package=args.package,
        base_pom=args.base_pom,
        directory=args.directory,
        quiet=args.quiet,
        mute=args.mute,
        debug=args.debug,
    )
    return _handle_generate(request)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ExternalToolError as exc:
        print_error(exc)
        sys.exit(exit_codes.from_returncode(exc.returncode))
    except MvnQuickstartError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
