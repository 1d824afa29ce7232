"""Allow ``python -m mvn_quickstart`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mvn_quickstart`` behaves identically to the
``mvn-quickstart`` console script.
"""

from __future__ import annotations

from mvn_quickstart.cli.app import cli

if __name__ == "__main__":
    cli()
