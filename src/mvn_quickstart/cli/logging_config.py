"""Root logger setup for a single CLI run.

Library modules only call ``logging.getLogger(__name__)``; this is the
one place that attaches a handler.  ``-D`` lowers the level to
``DEBUG`` so the resolved request, preflight results and the Maven
command line are shown.
"""

from __future__ import annotations

import logging
import sys

from mvn_quickstart.cli.console import get_rich_console

PLAIN_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """``RichHandler`` on stderr, or a plain stream handler without Rich."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return handler
    return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(debug: bool) -> None:
    """Replace any root handlers; ``DEBUG`` when *debug*, else ``WARNING``."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, handlers=[_build_handler()], format="%(message)s", force=True)
