"""Interactive yes/no confirmation before Maven runs.

A read-validate-retry loop: ``y``/``Y`` confirms, ``n``/``N`` declines,
anything else prints a reminder and asks again.  Quiet and mute modes
skip the prompt and confirm unconditionally.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from mvn_quickstart.cli.console import console
from mvn_quickstart.core.models import ProjectRequest
from mvn_quickstart.exceptions import EnvironmentError

PROMPT: str = "Generate this project? [y/n]"
REMINDER: str = "Please answer 'y' to continue or 'n' to abort."


class ConfirmState(enum.Enum):
    """Terminal states of the confirmation loop."""

    CONFIRMED = "confirmed"
    DECLINED = "declined"


_ANSWERS: dict[str, ConfirmState] = {
    "y": ConfirmState.CONFIRMED,
    "Y": ConfirmState.CONFIRMED,
    "n": ConfirmState.DECLINED,
    "N": ConfirmState.DECLINED,
}


def _import_questionary() -> Any:
    """Import questionary lazily for the confirmation prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask_answer() -> str | None:
    """Read one answer.  ``None`` when the prompt was cancelled."""
    questionary = _import_questionary()
    answer: str | None = questionary.text(PROMPT).ask()
    return answer


def parse_answer(answer: str) -> ConfirmState | None:
    """Map one answer to a terminal state, or ``None`` to ask again."""
    return _ANSWERS.get(answer.strip())


def confirm(
    request: ProjectRequest,
    *,
    ask: Callable[[], str | None] | None = None,
) -> ConfirmState:
    """Ask until the user answers ``y`` or ``n``.

    Parameters
    ----------
    request:
        The resolved request; quiet and mute skip the prompt.
    ask:
        Answer source.  Defaults to a questionary text prompt.

    Raises
    ------
    KeyboardInterrupt
        If the user cancels the prompt (Ctrl+C).
    """
    if not request.asks_confirmation:
        return ConfirmState.CONFIRMED

    read = ask if ask is not None else _ask_answer
    while True:
        answer = read()
        if answer is None:
            raise KeyboardInterrupt
        state = parse_answer(answer)
        if state is not None:
            return state
        console.print(f"[yellow]{REMINDER}[/yellow]")
