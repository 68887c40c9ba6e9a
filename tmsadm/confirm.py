"""Interactive confirmation before destructive deletes."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Optional, TextIO

import typer

from tmsadm.errors import ConfirmationError
from tmsadm.models import AdminConfig, Operation


DELETE_PROMPT = "Delete the records listed above? [y/N]: "


class ConfirmState(str, Enum):
    SKIP = "skip"
    PROMPT = "prompt"


def gate_state(config: AdminConfig) -> ConfirmState:
    if config.operation is Operation.DELETE and config.confirm_delete:
        return ConfirmState.PROMPT
    return ConfirmState.SKIP


def is_affirmative(response: str) -> bool:
    return response.strip().lower().startswith("y")


def read_response(stream: Optional[TextIO] = None) -> str:
    """Read one line; an empty string at end of input."""

    stream = sys.stdin if stream is None else stream
    try:
        return stream.readline()
    except (OSError, ValueError) as exc:
        raise ConfirmationError(f"Unable to read confirmation response: {exc}") from exc


def confirm_delete(
    config: AdminConfig,
    show_rows: Callable[[], None],
    stream: Optional[TextIO] = None,
) -> bool:
    """Return True when the delete described by ``config`` may go ahead.

    When prompting, ``show_rows`` runs first so the operator sees the rows that
    would be removed.
    """

    if gate_state(config) is ConfirmState.SKIP:
        return True

    show_rows()
    typer.echo(DELETE_PROMPT, nl=False)
    return is_affirmative(read_response(stream))
