"""Errors raised by tmsadm components and reported by the CLI entry point."""

from __future__ import annotations

from typing import Optional


class TmsadmError(Exception):
    """Base class for every failure that ends a tmsadm run."""


class DatabaseNotFoundError(TmsadmError):
    """No database file exists at the resolved path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Database file does not exist: {path}")
        self.path = path


class ConfirmationError(TmsadmError):
    """Reading the delete confirmation from standard input failed."""


class CommandError(TmsadmError):
    """The sqlite3 client could not be started or exited with a non-zero status."""

    def __init__(
        self,
        task: str,
        detail: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        super().__init__(f"{task}: {detail}")
        self.task = task
        self.detail = detail
        self.returncode = returncode
        self.stderr = stderr
