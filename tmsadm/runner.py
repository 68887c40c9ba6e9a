"""Invoke the sqlite3 command line client."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Tuple

from tmsadm.errors import CommandError
from tmsadm.models import AdminConfig


@dataclass(frozen=True)
class SqliteCommand:
    """One ``sqlite3 [-json] [-header] [-echo] <dbpath> <sql>`` call."""

    program: str
    flags: Tuple[str, ...]
    dbpath: str
    sql: str

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.flags, self.dbpath, self.sql]

    def __str__(self) -> str:
        return shlex.join(self.argv)


def build_command(config: AdminConfig, dbpath: str, sql: str) -> SqliteCommand:
    return SqliteCommand(program=config.sqlite3, flags=config.sqlite_flags, dbpath=dbpath, sql=sql)


def _format_status(returncode: int) -> str:
    if returncode < 0:
        return f"signal {-returncode}"
    return str(returncode)


def unknown_error_message(program: str, returncode: int) -> str:
    return (
        f"Unknown error condition returned by command: {program} "
        f"with exit status: {_format_status(returncode)}"
    )


def run_command(command: SqliteCommand, task: str) -> None:
    """Run ``command`` and raise ``CommandError`` unless it exits with status zero.

    Standard output goes straight to the terminal; standard error is captured
    so it can be reported under the ``task`` prefix. Error output that is not
    valid UTF-8 is reported as an unknown error with the exit status.
    """

    try:
        result = subprocess.run(
            command.argv,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise CommandError(task, str(exc)) from exc

    if result.returncode == 0:
        return

    try:
        stderr = (result.stderr or b"").decode("utf-8").strip()
    except UnicodeDecodeError:
        stderr = ""
    detail = stderr or unknown_error_message(command.program, result.returncode)
    raise CommandError(task, detail, returncode=result.returncode, stderr=stderr or None)
