"""Dispatch of (operation, resource) pairs to sqlite3 invocations."""

from __future__ import annotations

from typing import Callable, Optional, TextIO

from tmsadm.confirm import confirm_delete
from tmsadm.models import AdminConfig, Operation
from tmsadm.paths import check_db_file
from tmsadm.runner import SqliteCommand, build_command, run_command
from tmsadm.sql import build_statement, task_label


Announce = Callable[[SqliteCommand, str], None]


def _run(command: SqliteCommand, task: str, dry_run: bool, announce: Optional[Announce]) -> None:
    if announce is not None:
        announce(command, task)
    if not dry_run:
        run_command(command, task)


def process_list(
    config: AdminConfig,
    dbpath: str,
    *,
    dry_run: bool = False,
    announce: Optional[Announce] = None,
) -> None:
    sql = build_statement(Operation.LIST, config.resource, config.sqlwhere, config.limit)
    command = build_command(config, dbpath, sql)
    _run(command, task_label(Operation.LIST, config.resource), dry_run, announce)


def process_delete(
    config: AdminConfig,
    dbpath: str,
    *,
    dry_run: bool = False,
    announce: Optional[Announce] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """Delete matching rows, returning False when the operator declined."""

    sql = build_statement(Operation.DELETE, config.resource, config.sqlwhere, config.limit)
    command = build_command(config, dbpath, sql)
    task = task_label(Operation.DELETE, config.resource)

    if dry_run:
        if config.confirm_delete:
            process_list(config, dbpath, dry_run=True, announce=announce)
        _run(command, task, True, announce)
        return True

    def show_rows() -> None:
        process_list(config, dbpath, announce=announce)

    if not confirm_delete(config, show_rows, stream=stream):
        return False

    _run(command, task, False, announce)
    return True


def execute(
    config: AdminConfig,
    *,
    dry_run: bool = False,
    announce: Optional[Announce] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """Carry out the requested operation.

    Returns False only for a declined delete. Errors surface as ``TmsadmError``.
    """

    dbpath = check_db_file(config.dbpath)
    if config.operation is Operation.LIST:
        process_list(config, dbpath, dry_run=dry_run, announce=announce)
        return True
    return process_delete(config, dbpath, dry_run=dry_run, announce=announce, stream=stream)
