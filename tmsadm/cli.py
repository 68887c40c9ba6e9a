"""Command-line interface built with Typer."""

from __future__ import annotations

from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tmsadm.errors import TmsadmError
from tmsadm.models import DEFAULT_DB_PATH, TMSADM_INFO, AdminConfig, Operation, Resource
from tmsadm.operations import execute
from tmsadm.runner import SqliteCommand


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
)


def _config_table(config: AdminConfig) -> Table:
    table = Table(title="Command line arguments", box=box.MINIMAL_DOUBLE_HEAD, show_lines=False)
    table.add_column("Argument", style="bold")
    table.add_column("Value")
    for name, value in config.as_dict().items():
        table.add_row(name, escape(repr(value)))
    return table


@app.command(help=TMSADM_INFO)
def tmsadm_command(
    operation: Operation = typer.Option(
        ...,
        "--operation",
        "-o",
        case_sensitive=False,
        help="Specify the operation to carry out.",
    ),
    resource: Resource = typer.Option(
        ...,
        "--resource",
        "-r",
        case_sensitive=False,
        help="Specify the resource type to which the operation will be applied.",
    ),
    dbpath: str = typer.Option(
        DEFAULT_DB_PATH,
        "--dbpath",
        "-d",
        help="Path to TMS database file.",
        show_default=True,
    ),
    json_off: bool = typer.Option(
        False,
        "--json-off",
        "-j",
        help="Turn off JSON formatting (JSON is on by default).",
    ),
    echo_off: bool = typer.Option(
        False,
        "--echo-off",
        "-e",
        help="Do not echo the SQL command in the output (echo is on by default).",
    ),
    header_off: bool = typer.Option(
        False,
        "--header-off",
        "-h",
        help="Omit SQL column headings when using non-JSON format (headings are on by default).",
    ),
    limit: int = typer.Option(
        0,
        "--limit",
        "-l",
        help="Limit the number of records returned. 0 means no limit.",
        show_default=True,
    ),
    confirm_delete_off: bool = typer.Option(
        False,
        "--confirm-delete-off",
        help="Delete without listing the affected records and asking for confirmation.",
    ),
    sqlwhere: Optional[str] = typer.Option(
        None,
        "--sqlwhere",
        "-s",
        help=(
            "SQL WHERE clause added to the statement exactly as given. It must start with "
            "the word WHERE, e.g. \"WHERE tms_user_id = 'bud' and host = 'example.com'\". "
            "Use LIST with --limit 1 to discover the columns of a resource."
        ),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print the parsed arguments and each sqlite3 command on stderr.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help=(
            "Print the sqlite3 commands without running them. A DELETE prints its LIST "
            "preview and the delete statement, and never prompts for confirmation."
        ),
    ),
) -> None:
    """List or delete records in the TMS Server database via sqlite3."""

    err_console = Console(stderr=True, soft_wrap=True)
    config = AdminConfig(
        operation=operation,
        resource=resource,
        dbpath=dbpath,
        json_off=json_off,
        echo_off=echo_off,
        header_off=header_off,
        limit=limit,
        confirm_delete_off=confirm_delete_off,
        sqlwhere=sqlwhere,
    )

    if verbose:
        err_console.print(_config_table(config))

    def announce(command: SqliteCommand, task: str) -> None:
        if dry_run:
            typer.echo(str(command))
        elif verbose:
            err_console.print(f"[dim]{escape(task)}:[/dim] {escape(str(command))}")

    try:
        completed = execute(config, dry_run=dry_run, announce=announce)
    except TmsadmError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if not completed:
        typer.echo("Delete cancelled.")


def run() -> None:
    """Run the CLI."""

    app()


if __name__ == "__main__":
    run()
