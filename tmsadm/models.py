"""Configuration values and enumerations shared by the tmsadm commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


TMSADM_INFO = (
    "The tmsadm program provides administrative access to the TMS Server's Sqlite "
    "database from the command line. Access to this program should be limited to "
    "those that can logon to the TMS Server machine. Administrators can list or "
    "delete records from several database tables. The sqlite3 program must be on "
    "the PATH for execution to succeed."
)

# sqlite3 creates FILENAME when it does not exist, so callers check first.
SQLITE3 = "sqlite3"
DEFAULT_DB_PATH = "~/.tms/database/tms.db"


class Operation(str, Enum):
    LIST = "LIST"
    DELETE = "DELETE"


class Resource(str, Enum):
    PUBKEY = "pubkey"
    CLIENT = "client"
    DELEGATION = "delegation"

    @property
    def table(self) -> str:
        return TABLES[self]


TABLES = {
    Resource.PUBKEY: "pubkeys",
    Resource.CLIENT: "clients",
    Resource.DELEGATION: "delegations",
}


@dataclass(frozen=True)
class AdminConfig:
    """Parsed command line arguments.

    The boolean switches keep the "off" naming of the command line, so every
    output feature is on unless its switch was given.
    """

    operation: Operation
    resource: Resource
    dbpath: str = DEFAULT_DB_PATH
    json_off: bool = False
    echo_off: bool = False
    header_off: bool = False
    limit: int = 0
    confirm_delete_off: bool = False
    sqlwhere: Optional[str] = None
    sqlite3: str = SQLITE3

    @property
    def json(self) -> bool:
        return not self.json_off

    @property
    def header(self) -> bool:
        return not self.header_off

    @property
    def echo(self) -> bool:
        return not self.echo_off

    @property
    def confirm_delete(self) -> bool:
        return not self.confirm_delete_off

    @property
    def sqlite_flags(self) -> Tuple[str, ...]:
        flags = []
        if self.json:
            flags.append("-json")
        if self.header:
            flags.append("-header")
        if self.echo:
            flags.append("-echo")
        return tuple(flags)

    def as_dict(self) -> dict[str, object]:
        return {
            "operation": self.operation.value,
            "resource": self.resource.value,
            "dbpath": self.dbpath,
            "json_off": self.json_off,
            "echo_off": self.echo_off,
            "header_off": self.header_off,
            "limit": self.limit,
            "confirm_delete_off": self.confirm_delete_off,
            "sqlwhere": self.sqlwhere,
        }
