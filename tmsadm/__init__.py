"""Administrative access to the TMS Server database through sqlite3."""

from .errors import (  # noqa: F401
    CommandError,
    ConfirmationError,
    DatabaseNotFoundError,
    TmsadmError,
)
from .models import (  # noqa: F401
    DEFAULT_DB_PATH,
    SQLITE3,
    AdminConfig,
    Operation,
    Resource,
)
from .operations import execute  # noqa: F401
from .paths import check_db_file, get_absolute_path  # noqa: F401
from .sql import build_statement  # noqa: F401
from .cli import app, run  # noqa: F401

__all__ = [
    "CommandError",
    "ConfirmationError",
    "DatabaseNotFoundError",
    "TmsadmError",
    "DEFAULT_DB_PATH",
    "SQLITE3",
    "AdminConfig",
    "Operation",
    "Resource",
    "execute",
    "check_db_file",
    "get_absolute_path",
    "build_statement",
    "app",
    "run",
]
