"""Database path handling."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping, Optional

from tmsadm.errors import DatabaseNotFoundError


_ENV_REFERENCE = re.compile(
    r"\$(?:\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
    r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*))"
)


def expand_path(path: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Substitute ``$VAR``/``${VAR}``/``${VAR:-default}`` references, then a leading ``~``.

    Variables go first so a value that itself starts with ``~`` is expanded too.
    Raises ``KeyError`` when a referenced variable without a default is not defined.
    """

    env = os.environ if environ is None else environ

    def _substitute(match: re.Match[str]) -> str:
        if match.group("name") is not None:
            return env[match.group("name")]
        name = match.group("braced")
        default = match.group("default")
        if default is None:
            return env[name]
        # ":-" also covers a variable that is set but empty.
        return env.get(name) or default

    expanded = _ENV_REFERENCE.sub(_substitute, path)
    return os.path.expanduser(expanded)


def get_absolute_path(path: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace environment variable values and tilde, then absolutize.

    Unlike ``Path.resolve`` this neither requires the file to exist nor follows
    symlinks. On any failure the original string is returned untouched.
    """

    try:
        expanded = expand_path(path, environ)
    except KeyError:
        return path

    try:
        return os.path.abspath(expanded)
    except (OSError, ValueError):
        return path


def check_db_file(dbpath: str) -> str:
    """Return the resolved database path, or raise if there is no file there.

    sqlite3 silently creates a missing database, so this runs before any
    client invocation.
    """

    resolved = get_absolute_path(dbpath)
    if not Path(resolved).is_file():
        raise DatabaseNotFoundError(resolved)
    return resolved
