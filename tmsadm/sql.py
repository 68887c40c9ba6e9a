"""SQL statement construction.

Statements are plain string concatenation. The WHERE clause is operator input
that is used verbatim: no escaping or parameterization happens here, since the
tool is only available to administrators with shell access to the server.
"""

from __future__ import annotations

from typing import Optional

from tmsadm.models import Operation, Resource


def statement_prefix(operation: Operation, resource: Resource) -> str:
    if operation is Operation.LIST:
        return f"SELECT * FROM {resource.table} "
    return f"DELETE FROM {resource.table} "


def build_statement(
    operation: Operation,
    resource: Resource,
    sqlwhere: Optional[str] = None,
    limit: int = 0,
) -> str:
    """Return the statement for ``operation`` on ``resource``.

    ``sqlwhere`` should start with ``WHERE`` and is appended as given. A limit
    of zero or less means no ``LIMIT`` clause.
    """

    sql = statement_prefix(operation, resource)
    if sqlwhere:
        sql += sqlwhere
    if limit > 0:
        sql += f" LIMIT {limit}"
    return sql


def task_label(operation: Operation, resource: Resource) -> str:
    return f"{operation.value} {resource.table}"
