import pytest

from tmsadm.models import Operation, Resource
from tmsadm.sql import build_statement, statement_prefix, task_label


@pytest.mark.parametrize(
    "operation, resource, expected",
    [
        (Operation.LIST, Resource.PUBKEY, "SELECT * FROM pubkeys "),
        (Operation.LIST, Resource.CLIENT, "SELECT * FROM clients "),
        (Operation.LIST, Resource.DELEGATION, "SELECT * FROM delegations "),
        (Operation.DELETE, Resource.PUBKEY, "DELETE FROM pubkeys "),
        (Operation.DELETE, Resource.CLIENT, "DELETE FROM clients "),
        (Operation.DELETE, Resource.DELEGATION, "DELETE FROM delegations "),
    ],
)
def test_statement_prefixes(operation, resource, expected):
    assert statement_prefix(operation, resource) == expected
    assert build_statement(operation, resource) == expected


@pytest.mark.parametrize("limit", [0, -1, -100])
def test_non_positive_limit_adds_no_clause(limit):
    sql = build_statement(Operation.LIST, Resource.CLIENT, limit=limit)
    assert "LIMIT" not in sql


@pytest.mark.parametrize("limit", [1, 5, 1000])
def test_positive_limit_appended(limit):
    sql = build_statement(Operation.LIST, Resource.PUBKEY, limit=limit)
    assert sql == f"SELECT * FROM pubkeys  LIMIT {limit}"


def test_where_clause_goes_between_prefix_and_limit():
    sql = build_statement(Operation.DELETE, Resource.DELEGATION, "WHERE tms_user_id = 'bud'", 3)
    assert sql == "DELETE FROM delegations WHERE tms_user_id = 'bud' LIMIT 3"


def test_where_clause_is_not_escaped():
    clause = "WHERE host = 'o''brien' OR 1=1"
    assert build_statement(Operation.LIST, Resource.CLIENT, clause) == "SELECT * FROM clients " + clause


def test_task_label_uses_table_name():
    assert task_label(Operation.LIST, Resource.PUBKEY) == "LIST pubkeys"
    assert task_label(Operation.DELETE, Resource.CLIENT) == "DELETE clients"
