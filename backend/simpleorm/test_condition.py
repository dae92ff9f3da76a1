import pytest

from simpleorm.builder import QueryBuilder
from simpleorm.condition import Condition


@pytest.mark.parametrize("value", [0, 1, "open", 2.5, "", False])
def test_equality_renders_placeholder(value):
    condition = Condition("status", value)
    assert condition.render() == "status = ?"
    assert str(condition) == "status = ?"
    assert condition.get_value() is value
    assert condition.binds


def test_operator_is_used_verbatim():
    assert Condition("total", 10, ">=").render() == "total >= ?"
    assert Condition("name", "A%", "LIKE").render() == "name LIKE ?"


@pytest.mark.parametrize("operator, expected", [("=", "IS"), ("!=", "IS NOT"), ("<>", "IS NOT")])
def test_null_value_rewrites_operator(operator, expected):
    condition = Condition("status", None, operator)
    assert condition.operator == expected
    assert condition.render() == f"status {expected} NULL"
    assert condition.get_value() is None
    assert not condition.binds


def test_null_value_with_ordering_operator_is_rejected():
    with pytest.raises(ValueError):
        Condition("total", None, ">")


def test_null_conditions_are_left_out_of_parameters():
    sql, params = QueryBuilder().build_conditions([
        Condition("status", None),
        Condition("total", 10, ">"),
        Condition("customer_id", None, "!="),
    ])
    assert sql == "status IS NULL AND total > ? AND customer_id IS NOT NULL"
    assert params == [10]
    assert sql.count("?") == len(params)


def test_raw_condition_is_rendered_verbatim():
    condition = Condition.raw("total BETWEEN 5 AND 10")
    assert condition.is_raw
    assert condition.render() == "total BETWEEN 5 AND 10"
    assert not condition.binds


@pytest.mark.parametrize("sql", ["", "   ", None, 42])
def test_raw_condition_needs_sql_text(sql):
    with pytest.raises(ValueError):
        Condition.raw(sql)
