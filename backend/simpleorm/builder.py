import re
from enum import Enum

from simpleorm.condition import Condition
from simpleorm.paging import clamp_page, page_offset


class Direction(Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown order direction: {value!r}")


class QueryBuilder:
    """Composes SQL fragments with ``?`` placeholders.

    Identifiers are checked against a safe pattern and emitted unquoted so the
    same statements run on MySQL and SQLite.
    """

    def __init__(self):
        self._safe_ident_pattern = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')

    def _check(self, identifier):
        if not identifier or not self._safe_ident_pattern.match(str(identifier)):
            raise ValueError(f"Unsafe SQL identifier: {identifier}")
        return identifier

    def build_conditions(self, conditions):
        """Join conditions with AND. Returns (sql, params) without the WHERE keyword."""
        conditions = list(conditions or [])
        for condition in conditions:
            if not isinstance(condition, Condition):
                raise TypeError(f"Expected a Condition, got {type(condition).__name__}")
            if not condition.is_raw:
                self._check(condition.field)
        sql = " AND ".join(c.render() for c in conditions)
        params = [c.value for c in conditions if c.binds]
        return sql, params

    def build_where(self, conditions):
        sql, params = self.build_conditions(conditions)
        return (f"WHERE {sql}" if sql else ""), params

    def build_order_by(self, direction, column):
        direction = Direction.parse(direction)
        return f"ORDER BY {self._check(column)} {direction.value}"

    def build_group_by(self, columns):
        columns = list(columns or [])
        if not columns:
            return ""
        return "GROUP BY " + ", ".join(self._check(c) for c in columns)

    def build_projection(self, group_by=None, aggregates=None):
        """Select list for grouped queries: group columns, then aggregate columns."""
        group_by = list(group_by or [])
        aggregates = dict(aggregates or {})
        if not group_by and not aggregates:
            return "*"

        selected = group_by + [c for c in aggregates if c not in group_by]
        parts = []
        for column in selected:
            column = self._check(column)
            if column in aggregates:
                func = self._check(aggregates[column])
                parts.append(f"{func}({column}) AS {column}")
            else:
                parts.append(column)
        return ", ".join(parts)

    def build_limit(self, page, per_page, pages):
        page = clamp_page(page, pages)
        return f"LIMIT {page_offset(page, per_page)}, {int(per_page)}"

    def build_select(self, table_name, where="", group_by="", order_by="", limit="", projection="*"):
        parts = [f"SELECT {projection} FROM {self._check(table_name)}", where, group_by, order_by, limit]
        return " ".join(p for p in parts if p)

    def build_count(self, table_name, where="", group_by=""):
        """Count matching rows, or matching groups when a GROUP BY clause is given."""
        table = self._check(table_name)
        if group_by:
            grouped = " ".join(p for p in [f"SELECT 1 FROM {table}", where, group_by] if p)
            return f"SELECT count(1) FROM ({grouped}) AS grouped"
        return " ".join(p for p in [f"SELECT count(1) FROM {table}", where] if p)

    def build_insert(self, table_name, data, empty_values="DEFAULT VALUES"):
        table = self._check(table_name)
        if not data:
            return f"INSERT INTO {table} {empty_values}", ()
        fields = [self._check(f) for f in data]
        placeholders = ", ".join(["?" for _ in fields])
        sql = f"INSERT INTO {table} ({', '.join(fields)}) VALUES ({placeholders})"
        return sql, tuple(data.values())

    def build_update(self, table_name, data, pk_column, pk_value):
        if pk_value is None:
            raise ValueError("UPDATE needs a primary key value for its WHERE clause")
        table = self._check(table_name)
        set_parts = [f"{self._check(col)} = ?" for col in data]
        params = list(data.values()) + [pk_value]
        sql = f"UPDATE {table} SET {', '.join(set_parts)} WHERE {self._check(pk_column)} = ?"
        return sql, tuple(params)
