import re

_IDENTIFIER = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')


def _column_list(meta, name):
    value = meta.get(name, ())
    if isinstance(value, str):
        raise ValueError(f"Meta.{name} must be a list of column names, not a string")
    return tuple(value)


class Schema:
    """Table name and column sets of one model class, read from its ``Meta``."""

    def __init__(self, cls, meta_attrs):
        self.cls = cls
        self.meta = meta_attrs or {}

        self.table_name = self.meta.get("table_name", cls.__name__.lower() + "s")
        self.primary_key = self.meta.get("primary_key", "id")
        self.records_per_page = self.meta.get("records_per_page", 10)

        self.columns = _column_list(self.meta, "columns")
        self.read_only_columns = _column_list(self.meta, "read_only_columns")
        if self.primary_key not in self.columns and self.primary_key not in self.read_only_columns:
            self.read_only_columns = (self.primary_key,) + self.read_only_columns
        self.datetime_columns = _column_list(self.meta, "datetime_columns")
        self.default_value_columns = _column_list(self.meta, "default_value_columns")

        self.all_columns = self.columns + tuple(
            c for c in self.read_only_columns if c not in self.columns
        )
        self._validate()

    def __repr__(self):
        return (
            f"<Schema class={self.cls.__name__} table={self.table_name} "
            f"columns=[{', '.join(self.all_columns)}] pk={self.primary_key}>"
        )

    def _validate(self):
        for name in (self.table_name,) + self.all_columns:
            if not isinstance(name, str) or not _IDENTIFIER.match(name):
                raise ValueError(f"Unsafe SQL identifier in {self.cls.__name__}: {name!r}")
        for group in ("datetime_columns", "default_value_columns"):
            unknown = set(getattr(self, group)) - set(self.all_columns)
            if unknown:
                raise ValueError(f"{self.cls.__name__}.Meta.{group} names unknown columns: {sorted(unknown)}")
        if not isinstance(self.records_per_page, int) or self.records_per_page <= 0:
            raise ValueError(f"{self.cls.__name__}.Meta.records_per_page must be a positive int")

    def exists(self, column):
        return isinstance(column, str) and column in self.all_columns

    def is_writable(self, column):
        return column in self.columns

    def is_read_only(self, column):
        return column in self.read_only_columns

    def is_datetime(self, column):
        return column in self.datetime_columns

    def persisted_columns(self, data):
        """Columns written by INSERT/UPDATE for the given field values."""
        read_only = [c for c in self.read_only_columns if c not in self.columns]
        return [
            c for c in read_only + list(self.columns)
            if c != self.primary_key
            and not (c in self.default_value_columns and data.get(c) is None)
        ]
