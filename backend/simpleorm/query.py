from simpleorm.builder import Direction, QueryBuilder
from simpleorm.collection import Collection
from simpleorm.condition import Condition
from simpleorm.dates import storage_value
from simpleorm.database import get_engine
from simpleorm.paging import total_pages


class Query:
    """Finders and persistence for one model class, run against one engine."""

    def __init__(self, model_class, engine=None):
        self.model_class = model_class
        self.schema = model_class._schema
        self.engine = engine if engine is not None else get_engine()
        self.builder = QueryBuilder()

    def _hydrate(self, row):
        return self.model_class(row)

    def _fetch(self, sql, params, streamed, empty=None):
        """Run a SELECT and shape the result: ``empty``, one model, or a Collection."""
        if streamed:
            rows = self.engine.fetch_iter(sql, params)
        else:
            rows = self.engine.execute(sql, params)
        models = Collection(self._hydrate(row) for row in rows)
        if len(models) == 0:
            return empty
        if len(models) == 1:
            return models.first()
        return models

    def _count(self, where="", params=None, group_by=""):
        sql = self.builder.build_count(self.schema.table_name, where, group_by)
        return int(self.engine.fetch_value(sql, params or []) or 0)

    def _limit(self, page, where="", params=None, group_by=""):
        if page is None:
            return ""
        pages = total_pages(self._count(where, params, group_by), self.schema.records_per_page)
        return self.builder.build_limit(page, self.schema.records_per_page, pages)

    def count(self, conditions=None):
        where, params = self.builder.build_where(conditions)
        return self._count(where, params)

    def total_pages(self, conditions=None):
        return total_pages(self.count(conditions), self.schema.records_per_page)

    def find_by_id(self, id):
        if not isinstance(id, int) or isinstance(id, bool):
            return None
        where, params = self.builder.build_where([Condition(self.schema.primary_key, id)])
        sql = self.builder.build_select(self.schema.table_name, where=where)
        rows = self.engine.execute(sql, params)
        if not rows:
            return None
        return self._hydrate(rows[0])

    def find_where(self, conditions, page=None):
        where, params = self.builder.build_where(conditions)
        limit = self._limit(page, where, params)
        sql = self.builder.build_select(self.schema.table_name, where=where, limit=limit)
        return self._fetch(sql, params, streamed=not limit)

    def find_first_where(self, conditions):
        result = self.find_where(conditions, page=1)
        if isinstance(result, Collection):
            return result.first()
        return result

    def all(self, page=None, direction=Direction.DESC, order_column=None):
        order_by = self.builder.build_order_by(direction, order_column or self.schema.primary_key)
        limit = self._limit(page)
        sql = self.builder.build_select(self.schema.table_name, order_by=order_by, limit=limit)
        result = self._fetch(sql, [], streamed=not limit)
        if result is None or isinstance(result, Collection):
            return result
        return Collection([result])

    def find_parent(self, binding, conditions=None):
        """Load the parent side of ``binding`` from this query's (parent) model."""
        pk_column = binding.schema.primary_key_column
        if pk_column is None:
            return None
        constraint = Condition(pk_column, binding.foreign_key_value)
        if conditions:
            return self.find_where([constraint] + list(conditions))
        if pk_column == self.schema.primary_key:
            return self.find_by_id(binding.foreign_key_value)
        return self.find_first_where([constraint])

    def find_children(
        self,
        binding,
        page=None,
        conditions=None,
        direction=Direction.DESC,
        order_column=None,
        group_by=None,
        aggregates=None,
    ):
        """Load the child rows of ``binding`` from this query's (child) model."""
        fk_column = binding.schema.foreign_key_column
        if fk_column is None or binding.primary_key_value is None:
            return Collection()

        where, params = self.builder.build_where(
            [Condition(fk_column, binding.primary_key_value)] + list(conditions or [])
        )
        group_by = list(group_by or [])
        group_by_sql = self.builder.build_group_by(group_by)
        if order_column is None:
            order_column = group_by[0] if group_by else self.schema.primary_key

        sql = self.builder.build_select(
            self.schema.table_name,
            projection=self.builder.build_projection(group_by, aggregates),
            where=where,
            group_by=group_by_sql,
            order_by=self.builder.build_order_by(direction, order_column),
            limit=self._limit(page, where, params, group_by_sql),
        )
        return self._fetch(sql, params, streamed=page is None, empty=Collection())

    def _values(self, instance, columns):
        return {c: storage_value(instance.data.get(c)) for c in columns}

    def save(self, instance):
        pk = self.schema.primary_key
        data = self._values(instance, self.schema.persisted_columns(instance.data))
        if instance.data.get(pk):
            sql, params = self.builder.build_update(self.schema.table_name, data, pk, instance.data[pk])
            return self.engine.execute_write(sql, params) > 0

        sql, params = self.builder.build_insert(self.schema.table_name, data, self.engine.empty_insert_values)
        new_id = self.engine.execute_insert(sql, params)
        if new_id:
            instance.data[pk] = int(new_id)
        return bool(instance.data.get(pk))

    def save_if_not_exists(self, instance, strict=False):
        conditions = [
            Condition(column, storage_value(instance.data.get(column)))
            for column in self.schema.all_columns
            if strict or instance.data.get(column) is not None
        ]
        existing = self.find_first_where(conditions)
        if existing is not None:
            return existing
        self.save(instance)
        return instance
