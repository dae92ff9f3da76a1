from simpleorm.builder import Direction
from simpleorm.collection import Collection
from simpleorm.dates import to_display, to_storage
from simpleorm.query import Query
from simpleorm.schema import Schema


class ColumnAccessor:
    """Attribute access for one schema column, routed through Model.get/Model.set."""

    def __init__(self, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance, value):
        instance.set(self.name, value)


class Model:
    """Active record base class.

    Subclasses describe their table in an inner ``Meta``::

        class Order(Model):
            class Meta:
                table_name = "orders"
                columns = ["status", "total"]
                read_only_columns = ["id", "created_at"]
                datetime_columns = ["created_at"]
                default_value_columns = ["created_at"]

    Every column gets an attribute accessor. Read-only columns accept one
    write while they are ``None``; datetime columns are read and written in
    display form (``DD/MM/YYYY HH:MM:SS``) and kept in storage form in ``data``.
    """
    _registry = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        meta_cls = getattr(cls, "Meta", None)
        meta_attrs = {}
        if meta_cls:
            for attr in dir(meta_cls):
                if not attr.startswith('_'):
                    meta_attrs[attr] = getattr(meta_cls, attr)

        cls._schema = Schema(cls, meta_attrs)
        for column in cls._schema.all_columns:
            if column == "data" or hasattr(Model, column):
                raise ValueError(f"Column '{column}' of {cls.__name__} clashes with a Model attribute")
            setattr(cls, column, ColumnAccessor(column))
        Model._registry[cls.__name__] = cls

    def __init__(self, attributes=None):
        self.data = {column: None for column in self._schema.all_columns}
        # Row values are taken as stored, without the setter rules
        for column, value in (attributes or {}).items():
            if self._schema.exists(column):
                self.data[column] = value

    def __repr__(self):
        pk_val = self.data.get(self._schema.primary_key) or "New"
        return f"<{self.__class__.__name__}({self._schema.primary_key}={pk_val})>"

    def get(self, column):
        if not self._schema.exists(column):
            return None
        if self._schema.is_datetime(column):
            return to_display(self.data[column])
        return self.data[column]

    def set(self, column, value):
        schema = self._schema
        if not schema.exists(column):
            return
        if schema.is_writable(column) or (schema.is_read_only(column) and self.data[column] is None):
            if schema.is_datetime(column):
                value = to_storage(value)
            self.data[column] = value

    def attributes_to_dict(self, columns=None):
        return {column: self.get(column) for column in (columns or self._schema.all_columns)}

    @classmethod
    def get_all_columns(cls):
        return list(cls._schema.all_columns)

    @classmethod
    def query(cls, engine=None):
        return Query(cls, engine)

    @classmethod
    def find_by_id(cls, id, engine=None):
        return cls.query(engine).find_by_id(id)

    @classmethod
    def find_where(cls, conditions, page=None, engine=None):
        return cls.query(engine).find_where(conditions, page)

    @classmethod
    def find_first_where(cls, conditions, engine=None):
        return cls.query(engine).find_first_where(conditions)

    @classmethod
    def all(cls, page=None, direction=Direction.DESC, order_column=None, engine=None):
        return cls.query(engine).all(page, direction, order_column)

    @classmethod
    def count(cls, conditions=None, engine=None):
        return cls.query(engine).count(conditions)

    @classmethod
    def total_pages(cls, conditions=None, engine=None):
        return cls.query(engine).total_pages(conditions)

    def save(self, engine=None):
        return self.query(engine).save(self)

    def save_if_not_exists(self, strict=False, engine=None):
        return self.query(engine).save_if_not_exists(self, strict)

    def find_parent(self, relation, conditions=None, engine=None):
        if relation.parent_model is None:
            return None
        return relation.parent_model.query(engine).find_parent(relation.bind(self), conditions)

    def find_children(
        self,
        relation,
        page=None,
        conditions=None,
        direction=Direction.DESC,
        order_column=None,
        group_by=None,
        aggregates=None,
        engine=None,
    ):
        if relation.child_model is None:
            return Collection()
        return relation.child_model.query(engine).find_children(
            relation.bind(self), page, conditions, direction, order_column, group_by, aggregates
        )
