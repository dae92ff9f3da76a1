import logging

from simpleorm.model import Model

logger = logging.getLogger("SimpleORM")


def _resolve_model(target):
    if isinstance(target, str):
        target = Model._registry.get(target)
    if isinstance(target, type) and issubclass(target, Model) and target is not Model:
        return target
    return None


class RelationSchema:
    """A foreign-key link between a child model (many side) and a parent model (one side).

    Invalid arguments do not raise: an unknown model or a non-string key column
    leaves the corresponding field as ``None`` and logs a warning.
    """

    def __init__(self, child_model, foreign_key_column, parent_model, primary_key_column="id"):
        self._child_model = _resolve_model(child_model)
        self._foreign_key_column = foreign_key_column if isinstance(foreign_key_column, str) else None
        self._parent_model = _resolve_model(parent_model)
        self._primary_key_column = primary_key_column if isinstance(primary_key_column, str) else None

        for name, given in (
            ("child_model", child_model),
            ("foreign_key_column", foreign_key_column),
            ("parent_model", parent_model),
            ("primary_key_column", primary_key_column),
        ):
            if getattr(self, name) is None:
                logger.warning(f"RelationSchema: invalid {name} {given!r}, left unset")

    @property
    def child_model(self):
        return self._child_model

    @property
    def foreign_key_column(self):
        return self._foreign_key_column

    @property
    def parent_model(self):
        return self._parent_model

    @property
    def primary_key_column(self):
        return self._primary_key_column

    def bind(self, instance):
        """Capture the key values ``instance`` contributes to one navigation."""
        foreign_key_value = None
        primary_key_value = None
        if self._child_model is not None and isinstance(instance, self._child_model):
            foreign_key_value = instance.data.get(self._foreign_key_column)
        if self._parent_model is not None and isinstance(instance, self._parent_model):
            primary_key_value = instance.data.get(self._primary_key_column)
        return RelationBinding(self, foreign_key_value, primary_key_value)

    def __repr__(self):
        child = getattr(self._child_model, "__name__", None)
        parent = getattr(self._parent_model, "__name__", None)
        return (
            f"<RelationSchema {child}.{self._foreign_key_column} -> "
            f"{parent}.{self._primary_key_column}>"
        )


class RelationBinding:
    """A RelationSchema plus the concrete key values of one traversal."""

    def __init__(self, schema, foreign_key_value=None, primary_key_value=None):
        self.schema = schema
        self.foreign_key_value = foreign_key_value
        self.primary_key_value = primary_key_value

    def __repr__(self):
        return (
            f"<RelationBinding {self.schema!r} fk={self.foreign_key_value!r} "
            f"pk={self.primary_key_value!r}>"
        )
