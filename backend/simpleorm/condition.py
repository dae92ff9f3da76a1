NULL_OPERATORS = {
    "=": "IS",
    "!=": "IS NOT",
    "<>": "IS NOT",
}


class Condition:
    """One comparison term of a WHERE clause.

    A ``None`` value turns ``=`` into ``IS`` and ``!=``/``<>`` into ``IS NOT``
    and renders a literal ``NULL``; such conditions do not bind a parameter.
    So ``Condition("email", None)`` renders ``email IS NULL`` rather than
    ``email IS ?`` with a ``None`` parameter, which MySQL rejects. The
    placeholder count of a rendered clause always equals its parameter count.
    """

    def __init__(self, field, value, operator="="):
        if value is None:
            if operator not in NULL_OPERATORS:
                raise ValueError(f"Operator {operator!r} cannot be compared with NULL")
            operator = NULL_OPERATORS[operator]
        self._field = field
        self._value = value
        self._operator = operator
        self._raw = None

    @classmethod
    def raw(cls, sql):
        """Build a hand-written condition rendered verbatim, with no parameter."""
        if not isinstance(sql, str) or not sql.strip():
            raise ValueError("A raw condition needs a non-empty SQL string")
        condition = cls(None, None)
        condition._raw = sql
        return condition

    @property
    def field(self):
        return self._field

    @property
    def operator(self):
        return self._operator

    @property
    def value(self):
        return self._value

    def get_value(self):
        return self._value

    @property
    def is_raw(self):
        return self._raw is not None

    @property
    def binds(self):
        """Whether the value goes into the bound parameter list."""
        return self._raw is None and self._value is not None

    def render(self):
        if self._raw is not None:
            return self._raw
        if self._value is None:
            return f"{self._field} {self._operator} NULL"
        return f"{self._field} {self._operator} ?"

    def __str__(self):
        return self.render()

    def __repr__(self):
        if self._raw is not None:
            return f"<Condition raw={self._raw!r}>"
        return f"<Condition {self._field} {self._operator} {self._value!r}>"
