from simpleorm import Model, RelationSchema


class Customer(Model):
    class Meta:
        table_name = "customers"
        columns = ["name", "email"]
        read_only_columns = ["id", "created_at"]
        datetime_columns = ["created_at"]
        default_value_columns = ["created_at"]


class Order(Model):
    class Meta:
        table_name = "orders"
        columns = ["status", "total"]
        read_only_columns = ["id", "customer_id", "created_at"]
        datetime_columns = ["created_at"]
        default_value_columns = ["created_at"]


CUSTOMER_ORDERS = RelationSchema(Order, "customer_id", Customer)

SCHEMA = [
    """CREATE TABLE IF NOT EXISTS customers (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        email TEXT,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )""",
    """CREATE TABLE IF NOT EXISTS orders (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        customer_id INTEGER NOT NULL REFERENCES customers(id),
        status TEXT NOT NULL,
        total INTEGER NOT NULL DEFAULT 0,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )""",
]


def create_tables(engine):
    for statement in SCHEMA:
        engine.execute_write(statement)
