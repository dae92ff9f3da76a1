# SimpleORM - an active record ORM over parameterized SQL
from simpleorm.builder import Direction, QueryBuilder
from simpleorm.collection import Collection
from simpleorm.condition import Condition
from simpleorm.database import DatabaseEngine, MySQLEngine, create_engine, get_engine, set_engine, reset_engine
from simpleorm.model import Model
from simpleorm.query import Query
from simpleorm.relation import RelationBinding, RelationSchema
from simpleorm.settings import Settings, get_settings

__version__ = "0.1.0"
__all__ = [
    "Collection",
    "Condition",
    "DatabaseEngine",
    "Direction",
    "Model",
    "MySQLEngine",
    "Query",
    "QueryBuilder",
    "RelationBinding",
    "RelationSchema",
    "Settings",
    "create_engine",
    "get_engine",
    "get_settings",
    "reset_engine",
    "set_engine",
]
