import re
import sqlite3
import logging

from simpleorm.settings import get_settings


class DatabaseEngine:
    """Executes parameterized statements against a SQLite database.

    Statements use ``?`` placeholders. The connection runs in autocommit mode:
    this layer never opens transactions.
    """
    logger = logging.getLogger("SimpleORM")
    empty_insert_values = "DEFAULT VALUES"

    def __init__(self, db_path=":memory:"):
        self.connection = sqlite3.connect(db_path, isolation_level=None, check_same_thread=False)
        self.connection.row_factory = sqlite3.Row

    def _log(self, sql, params=None):
        msg = f"[SQL EXECUTE]: {sql}"
        if params:
            msg += f" | [PARAMS]: {params}"
        self.logger.info(msg)

    def _prepare(self, sql):
        return sql

    def _cursor(self):
        return self.connection.cursor()

    def _run(self, sql, params=None):
        self._log(sql, params)
        cursor = self._cursor()
        cursor.execute(self._prepare(sql), tuple(params or ()))
        return cursor

    def _as_dict(self, row):
        return dict(row)

    def execute(self, sql, params=None):
        cursor = self._run(sql, params)
        try:
            return [self._as_dict(row) for row in cursor.fetchall()]
        finally:
            cursor.close()

    def fetch_iter(self, sql, params=None):
        """Yield result rows one at a time instead of materializing them."""
        cursor = self._run(sql, params)
        try:
            row = cursor.fetchone()
            while row is not None:
                yield self._as_dict(row)
                row = cursor.fetchone()
        finally:
            cursor.close()

    def fetch_value(self, sql, params=None):
        cursor = self._run(sql, params)
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        if row is None:
            return None
        return list(self._as_dict(row).values())[0]

    def execute_write(self, sql, params=None):
        cursor = self._run(sql, params)
        try:
            return cursor.rowcount
        finally:
            cursor.close()

    def execute_insert(self, sql, params=None):
        cursor = self._run(sql, params)
        try:
            return cursor.lastrowid
        finally:
            cursor.close()

    def close(self):
        self.connection.close()


class MySQLEngine(DatabaseEngine):
    """Same contract as DatabaseEngine, backed by ``mysql-connector-python``.

    ``?`` placeholders are rewritten to the driver's ``%s`` format style.
    Question marks inside quoted literals and backquoted names are left alone.
    """
    empty_insert_values = "() VALUES ()"
    _placeholder_pattern = re.compile(
        r"('(?:[^'\\]|\\.|'')*'|\"(?:[^\"\\]|\\.|\"\")*\"|`[^`]*`)|\?"
    )

    def __init__(self, host="localhost", port=3306, database="", username=None, password=None):
        try:
            import mysql.connector
            from mysql.connector.constants import ClientFlag
        except ImportError:
            raise RuntimeError(
                "mysql-connector-python is required for MySQL. "
                "Install with: pip install simpleorm[mysql]"
            ) from None

        # FOUND_ROWS makes UPDATE report matched rows rather than changed rows
        self.connection = mysql.connector.connect(
            host=host,
            port=port,
            database=database,
            user=username,
            password=password,
            autocommit=True,
            client_flags=[ClientFlag.FOUND_ROWS],
        )

    def _prepare(self, sql):
        return self._placeholder_pattern.sub(lambda m: m.group(1) or "%s", sql)

    def _cursor(self):
        return self.connection.cursor(dictionary=True)


def create_engine(settings=None):
    settings = settings or get_settings()
    if settings.db_driver == "mysql":
        return MySQLEngine(
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name,
            username=settings.db_user,
            password=settings.db_password,
        )
    return DatabaseEngine(settings.db_host)


def configure_logging(settings=None):
    settings = settings or get_settings()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level)


_engine = None


def get_engine():
    """Return the process-wide engine, building it from settings on first use."""
    global _engine
    if _engine is None:
        configure_logging()
        _engine = create_engine()
    return _engine


def set_engine(engine):
    global _engine
    _engine = engine


def reset_engine():
    global _engine
    if _engine is not None:
        _engine.close()
    _engine = None
