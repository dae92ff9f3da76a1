import logging

from simpleorm import database
from simpleorm.database import DatabaseEngine, MySQLEngine, create_engine, get_engine, reset_engine
from simpleorm.settings import Settings, get_settings, reset_settings


def test_engine_contract():
    engine = DatabaseEngine(":memory:")
    engine.execute_write("CREATE TABLE items (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)")
    assert engine.execute_insert("INSERT INTO items (name) VALUES (?)", ["a"]) == 1
    assert engine.execute_insert("INSERT INTO items (name) VALUES (?)", ["b"]) == 2

    assert engine.execute("SELECT * FROM items ORDER BY id") == [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
    assert list(engine.fetch_iter("SELECT name FROM items WHERE id > ?", [1])) == [{"name": "b"}]
    assert engine.fetch_value("SELECT count(1) FROM items") == 2
    assert engine.fetch_value("SELECT name FROM items WHERE id = ?", [9]) is None
    assert engine.execute_write("UPDATE items SET name = ? WHERE id = ?", ["c", 2]) == 1
    engine.close()


def test_statements_are_logged(caplog):
    engine = DatabaseEngine(":memory:")
    with caplog.at_level(logging.INFO, logger="SimpleORM"):
        engine.fetch_value("SELECT ?", [5])
    assert "[SQL EXECUTE]: SELECT ? | [PARAMS]: [5]" in caplog.text
    engine.close()


def test_mysql_placeholders():
    engine = MySQLEngine.__new__(MySQLEngine)
    assert engine._prepare("SELECT * FROM t WHERE a = ? AND b LIKE 'x%'") == (
        "SELECT * FROM t WHERE a = %s AND b LIKE 'x%'"
    )


def test_mysql_placeholders_skip_quoted_literals():
    engine = MySQLEngine.__new__(MySQLEngine)
    assert engine._prepare("SELECT * FROM t WHERE note = 'why?' AND status = ?") == (
        "SELECT * FROM t WHERE note = 'why?' AND status = %s"
    )
    assert engine._prepare("SELECT `odd?` FROM t WHERE a = 'it''s?' AND b = \"?\" AND c = ?") == (
        "SELECT `odd?` FROM t WHERE a = 'it''s?' AND b = \"?\" AND c = %s"
    )


def test_empty_insert_syntax_per_driver():
    assert DatabaseEngine.empty_insert_values == "DEFAULT VALUES"
    assert MySQLEngine.empty_insert_values == "() VALUES ()"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SIMPLEORM_DB_DRIVER", "sqlite")
    monkeypatch.setenv("SIMPLEORM_DB_HOST", "orders.sqlite")
    monkeypatch.setenv("SIMPLEORM_LOG_LEVEL", "WARNING")
    reset_settings()
    try:
        settings = get_settings()
        assert settings.db_host == "orders.sqlite"
        assert settings.log_level == "WARNING"
        assert get_settings() is settings
    finally:
        reset_settings()


def test_create_engine_picks_sqlite(tmp_path):
    engine = create_engine(Settings(db_driver="sqlite", db_host=str(tmp_path / "db.sqlite")))
    assert type(engine) is DatabaseEngine
    engine.close()


def test_default_engine_is_built_once(monkeypatch):
    monkeypatch.setenv("SIMPLEORM_DB_HOST", ":memory:")
    reset_settings()
    try:
        engine = get_engine()
        assert get_engine() is engine
        reset_engine()
        assert database._engine is None
    finally:
        reset_settings()
