import pytest

from simpleorm import DatabaseEngine, reset_engine, set_engine

from models import create_tables


class RecordingEngine(DatabaseEngine):
    """In-memory SQLite engine that remembers every statement it runs."""

    def __init__(self):
        super().__init__(":memory:")
        self.statements = []

    def _run(self, sql, params=None):
        self.statements.append((sql, tuple(params or ())))
        return super()._run(sql, params)

    def reset(self):
        self.statements = []


@pytest.fixture
def engine():
    engine = RecordingEngine()
    create_tables(engine)
    engine.reset()
    yield engine
    engine.close()


@pytest.fixture
def default_engine(engine):
    set_engine(engine)
    yield engine
    set_engine(None)


@pytest.fixture(autouse=True)
def _no_leaked_default_engine():
    yield
    reset_engine()
