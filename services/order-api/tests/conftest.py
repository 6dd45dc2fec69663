import pytest
from fastapi.testclient import TestClient

from order_api.config import AppConfig
from order_api.database import init_db, make_engine
from order_api.main import create_app
from order_api.store import InMemoryOrderStore, SqlAlchemyOrderStore


@pytest.fixture
def sql_store():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield SqlAlchemyOrderStore(engine)
    engine.dispose()


@pytest.fixture
def file_sql_store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'orders.db'}")
    init_db(engine)
    yield SqlAlchemyOrderStore(engine)
    engine.dispose()


@pytest.fixture
def memory_store():
    return InMemoryOrderStore()


@pytest.fixture(params=["sql_store", "memory_store"])
def store(request):
    """Every store backend must honour the same contract."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def client(store):
    app = create_app(store=store, config=AppConfig(graphiql=False))
    with TestClient(app) as c:
        yield c
