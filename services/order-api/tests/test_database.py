import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from order_api import database
from order_api.database import init_db, make_engine, make_session_factory, session_scope, wait_for_database
from order_api.models import Order


class UnreachableEngine:
    def __init__(self):
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        raise OperationalError("select 1", {}, Exception("connection refused"))


def test_init_db_creates_orders_table():
    engine = make_engine("sqlite://")
    init_db(engine)
    assert "orders" in inspect(engine).get_table_names()


def test_session_scope_rolls_back_on_error():
    engine = make_engine("sqlite://")
    init_db(engine)
    factory = make_session_factory(engine)
    with pytest.raises(RuntimeError):
        with session_scope(factory) as db:
            db.add(Order(full_name="a", address="b", status="PAID", item_name="c", total=1))
            db.flush()
            raise RuntimeError("boom")
    with session_scope(factory) as db:
        assert db.query(Order).count() == 0


def test_wait_for_database_succeeds_immediately():
    wait_for_database(make_engine("sqlite://"), max_attempts=1)


def test_wait_for_database_retries_with_backoff_then_gives_up(monkeypatch):
    sleeps = []
    monkeypatch.setattr(database.time, "sleep", sleeps.append)
    engine = UnreachableEngine()
    with pytest.raises(OperationalError):
        wait_for_database(engine, max_attempts=4, max_wait_sec=5)
    assert engine.attempts == 4
    assert sleeps == [2, 4, 5]
