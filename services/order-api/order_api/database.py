import time
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .logger import get_logger

# Base class for declarative ORM models.
Base = declarative_base()

log = get_logger(__name__)

def make_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for `database_url`.

    SQLite connections are shared across FastAPI's worker threads, and an
    in-memory SQLite database is pinned to a single connection so every
    session sees the same tables.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)

def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@contextmanager
def session_scope(session_factory: sessionmaker):
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def init_db(engine: Engine) -> None:
    """Create tables that don't exist yet."""
    # models must be imported so their tables are registered on Base.metadata
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)

def wait_for_database(engine: Engine, max_attempts: int = 5, max_wait_sec: int = 30) -> None:
    """Block until the database answers `select 1`.

    Retries OperationalError with exponential backoff and re-raises after
    `max_attempts` failed probes.
    """
    attempt = 0
    while True:
        try:
            with engine.connect() as conn:
                conn.execute(text("select 1"))
            log.info("connected to DB")
            return
        except OperationalError as e:
            attempt += 1
            if attempt >= max_attempts:
                log.error(f"DB connect failed after {attempt} attempts: {e}")
                raise
            sleep = min(2 ** attempt, max_wait_sec)
            log.warning(f"DB connect failed ({e}); retrying in {sleep}s")
            time.sleep(sleep)
