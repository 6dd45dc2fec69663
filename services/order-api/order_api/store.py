import threading
from typing import Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from . import models
from .config import AppConfig
from .database import make_engine, make_session_factory, session_scope
from .logger import get_logger
from .schemas import OrderCreate, OrderRecord
from .validation import OrderValidationError, validate_presence

log = get_logger(__name__)

class OrderStore(Protocol):
    """
    Persistence contract used by the GraphQL resolvers.

    - create_order validates all required fields before writing anything and
      raises OrderValidationError with every violation.
    - list_orders always returns orders in ascending id (creation) order.
    """

    def create_order(self, data: OrderCreate) -> OrderRecord:
        ...

    def list_orders(self, status: Optional[str] = None) -> List[OrderRecord]:
        ...

def _validate(data: OrderCreate) -> None:
    errors = validate_presence(data.model_dump())
    if errors:
        log.info(f"order rejected: {[e.message for e in errors]}")
        raise OrderValidationError(errors)

class SqlAlchemyOrderStore:
    """Orders stored in the `orders` table; one transaction per create."""

    def __init__(self, engine: Engine, session_factory: Optional[sessionmaker] = None):
        self.engine = engine
        self.session_factory = session_factory or make_session_factory(engine)

    def create_order(self, data: OrderCreate) -> OrderRecord:
        _validate(data)
        with session_scope(self.session_factory) as db:
            now = models.utcnow()
            order = models.Order(created_at=now, updated_at=now, **data.model_dump())
            db.add(order)
            db.flush()
            db.refresh(order)
            record = OrderRecord.model_validate(order)
        log.info(f"order created id={record.id} status={record.status}")
        return record

    def list_orders(self, status: Optional[str] = None) -> List[OrderRecord]:
        stmt = select(models.Order)
        if status is not None:
            stmt = stmt.where(models.Order.status == status)
        stmt = stmt.order_by(models.Order.id.asc())
        with session_scope(self.session_factory) as db:
            return [OrderRecord.model_validate(o) for o in db.scalars(stmt)]

class InMemoryOrderStore:
    """Dict-backed store keyed by sequential id. Writes are serialised by a lock."""

    def __init__(self):
        self._orders: Dict[int, OrderRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create_order(self, data: OrderCreate) -> OrderRecord:
        _validate(data)
        with self._lock:
            now = models.utcnow()
            record = OrderRecord(id=self._next_id, created_at=now, updated_at=now, **data.model_dump())
            self._orders[record.id] = record
            self._next_id += 1
        log.info(f"order created id={record.id} status={record.status}")
        return record

    def list_orders(self, status: Optional[str] = None) -> List[OrderRecord]:
        with self._lock:
            orders = sorted(self._orders.values(), key=lambda o: o.id)
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return orders

def build_store(config: AppConfig) -> OrderStore:
    if config.store_backend == "memory":
        return InMemoryOrderStore()
    if config.store_backend == "sqlalchemy":
        return SqlAlchemyOrderStore(make_engine(config.database_url))
    raise ValueError(f"Unknown store backend: {config.store_backend}")
