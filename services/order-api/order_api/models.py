from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from .database import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    status = Column(String, nullable=False, index=True)
    item_name = Column(String, nullable=False)
    total = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
