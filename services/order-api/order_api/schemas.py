from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

class OrderCreate(BaseModel):
    # Every field may arrive as null; blank values are reported by validation.
    full_name: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None
    item_name: Optional[str] = None
    total: Optional[int] = None

class OrderRecord(BaseModel):
    """A persisted order, detached from any database session."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    address: str
    status: str
    item_name: str
    total: int
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset of stored timestamps; they are always UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

class FieldError(BaseModel):
    field: str
    message: str
