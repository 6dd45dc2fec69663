from datetime import datetime
from typing import List, Optional

import strawberry

from .schemas import OrderCreate, OrderRecord

@strawberry.type
class Order:
    id: strawberry.ID
    full_name: Optional[str]
    address: Optional[str]
    status: Optional[str]
    item_name: Optional[str]
    total: Optional[int]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: OrderRecord) -> "Order":
        return cls(
            id=strawberry.ID(str(record.id)),
            full_name=record.full_name,
            address=record.address,
            status=record.status,
            item_name=record.item_name,
            total=record.total,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

@strawberry.input
class CreateOrderInput:
    # Nullable on the wire: a null or missing value is reported as blank by the store.
    full_name: Optional[str] = None
    address: Optional[str] = None
    status: Optional[str] = None
    item_name: Optional[str] = None
    total: Optional[int] = None
    client_mutation_id: Optional[str] = None

    def to_order_create(self) -> OrderCreate:
        return OrderCreate(
            full_name=self.full_name,
            address=self.address,
            status=self.status,
            item_name=self.item_name,
            total=self.total,
        )

@strawberry.type
class CreateOrderPayload:
    order: Optional[Order]
    errors: List[str]
    client_mutation_id: Optional[str] = None
