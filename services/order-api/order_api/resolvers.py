from typing import List, Optional

import strawberry
from strawberry.types import Info

from .graphql_types import CreateOrderInput, CreateOrderPayload, Order
from .store import OrderStore

def get_store(info: Info) -> OrderStore:
    return info.context["store"]

@strawberry.type
class Query:
    @strawberry.field(description="All orders in creation order, optionally only those with the given status.")
    def orders(self, info: Info, status: Optional[str] = None) -> List[Order]:
        return [Order.from_record(r) for r in get_store(info).list_orders(status=status)]

@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create an order. Blank fields are reported as top-level errors.")
    def create_order(self, info: Info, input: CreateOrderInput) -> Optional[CreateOrderPayload]:
        # OrderValidationError propagates: createOrder resolves to null and the
        # HTTP layer reports one error per blank field.
        record = get_store(info).create_order(input.to_order_create())
        return CreateOrderPayload(
            order=Order.from_record(record),
            errors=[],
            client_mutation_id=input.client_mutation_id,
        )
