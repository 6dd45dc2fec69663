import strawberry
from graphql import GraphQLError

from order_api.graphql_schema import expand_errors, schema
from order_api.store import InMemoryOrderStore
from order_api.validation import OrderValidationError, validate_presence


def test_expand_errors_emits_one_entry_per_validation_message():
    original = OrderValidationError(validate_presence({"full_name": "x", "address": "y", "status": "PAID"}))
    error = GraphQLError(str(original), path=["createOrder"], original_error=original)
    assert expand_errors([error]) == [
        {"message": "Item name can't be blank", "path": ["createOrder"]},
        {"message": "Total can't be blank", "path": ["createOrder"]},
    ]


def test_expand_errors_keeps_other_errors():
    error = GraphQLError("boom")
    assert expand_errors([error]) == [{"message": "boom"}]


def test_schema_uses_camel_case_wire_names():
    sdl = schema.as_str()
    assert "orders(status: String" in sdl
    assert "[Order!]!" in sdl
    assert "createOrder(input: CreateOrderInput!): CreateOrderPayload" in sdl
    assert "itemName: String" in sdl
    assert "clientMutationId: String" in sdl


def test_execute_against_injected_store():
    result = schema.execute_sync(
        'mutation { createOrder(input: {fullName: "A", address: "B", status: "PAID", itemName: "C", total: 5}) { order { id total } } }',
        context_value={"store": InMemoryOrderStore()},
    )
    assert result.errors is None
    assert result.data == {"createOrder": {"order": {"id": "1", "total": 5}}}


def test_only_unexpected_errors_reach_strawberry_error_logging(monkeypatch):
    forwarded = []
    monkeypatch.setattr(
        strawberry.Schema, "process_errors", lambda self, errors, execution_context=None: forwarded.extend(errors)
    )
    rejected = GraphQLError("blank", original_error=OrderValidationError(validate_presence({})))
    crashed = GraphQLError("boom", original_error=RuntimeError("boom"))
    schema.process_errors([rejected, crashed])
    assert forwarded == [crashed]
