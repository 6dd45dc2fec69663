"""
Strawberry GraphQL schema and the FastAPI router serving it.
"""
from typing import Any, Dict, List, Optional

import strawberry
from fastapi import Request
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionContext, ExecutionResult

from .resolvers import Mutation, Query
from .validation import OrderValidationError

class OrderSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        # Validation failures are logged by the store; they are not server errors.
        unexpected = [e for e in errors if not isinstance(e.original_error, OrderValidationError)]
        if unexpected:
            super().process_errors(unexpected, execution_context)

schema = OrderSchema(query=Query, mutation=Mutation)

def expand_errors(errors: List[GraphQLError]) -> List[Dict[str, Any]]:
    """Format errors for the response, one entry per validation message."""
    formatted = []
    for error in errors:
        original = error.original_error
        if isinstance(original, OrderValidationError):
            for message in original.messages:
                formatted.append({**error.formatted, "message": message})
        else:
            formatted.append(error.formatted)
    return formatted

class OrderGraphQLRouter(GraphQLRouter):
    async def process_result(self, request: Request, result: ExecutionResult) -> GraphQLHTTPResponse:
        response = await super().process_result(request, result)
        if result.errors:
            response["errors"] = expand_errors(result.errors)
        return response
