from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import AppConfig, get_config
from .database import init_db, wait_for_database
from .graphql_schema import OrderGraphQLRouter, schema
from .logger import get_logger
from .store import OrderStore, SqlAlchemyOrderStore, build_store

log = get_logger(__name__)

def create_app(store: Optional[OrderStore] = None, config: Optional[AppConfig] = None) -> FastAPI:
    """Build the Order API around `store` (built from config when omitted)."""
    config = config or get_config()
    owns_store = store is None
    if owns_store:
        store = build_store(config)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if owns_store and isinstance(store, SqlAlchemyOrderStore):
            wait_for_database(
                store.engine,
                max_attempts=config.db_connect_max_attempts,
                max_wait_sec=config.db_connect_max_wait_sec,
            )
            init_db(store.engine)
        log.info(f"Order API ready at {config.graphql_path} (env={config.app_env}, store={type(store).__name__})")
        yield

    def get_context():
        return {"store": store}

    app = FastAPI(title="Order API", lifespan=lifespan)
    graphql_app = OrderGraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if config.graphiql else None,
    )
    app.include_router(graphql_app, prefix=config.graphql_path)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

app = create_app()

if __name__ == "__main__":
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)
