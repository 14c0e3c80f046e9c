import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blocklist.api.exception_handlers import register_exception_handlers
from blocklist.api.routers import domains
from blocklist.core.config import settings
from blocklist.core.logging import configure_logging
from blocklist.db.store import DomainStore

logger = logging.getLogger(__name__)


def create_app(store: DomainStore | None = None) -> FastAPI:
    """
    Build the HTTP app around a store.

    When no store is given one is built from settings. The schema is ensured
    when the app starts; if that fails the server doesn't start.
    """
    if store is None:
        store = DomainStore(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store.ensure_schema()
        yield
        app.state.store.dispose()
        logger.info("Store disposed")

    app = FastAPI(title="Blocklist", lifespan=lifespan)
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(domains.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


configure_logging(settings.log_level)
app = create_app()
