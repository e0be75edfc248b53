from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from crmdesk import __version__
from crmdesk.core.config import settings
from crmdesk.core.errors import register_exception_handlers
from crmdesk.core.logging import configure_logging
from crmdesk.services.crm import CRMService
from crmdesk.store import CRMStore, InMemoryCRMStore, build_demo_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    logger.info("Starting %s %s (env=%s)", settings.app_name, __version__, settings.app_env)
    yield
    # Shutdown
    logger.info("Stopping %s; in-memory data is discarded", settings.app_name)


def create_app(store: CRMStore | None = None) -> FastAPI:
    configure_logging(settings.app_log_level)

    if store is None:
        store = build_demo_store() if settings.seed_demo_data else InMemoryCRMStore()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.app_debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.crm_service = CRMService(
        store,
        top_customers_limit=settings.top_customers_limit,
    )

    register_exception_handlers(app)

    # Register routes
    from crmdesk.api.v1.router import api_v1_router

    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()
