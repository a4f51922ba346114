"""
FastAPI application entry point.
Mounts routes, the Prometheus endpoint, error handlers, and the lifespan that
owns the shared Elasticsearch client.
"""

import logging
from contextlib import asynccontextmanager

from elasticsearch import ApiError, TransportError
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from pizza_api.api.router import api_router
from pizza_api.config import get_settings
from pizza_api.core.errors import register_exception_handlers
from pizza_api.core.logging_config import setup_logging
from pizza_api.search.elasticsearch_client import (
    close_elasticsearch,
    ensure_pizzas_index,
    get_elasticsearch,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the shared client (a bad CLOUD_ID aborts here), ensure the index.
    Shutdown: close the client."""
    es = await get_elasticsearch()
    try:
        await ensure_pizzas_index(es)
    except (ApiError, TransportError) as e:
        # Key may lack index-management privileges; indexing still auto-creates it
        logger.warning("Could not ensure pizzas index: %s", e)
    try:
        yield
    finally:
        await close_elasticsearch()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="List and create pizzas stored in an Elasticsearch index.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router)

    return app


app = create_app()
