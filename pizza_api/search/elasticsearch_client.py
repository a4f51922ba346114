"""
Elasticsearch client - the only place that talks to the managed cluster.
One AsyncElasticsearch per worker process, shared by all requests (its
connection pool is safe for concurrent use). Client errors are translated
into the typed errors of pizza_api.core.errors; nothing here retries.
"""

import logging
from typing import Annotated, Any

from elasticsearch import ApiError, AsyncElasticsearch, ConnectionTimeout, TransportError
from fastapi import Depends
from prometheus_client import Counter

from pizza_api.config import get_settings
from pizza_api.core.errors import StoreRejectedError, StoreTimeoutError, StoreUnavailableError

logger = logging.getLogger(__name__)

# Fixed index name, not configurable at runtime
PIZZAS_INDEX = "pizzas_dev"

STORE_REQUESTS = Counter(
    "pizza_store_requests_total",
    "Calls made to the Elasticsearch cluster",
    ["operation", "outcome"],
)

_es_client: AsyncElasticsearch | None = None


def _es_client_options() -> dict:
    """Build Elasticsearch client options from settings (Elastic Cloud + API key)."""
    settings = get_settings()
    return {
        "cloud_id": settings.cloud_id,
        "api_key": (settings.api_key_id, settings.api_key),
    }


async def get_elasticsearch() -> AsyncElasticsearch:
    """Get the shared Elasticsearch client. Dependency injection for tests."""
    global _es_client
    if _es_client is None:
        _es_client = AsyncElasticsearch(**_es_client_options())
    return _es_client


async def close_elasticsearch() -> None:
    """Close the shared client on shutdown."""
    global _es_client
    if _es_client is not None:
        await _es_client.close()
        _es_client = None


SearchClient = Annotated[AsyncElasticsearch, Depends(get_elasticsearch)]


def _pizzas_index_mappings() -> dict:
    return {
        "properties": {
            "name": {"type": "text"},
            "description": {"type": "text"},
            "price": {"type": "float"},
            "ingredients": {"type": "keyword"},
        }
    }


def _outcome(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return "rejected"
    if isinstance(exc, ConnectionTimeout):
        return "timeout"
    return "unavailable"


def _translate(operation: str, exc: Exception) -> Exception:
    """Map a client exception to the error taxonomy and record the outcome."""
    outcome = _outcome(exc)
    STORE_REQUESTS.labels(operation=operation, outcome=outcome).inc()
    if outcome == "rejected":
        return StoreRejectedError(f"{operation}: {exc.message}", upstream_status=exc.meta.status)
    if outcome == "timeout":
        return StoreTimeoutError(f"{operation}: {exc}")
    return StoreUnavailableError(f"{operation}: {exc}")


async def add_document(es: AsyncElasticsearch, index_name: str, body: dict[str, Any]):
    """Index one document; the store assigns its id. Caller checks the status (201 = created)."""
    try:
        response = await es.index(index=index_name, document=body)
    except (ApiError, TransportError) as e:
        raise _translate("index", e) from e
    STORE_REQUESTS.labels(operation="index", outcome="ok").inc()
    logger.debug("add_document: index=%s status=%s", index_name, response.meta.status)
    return response


async def query_all(es: AsyncElasticsearch, index_name: str):
    """match_all over the index. No pagination: the whole result is one response."""
    try:
        response = await es.search(index=index_name, query={"match_all": {}})
    except (ApiError, TransportError) as e:
        raise _translate("search", e) from e
    STORE_REQUESTS.labels(operation="search", outcome="ok").inc()
    return response


async def ensure_pizzas_index(es: AsyncElasticsearch) -> None:
    """Create the pizzas index with its mapping if it does not exist yet.
    Client errors are recorded and re-raised unchanged; startup decides what to do."""
    try:
        if not await es.indices.exists(index=PIZZAS_INDEX):
            await es.indices.create(index=PIZZAS_INDEX, mappings=_pizzas_index_mappings())
            logger.info("Created index %r", PIZZAS_INDEX)
    except (ApiError, TransportError) as e:
        STORE_REQUESTS.labels(operation="ensure_index", outcome=_outcome(e)).inc()
        raise
    STORE_REQUESTS.labels(operation="ensure_index", outcome="ok").inc()


async def ping(es: AsyncElasticsearch) -> bool:
    """True if the cluster answers. Used by readiness."""
    try:
        alive = bool(await es.ping())
    except (ApiError, TransportError) as e:
        STORE_REQUESTS.labels(operation="ping", outcome=_outcome(e)).inc()
        logger.warning("ping failed: %s", e)
        return False
    STORE_REQUESTS.labels(operation="ping", outcome="ok" if alive else "unavailable").inc()
    return alive
