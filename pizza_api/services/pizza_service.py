"""
Pizza service - maps between the API records and Elasticsearch documents.
Keeps routes thin: the route calls the service, the service calls the adapter.
"""

import logging
from typing import Any

from elasticsearch import AsyncElasticsearch
from pydantic import ValidationError

from pizza_api.core.errors import DocumentShapeError, PizzaNotCreatedError, StoreRejectedError
from pizza_api.schemas.pizza import Pizza, PizzaCreate
from pizza_api.search.elasticsearch_client import PIZZAS_INDEX, add_document, query_all

logger = logging.getLogger(__name__)


def _body(response: Any) -> Any:
    # ObjectApiResponse exposes the parsed JSON as .body
    return getattr(response, "body", response)


def hit_to_pizza(hit: Any) -> Pizza:
    """Build a Pizza from one search hit (`_id` + `_source`)."""
    try:
        doc_id = hit["_id"]
        source = hit["_source"]
    except (KeyError, TypeError) as e:
        raise DocumentShapeError(f"search hit without _id/_source: {e!r}") from e
    if not isinstance(doc_id, str) or not doc_id:
        raise DocumentShapeError(f"search hit has an invalid _id: {doc_id!r}")
    try:
        data = PizzaCreate.model_validate(source)
    except ValidationError as e:
        raise DocumentShapeError(f"document {doc_id} is not a pizza: {e}") from e
    return Pizza.from_create(data, doc_id)


def created_to_pizza(data: PizzaCreate, body: Any) -> Pizza:
    """Combine the submitted pizza with the `_id` from the index response."""
    doc_id = body.get("_id") if isinstance(body, dict) else None
    if not isinstance(doc_id, str) or not doc_id:
        raise DocumentShapeError("index response without _id")
    return Pizza.from_create(data, doc_id)


class PizzaService:
    """Pizza use cases: list everything, create one."""

    def __init__(self, es: AsyncElasticsearch, index_name: str = PIZZAS_INDEX):
        self.es = es
        self.index_name = index_name

    async def list_all(self) -> list[Pizza]:
        """All pizzas in store order."""
        try:
            body = _body(await query_all(self.es, self.index_name))
        except StoreRejectedError as e:
            if e.upstream_status == 404:
                # Index not created yet: nothing was ever stored
                logger.info("list_all: index %r does not exist yet", self.index_name)
                return []
            raise
        try:
            hits = body["hits"]["hits"]
        except (KeyError, TypeError) as e:
            raise DocumentShapeError(f"search response without hits: {e!r}") from e
        if not isinstance(hits, list):
            raise DocumentShapeError("search response hits is not a list")
        return [hit_to_pizza(hit) for hit in hits]

    async def create(self, data: PizzaCreate) -> Pizza:
        """Index the pizza; anything other than 201 Created counts as a rejection."""
        try:
            response = await add_document(self.es, self.index_name, data.model_dump())
        except StoreRejectedError as e:
            raise PizzaNotCreatedError(str(e), upstream_status=e.upstream_status) from e
        if response.meta.status != 201:
            raise PizzaNotCreatedError(
                f"index returned status {response.meta.status}",
                upstream_status=response.meta.status,
            )
        pizza = created_to_pizza(data, _body(response))
        logger.info("Created pizza id=%s name=%r", pizza.id, pizza.name)
        return pizza
