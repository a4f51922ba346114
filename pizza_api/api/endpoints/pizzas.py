"""
Pizza endpoints - list all, create one.
Thin controller; errors are mapped to status codes by the app's exception handlers.
"""

from fastapi import APIRouter, status

from pizza_api.schemas.pizza import Pizza, PizzaCreate
from pizza_api.search.elasticsearch_client import SearchClient
from pizza_api.services.pizza_service import PizzaService

router = APIRouter()

_GATEWAY_ERRORS = {
    status.HTTP_502_BAD_GATEWAY: {"description": "Store rejected or unreachable", "content": {"text/plain": {}}},
    status.HTTP_504_GATEWAY_TIMEOUT: {"description": "Store timed out", "content": {"text/plain": {}}},
}


def _get_pizza_service(es: SearchClient) -> PizzaService:
    return PizzaService(es)


@router.get("/all-pizzas", response_model=list[Pizza], responses=_GATEWAY_ERRORS)
async def get_all_pizzas(es: SearchClient):
    """Every pizza in the index, in store order. Empty list if there are none."""
    return await _get_pizza_service(es).list_all()


@router.post("/pizza", response_model=Pizza, responses=_GATEWAY_ERRORS)
async def post_pizza(es: SearchClient, data: PizzaCreate):
    """Create a pizza. The id comes from the store."""
    return await _get_pizza_service(es).create(data)
