"""
API router - aggregates the endpoint modules.
Pizza routes sit at the root (/all-pizzas, /pizza).
"""

from fastapi import APIRouter

from pizza_api.api.endpoints import health, pizzas

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(pizzas.router, tags=["pizzas"])
