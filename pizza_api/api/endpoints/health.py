"""
Health checks - liveness, and readiness against the cluster.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from pizza_api.config import get_settings
from pizza_api.search.elasticsearch_client import SearchClient, ping

router = APIRouter()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": get_settings().app_name}


@router.get("/ready")
async def ready(es: SearchClient):
    """Readiness: does the cluster answer a ping?"""
    if not await ping(es):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return {"status": "ready"}
