"""
Operational routes: health check and Prometheus metrics.
"""
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST

from storefront.dependencies import get_storage
from storefront.monitoring import get_health_info, get_metrics
from storefront.storage import StorageInterface

router = APIRouter(tags=["operations"])


@router.get("/health")
async def health(storage: StorageInterface = Depends(get_storage)) -> JSONResponse:
    """Health check. Returns 503 when the storage backend does not answer."""
    health_info = await get_health_info(storage)
    status_code = 200 if health_info["status"] == "healthy" else 503
    return JSONResponse(content=health_info, status_code=status_code)


@router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
