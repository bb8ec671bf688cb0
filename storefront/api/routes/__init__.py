"""
API routers. Everything except the operational routes is mounted under /api.
"""
from fastapi import APIRouter

from .articles import router as articles_router
from .auth import router as auth_router
from .health import router as health_router
from .inbox import router as inbox_router
from .orders import router as orders_router
from .products import router as products_router
from .settings import router as settings_router

api_router = APIRouter(prefix="/api")
api_router.include_router(products_router)
api_router.include_router(articles_router)
api_router.include_router(auth_router)
api_router.include_router(orders_router)
api_router.include_router(inbox_router)
api_router.include_router(settings_router)

__all__ = ['api_router', 'health_router']
