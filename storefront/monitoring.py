"""
Monitoring and observability utilities for the storefront service.

Provides:
- Prometheus metrics (requests, latencies, errors)
- Request tracing (unique request IDs)
- Health information for the active storage backend
"""
import re
import time
import uuid
import logging
from typing import Callable, Dict, Any
from contextvars import ContextVar

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from prometheus_client import Counter, Histogram, generate_latest

# Request context variable for tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

http_requests_total = Counter(
    'storefront_http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'storefront_http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
)

http_errors_total = Counter(
    'storefront_http_errors_total',
    'Total number of HTTP errors',
    ['method', 'endpoint', 'error_type']
)

service_start_time = time.time()

logger = logging.getLogger(__name__)


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get('')


def set_request_id(request_id: str) -> None:
    """Set the request ID in context."""
    request_id_var.set(request_id)


def normalize_endpoint(path: str) -> str:
    """Collapse numeric ids so metrics are labelled per route, not per record."""
    return re.sub(r'/\d+', '/{id}', path)[:100]


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for collecting Prometheus metrics and request tracing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        set_request_id(request_id)
        endpoint = normalize_endpoint(request.url.path)
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Request failed with exception: {request.method} {request.url.path}",
                exc_info=True,
                extra={"duration_seconds": duration, "exception_type": type(e).__name__},
            )
            http_errors_total.labels(method=request.method, endpoint=endpoint, error_type="exception").inc()
            raise

        duration = time.time() - start_time
        status_code = response.status_code
        http_requests_total.labels(method=request.method, endpoint=endpoint, status_code=status_code).inc()
        http_request_duration_seconds.labels(method=request.method, endpoint=endpoint).observe(duration)

        if status_code >= 400:
            error_type = "client_error" if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR else "server_error"
            http_errors_total.labels(method=request.method, endpoint=endpoint, error_type=error_type).inc()

        logger.info(f"{request.method} {request.url.path} -> {status_code} in {duration:.4f}s")
        response.headers["X-Request-ID"] = request_id
        return response


def get_metrics() -> str:
    """Get Prometheus metrics in text format."""
    return generate_latest().decode('utf-8')


async def get_health_info(storage) -> Dict[str, Any]:
    """
    Report service uptime and whether the storage backend answers.

    Args:
        storage: Active StorageInterface implementation
    """
    uptime = time.time() - service_start_time
    start_time = time.time()
    component: Dict[str, Any] = {"type": storage.name}
    try:
        await storage.ping()
        component["status"] = "healthy"
    except Exception as e:
        logger.warning("Storage health check failed", exc_info=True)
        component["status"] = "unhealthy"
        component["error_type"] = type(e).__name__
    component["response_time_ms"] = round((time.time() - start_time) * 1000, 2)

    return {
        "status": component["status"],
        "service": "storefront",
        "uptime_seconds": round(uptime, 2),
        "components": {"storage": component},
    }
