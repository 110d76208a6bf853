"""
Rate limiting global con slowapi y log de cada petición HTTP.
"""
import logging
import time

from fastapi import FastAPI, Request
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from ..config import Settings

access_logger = logging.getLogger("petcare.access")

def build_limiter(settings: Settings) -> Limiter:
    """
    Un único límite por IP para toda la API (RATE_LIMIT, p.ej. "100/minute").
    Con RATE_LIMIT_ENABLED=false (tests) el limiter no cuenta nada.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )

def install_rate_limit(app: FastAPI, settings: Settings) -> Limiter:
    limiter = build_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter

async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    status_code = 500  # si call_next lanza, el boundary devuelve 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            "%s %s %s %.1f ms",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )
