"""Middleware de tempo de resposta e cabeçalhos de segurança"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from time import perf_counter
import logging
import uuid

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


class OptimizedMiddleware(BaseHTTPMiddleware):
    """Middleware combinado para performance e segurança"""

    async def dispatch(self, request: Request, call_next):
        start_time = perf_counter()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex

        response = await call_next(request)

        process_time = perf_counter() - start_time

        # Headers de performance
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id

        # Headers de segurança
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"

        if process_time > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request [{request_id}]: {request.method} {request.url.path} "
                f"took {process_time:.4f}s"
            )

        return response
