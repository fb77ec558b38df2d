import time
import logging
from uuid import uuid4
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from .logging_config import request_id_ctx

logger = logging.getLogger(__name__)

class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propaga X-Request-ID a los logs y mide la duración de cada request."""

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid4().hex
        token = request_id_ctx.set(rid)
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
            dur_ms = (time.perf_counter() - start) * 1000
            logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, dur_ms)
        except Exception:
            logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
            raise
        finally:
            request_id_ctx.reset(token)
        response.headers["X-Request-ID"] = rid
        return response
