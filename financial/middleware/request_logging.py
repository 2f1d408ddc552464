import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

log = logging.getLogger("req")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """One access line per request: method, path, status, duration."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        t0 = time.perf_counter()
        response: Response = await call_next(request)
        dt_ms = int((time.perf_counter() - t0) * 1000)
        log.info(
            "%s %s -> %s (%dms)",
            request.method,
            request.url.path,
            response.status_code,
            dt_ms,
            extra={
                "status": response.status_code,
                "duration_ms": dt_ms,
            },
        )
        return response
