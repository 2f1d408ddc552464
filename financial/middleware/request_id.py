from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from financial.utils.request_ctx import pick_request_id, request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Binds X-Request-ID for the request's log lines and echoes it back."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        rid = pick_request_id(request.headers.get("X-Request-ID"))
        token = request_id.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id.reset(token)
        response.headers["X-Request-ID"] = rid
        return response
