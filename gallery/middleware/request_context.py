"""Request context middleware: request id propagation, timing and access logging."""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..core.logging_config import request_id_var

logger = logging.getLogger(__name__)

# Health probes and static image fetches are not worth an access log line each.
_QUIET_PREFIXES = ("/api/health",)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns ``X-Request-ID``, measures duration and logs every request."""

    def __init__(self, app, quiet_prefixes: tuple = _QUIET_PREFIXES):
        super().__init__(app)
        self.quiet_prefixes = quiet_prefixes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:16]
        token = request_id_var.set(rid)
        try:
            start = time.monotonic()
            response = await call_next(request)
            duration_ms = round((time.monotonic() - start) * 1000, 1)

            response.headers["X-Request-ID"] = rid
            response.headers["X-Response-Time"] = f"{duration_ms}ms"

            log = logger.debug if request.url.path.startswith(self.quiet_prefixes) else logger.info
            log(
                f"{request.method} {request.url.path} {response.status_code}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return response
        finally:
            request_id_var.reset(token)
