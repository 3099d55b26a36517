"""
Request logging middleware.

Times every call to the reader surface and reports it on the diagnostic
channel. Session polling (GET /session) is logged at DEBUG since the
browser hits it continuously while a document is processing.

Dependencies: fastapi, starlette
System role: Request observability for the HTTP adapter
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time-Ms"
_POLLING_PATHS = frozenset({"/session", "/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Unhandled {type(e).__name__}",
                extra={"method": method, "path": path, "elapsed_ms": _elapsed_ms(start)},
            )
            raise

        elapsed_ms = _elapsed_ms(start)
        response.headers[PROCESS_TIME_HEADER] = str(elapsed_ms)

        level = logging.DEBUG if method == "GET" and path in _POLLING_PATHS else logging.INFO
        logger.log(
            level,
            f"{method} {path} - {response.status_code} ({elapsed_ms} ms)",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
