import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("course_booking.access")


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request. Server errors are logged at WARNING."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        client = request.client.host if request.client else "-"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s from %s failed after %.1fms",
                request.method,
                request.url.path,
                client,
                (time.monotonic() - start) * 1000,
            )
            raise

        duration_ms = (time.monotonic() - start) * 1000
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s from %s -> %s (%.1fms)",
            request.method,
            request.url.path,
            client,
            response.status_code,
            duration_ms,
        )

        return response
