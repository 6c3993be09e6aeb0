"""Access-log middleware: one log line per request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("warehouse_api.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start)
            raise
        self._log(request, response.status_code, start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, start: float) -> None:
        duration_ms = round((time.monotonic() - start) * 1000)
        client = request.client.host if request.client else "-"
        logger.info(
            '%s "%s %s" %s (%sms)',
            client, request.method, request.url.path, status_code, duration_ms,
        )
