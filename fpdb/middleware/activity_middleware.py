"""Middleware for request activity logging and shared response headers."""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from fpdb.core.log_config import ACTIVITY_LOGGER_NAME

activity_logger = logging.getLogger(ACTIVITY_LOGGER_NAME)

# Set on every response, with or without an Origin header
SHARED_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ActivityLogMiddleware(BaseHTTPMiddleware):
    """Middleware to log every served request and set the shared headers."""

    async def dispatch(self, request: Request, call_next):
        """Log the request, pass it on, then add the shared headers."""
        activity_logger.info(
            "serving %s to %s",
            self._request_uri(request),
            request.headers.get("x-forwarded-for", ""),
        )
        response = await call_next(request)
        response.headers.update(SHARED_HEADERS)
        return response

    @staticmethod
    def _request_uri(request: Request) -> str:
        query = request.url.query
        return f"{request.url.path}?{query}" if query else request.url.path
