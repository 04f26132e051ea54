# -*- coding: utf-8 -*-
"""Request timeout middleware."""

import asyncio
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from newsdesk.core.logging import get_logger

logger = get_logger(__name__)


class RequestTimeoutMiddleware(BaseHTTPMiddleware):
    """Answer 504 when a handler does not respond within ``timeout_seconds``.

    A store operation that is already committing is not interrupted; only the
    response is abandoned. A timeout of 0 disables the limit.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float = 30.0):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self.timeout_seconds:
            return await call_next(request)

        try:
            return await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out",
                timeout_seconds=self.timeout_seconds,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={
                    "detail": "Request timed out",
                    "error_code": "REQUEST_TIMEOUT",
                    "context": {"timeout_seconds": self.timeout_seconds},
                },
            )
