# -*- coding: utf-8 -*-
"""Request/Response logging middleware.

Binds a short request ID and the acting user (as forwarded by the gateway)
to every log line emitted while the request is handled.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from newsdesk.core.logging import bind_context, clear_context, get_logger
from newsdesk.core.sentry import set_user_context

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for structured request/response logging."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request and log details.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response from the handler
        """
        request_id = uuid.uuid4().hex[:8]
        user_id = request.headers.get("x-user-id")

        bind_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=self._get_client_ip(request),
        )
        if user_id:
            bind_context(user_id=user_id)
            set_user_context(user_id, role=request.headers.get("x-user-role"))

        request.state.request_id = request_id
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            query_params=dict(request.query_params) if request.query_params else None,
        )

        try:
            response = await call_next(request)
            latency_ms = (time.perf_counter() - start_time) * 1000

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                latency_ms=round(latency_ms, 2),
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed",
                error=str(e),
                error_type=type(e).__name__,
                latency_ms=round(latency_ms, 2),
                exc_info=True,
            )
            raise

        finally:
            # Context vars would otherwise leak into the next request on this task
            clear_context()

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP from request, handling proxies."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"
