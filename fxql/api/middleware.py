"""HTTP middleware for request logging and security response headers."""

from __future__ import annotations

import json
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from fxql.logging_setup import get_logger

_logger = get_logger("fxql.api.requests")

_API_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def api_install_middleware(application: FastAPI) -> None:
    """Register request logging and security header middleware.

    Args:
        application: FastAPI application to decorate.

    Returns:
        None: Middleware is registered as a side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    @application.middleware("http")
    async def api_request_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started_at = time.perf_counter()
        response = await call_next(request)
        for header_name, header_value in _API_SECURITY_HEADERS.items():
            response.headers.setdefault(header_name, header_value)

        _logger.debug(
            json.dumps(
                {
                    "method": request.method,
                    "url": str(request.url.path),
                    "statusCode": response.status_code,
                    "clientIp": request.headers.get("x-forwarded-for")
                    or (request.client.host if request.client else None),
                    "userAgent": request.headers.get("user-agent"),
                    "responseTime": f"{(time.perf_counter() - started_at) * 1000:.1f}ms",
                    "requestSize": request.headers.get("content-length", "unknown"),
                    "responseSize": response.headers.get("content-length", "unknown"),
                }
            )
        )
        return response
