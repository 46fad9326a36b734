"""Request timeout middleware.

Requests running longer than the limit are cancelled and answered with 504
in the same error body the exception handlers produce.
"""

import asyncio
import json
from typing import Callable

from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "success": False,
            "error": f"Request timed out after {timeout_seconds} seconds",
            "code": "GATEWAY_TIMEOUT",
            "details": {"timeoutSeconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, send_wrapper), timeout=timeout_seconds)
        except TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                # Headers already went out; nothing valid can follow.
                raise
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", b"application/json")],
            })
            await send({"type": "http.response.body", "body": timeout_body(timeout_seconds)})

    return asgi_app
