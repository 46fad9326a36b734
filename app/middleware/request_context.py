"""Request and correlation id middleware with an access log line per request.

Raw ASGI so streaming responses and background tasks are not wrapped by
BaseHTTPMiddleware.
"""

import re
import time
import uuid
from typing import Callable

from app.shared.telemetry.logging import get_logger

logger = get_logger("app.access")

REQUEST_ID_MAX_LENGTH = 64
_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def _header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def safe_id(raw: str | None) -> str:
    """Keep a client id only when it is short and log-safe; otherwise mint a UUID."""
    if raw and _SAFE_ID.match(raw.strip()):
        return raw.strip()
    return str(uuid.uuid4())


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    correlation_id_header: str = "X-Correlation-ID",
) -> Callable:
    """Attach request_id and correlation_id to scope state and echo both headers."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = safe_id(_header(scope, request_id_header))
        raw_correlation = _header(scope, correlation_id_header)
        correlation_id = safe_id(raw_correlation) if raw_correlation else request_id
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id
        status_holder = {"status": 500}
        started = time.perf_counter()

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
                headers = list(message.get("headers", []))
                headers.append((request_id_header.encode(), request_id.encode()))
                headers.append((correlation_id_header.encode(), correlation_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "%s %s -> %s (%.1f ms) request_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_holder["status"],
                (time.perf_counter() - started) * 1000,
                request_id,
            )

    return asgi_app
