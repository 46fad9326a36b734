"""Security headers for a JSON API.

Responses are never framed or sniffed and API payloads are not cached.
"""

from typing import Callable

API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}
NO_STORE = (b"cache-control", b"no-store")


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None, api_prefix: str = "/api/"
) -> Callable:
    """Add headers missing from the response; mark API responses no-store. Raw ASGI."""
    extra = [(k.lower().encode(), v.encode()) for k, v in (headers or API_HEADERS).items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        is_api = scope.get("path", "").startswith(api_prefix)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                candidates = extra + [NO_STORE] if is_api else extra
                headers.extend(h for h in candidates if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
