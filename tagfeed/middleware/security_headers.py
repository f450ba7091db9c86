"""Security and caching headers for JSON responses. Raw ASGI.

Feeds are randomized on every call, so responses must not be cached.
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Cache-Control": "no-store",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set headers on all responses unless the route already set them."""
    header_list = [(k.lower().encode(), v.encode()) for k, v in (headers or DEFAULT_HEADERS).items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                existing = list(message.get("headers", []))
                seen = {name.lower() for name, _ in existing}
                existing.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = existing
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
