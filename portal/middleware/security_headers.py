"""Security headers middleware.

Adds common security-related response headers for server-rendered pages
(CSP limited to same-origin assets, X-Content-Type-Options, etc.). HSTS is
only sent when the app runs in production. Raw ASGI.
"""

from typing import Callable

DEFAULT_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; img-src 'self' data:; object-src 'none'; "
        "frame-ancestors 'self'; base-uri 'self'; form-action 'self'"
    ),
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}

HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    hsts: bool = False,
) -> Callable:
    """Set security headers on all responses unless the app already set them. Raw ASGI."""
    resolved = dict(headers if headers is not None else DEFAULT_HEADERS)
    if hsts:
        resolved.setdefault(*HSTS_HEADER)
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {name.lower() for name, _ in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
