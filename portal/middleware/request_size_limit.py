"""Request body size limit middleware.

Rejects requests whose body exceeds http.bodyLimit with 413. Checks
Content-Length up front; bodies without it (chunked) are buffered up to the
limit and replayed to the app. Raw ASGI (no BaseHTTPMiddleware).
"""

import json
from typing import Callable


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("latin-1")
    return None


async def _send_413(send: Callable, max_bytes: int) -> None:
    """Send 413 Payload Too Large as JSON."""
    body = json.dumps(
        {
            "error": "PAYLOAD_TOO_LARGE",
            "message": f"Request body must be at most {max_bytes} bytes",
            "details": {"max_bytes": max_bytes},
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body})


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Reject request bodies larger than max_bytes. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        content_length = _get_header(scope, "content-length")
        if content_length is not None:
            if content_length.strip().isdigit() and int(content_length) > max_bytes:
                await _send_413(send, max_bytes)
                return
            await app(scope, receive, send)
            return

        # No Content-Length: buffer up to the limit, then replay.
        messages: list[dict] = []
        total = 0
        while True:
            message = await receive()
            messages.append(message)
            if message["type"] != "http.request":
                break
            total += len(message.get("body", b""))
            if total > max_bytes:
                await _send_413(send, max_bytes)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> dict:
            if messages:
                return messages.pop(0)
            return await receive()

        await app(scope, replay, send)

    return asgi_app
