"""ASGI middleware that injects the GA4 snippet into HTML pages.

Wraps any ASGI application and inserts the snippet before a target
string (default: ``</body>``) in every full-page ``text/html`` response,
so layouts need no template changes::

    from ga4.inject import GA4Middleware

    app = GA4Middleware(app)

Skipped, and forwarded byte-for-byte:

- non-HTTP scopes (lifespan, websocket)
- htmx fragment requests (``HX-Request: true``) and ``HEAD`` requests
- 1xx, 204 and 304 responses, which carry no body
- non-HTML, compressed (``content-encoding``) or streamed
  (``more_body``) responses
- everything, while no measurement ID is configured
"""

import logging
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from ga4.helpers import default_renderer
from ga4.snippet import SnippetRenderer

logger = logging.getLogger("ga4.inject")

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


def inject_snippet(body: str, snippet: str, before: str = "</body>") -> str:
    """Insert *snippet* before the first *before*, or append it when absent."""
    if before in body:
        return body.replace(before, snippet + before, 1)
    return body + snippet


def _header(headers: list[tuple[bytes, bytes]], name: bytes) -> bytes | None:
    for key, value in headers:
        if key.lower() == name:
            return value
    return None


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    return not (100 <= status < 200 or status in {204, 304})


def _is_fragment(scope: Scope) -> bool:
    return _header(list(scope.get("headers", ())), b"hx-request") == b"true"


def _is_injectable(headers: list[tuple[bytes, bytes]]) -> bool:
    content_type = _header(headers, b"content-type") or b""
    if b"text/html" not in content_type.lower():
        return False
    return _header(headers, b"content-encoding") is None


class GA4Middleware:
    """Inject the GA4 snippet into full-page HTML responses.

    The snippet is rendered once per request, so the navigation probe
    sees the current state of the process. With no *renderer*, the
    process-wide default (configured from ``GA4_MEASUREMENT_ID``) is used.
    """

    __slots__ = ("_app", "_renderer", "_target")

    def __init__(
        self,
        app: ASGIApp,
        renderer: SnippetRenderer | None = None,
        *,
        before: str = "</body>",
    ) -> None:
        self._app = app
        self._renderer = renderer
        self._target = before

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("method") == "HEAD" or _is_fragment(scope):
            await self._app(scope, receive, send)
            return

        renderer = self._renderer if self._renderer is not None else default_renderer()
        snippet = renderer.render()
        if not snippet:
            await self._app(scope, receive, send)
            return

        held_start: Message | None = None
        passthrough = False

        async def send_with_snippet(message: Message) -> None:
            nonlocal held_start, passthrough

            if message["type"] == "http.response.start":
                if _body_allowed(message.get("status", 200)) and _is_injectable(
                    list(message.get("headers", ()))
                ):
                    held_start = message
                else:
                    passthrough = True
                    await send(message)
                return

            if passthrough or held_start is None or message["type"] != "http.response.body":
                await send(message)
                return

            start, held_start = held_start, None
            if message.get("more_body", False):
                # Streamed body, forward untouched
                passthrough = True
                await send(start)
                await send(message)
                return

            body = message.get("body", b"").decode("utf-8", errors="replace")
            new_body = inject_snippet(body, snippet, self._target).encode("utf-8")
            headers = [
                (key, value)
                for key, value in start.get("headers", ())
                if key.lower() != b"content-length"
            ]
            headers.append((b"content-length", str(len(new_body)).encode("latin-1")))
            logger.debug("Injected GA4 snippet into %s", scope.get("path", ""))
            await send({**start, "headers": headers})
            await send({**message, "body": new_body})

        await self._app(scope, receive, send_with_snippet)
