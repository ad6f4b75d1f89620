"""ASGI middleware that injects the scroll-reset snippet into HTML pages.

Wraps any ASGI 3 application. Only complete ``text/html`` pages are
touched; everything else streams through untouched:

- non-HTTP scopes (websocket, lifespan)
- HEAD requests and bodyless statuses (1xx, 204, 304)
- non-HTML or ``content-encoding``-compressed responses
- htmx fragment requests (``HX-Request`` without ``HX-Boosted``)

Usage::

    app = ScrollResetMiddleware(app, ScrollConfig(reset_delays=(0.05, 0.25)))
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from scrollkeeper._internal.asgi import ASGIApp, Receive, Scope, Send
from scrollkeeper.client import scroll_reset_snippet
from scrollkeeper.config import ScrollConfig

logger = logging.getLogger("scrollkeeper.middleware")

Message = MutableMapping[str, Any]


class ScrollResetMiddleware:
    """Inject ``scroll_reset_snippet()`` before a target string in HTML bodies.

    When *full_page_only* is ``True`` (the default), the snippet is
    injected **only** when the *before* target is found in the body.
    When ``False``, it is appended at the end if the target is absent.
    """

    __slots__ = ("_app", "_full_page_only", "_snippet", "_target")

    def __init__(
        self,
        app: ASGIApp,
        config: ScrollConfig | None = None,
        *,
        before: str = "</body>",
        full_page_only: bool = True,
    ) -> None:
        self._app = app
        self._snippet = scroll_reset_snippet(config).encode("utf-8")
        self._target = before.encode("utf-8")
        self._full_page_only = full_page_only

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] != "http"
            or scope.get("method") == "HEAD"
            or _is_fragment_request(scope)
        ):
            await self._app(scope, receive, send)
            return

        start: Message | None = None
        chunks: list[bytes] = []
        passthrough = False

        async def intercept(message: Message) -> None:
            nonlocal start, passthrough
            if message["type"] == "http.response.start":
                if _should_inject(message):
                    start = message
                else:
                    passthrough = True
                    await send(message)
                return
            if message["type"] != "http.response.body" or passthrough or start is None:
                await send(message)
                return
            chunks.append(message.get("body", b""))
            if message.get("more_body", False):
                return
            await self._send_injected(start, b"".join(chunks), send)

        await self._app(scope, receive, intercept)

    async def _send_injected(self, start: Message, body: bytes, send: Send) -> None:
        if self._target in body:
            index = body.find(self._target)
            body = body[:index] + self._snippet + body[index:]
        elif not self._full_page_only:
            body = body + self._snippet
        else:
            logger.debug("no %r in HTML body, snippet not injected", self._target.decode())

        headers = [
            (name, value) for name, value in start.get("headers", ()) if name.lower() != b"content-length"
        ]
        headers.append((b"content-length", str(len(body)).encode("latin-1")))
        await send({**start, "headers": headers})
        await send({"type": "http.response.body", "body": body})


def _header(headers: Any, name: bytes) -> bytes | None:
    for key, value in headers or ():
        if key.lower() == name:
            return value
    return None


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _should_inject(start: Message) -> bool:
    if not _body_allowed(start.get("status", 200)):
        return False
    headers = start.get("headers", ())
    content_type = _header(headers, b"content-type") or b""
    if b"text/html" not in content_type.lower():
        return False
    encoding = _header(headers, b"content-encoding")
    return encoding is None or encoding.lower() == b"identity"


def _is_fragment_request(scope: Scope) -> bool:
    headers = scope.get("headers", ())
    return _header(headers, b"hx-request") is not None and _header(headers, b"hx-boosted") is None
