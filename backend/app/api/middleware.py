"""ASGI Middleware: trailing-slash normalization and the in-stack catch-all.

Invariants:
    - "/users/" is routed exactly like "/users" (the root "/" is left alone)
    - An exception escaping the app before the response starts becomes the
      500 "Internal server error" envelope inside the CORS layer, so browsers
      from any origin can read it
    - Exceptions after the response has started are re-raised untouched

Design Decisions:
    - Plain ASGI classes over BaseHTTPMiddleware: no body buffering, and the
      scope can be rewritten before routing
    - Path rewrite instead of redirect: the router never emits a bodiless 307
"""

import logging

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "success": False,
    "message": "Internal server error",
    "code": "INTERNAL_ERROR",
}


class StripTrailingSlashMiddleware:
    """Route "/path/" as "/path"."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope)
                scope["path"] = path.rstrip("/") or "/"
                raw_path = scope.get("raw_path")
                if raw_path:
                    scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        await self.app(scope, receive, send)


class UnhandledErrorMiddleware:
    """Turn escaping exceptions into the 500 envelope while CORS can still decorate it."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            logger.error(
                f"Unhandled exception on {scope['path']}: {exc}",
                exc_info=True,
                extra={"path": scope["path"], "method": scope.get("method")},
            )
            response = JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)
            await response(scope, receive, send)
