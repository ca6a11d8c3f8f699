import logging
import time

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from comments_api.security import user_id_from_authorization

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Middleware (pure ASGI, avoids BaseHTTPMiddleware ContextVar isolation)
# ---------------------------------------------------------------------------

class RequestContextMiddleware:
    """
    Pure ASGI middleware that prepares the per-request context:

    - ``request.state.user_id``: the caller's identifier taken from a valid
      ``Authorization: Bearer <jwt>`` header, or None.  Handlers that need
      a caller read it through ``get_current_user_id``; rejection of
      anonymous requests happens there, not here.
    - ``X-Response-Time-Ms`` response header with the wall-clock duration.

    Each request is logged at DEBUG with its status and duration.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        scope.setdefault("state", {})["user_id"] = user_id_from_authorization(
            headers.get("authorization")
        )
        start = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                response_headers = list(message.get("headers", []))
                response_headers.append((b"x-response-time-ms", str(duration_ms).encode()))
                message["headers"] = response_headers
                logger.debug(
                    "%s %s -> %s (%.2f ms)",
                    scope["method"], scope["path"], message["status"], duration_ms,
                )
            await send(message)

        await self.app(scope, receive, send_wrapper)
