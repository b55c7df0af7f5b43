"""
Request size ceiling for bulk ingestion.
"""

from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send
import logging

from author_dict.core.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Caps request bodies at ``max_body_bytes``.

    A declared Content-Length over the limit is refused before the app runs.
    Bodies without one (chunked uploads) are counted as they are read; the
    read that crosses the limit raises ``PayloadTooLargeError``, which the
    app's error handlers turn into a 413.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_bytes:
            exc = PayloadTooLargeError(int(content_length), self.max_body_bytes)
            logger.warning(
                f"Rejected {scope['method']} {scope['path']}: {exc.message}",
                extra={"size_bytes": exc.size_bytes, "max_size_bytes": self.max_body_bytes},
            )
            response = PlainTextResponse(exc.message, status_code=exc.status_code)
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(
                        f"Streamed body for {scope['method']} {scope['path']} passed {self.max_body_bytes} bytes",
                        extra={"size_bytes": received, "max_size_bytes": self.max_body_bytes},
                    )
                    raise PayloadTooLargeError(received, self.max_body_bytes)
            return message

        await self.app(scope, limited_receive, send)
