from starlette.types import ASGIApp, Message, Receive, Scope, Send
from helpers.errors import PayloadTooLargeError
from helpers.responses import error_response

import logging
logger = logging.getLogger(__name__)


class UploadSizeLimitMiddleware:
    """Caps the request body size on one path.

    A declared Content-Length over the limit is refused straight away.
    Otherwise the body bytes are counted as they are received, which also
    covers chunked requests, and receiving stops once the limit is passed.
    """

    def __init__(self, app: ASGIApp, path: str, max_body_size: int, message: str):
        self.app = app
        self.path = path
        self.max_body_size = max_body_size
        self.message = message

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http" or scope["method"] != "POST" or scope["path"] != self.path:
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        content_length = headers.get(b"content-length", b"").decode("latin-1")
        if content_length.isdigit() and int(content_length) > self.max_body_size:
            logger.warning(f"Upload rejected, Content-Length {content_length} exceeds the limit")
            await error_response(400, self.message)(scope, receive, send)
            return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    raise PayloadTooLargeError(self.message)
            return message

        async def tracked_send(message: Message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracked_send)
        except PayloadTooLargeError:
            if response_started:
                raise
            logger.warning(f"Upload rejected after {received} body bytes")
            await error_response(400, self.message)(scope, receive, send)
