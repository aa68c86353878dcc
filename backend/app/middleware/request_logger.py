"""요청 단위 접근 로그를 남기는 ASGI 미들웨어입니다."""

import logging
import time
import uuid

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("app.access")


class RequestLoggerMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = uuid.uuid4().hex[:12]
        start_time = time.perf_counter()
        status_code = 500

        async def send_with_status(message: Message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode("latin1")))
                message["headers"] = headers
            await send(message)

        try:
            await self.app(scope, receive, send_with_status)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            client = scope.get("client")
            logger.info(
                "%s %s %s %s %.1fms id=%s",
                client[0] if client else "-",
                scope["method"],
                scope["path"],
                status_code,
                duration_ms,
                request_id,
            )
