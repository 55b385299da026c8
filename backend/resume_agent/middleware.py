"""Request ID propagation.

Calls usually arrive from the profile service, which may already have tagged
the request. A well-formed incoming X-Request-ID is reused so both services
log the same ID; otherwise a fresh 8-char ID is minted. Implemented as raw
ASGI so the context variable is still set when the exception handlers run.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_INCOMING_ID = re.compile(r"[A-Za-z0-9-]{1,64}")

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def _request_id_for(scope: Scope) -> str:
    incoming = Headers(scope=scope).get(REQUEST_ID_HEADER)
    if incoming and _VALID_INCOMING_ID.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex[:8]


class RequestIdMiddleware:

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = _request_id_for(scope)
        request_id_var.set(request_id)
        scope.setdefault("state", {})["request_id"] = request_id

        async def tag_response(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        await self.app(scope, receive, tag_response)
