"""Request correlation ids."""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

HEADER = "X-Request-ID"
# ids echoed from clients end up in log lines, so only short plain tokens pass
_VALID_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def incoming_request_id(value: str | None) -> str:
    """Return ``value`` if it is an acceptable id, else a fresh one."""

    if value and _VALID_ID.match(value):
        return value
    return uuid.uuid4().hex


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the context for logs and error envelopes."""

    async def dispatch(self, request: Request, call_next):
        req_id = incoming_request_id(request.headers.get(HEADER))
        token = request_id_ctx.set(req_id)
        request.state.request_id = req_id
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)
        response.headers[HEADER] = req_id
        return response
