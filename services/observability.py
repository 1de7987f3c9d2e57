from __future__ import annotations

import uuid
from contextvars import ContextVar, Token


REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[str | None] = ContextVar("listenport_request_id", default=None)


def bind_request_id(incoming: str | None) -> tuple[str, Token]:
    req_id = (incoming or "").strip() or str(uuid.uuid4())
    return req_id, _request_id.set(req_id)


def release_request_id(token: Token) -> None:
    _request_id.reset(token)


def current_request_id() -> str | None:
    return _request_id.get()
