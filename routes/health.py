from __future__ import annotations

from fastapi import APIRouter, Request

from services.observability import current_request_id

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request):
    address = request.app.state.listen_address
    return {
        "ok": True,
        "env": request.app.state.settings.ENV,
        "request_id": current_request_id(),
        "listen": {
            "host": address.host,
            "port_kind": address.port.kind,
            "port": address.bind_port,
        },
    }
