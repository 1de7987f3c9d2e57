# server.py
from __future__ import annotations

import logging

import uvicorn

from services.listen_config import ListenAddress

logger = logging.getLogger("listenport.server")


def build_server(app, address: ListenAddress, log_level: str = "info") -> uvicorn.Server:
    """
    Build (but do not start) a uvicorn server for a resolved address.

    Ephemeral addresses bind port 0; the OS picks the real port at startup.
    """
    config = uvicorn.Config(
        app,
        host=address.host,
        port=address.bind_port,
        log_level=log_level.lower(),
    )
    return uvicorn.Server(config)


def bound_port(server: uvicorn.Server) -> int | None:
    for srv in getattr(server, "servers", None) or []:
        for sock in srv.sockets:
            return sock.getsockname()[1]
    return None


def serve(app, address: ListenAddress, log_level: str = "info") -> None:
    logger.info(
        "server_starting host=%s port=%s kind=%s",
        address.host,
        address.bind_port,
        address.port.kind,
    )
    build_server(app, address, log_level=log_level).run()
