# backend/app/server.py
"""
Process entry point.

starting -> serving, or starting -> failed when the port cannot be bound.
Serving lasts until the process is terminated from outside.
"""
from __future__ import annotations

import socket
import sys

import uvicorn
from fastapi import FastAPI
from loguru import logger

from .core.config import Settings, settings
from .core.errors import BindFailure
from .core.logging_config import setup_logging
from .main import create_app


def bind_listener(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on host:port. Raises BindFailure on any socket error."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError as e:
        sock.close()
        raise BindFailure(host, port, e) from e
    return sock


def build_server(api: FastAPI) -> uvicorn.Server:
    # log_config=None keeps uvicorn from installing its own handlers;
    # the startup line comes from us, not from uvicorn
    config = uvicorn.Config(api, log_config=None, access_log=False)
    return uvicorn.Server(config)


def serve(api: FastAPI, sock: socket.socket) -> None:
    build_server(api).run(sockets=[sock])


def run(cfg: Settings = settings) -> int:
    try:
        sock = bind_listener(cfg.host, cfg.port)
    except BindFailure as e:
        logger.error("server failed: {}", e)
        return 1

    logger.info("{} started on :{}", cfg.service_name, sock.getsockname()[1])
    serve(create_app(cfg), sock)
    return 0


def main() -> None:
    setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
