# backend/app/core/errors.py
from __future__ import annotations


class BindFailure(OSError):
    """The listener could not bind its port (in use, permission denied)."""

    def __init__(self, host: str, port: int, cause: OSError):
        super().__init__(f"listen tcp {host}:{port}: bind: {cause.strerror or cause}")
        self.host = host
        self.port = port
        self.cause = cause
