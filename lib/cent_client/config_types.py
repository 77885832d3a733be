from __future__ import annotations

from dataclasses import dataclass

import httpx

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000
DEFAULT_TIMEOUT_S = 5.0


@dataclass
class ClientConfig:
    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    secret: str | None = None
    api_key: str | None = None
    # read timeout / connect timeout, seconds
    timeout: float = DEFAULT_TIMEOUT_S
    open_timeout: float = DEFAULT_TIMEOUT_S
    # None means httpx's default network transport
    transport: httpx.BaseTransport | None = None
