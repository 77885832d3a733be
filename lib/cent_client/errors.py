from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    GENERIC = "generic"
    TRANSPORT = "transport"
    REQUEST = "request"
    RESPONSE = "response"
    CONFIG = "config"


class CentClientError(Exception):
    """Base client error. Raised directly for unmapped response statuses."""

    kind = ErrorKind.GENERIC

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NetworkError(CentClientError):
    """Transport/network layer error. The request never completed."""

    kind = ErrorKind.TRANSPORT

    @property
    def original_error(self) -> BaseException | None:
        return self.__cause__


class RequestError(CentClientError):
    """Server rejected the request shape or credentials."""

    kind = ErrorKind.REQUEST

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code)


class ResponseError(CentClientError):
    """Command reached the server but its execution failed."""

    kind = ErrorKind.RESPONSE

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.code = code

    @classmethod
    def from_payload(cls, payload: Any) -> ResponseError:
        if isinstance(payload, dict):
            return cls(str(payload.get("message") or ""), payload.get("code"))
        return cls(str(payload))


class ConfigError(CentClientError):
    """Client configuration is missing something an operation needs."""

    kind = ErrorKind.CONFIG
