"""POST execution and response classification."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn

import httpx

from .errors import CentClientError, RequestError, ResponseError
from .transport import Transport

if TYPE_CHECKING:
    from .query import RequestDescriptor

log = logging.getLogger(__name__)

# Statuses absent from this table are reported as generic server errors.
ERROR_MESSAGES: dict[int, str] = {
    400: "Bad request: {body}",
    401: "Invalid API key",
    404: "Route not found",
}
UNKNOWN_ERROR_MESSAGE = "Status: {status}. Unknown error: {body}"


def resolve_error_message(status_code: int, body: str = "") -> str:
    template = ERROR_MESSAGES.get(status_code, UNKNOWN_ERROR_MESSAGE)
    return template.format(status=status_code, body=body)


def post(descriptor: RequestDescriptor, *, transport: httpx.BaseTransport | None = None) -> dict[str, Any]:
    log.debug("POST %s", descriptor.url)
    try:
        with Transport(transport, timeout=descriptor.timeout, open_timeout=descriptor.open_timeout) as t:
            response = t.post(descriptor.url, headers=descriptor.headers, content=descriptor.body)
        return handle_response(response)
    except CentClientError as e:
        log.warning("request to %s failed: %s", descriptor.url, e)
        raise


def handle_response(response: httpx.Response) -> dict[str, Any]:
    if response.status_code == 200:
        return parse_response(response)
    raise_error(response)


def parse_response(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise CentClientError(f"Invalid response body: {response.text}", response.status_code) from e
    if not isinstance(data, dict):
        raise CentClientError(f"Invalid response body: {response.text}", response.status_code)
    if "error" in data:
        raise ResponseError.from_payload(data["error"])
    return data


def raise_error(response: httpx.Response) -> NoReturn:
    status_code = response.status_code
    message = resolve_error_message(status_code, response.text)
    if status_code in ERROR_MESSAGES:
        raise RequestError(message, status_code)
    raise CentClientError(message, status_code)
