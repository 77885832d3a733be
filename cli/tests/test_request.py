from __future__ import annotations

import httpx
import pytest

from cent_client import ClientConfig
from cent_client.errors import CentClientError, ErrorKind, NetworkError, RequestError, ResponseError
from cent_client.query import build_request, execute
from cent_client.request import ERROR_MESSAGES, post, resolve_error_message


def _cfg(handler) -> ClientConfig:
    return ClientConfig(api_key="api-key", transport=httpx.MockTransport(handler))


def _respond(status: int, body: str):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body)

    return handler


def test_empty_result_on_200() -> None:
    assert execute(_cfg(_respond(200, "{}")), "publish", {"channel": "chat", "data": {}}) == {}


def test_result_body_returned_verbatim() -> None:
    body = '{"result": {"channels": ["chat"]}}'
    assert execute(_cfg(_respond(200, body)), "channels", {}) == {"result": {"channels": ["chat"]}}


def test_error_payload_on_200_raises_response_error() -> None:
    body = '{"error": {"message": "namespace not found", "code": 102}}'
    with pytest.raises(ResponseError) as exc_info:
        execute(_cfg(_respond(200, body)), "publish", {"channel": "x:chat", "data": {}})

    exc = exc_info.value
    assert exc.kind is ErrorKind.RESPONSE
    assert exc.message == "namespace not found"
    assert str(exc) == "namespace not found"
    assert exc.code == 102


@pytest.mark.parametrize(
    ("status", "message"),
    [
        (400, "Bad request: missing channel"),
        (401, "Invalid API key"),
        (404, "Route not found"),
    ],
)
def test_rejected_statuses_raise_request_error(status: int, message: str) -> None:
    with pytest.raises(RequestError) as exc_info:
        execute(_cfg(_respond(status, "missing channel")), "publish", {})

    exc = exc_info.value
    assert exc.kind is ErrorKind.REQUEST
    assert exc.status_code == status
    assert str(exc) == message


@pytest.mark.parametrize("status", [402, 403, 409, 429, 500, 502, 503])
def test_unmapped_statuses_raise_generic_error(status: int) -> None:
    with pytest.raises(CentClientError) as exc_info:
        execute(_cfg(_respond(status, "boom")), "info", {})

    exc = exc_info.value
    assert type(exc) is CentClientError
    assert exc.kind is ErrorKind.GENERIC
    assert exc.status_code == status
    assert str(exc) == f"Status: {status}. Unknown error: boom"


def test_error_message_table_covers_only_rejected_statuses() -> None:
    assert set(ERROR_MESSAGES) == {400, 401, 404}
    assert resolve_error_message(400, "oops") == "Bad request: oops"
    assert resolve_error_message(418, "teapot") == "Status: 418. Unknown error: teapot"


def test_connection_failure_raises_network_error_with_cause() -> None:
    original = httpx.ConnectError("Connection refused")

    def handler(request: httpx.Request) -> httpx.Response:
        raise original

    with pytest.raises(NetworkError) as exc_info:
        execute(_cfg(handler), "info", {})

    exc = exc_info.value
    assert exc.kind is ErrorKind.TRANSPORT
    assert exc.original_error is original
    assert exc.__cause__ is original
    assert str(exc) == "Connection refused (ConnectError)"


def test_timeout_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out")

    with pytest.raises(NetworkError) as exc_info:
        execute(_cfg(handler), "info", {})

    assert isinstance(exc_info.value.original_error, httpx.ReadTimeout)


def test_configured_timeouts_reach_transport() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.extensions["timeout"])
        return httpx.Response(200, json={})

    cfg = _cfg(handler)
    cfg.timeout = 7.0
    cfg.open_timeout = 2.0
    execute(cfg, "info", {})

    assert seen["connect"] == 2.0
    assert seen["read"] == 7.0


@pytest.mark.parametrize("body", ["not json", "[1, 2]"])
def test_unreadable_200_body_raises_generic_error(body: str) -> None:
    with pytest.raises(CentClientError) as exc_info:
        execute(_cfg(_respond(200, body)), "info", {})

    assert exc_info.value.kind is ErrorKind.GENERIC
    assert str(exc_info.value) == f"Invalid response body: {body}"


def test_post_sends_exactly_one_request() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, text="down")

    cfg = _cfg(handler)
    with pytest.raises(CentClientError):
        post(build_request(cfg, "info", {}), transport=cfg.transport)

    assert len(calls) == 1


def test_explicit_transport_overrides_config() -> None:
    cfg = _cfg(_respond(500, "unused"))
    override = httpx.MockTransport(_respond(200, '{"result": {}}'))

    assert execute(cfg, "info", {}, transport=override) == {"result": {}}
