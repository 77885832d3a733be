"""Envelope and request construction for the server HTTP API."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .request import post

API_PATH = "/api"


@dataclass(frozen=True)
class CommandEnvelope:
    method: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps({"method": self.method, "params": dict(self.params)})


@dataclass(frozen=True)
class RequestDescriptor:
    url: str
    headers: dict[str, str]
    body: str
    timeout: float
    open_timeout: float


def build_envelope(method: str, params: Mapping[str, Any] | None = None) -> CommandEnvelope:
    return CommandEnvelope(method=method, params=dict(params or {}))


def build_endpoint(host: str, port: int | str, scheme: str) -> str:
    return f"{scheme}://{host}:{port}{API_PATH}"


def build_headers(api_key: str | None) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"apikey {api_key or ''}",
    }


def build_request(cfg: ClientConfig, method: str, params: Mapping[str, Any] | None = None) -> RequestDescriptor:
    envelope = build_envelope(method, params)
    return RequestDescriptor(
        url=build_endpoint(cfg.host, cfg.port, str(cfg.scheme)),
        headers=build_headers(cfg.api_key),
        body=envelope.to_json(),
        timeout=cfg.timeout,
        open_timeout=cfg.open_timeout,
    )


def execute(
        cfg: ClientConfig,
        method: str,
        params: Mapping[str, Any] | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Run one API command and return the decoded response body.

    Raises one of the ``cent_client.errors`` types on any non-success path.
    """
    descriptor = build_request(cfg, method, params)
    return post(descriptor, transport=transport if transport is not None else cfg.transport)
