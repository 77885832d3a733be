from __future__ import annotations

from cent_client import CentClient

from .config import AppConfig, to_client_config


def make_client(
    cfg: AppConfig,
    *,
    host_override: str | None = None,
    port_override: int | None = None,
) -> CentClient:
    client_cfg = to_client_config(cfg)
    if host_override:
        client_cfg.host = host_override.strip()
    if port_override is not None:
        client_cfg.port = int(port_override)
    return CentClient(client_cfg)
