from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from cent_client import ClientConfig
from cent_client.config_types import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SCHEME, DEFAULT_TIMEOUT_S

APP_NAME = "cent"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "CENT_API_KEY"
ENV_SECRET = "CENT_SECRET"


@dataclass
class AppConfig:
    scheme: str = DEFAULT_SCHEME
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    api_key: str = ""
    secret: str = ""
    timeout: float = DEFAULT_TIMEOUT_S
    open_timeout: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "server": {
            "scheme": cfg.scheme,
            "host": cfg.host,
            "port": cfg.port,
            "timeout": cfg.timeout,
            "open_timeout": cfg.open_timeout,
        },
        "auth": {
            "api_key": cfg.api_key,
            "secret": cfg.secret,
        },
    }


def _float_or(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    server = data.get("server") or {}
    if isinstance(server, dict):
        cfg.scheme = str(server.get("scheme") or DEFAULT_SCHEME).strip().lower()
        cfg.host = str(server.get("host") or DEFAULT_HOST).strip()
        try:
            cfg.port = int(server.get("port") or DEFAULT_PORT)
        except (TypeError, ValueError):
            cfg.port = DEFAULT_PORT
        cfg.timeout = _float_or(server.get("timeout"), DEFAULT_TIMEOUT_S)
        cfg.open_timeout = _float_or(server.get("open_timeout"), DEFAULT_TIMEOUT_S)
    auth = data.get("auth") or {}
    if isinstance(auth, dict):
        cfg.api_key = str(auth.get("api_key") or "")
        cfg.secret = str(auth.get("secret") or "")
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def resolve_api_key(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_API_KEY, "").strip()
    return env_value or cfg.api_key


def resolve_secret(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_SECRET, "").strip()
    return env_value or cfg.secret


def to_client_config(cfg: AppConfig) -> ClientConfig:
    return ClientConfig(
        scheme=cfg.scheme,
        host=cfg.host,
        port=cfg.port,
        secret=resolve_secret(cfg) or None,
        api_key=resolve_api_key(cfg) or None,
        timeout=cfg.timeout,
        open_timeout=cfg.open_timeout,
    )
