from __future__ import annotations

import os

from cent_cli import config


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    cfg = config.load_config()
    assert (cfg.scheme, cfg.host, cfg.port) == ("http", "localhost", 8000)
    assert (cfg.timeout, cfg.open_timeout) == (5.0, 5.0)


def test_save_and_load_roundtrip(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path))
    cfg = config.AppConfig(scheme="https", host="cent.test", port=443, api_key="key", secret="s", timeout=2.5)

    path = config.save_config(cfg)

    assert path == f"{tmp_path}/config.toml"
    assert os.stat(path).st_mode & 0o777 == 0o600
    assert config.load_config() == cfg


def test_from_toml_tolerates_bad_values() -> None:
    cfg = config.from_toml({"server": {"port": "nope", "timeout": "slow"}, "auth": "x"})
    assert cfg.port == 8000
    assert cfg.timeout == 5.0
    assert cfg.api_key == ""


def test_env_overrides_credentials(monkeypatch) -> None:
    cfg = config.AppConfig(api_key="file-key", secret="file-secret")
    monkeypatch.setenv(config.ENV_API_KEY, "env-key")
    monkeypatch.delenv(config.ENV_SECRET, raising=False)

    client_cfg = config.to_client_config(cfg)

    assert client_cfg.api_key == "env-key"
    assert client_cfg.secret == "file-secret"


def test_empty_credentials_become_none(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    monkeypatch.delenv(config.ENV_SECRET, raising=False)
    client_cfg = config.to_client_config(config.default_config())
    assert client_cfg.api_key is None
    assert client_cfg.secret is None
