from __future__ import annotations

import typer

from .. import console
from ..config import ENV_API_KEY, config_path, load_config, resolve_api_key, resolve_secret, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/cent/config.toml).")


def _mask(value: str) -> str:
    return "(set)" if value.strip() else "(empty)"


@app.command("show")
def show_config():
    cfg = load_config()
    console.console.print(
        f"endpoint={cfg.scheme}://{cfg.host}:{cfg.port}/api "
        f"timeout={cfg.timeout} open_timeout={cfg.open_timeout} "
        f"api_key={_mask(resolve_api_key(cfg))} secret={_mask(resolve_secret(cfg))}"
    )
    if not resolve_api_key(cfg).strip():
        console.warn(f"No API key configured; set one with 'cent config set --api-key' or {ENV_API_KEY}.")


@app.command("path")
def show_path():
    console.console.print(config_path())


@app.command("set")
def set_config(
        scheme: str | None = typer.Option(None, "--scheme", help="http or https."),
        host: str | None = typer.Option(None, "--host"),
        port: int | None = typer.Option(None, "--port"),
        api_key: str | None = typer.Option(None, "--api-key"),
        secret: str | None = typer.Option(None, "--secret", help="Token signing secret."),
        timeout: float | None = typer.Option(None, "--timeout", help="Read timeout, seconds."),
        open_timeout: float | None = typer.Option(None, "--open-timeout", help="Connect timeout, seconds."),
):
    cfg = load_config()
    if scheme is not None:
        value = scheme.strip().lower()
        if value not in {"http", "https"}:
            console.err("Scheme must be http or https.")
            raise typer.Exit(code=2)
        cfg.scheme = value
    if host is not None:
        if not host.strip():
            console.err("Host cannot be empty.")
            raise typer.Exit(code=2)
        cfg.host = host.strip()
    if port is not None:
        cfg.port = port
    if api_key is not None:
        cfg.api_key = api_key
    if secret is not None:
        cfg.secret = secret
    if timeout is not None:
        cfg.timeout = timeout
    if open_timeout is not None:
        cfg.open_timeout = open_timeout

    path = save_config(cfg)
    console.ok(f"Config updated: {path}")
