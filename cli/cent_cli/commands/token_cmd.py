from __future__ import annotations

import json
from typing import Any

import typer
from cent_client import ConfigError

from .. import console
from ..config import load_config
from ..http import make_client

app = typer.Typer(help="Issue signed connection and channel tokens.")

ExpOption = typer.Option(None, "--exp", help="UNIX timestamp when the token expires.")
InfoOption = typer.Option(None, "--info", help="JSON info claim.")
AlgOption = typer.Option("HS256", "--algorithm", help="Signing algorithm.")


def _parse_info(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        console.err(f"--info must be valid JSON: {e}")
        raise typer.Exit(code=2)


@app.command("user")
def user_token(
        user_id: str = typer.Argument(..., help="Application user ID."),
        exp: int | None = ExpOption,
        info: str | None = InfoOption,
        algorithm: str = AlgOption,
):
    client = make_client(load_config())
    try:
        token = client.issue_user_token(user_id, exp, _parse_info(info), algorithm)
    except ConfigError as exc:
        console.err(f"{exc}. Set auth.secret with 'cent config set --secret' or CENT_SECRET.")
        raise typer.Exit(code=2)
    typer.echo(token)


@app.command("channel")
def channel_token(
        client_id: str = typer.Argument(..., help="Client ID subscribing to the channel."),
        channel: str = typer.Argument(..., help="Private channel name."),
        exp: int | None = ExpOption,
        info: str | None = InfoOption,
        algorithm: str = AlgOption,
):
    client = make_client(load_config())
    try:
        token = client.issue_channel_token(client_id, channel, exp, _parse_info(info), algorithm)
    except ConfigError as exc:
        console.err(f"{exc}. Set auth.secret with 'cent config set --secret' or CENT_SECRET.")
        raise typer.Exit(code=2)
    typer.echo(token)
