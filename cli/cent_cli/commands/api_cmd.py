from __future__ import annotations

import json
from typing import Any, Callable

import typer
from cent_client import CentClient, CentClientError, ErrorKind

from .. import console
from ..config import load_config
from ..http import make_client

HostOption = typer.Option(None, "--host", help="Override server host.")
PortOption = typer.Option(None, "--port", help="Override server port.")

_KIND_LABELS = {
    ErrorKind.GENERIC: "server error",
    ErrorKind.TRANSPORT: "network error",
    ErrorKind.REQUEST: "request rejected",
    ErrorKind.RESPONSE: "command failed",
    ErrorKind.CONFIG: "config error",
}


def _parse_data(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        console.err(f"DATA must be valid JSON: {e}")
        raise typer.Exit(code=2)


def _describe(exc: CentClientError) -> str:
    label = _KIND_LABELS.get(exc.kind, "error")
    match exc.kind:
        case ErrorKind.REQUEST:
            return f"{label} ({exc.status_code}): {exc}"
        case ErrorKind.RESPONSE:
            return f"{label} (code {exc.code}): {exc}"
        case _:
            return f"{label}: {exc}"


def _run(
        call: Callable[[CentClient], dict[str, Any]],
        *,
        host: str | None,
        port: int | None,
) -> None:
    cfg = load_config()
    client = make_client(cfg, host_override=host, port_override=port)
    try:
        result = call(client)
    except CentClientError as exc:
        console.err(_describe(exc))
        raise typer.Exit(code=1)
    console.print_json(result)


def publish(
        channel: str = typer.Argument(..., help="Channel name."),
        data: str = typer.Argument(..., help="JSON payload."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Publish data into a channel."""
    payload = _parse_data(data)
    _run(lambda c: c.publish(channel, payload), host=host, port=port)


def broadcast(
        channels: list[str] = typer.Option(..., "--channel", "-c", help="Target channel (repeatable)."),
        data: str = typer.Argument(..., help="JSON payload."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Publish the same data into many channels."""
    payload = _parse_data(data)
    _run(lambda c: c.broadcast(channels, payload), host=host, port=port)


def unsubscribe(
        channel: str = typer.Argument(..., help="Channel name."),
        user_id: str = typer.Argument(..., help="User ID."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Unsubscribe a user from a channel."""
    _run(lambda c: c.unsubscribe(channel, user_id), host=host, port=port)


def disconnect(
        user_id: str = typer.Argument(..., help="User ID."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Disconnect a user by ID."""
    _run(lambda c: c.disconnect(user_id), host=host, port=port)


def presence(
        channel: str = typer.Argument(..., help="Channel name."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Clients currently subscribed on a channel."""
    _run(lambda c: c.presence(channel), host=host, port=port)


def presence_stats(
        channel: str = typer.Argument(..., help="Channel name."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Client and user counts for a channel."""
    _run(lambda c: c.presence_stats(channel), host=host, port=port)


def history(
        channel: str = typer.Argument(..., help="Channel name."),
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Last messages published into a channel."""
    _run(lambda c: c.history(channel), host=host, port=port)


def channels(
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Active channels."""
    _run(lambda c: c.channels(), host=host, port=port)


def info(
        host: str | None = HostOption,
        port: int | None = PortOption,
):
    """Running server nodes."""
    _run(lambda c: c.info(), host=host, port=port)


def register(app: typer.Typer) -> None:
    app.command("publish")(publish)
    app.command("broadcast")(broadcast)
    app.command("unsubscribe")(unsubscribe)
    app.command("disconnect")(disconnect)
    app.command("presence")(presence)
    app.command("presence-stats")(presence_stats)
    app.command("history")(history)
    app.command("channels")(channels)
    app.command("info")(info)
