from __future__ import annotations

import dataclasses
from typing import Any

from . import tokens
from .config_types import ClientConfig
from .query import execute


class CentClient:
    """Server API commands and token issuance over a shared ``ClientConfig``.

    The config is read at call time, so changes to ``client.config`` apply to
    the next call. Every command raises ``CentClientError`` subclasses.
    """

    def __init__(self, cfg: ClientConfig | None = None, **overrides: Any):
        # overrides go to a private copy; a caller's config is never written
        base = cfg or ClientConfig()
        self.config = dataclasses.replace(base, **overrides) if overrides else base

    def _execute(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        return execute(self.config, method, params)

    # --- API commands ---
    def publish(self, channel: str, data: Any) -> dict[str, Any]:
        return self._execute("publish", {"channel": channel, "data": data})

    def broadcast(self, channels: list[str], data: Any) -> dict[str, Any]:
        """Publish the same data into many channels."""
        return self._execute("broadcast", {"channels": list(channels), "data": data})

    def unsubscribe(self, channel: str, user_id: str | int) -> dict[str, Any]:
        return self._execute("unsubscribe", {"channel": channel, "user": user_id})

    def disconnect(self, user_id: str | int) -> dict[str, Any]:
        return self._execute("disconnect", {"user": user_id})

    def presence(self, channel: str) -> dict[str, Any]:
        """All clients currently subscribed on the channel."""
        return self._execute("presence", {"channel": channel})

    def presence_stats(self, channel: str) -> dict[str, Any]:
        return self._execute("presence_stats", {"channel": channel})

    def history(self, channel: str) -> dict[str, Any]:
        return self._execute("history", {"channel": channel})

    def channels(self) -> dict[str, Any]:
        """Active channels (with one or more subscribers)."""
        return self._execute("channels", {})

    def info(self) -> dict[str, Any]:
        return self._execute("info", {})

    # --- tokens ---
    def issue_user_token(
            self,
            user_id: Any,
            expiration: int | None = None,
            info: Any = None,
            algorithm: str = tokens.DEFAULT_ALGORITHM,
    ) -> str:
        return tokens.issue_user_token(self.config.secret, user_id, expiration, info, algorithm)

    def issue_channel_token(
            self,
            client: str,
            channel: str,
            expiration: int | None = None,
            info: Any = None,
            algorithm: str = tokens.DEFAULT_ALGORITHM,
    ) -> str:
        return tokens.issue_channel_token(self.config.secret, client, channel, expiration, info, algorithm)
