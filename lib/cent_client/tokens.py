"""JWT issuance for connection and private channel authentication."""
from __future__ import annotations

import json
from typing import Any

import jwt
from jwt import api_jws

from .errors import ConfigError

DEFAULT_ALGORITHM = "HS256"


def build_claims(subject: dict[str, Any], expiration: int | None = None, info: Any = None) -> dict[str, Any]:
    claims = {**subject, "info": info if info is not None else {}}
    if expiration is not None:
        claims["exp"] = expiration
    return claims


def _sign(secret: str | None, claims: dict[str, Any], algorithm: str) -> str:
    if secret is None:
        raise ConfigError("Secret can not be nil")
    return jwt.encode(claims, secret, algorithm=algorithm)


def issue_user_token(
        secret: str | None,
        user_id: Any,
        expiration: int | None = None,
        info: Any = None,
        algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Connection token; ``sub`` carries the application user id."""
    return _sign(secret, build_claims({"sub": user_id}, expiration, info), algorithm)


def issue_channel_token(
        secret: str | None,
        client: str,
        channel: str,
        expiration: int | None = None,
        info: Any = None,
        algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Subscription token for a private channel."""
    return _sign(secret, build_claims({"client": client, "channel": channel}, expiration, info), algorithm)


def read_token_claims(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> dict[str, Any]:
    """Verify the signature and return claims as issued.

    Registered claims (``exp``, ``sub``) are not validated, so expired tokens
    and non-string subjects come back unchanged.
    """
    payload = api_jws.decode(token, secret, algorithms=[algorithm])
    return json.loads(payload)
