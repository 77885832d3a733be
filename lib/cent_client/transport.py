from __future__ import annotations

import httpx

from .errors import NetworkError

USER_AGENT = "cent-client/0.1.0"


class Transport:
    """Short-lived httpx client around a pluggable adapter.

    ``adapter`` is any ``httpx.BaseTransport``; ``None`` selects the
    default network transport. Tests pass ``httpx.MockTransport``.
    """

    def __init__(
            self,
            adapter: httpx.BaseTransport | None = None,
            *,
            timeout: float,
            open_timeout: float,
    ):
        self._client = httpx.Client(
            transport=adapter,
            timeout=httpx.Timeout(timeout, connect=open_timeout),
            headers={"User-Agent": USER_AGENT},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def post(self, url: str, *, headers: dict[str, str], content: str) -> httpx.Response:
        try:
            return self._client.post(url, headers=headers, content=content)
        except httpx.RequestError as e:
            raise NetworkError(f"{e} ({type(e).__name__})") from e
