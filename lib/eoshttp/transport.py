from __future__ import annotations

import logging
import threading
from typing import Any

import httpx

from .errors import TransportError

log = logging.getLogger(__name__)

USER_AGENT = "eoshttp/0.1.0"
DEFAULT_TIMEOUT_S = 15.0

_shared: Transport | None = None
_shared_lock = threading.Lock()


class Transport:
    """Host-agnostic connection pool shared by any number of clients.

    Wraps a single ``httpx.Client``, which is safe to use from several
    threads at once. ``http_transport`` lets callers swap the network layer,
    e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
            self,
            *,
            timeout_s: float = DEFAULT_TIMEOUT_S,
            http_transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            timeout=timeout_s,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def build_request(
            self,
            method: str,
            url: str,
            *,
            content: bytes | None = None,
            headers: dict[str, str | bytes] | None = None,
            timeout_s: float | None = None,
    ) -> httpx.Request:
        kwargs: dict[str, Any] = {}
        if timeout_s is not None:
            kwargs["timeout"] = timeout_s
        try:
            return self._client.build_request(method, url, content=content, headers=headers, **kwargs)
        except httpx.InvalidURL as e:
            log.error("Problem building http %s request: %s", method, e)
            raise TransportError(str(e)) from e

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` and return the response with its body still unread.

        The caller owns the returned response and must close it.
        """
        try:
            return self._client.send(request, stream=True)
        except httpx.RequestError as e:
            log.error("Problem sending http %s request: %s", request.method, e)
            raise TransportError(str(e)) from e


def shared_transport() -> Transport:
    global _shared
    if _shared is not None:
        return _shared

    with _shared_lock:
        if _shared is None:
            _shared = Transport()
    return _shared
