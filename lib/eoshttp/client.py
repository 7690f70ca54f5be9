from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import HTTPStatusError, SerializationError, TransportError
from .errors_utils import parse_error_message
from .transport import Transport, shared_transport

log = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class HTTPClient:
    """Authenticated HTTP client for a single host.

    Every call is one request/response exchange: successful calls return the
    raw response body, failures raise ``SerializationError``,
    ``TransportError`` or ``HTTPStatusError``. Nothing is retried.

    Without an explicit ``transport`` the process-wide shared one is used;
    either way the client does not own it and never closes it.
    """

    def __init__(self, cfg: ClientConfig, *, transport: Transport | None = None):
        self._cfg = cfg
        self._t = transport if transport is not None else shared_transport()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def get(self, path: str, *, timeout_s: float | None = None) -> bytes:
        return self._request("GET", path, timeout_s=timeout_s)

    def post(self, path: str, payload: Any, *, timeout_s: float | None = None) -> bytes:
        body = _marshal_json(payload, "POST")
        return self._request("POST", path, body=body, timeout_s=timeout_s)

    def put(self, path: str, payload: Any, *, timeout_s: float | None = None) -> bytes:
        body = _marshal_json(payload, "PUT")
        return self._request("PUT", path, body=body, timeout_s=timeout_s)

    def delete(self, path: str, *, timeout_s: float | None = None) -> bytes:
        return self._request("DELETE", path, timeout_s=timeout_s)

    def _request(
            self,
            method: str,
            path: str,
            *,
            body: bytes | None = None,
            timeout_s: float | None = None,
    ) -> bytes:
        # token bytes go on the wire unchanged, non-ASCII included
        headers: dict[str, str | bytes] = {"Authorization": self._cfg.bearer.encode("utf-8")}
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        url = self._cfg.host + path
        request = self._t.build_request(method, url, content=body, headers=headers, timeout_s=timeout_s)
        log.debug("%s %s", method, url)

        response = self._t.send(request)
        try:
            return _read_response(method, path, response)
        finally:
            response.close()


def _marshal_json(payload: Any, method: str) -> bytes:
    try:
        data = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return data.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        log.error("Problem marshalling json for %s request: %s", method, e)
        raise SerializationError(str(e)) from e


def _read_response(method: str, path: str, response: httpx.Response) -> bytes:
    try:
        body = response.read()
    except httpx.RequestError as e:
        log.error("Problem reading http %s response: %s", method, e)
        raise TransportError(str(e)) from e

    if response.status_code > 299:
        message = parse_error_message(body)
        log.error(
            "%s %s: %s %s: %s",
            method, path, response.status_code, response.reason_phrase, message,
        )
        details = body.decode("utf-8", errors="replace")[:1000] or None
        raise HTTPStatusError(response.status_code, message, details)

    return body
