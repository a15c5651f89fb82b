from __future__ import annotations

import logging
from typing import Any

import httpx

from . import __version__
from .config_types import DEFAULT_CLIENT_CONFIG, ClientConfig
from .errors import ERR_NOT_200, BodyReadError, NetworkError, RequestBuildError, wrap
from .response import ClientResponse

log = logging.getLogger(__name__)

MAX_REDIRECTS = 10


def build_timeout(cfg: ClientConfig) -> httpx.Timeout:
    # httpx's connect phase covers both the TCP dial and the TLS handshake.
    connect = min(cfg.conn_timeout_s + cfg.tls_handshake_timeout_s, cfg.request_timeout_s)
    return httpx.Timeout(cfg.request_timeout_s, connect=connect)


def build_limits(cfg: ClientConfig) -> httpx.Limits:
    return httpx.Limits(
        max_connections=None,
        max_keepalive_connections=cfg.max_idle_conns,
        keepalive_expiry=cfg.idle_conn_timeout_s,
    )


class Transport:
    def __init__(self, cfg: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg or DEFAULT_CLIENT_CONFIG
        self._client = httpx.Client(
            timeout=build_timeout(self._cfg),
            limits=build_limits(self._cfg),
            verify=not self._cfg.insecure_skip_verify,
            headers={"User-Agent": f"httpwrap/{__version__}"},
            trust_env=True,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, url: str, *, headers: Any = None, content: Any = None) -> ClientResponse:
        try:
            req = self._client.build_request(method, url, headers=headers, content=content)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            log.debug("%s %s: cannot build request: %s", method, url, e)
            return ClientResponse(b"", None, wrap(RequestBuildError, e))

        try:
            r = self._client.send(req, stream=True)
        except httpx.RequestError as e:
            log.debug("%s %s: request failed: %s", method, url, e)
            return ClientResponse(b"", None, wrap(NetworkError, e))

        try:
            body = r.read()
        except (httpx.RequestError, httpx.StreamError) as e:
            log.debug("%s %s: body read failed: %s", method, url, e)
            return ClientResponse(b"", r, wrap(BodyReadError, e))
        finally:
            r.close()

        log.debug("%s %s -> %s (%d bytes)", method, url, r.status_code, len(body))
        if r.status_code != httpx.codes.OK:
            return ClientResponse(body, r, ERR_NOT_200)
        return ClientResponse(body, r, None)
