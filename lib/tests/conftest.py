from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from httpwrap import client as client_mod
from httpwrap.client import Client


def _echo(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/get":
        return httpx.Response(200, text=request.url.params.get("v", ""))
    if path == "/post-form":
        form = parse_qs(request.content.decode("utf-8"))
        return httpx.Response(200, text=(form.get("v") or [""])[0])
    if path == "/post-body":
        return httpx.Response(200, content=request.content)
    if path == "/header":
        return httpx.Response(200, text=request.headers.get("h", ""))
    if path.startswith("/status/"):
        code = int(path.rsplit("/", 1)[1])
        return httpx.Response(code, text=request.url.params.get("v", ""))
    return httpx.Response(404, text="not found")


class EchoServer:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return _echo(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def echo() -> EchoServer:
    return EchoServer()


@pytest.fixture
def client(echo: EchoServer):
    c = Client(transport=echo.transport)
    yield c
    c.close()


@pytest.fixture
def default_echo(echo: EchoServer):
    c = Client(transport=echo.transport)
    previous = client_mod.set_default_client(c)
    yield echo
    client_mod.set_default_client(previous)
    c.close()
