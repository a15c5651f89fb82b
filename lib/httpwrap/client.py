from __future__ import annotations

import dataclasses
import json
import threading
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from .config_types import ClientConfig
from .errors import JSONEncodeError, wrap
from .response import ClientResponse
from .transport import Transport

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class Client:
    def __init__(self, conf: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        self._t = Transport(conf, transport=transport)

    @property
    def conf(self) -> ClientConfig:
        return self._t.config

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def get(self, url: str) -> ClientResponse:
        return self._t.request("GET", url)

    def post(self, url: str, content_type: str, headers: Any = None, body: Any = None) -> ClientResponse:
        """POST ``body`` with ``content_type`` replacing any caller-supplied Content-Type."""
        return self._t.request("POST", url, headers=_with_content_type(headers, content_type), content=body)

    def post_form(self, url: str, headers: Any = None, data: Mapping[str, Any] | None = None) -> ClientResponse:
        return self.post(url, FORM_CONTENT_TYPE, headers, encode_form(data))

    def post_json_bytes(self, url: str, headers: Any = None, json_bytes: bytes = b"") -> ClientResponse:
        return self.post(url, JSON_CONTENT_TYPE, headers, json_bytes)

    def post_json_object(self, url: str, headers: Any = None, obj: Any = None) -> ClientResponse:
        """Serialize ``obj`` and POST it; nothing is sent if serialization fails."""
        try:
            body = encode_json(obj)
        except (TypeError, ValueError) as e:
            return ClientResponse(b"", None, wrap(JSONEncodeError, e))
        return self.post(url, JSON_CONTENT_TYPE, headers, body)

    def post_body_string(self, url: str, headers: Any = None, data: str = "") -> ClientResponse:
        return self.post(url, FORM_CONTENT_TYPE, headers, data.encode("utf-8"))

    def post_body_bytes(self, url: str, headers: Any = None, data: bytes = b"") -> ClientResponse:
        return self.post(url, FORM_CONTENT_TYPE, headers, data)


def _with_content_type(headers: Any, content_type: str) -> list[tuple[str, str]]:
    items = httpx.Headers(headers).multi_items() if headers else []
    items = [(name, value) for name, value in items if name.lower() != "content-type"]
    items.append(("Content-Type", content_type))
    return items


def encode_form(data: Mapping[str, Any] | None) -> str:
    # keys sorted, list values repeated
    if not data:
        return ""
    return urlencode(sorted(data.items()), doseq=True)


def encode_json(obj: Any) -> bytes:
    return json.dumps(
        obj,
        default=_json_default,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode("utf-8")


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


_default_client: Client | None = None
_default_lock = threading.Lock()


def default_client() -> Client:
    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = Client()
    return _default_client


def set_default_client(client: Client | None) -> Client | None:
    """Swap the shared client; ``None`` makes the next call build a fresh one."""
    global _default_client
    with _default_lock:
        previous, _default_client = _default_client, client
    return previous


def get(url: str) -> ClientResponse:
    return default_client().get(url)


def post(url: str, content_type: str, headers: Any = None, body: Any = None) -> ClientResponse:
    return default_client().post(url, content_type, headers, body)


def post_form(url: str, headers: Any = None, data: Mapping[str, Any] | None = None) -> ClientResponse:
    return default_client().post_form(url, headers, data)


def post_json_bytes(url: str, headers: Any = None, json_bytes: bytes = b"") -> ClientResponse:
    return default_client().post_json_bytes(url, headers, json_bytes)


def post_json_object(url: str, headers: Any = None, obj: Any = None) -> ClientResponse:
    return default_client().post_json_object(url, headers, obj)


def post_body_string(url: str, headers: Any = None, data: str = "") -> ClientResponse:
    return default_client().post_body_string(url, headers, data)


def post_body_bytes(url: str, headers: Any = None, data: bytes = b"") -> ClientResponse:
    return default_client().post_body_bytes(url, headers, data)
