from __future__ import annotations

import inspect
import json
from typing import Any

import httpx

from .errors import CompoundError, JSONDecodeFailure, wrap

_MISSING = object()


class ClientResponse:
    """Buffered body, raw response and deferred error of one request.

    Request methods never raise: whatever went wrong is stored here and handed
    back by every accessor, next to the body and the ``httpx.Response`` (which
    is ``None`` when no response was received).
    """

    __slots__ = ("_body", "_resp", "_err")

    def __init__(self, body: bytes, resp: httpx.Response | None, err: Exception | None):
        self._body = body
        self._resp = resp
        self._err = err

    @property
    def body(self) -> bytes:
        return self._body

    @property
    def response(self) -> httpx.Response | None:
        return self._resp

    @property
    def error(self) -> Exception | None:
        return self._err

    def bytes(self) -> tuple[bytes, httpx.Response | None, Exception | None]:
        return self._body, self._resp, self._err

    def string(self) -> tuple[str, httpx.Response | None, Exception | None]:
        return self._body.decode("utf-8", errors="replace"), self._resp, self._err

    def json_object(self, target: Any) -> tuple[str, httpx.Response | None, Exception | None]:
        """Decode the body into ``target``.

        Dicts are updated, lists are replaced in place, other objects get the
        attributes matching the decoded keys (case-insensitively) assigned,
        all of them or none.
        A decode failure is combined with any earlier error into a
        :class:`CompoundError`.
        """
        text = self._body.decode("utf-8", errors="replace")
        try:
            _fill(target, json.loads(self._body))
        except (ValueError, TypeError, AttributeError) as e:
            decode_err = wrap(JSONDecodeFailure, e)
            if self._err is not None:
                compound = CompoundError(
                    "response error and json decode failure",
                    [self._err, decode_err],
                )
                return text, self._resp, compound
            return text, self._resp, decode_err
        return text, self._resp, self._err

    def __repr__(self) -> str:
        status = self._resp.status_code if self._resp is not None else None
        return f"ClientResponse(status={status!r}, body={len(self._body)} bytes, error={self._err!r})"


def _fill(target: Any, data: Any) -> None:
    if isinstance(target, dict):
        if not isinstance(data, dict):
            raise TypeError(f"cannot decode {type(data).__name__} into dict")
        target.update(data)
        return
    if isinstance(target, list):
        if not isinstance(data, list):
            raise TypeError(f"cannot decode {type(data).__name__} into list")
        target[:] = data
        return
    if not isinstance(data, dict):
        raise TypeError(f"cannot decode {type(data).__name__} into {type(target).__name__}")

    names = {name.lower(): name for name in _attribute_names(target)}
    pairs = [(names[str(key).lower()], value) for key, value in data.items() if str(key).lower() in names]
    _assign_all(target, pairs)


def _assign_all(target: Any, pairs: list[tuple[str, Any]]) -> None:
    # all or nothing: undo earlier assignments if a later one is rejected
    done: list[tuple[str, Any]] = []
    try:
        for name, value in pairs:
            old = getattr(target, name, _MISSING)
            setattr(target, name, value)
            done.append((name, old))
    except (AttributeError, TypeError):
        for name, old in reversed(done):
            if old is _MISSING:
                delattr(target, name)
            else:
                setattr(target, name, old)
        raise


def _attribute_names(target: Any) -> list[str]:
    fields = getattr(target, "__dataclass_fields__", None)
    if fields:
        return list(fields)

    names: dict[str, None] = {}
    for cls in reversed(type(target).__mro__):
        if cls is object:
            continue
        names.update(dict.fromkeys(inspect.get_annotations(cls)))
        slots = cls.__dict__.get("__slots__", ())
        names.update(dict.fromkeys([slots] if isinstance(slots, str) else slots))
    if hasattr(target, "__dict__"):
        names.update(dict.fromkeys(vars(target)))
    elif not names:
        raise TypeError(f"cannot decode into {type(target).__name__}")
    names.pop("__dict__", None)
    names.pop("__weakref__", None)
    return list(names)
