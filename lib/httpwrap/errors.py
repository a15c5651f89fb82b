from __future__ import annotations


class HttpWrapError(Exception):
    """Base wrapper error."""


class RequestBuildError(HttpWrapError):
    """Request could not be constructed."""


class NetworkError(HttpWrapError):
    """Transport/network layer error."""


class BodyReadError(HttpWrapError):
    """Response body could not be read."""


class Not200Error(HttpWrapError):
    """Round trip succeeded but the status code was not 200."""


class JSONEncodeError(HttpWrapError):
    """Request object could not be serialized to JSON."""


class JSONDecodeFailure(HttpWrapError):
    """Response body could not be decoded into the target."""


class CompoundError(ExceptionGroup):
    """An earlier response error together with a JSON decode failure."""


ERR_NOT_200 = Not200Error("not 200 ok")


def wrap(kind: type[HttpWrapError], exc: BaseException) -> HttpWrapError:
    err = kind(str(exc) or type(exc).__name__)
    err.__cause__ = exc
    return err
