__version__ = "0.1.0"

from .client import (
    Client,
    default_client,
    get,
    post,
    post_body_bytes,
    post_body_string,
    post_form,
    post_json_bytes,
    post_json_object,
    set_default_client,
)
from .config_types import DEFAULT_CLIENT_CONFIG, ClientConfig
from .logging_ import disable_debug_logging, enable_debug_logging
from .errors import (
    ERR_NOT_200,
    BodyReadError,
    CompoundError,
    HttpWrapError,
    JSONDecodeFailure,
    JSONEncodeError,
    NetworkError,
    Not200Error,
    RequestBuildError,
)
from .response import ClientResponse
from .server import DEFAULT_SERVER_CONFIG, ServerConfig

__all__ = [
    "Client",
    "ClientConfig",
    "ClientResponse",
    "DEFAULT_CLIENT_CONFIG",
    "DEFAULT_SERVER_CONFIG",
    "ERR_NOT_200",
    "ServerConfig",
    "BodyReadError",
    "CompoundError",
    "HttpWrapError",
    "JSONDecodeFailure",
    "JSONEncodeError",
    "NetworkError",
    "Not200Error",
    "RequestBuildError",
    "default_client",
    "disable_debug_logging",
    "enable_debug_logging",
    "get",
    "post",
    "post_body_bytes",
    "post_body_string",
    "post_form",
    "post_json_bytes",
    "post_json_object",
    "set_default_client",
]
