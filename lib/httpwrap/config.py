from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from .config_types import ClientConfig
from .server import ServerConfig

APP_NAME = "httpwrap"
CONFIG_FILENAME = "config.toml"


@dataclass
class HttpConfig:
    client: ClientConfig = field(default_factory=ClientConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> HttpConfig:
    return HttpConfig(client=ClientConfig(), server=ServerConfig())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: HttpConfig) -> dict[str, Any]:
    return {
        "client": {f.name: getattr(cfg.client, f.name) for f in fields(cfg.client)},
        "server": {f.name: getattr(cfg.server, f.name) for f in fields(cfg.server)},
    }


def _coerce(raw: Any, default: Any) -> Any:
    if isinstance(default, bool):
        return raw if isinstance(raw, bool) else default
    if isinstance(raw, bool):
        return default
    if isinstance(default, int):
        try:
            value = int(raw)
        except Exception:
            return default
        return value if value >= 0 else default
    if isinstance(default, float):
        try:
            value = float(raw)
        except Exception:
            return default
        return value if value >= 0 else default
    return default


def _section(cls: type, raw: Any) -> Any:
    defaults = cls()
    if not isinstance(raw, dict):
        return defaults
    values = {}
    for f in fields(cls):
        default = getattr(defaults, f.name)
        values[f.name] = _coerce(raw[f.name], default) if f.name in raw else default
    return cls(**values)


def from_toml(data: dict[str, Any]) -> HttpConfig:
    return HttpConfig(
        client=_section(ClientConfig, data.get("client")),
        server=_section(ServerConfig, data.get("server")),
    )


def load_config(path: str | None = None) -> HttpConfig:
    path = path or config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: HttpConfig, path: str | None = None) -> str:
    path = path or config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
