"""Recommended timeouts for servers built by callers.

No routing or handlers live here; pass the values to whatever server you
construct (``as_dict`` keys match the field names).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ServerConfig:
    read_timeout_s: float = 10.0
    read_header_timeout_s: float = 5.0
    write_timeout_s: float = 10.0
    idle_timeout_s: float = 600.0

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


DEFAULT_SERVER_CONFIG = ServerConfig()
