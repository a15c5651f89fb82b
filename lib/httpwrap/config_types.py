from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    conn_timeout_s: float = 1.0
    # Not applied: httpx exposes no TCP keep-alive interval on its default transport.
    keep_alive_s: float = 30.0
    max_idle_conns: int = 8
    idle_conn_timeout_s: float = 90.0
    tls_handshake_timeout_s: float = 10.0
    # Not applied: httpx never sends "Expect: 100-continue".
    expect_continue_timeout_s: float = 1.0
    # Applied per phase (read/write/pool), not as one deadline for the whole
    # request; a body trickled in small chunks can take longer than this in total.
    request_timeout_s: float = 5.0
    insecure_skip_verify: bool = False


DEFAULT_CLIENT_CONFIG = ClientConfig()
