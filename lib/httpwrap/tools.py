from __future__ import annotations

import socket

from .errors import NetworkError, wrap

PROBE_ADDR = ("8.8.8.8", 80)


def server_outer_ip(probe: tuple[str, int] = PROBE_ADDR) -> str:
    """Return the local address this host uses for outbound traffic.

    Connecting a UDP socket only selects a route; no packet is sent.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(probe)
            return s.getsockname()[0]
    except OSError as e:
        raise wrap(NetworkError, e) from e
