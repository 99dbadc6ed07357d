"""Host port selection for cluster nodes."""

from __future__ import annotations

import socket

API_SERVER_INTERNAL_PORT = 6443
"""Port the control plane listens on inside the node network."""


def port_or_get_free_port(port: int, listen_addr: str) -> int:
    """Return port if set, 0 for -1 (let the backend pick), or a free port for 0."""
    if port == -1:
        return 0
    if port == 0:
        return get_free_port(listen_addr)
    return port


def get_free_port(listen_addr: str) -> int:
    """Return a TCP port that is currently free on listen_addr.

    Raises OSError if the address cannot be resolved or bound.
    """
    flags = socket.AI_PASSIVE
    if ":" in listen_addr:
        # host names never contain colons, so this must be a literal address
        flags |= socket.AI_NUMERICHOST
    infos = socket.getaddrinfo(listen_addr or None, 0, type=socket.SOCK_STREAM, flags=flags)

    last_error: OSError | None = None
    for family, socktype, proto, _, sockaddr in infos:
        try:
            with socket.socket(family, socktype, proto) as sock:
                sock.bind(sockaddr)
                sock.listen(1)
                return int(sock.getsockname()[1])
        except OSError as exc:
            last_error = exc
    if last_error is not None:
        raise last_error
    raise OSError(f"no usable address for {listen_addr!r}")