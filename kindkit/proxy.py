"""Proxy settings passed through to cluster nodes."""

from __future__ import annotations

import os
from collections.abc import Callable

HTTP_PROXY = "HTTP_PROXY"
HTTPS_PROXY = "HTTPS_PROXY"
NO_PROXY = "NO_PROXY"


def get_proxy_envs(
    service_subnet: str,
    pod_subnet: str,
    getenv: Callable[[str], str | None] | None = None,
) -> dict[str, str]:
    """Return the proxy environment variables to set on nodes.

    Each variable is read in upper case, then lower case, and set under both
    names. When any proxy setting is present, the cluster subnets are added
    to NO_PROXY.
    """
    source = getenv if getenv is not None else os.environ.get

    def env(key: str) -> str:
        return source(key) or ""

    envs: dict[str, str] = {}
    for name in (HTTP_PROXY, HTTPS_PROXY, NO_PROXY):
        value = env(name) or env(name.lower())
        if value:
            envs[name] = value
            envs[name.lower()] = value

    if envs:
        subnets = f"{service_subnet},{pod_subnet}"
        existing = envs.get(NO_PROXY, "")
        no_proxy = f"{existing},{subnets}" if existing else subnets
        envs[NO_PROXY] = no_proxy
        envs[NO_PROXY.lower()] = no_proxy
    return envs