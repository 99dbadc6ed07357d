"""Writing kubeconfig documents to disk."""

from __future__ import annotations

import os

from kindkit.encode import encode
from kindkit.types import Config


def write(cfg: Config, config_path: str) -> None:
    """Encode cfg and write it to config_path, creating parent directories."""
    encoded = encode(cfg)
    directory = os.path.dirname(config_path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, mode=0o755, exist_ok=True)
    fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(encoded)