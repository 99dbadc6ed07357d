"""Removing kind cluster entries from kubeconfig files."""

from __future__ import annotations

from kindkit.helpers import kind_cluster_key
from kindkit.lock import locked
from kindkit.paths import paths
from kindkit.read import read
from kindkit.types import Config
from kindkit.write import write


def remove(cfg: Config, kind_cluster_name: str) -> bool:
    """Drop the kind cluster's entries from cfg in place; return whether cfg changed."""
    key = kind_cluster_key(kind_cluster_name)
    before = (len(cfg.clusters), len(cfg.users), len(cfg.contexts))

    cfg.clusters = [c for c in cfg.clusters if c.name != key]
    cfg.users = [u for u in cfg.users if u.name != key]
    cfg.contexts = [c for c in cfg.contexts if c.name != key]
    mutated = before != (len(cfg.clusters), len(cfg.users), len(cfg.contexts))

    if cfg.current_context == key:
        cfg.current_context = ""
        mutated = True

    return mutated


def remove_kind(kind_cluster_name: str, explicit_path: str = "") -> None:
    """Remove the kind cluster from every kubeconfig file kubectl would consider."""
    for config_path in paths(explicit_path):
        with locked(config_path):
            existing = read(config_path)
            if remove(existing, kind_cluster_name):
                write(existing, config_path)