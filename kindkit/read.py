"""Reading kubeconfig documents from kubeadm output and from disk."""

from __future__ import annotations

from typing import Any

import yaml

from kindkit.helpers import KubeconfigError, check_kubeadm_expectations, kind_cluster_key
from kindkit.types import Config


def _decode(raw: str | bytes, source: str) -> Config:
    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to parse {source}: {exc}") from exc
    try:
        return Config.from_dict(data)
    except TypeError as exc:
        raise KubeconfigError(f"invalid {source}: {exc}") from exc


def kind_from_raw_kubeadm(
    raw_kubeadm_kubeconfig: str, cluster_name: str, server: str = ""
) -> Config:
    """Derive a kind kubeconfig from the raw kubeadm one.

    Every named reference is renamed to the cluster's kind key; the server
    endpoint is replaced only when server is non-empty.
    """
    cfg = _decode(raw_kubeadm_kubeconfig, "kubeadm kubeconfig")
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cfg.clusters[0].name = key
    cfg.users[0].name = key
    cfg.contexts[0].name = key
    cfg.contexts[0].context.user = key
    cfg.contexts[0].context.cluster = key
    cfg.current_context = key

    if server:
        cfg.clusters[0].cluster.server = server

    return cfg


def read(config_path: str) -> Config:
    """Load the kubeconfig at config_path; a missing file gives an empty config."""
    try:
        with open(config_path, "rb") as handle:
            raw = handle.read()
    except FileNotFoundError:
        return Config()
    return _decode(raw, config_path)