"""Small helpers shared by the kubeconfig operations."""

from __future__ import annotations

from kindkit.types import Config


class KubeconfigError(Exception):
    """Raised when a kubeconfig does not meet expectations."""


def kind_cluster_key(cluster_name: str) -> str:
    """Return the key that identifies a kind cluster in kubeconfig files."""
    return "kind-" + cluster_name


def check_kubeadm_expectations(cfg: Config) -> None:
    """Check that a kubeadm kubeconfig has exactly one cluster, user and context."""
    if len(cfg.clusters) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one cluster, but read {len(cfg.clusters)}"
        )
    if len(cfg.users) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one user, but read {len(cfg.users)}"
        )
    if len(cfg.contexts) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one context, but read {len(cfg.contexts)}"
        )