"""Node images a cluster needs."""

from __future__ import annotations

from collections.abc import Iterable


def required_node_images(node_images: Iterable[str]) -> set[str]:
    """Return the distinct node images, excluding any load balancer image."""
    return set(node_images)