"""Naming of cluster nodes by role."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable


def make_node_namer(cluster_name: str) -> Callable[[str], str]:
    """Return a function mapping a node role to the next node name for that role.

    The first node of a role is named "<cluster>-<role>", later ones get a
    numeric suffix starting at 2.
    """
    counter: Counter[str] = Counter()

    def name_node(role: str) -> str:
        counter[role] += 1
        count = counter[role]
        suffix = str(count) if count > 1 else ""
        return f"{cluster_name}-{role}{suffix}"

    return name_node