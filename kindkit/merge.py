"""Merging kind kubeconfig entries into existing kubeconfig files."""

from __future__ import annotations

from typing import Protocol, TypeVar

from kindkit.helpers import check_kubeadm_expectations
from kindkit.lock import locked
from kindkit.paths import path_for_merge
from kindkit.read import read
from kindkit.types import Config
from kindkit.write import write


class _Named(Protocol):
    name: str


_T = TypeVar("_T", bound=_Named)


def _upsert(entries: list[_T], entry: _T) -> None:
    replaced = False
    for index, current in enumerate(entries):
        if current.name == entry.name:
            entries[index] = entry
            replaced = True
    if not replaced:
        entries.append(entry)


def merge(existing: Config, kind: Config) -> None:
    """Merge the kind config's entries into existing, in place.

    Entries with the same name are replaced, others appended; the current
    context becomes the kind config's.
    """
    check_kubeadm_expectations(kind)

    _upsert(existing.clusters, kind.clusters[0])
    _upsert(existing.users, kind.users[0])
    _upsert(existing.contexts, kind.contexts[0])

    existing.current_context = kind.current_context

    # Some clients depend on apiVersion and kind being present.
    if not existing.other_fields:
        existing.other_fields = kind.other_fields


def write_merged(kind_config: Config, explicit_config_path: str = "") -> None:
    """Merge kind_config into the kubeconfig kubectl would write to, and save it."""
    config_path = path_for_merge(explicit_config_path)
    with locked(config_path):
        existing = read(config_path)
        merge(existing, kind_config)
        write(existing, config_path)