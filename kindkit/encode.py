"""Encoding of kubeconfig documents to YAML."""

from __future__ import annotations

import yaml

from kindkit.types import Config


def encode(cfg: Config) -> str:
    """Encode cfg as normalized YAML with sorted keys; an empty config gives ""."""
    data = cfg.to_dict()
    encoded = yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
    if encoded == "{}\n":
        return ""
    return encoded