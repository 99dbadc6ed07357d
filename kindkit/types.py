"""Kubeconfig data model.

Only the fields that cluster tooling inspects or modifies are modelled
explicitly; everything else is carried in ``other_fields`` so that it can be
written back unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")


def _rest(data: Mapping[str, Any], known: set[str]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


@dataclass
class Cluster:
    """How to communicate with a kubernetes cluster."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Cluster:
        data = _mapping(data, "cluster")
        return cls(
            server=_string(data.get("server"), "server"),
            other_fields=_rest(data, {"server"}),
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.server:
            out["server"] = self.server
        return out


@dataclass
class NamedCluster:
    """A cluster entry with its nickname."""

    name: str = ""
    cluster: Cluster = field(default_factory=Cluster)

    @classmethod
    def from_dict(cls, data: Any) -> NamedCluster:
        data = _mapping(data, "cluster entry")
        return cls(
            name=_string(data.get("name"), "name"),
            cluster=Cluster.from_dict(data.get("cluster")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cluster": self.cluster.to_dict()}


@dataclass
class NamedUser:
    """A user entry with its nickname; the user data is kept untouched."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> NamedUser:
        data = _mapping(data, "user entry")
        return cls(
            name=_string(data.get("name"), "name"),
            user=dict(_mapping(data.get("user"), "user")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "user": dict(self.user)}


@dataclass
class Context:
    """References to a cluster and a user, plus any other context settings."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Context:
        data = _mapping(data, "context")
        return cls(
            cluster=_string(data.get("cluster"), "cluster"),
            user=_string(data.get("user"), "user"),
            other_fields=_rest(data, {"cluster", "user"}),
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        out["cluster"] = self.cluster
        out["user"] = self.user
        return out


@dataclass
class NamedContext:
    """A context entry with its nickname."""

    name: str = ""
    context: Context = field(default_factory=Context)

    @classmethod
    def from_dict(cls, data: Any) -> NamedContext:
        data = _mapping(data, "context entry")
        return cls(
            name=_string(data.get("name"), "name"),
            context=Context.from_dict(data.get("context")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "context": self.context.to_dict()}


def _entries(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list, got {type(value).__name__}")
    return value


@dataclass
class Config:
    """A kubeconfig document."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    _KNOWN = frozenset({"clusters", "users", "contexts", "current-context"})

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        data = _mapping(data, "kubeconfig")
        return cls(
            clusters=[NamedCluster.from_dict(item) for item in _entries(data, "clusters")],
            users=[NamedUser.from_dict(item) for item in _entries(data, "users")],
            contexts=[NamedContext.from_dict(item) for item in _entries(data, "contexts")],
            current_context=_string(data.get("current-context"), "current-context"),
            other_fields=_rest(data, set(cls._KNOWN)),
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.clusters:
            out["clusters"] = [item.to_dict() for item in self.clusters]
        if self.users:
            out["users"] = [item.to_dict() for item in self.users]
        if self.contexts:
            out["contexts"] = [item.to_dict() for item in self.contexts]
        if self.current_context:
            out["current-context"] = self.current_context
        return out