import pytest

from kindkit.types import (
    Cluster,
    Config,
    Context,
    NamedCluster,
    NamedContext,
    NamedUser,
)


SAMPLE = {
    "apiVersion": "v1",
    "kind": "Config",
    "preferences": {},
    "clusters": [
        {
            "name": "kind-kind",
            "cluster": {
                "server": "https://127.0.0.1:6443",
                "certificate-authority-data": "definitelyacert",
            },
        }
    ],
    "contexts": [
        {"name": "kind-kind", "context": {"cluster": "kind-kind", "user": "kind-kind"}}
    ],
    "current-context": "kind-kind",
    "users": [
        {
            "name": "kind-kind",
            "user": {"client-certificate-data": "seemslegit", "client-key-data": "yep"},
        }
    ],
}


def test_config_from_dict_reads_known_fields():
    cfg = Config.from_dict(SAMPLE)
    assert cfg.current_context == "kind-kind"
    assert cfg.clusters[0].name == "kind-kind"
    assert cfg.clusters[0].cluster.server == "https://127.0.0.1:6443"
    assert cfg.clusters[0].cluster.other_fields == {
        "certificate-authority-data": "definitelyacert"
    }
    assert cfg.contexts[0].context == Context(cluster="kind-kind", user="kind-kind")
    assert cfg.users[0].user == {
        "client-certificate-data": "seemslegit",
        "client-key-data": "yep",
    }


def test_config_other_fields_hold_unknown_keys():
    cfg = Config.from_dict(SAMPLE)
    assert cfg.other_fields == {"apiVersion": "v1", "kind": "Config", "preferences": {}}


def test_config_round_trip():
    assert Config.from_dict(SAMPLE).to_dict() == SAMPLE


def test_empty_config_to_dict_is_empty():
    assert Config().to_dict() == {}


def test_from_dict_none_gives_default():
    assert Config.from_dict(None) == Config()


def test_cluster_omits_empty_server():
    assert Cluster(other_fields={"a": 1}).to_dict() == {"a": 1}


def test_named_entries_always_write_name_and_body():
    assert NamedCluster(name="x").to_dict() == {"name": "x", "cluster": {}}
    assert NamedUser(name="x").to_dict() == {"name": "x", "user": {}}
    assert NamedContext(name="x").to_dict() == {
        "name": "x",
        "context": {"cluster": "", "user": ""},
    }


def test_context_round_trip_keeps_namespace():
    data = {"cluster": "c", "user": "u", "namespace": "ns"}
    ctx = Context.from_dict(data)
    assert ctx.other_fields == {"namespace": "ns"}
    assert ctx.to_dict() == data


def test_non_mapping_is_rejected():
    with pytest.raises(TypeError):
        Config.from_dict(["not", "a", "mapping"])


def test_non_list_clusters_rejected():
    with pytest.raises(TypeError):
        Config.from_dict({"clusters": "nope"})


def test_non_string_name_rejected():
    with pytest.raises(TypeError):
        NamedCluster.from_dict({"name": {"nested": True}})