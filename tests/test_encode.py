import yaml

from kindkit.encode import encode
from kindkit.types import Config

SAMPLE = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: cadata
    server: https://10.20.30.40:6443
  name: kind-demo
contexts:
- context:
    cluster: kind-demo
    user: kind-demo
  name: kind-demo
current-context: kind-demo
kind: Config
preferences: {}
users:
- name: kind-demo
  user:
    client-certificate-data: certdata
    client-key-data: placeholder
"""


def test_encode_roundtrip():
    cfg = Config.from_dict(yaml.safe_load(SAMPLE))
    assert encode(cfg) == SAMPLE


def test_encode_empty():
    assert encode(Config()) == ""


def test_encode_sorts_keys():
    cfg = Config(other_fields={"kind": "Config", "apiVersion": "v1"})
    assert encode(cfg) == "apiVersion: v1\nkind: Config\n"


def test_encode_decodes_back_to_same_config():
    cfg = Config.from_dict(yaml.safe_load(SAMPLE))
    assert Config.from_dict(yaml.safe_load(encode(cfg))) == cfg