# kindkit

Helpers for working with local Kubernetes clusters whose nodes run as
containers. It is a library: there are no commands to run.

- **Kubeconfig handling** (`kindkit.read`, `kindkit.merge`,
  `kindkit.remove`, `kindkit.encode`, `kindkit.write`): turn the admin
  kubeconfig written by kubeadm into a per-cluster entry named
  `kind-<name>`, merge it into the user's kubeconfig, and remove it again.
- **Kubeconfig locations** (`kindkit.paths`): the explicit path first,
  then the `$KUBECONFIG` list, then `$HOME/.kube/config`, as kubectl
  finds them.
- **Load balancer config** (`kindkit.loadbalancer`): render the HAProxy
  configuration for the control-plane load balancer.
- **Node helpers**: name nodes by role, pick free host ports, work out
  proxy environment variables, collect the node images a cluster needs,
  wait for a log line saying a node's cgroups are ready, and unpack a tar
  stream of node files onto the host.

## Install

```
pip install kindkit
```

For the tests:

```
pip install "kindkit[test]"
pytest
```

## Kubeconfig

```python
from kindkit.read import kind_from_raw_kubeadm
from kindkit.merge import write_merged
from kindkit.remove import remove_kind
from kindkit.encode import encode

with open("admin.conf") as f:
    cfg = kind_from_raw_kubeadm(f.read(), "dev", "https://127.0.0.1:6443")

print(encode(cfg))       # YAML text with sorted keys; "" for an empty config
write_merged(cfg, "")    # merge into the kubeconfig kubectl would write to
remove_kind("dev", "")   # drop the kind-dev entries from every kubeconfig considered
```

`kind_from_raw_kubeadm` renames the cluster, user and context to
`kind-<name>`, makes that the current context, and replaces the server
address only when one is given. The config is a `kindkit.types.Config`
dataclass; fields that are not modelled are kept in `other_fields` and
written back unchanged.

`merge` replaces entries of the same name and appends the rest.
`write_merged` and `remove_kind` hold a lock while they work, the same
way kubectl does, by creating `<file>.lock` next to the file
(`kindkit.lock.locked`); if the lock file already exists,
`FileExistsError` is raised. A kubeadm kubeconfig that does not hold
exactly one cluster, one user and one context, or YAML that cannot be
parsed, is rejected with `kindkit.helpers.KubeconfigError`. Files are
written with mode 0600, creating missing parent directories.

## Load balancer

```python
from kindkit.loadbalancer import ConfigData, render_config, IMAGE, CONFIG_PATH

text = render_config(ConfigData(
    control_plane_port=6443,
    backend_servers={"dev-control-plane": "dev-control-plane:6443"},
    ipv6=False,
))
```

Backend servers are listed in order of their names. `IMAGE` is the
HAProxy image and tag, `CONFIG_PATH` where the configuration goes in it.

## Node helpers

```python
from kindkit.namer import make_node_namer
from kindkit.ports import port_or_get_free_port
from kindkit.proxy import get_proxy_envs
from kindkit.images import required_node_images

name = make_node_namer("dev")
name("worker")   # "dev-worker"
name("worker")   # "dev-worker2"

port_or_get_free_port(0, "127.0.0.1")   # a free port picked on the host
port_or_get_free_port(-1, "127.0.0.1")  # 0: let the backend choose
port_or_get_free_port(80, "127.0.0.1")  # 80

# reads HTTP_PROXY, HTTPS_PROXY, NO_PROXY (or their lower-case forms)
# and adds the subnets to NO_PROXY when any proxy is set
get_proxy_envs("10.96.0.0/16", "10.244.0.0/16")

required_node_images(["img:a", "img:b", "img:a"])   # {"img:a", "img:b"}
```

Other helpers:

- `kindkit.cgroups.wait_until_log_regexp_matches(lines, pattern)` reads an
  iterable of log lines until one matches, raising `LogMatchError` if none
  does; `node_reached_cgroups_ready_regexp()` gives the pattern to wait for.
- `kindkit.untar.dump_dir_command(node_dir)` returns the `sh -c` command
  line that writes a node directory as a tar stream;
  `kindkit.untar.untar(stream, directory)` extracts such a stream,
  creating regular files and directories and logging a warning for other
  entry types. Errors raise `UntarError`.
- `kindkit.hostfiles.file_on_host(path)` creates a file, making missing
  parent directories.
- `kindkit.ports.API_SERVER_INTERNAL_PORT` is 6443.

## What it does not do

kindkit does not talk to a container runtime, create or delete clusters,
or run commands on nodes. The caller supplies the kubeadm kubeconfig
text, the API server address, the log lines to scan and the tar stream
to extract; `dump_dir_command` only builds a command line, it does not
run it.