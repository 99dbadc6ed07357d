from kindkit.loadbalancer import ConfigData, render_config


def _server_lines(text):
    return [line.strip() for line in text.splitlines() if line.strip().startswith("server ")]


def test_header_and_frontend_port():
    text = render_config(ConfigData(control_plane_port=6443))
    assert text.startswith("# generated by kind\n")
    assert "  bind *:6443\n" in text
    assert ":::6443" not in text


def test_ipv6_adds_second_bind():
    text = render_config(ConfigData(control_plane_port=7000, ipv6=True))
    lines = text.splitlines()
    index = lines.index("  bind *:7000")
    assert lines[index + 1] == "  bind :::7000;"
    assert lines[index + 2] == "  default_backend kube-apiservers"


def test_ipv4_leaves_blank_bind_line():
    lines = render_config(ConfigData(control_plane_port=7000)).splitlines()
    index = lines.index("  bind *:7000")
    assert lines[index + 1].strip() == ""
    assert lines[index + 2] == "  default_backend kube-apiservers"


def test_backend_servers_sorted_with_family():
    servers = {"kind-control-plane2": "10.0.0.3:6443", "kind-control-plane": "10.0.0.2:6443"}
    text = render_config(ConfigData(control_plane_port=6443, backend_servers=servers))
    found = _server_lines(text)
    assert found == [
        f"server {name} {servers[name]} check check-ssl verify none resolvers docker resolve-prefer ipv4"
        for name in sorted(servers)
    ]
    assert text.endswith("resolve-prefer ipv4\n")


def test_ipv6_servers_prefer_ipv6():
    servers = {"a": "[fd00::2]:6443", "b": "[fd00::3]:6443"}
    text = render_config(ConfigData(control_plane_port=6443, backend_servers=servers, ipv6=True))
    found = _server_lines(text)
    assert len(found) == len(servers)
    assert all(line.endswith("resolve-prefer ipv6") for line in found)


def test_no_servers():
    text = render_config(ConfigData(control_plane_port=6443))
    assert _server_lines(text) == []
    assert text.endswith("\n")