import os

from kindkit.hostfiles import file_on_host


def test_creates_parent_directories(tmp_path):
    target = tmp_path / "a" / "b" / "journal.log"
    with file_on_host(str(target)) as handle:
        handle.write(b"log data")
    assert target.read_bytes() == b"log data"
    assert os.path.isdir(tmp_path / "a" / "b")


def test_truncates_existing_file(tmp_path):
    target = tmp_path / "images.log"
    target.write_bytes(b"a much longer previous content")
    with file_on_host(str(target)) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"new"


def test_handle_is_readable(tmp_path):
    target = tmp_path / "x" / "kubelet.log"
    with file_on_host(str(target)) as handle:
        handle.write(b"round trip")
        handle.seek(0)
        assert handle.read() == b"round trip"