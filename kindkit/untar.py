"""Extraction of directory dumps taken from cluster nodes."""

from __future__ import annotations

import logging
import os
import posixpath
import shlex
import shutil
import tarfile
from typing import BinaryIO

_log = logging.getLogger(__name__)

_CHUNK = 64 * 1024


class UntarError(Exception):
    """Raised when a tar stream cannot be read or extracted."""


class _CountingReader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.count = 0

    def read(self, size: int = -1) -> bytes:
        data = self._stream.read(size)
        self.count += len(data)
        return data


class _CountingWriter:
    def __init__(self, handle: BinaryIO) -> None:
        self._handle = handle
        self.count = 0

    def write(self, data: bytes) -> int:
        written = self._handle.write(data)
        self.count += len(data)
        return written


def _clean(node_dir: str) -> str:
    cleaned = posixpath.normpath(node_dir)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def dump_dir_command(node_dir: str) -> list[str]:
    """Return the command that writes node_dir as a tar stream to stdout.

    Exit status 1 from tar (files changed while archiving) is ignored.
    """
    script = (
        f"tar --hard-dereference -C {shlex.quote(_clean(node_dir) + '/')} -chf - . "
        "|| (r=$?; [ $r -eq 1 ] || exit $r)"
    )
    return ["sh", "-c", script]


def _target(directory: str, name: str) -> str:
    rel = name.replace("/", os.sep)
    return os.path.normpath(directory + os.sep + rel)


def _extract_file(archive: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> None:
    fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
    source = archive.extractfile(member)
    try:
        with os.fdopen(fd, "r+b") as handle:
            writer = _CountingWriter(handle)
            if source is not None:
                shutil.copyfileobj(source, writer, _CHUNK)
    except (OSError, tarfile.TarError) as exc:
        raise UntarError(f"error writing to {target}: {exc}") from exc
    if writer.count != member.size:
        raise UntarError(
            f"only wrote {writer.count} bytes to {target}; expected {member.size}"
        )


def untar(stream: BinaryIO, directory: str, logger: logging.Logger | None = None) -> None:
    """Extract the tar stream into directory.

    Regular files and directories are created; other entry types are
    skipped with a warning. The stream is read to its end afterwards.
    """
    logger = logger or _log
    reader = _CountingReader(stream)
    try:
        archive = tarfile.open(fileobj=reader, mode="r|")  # type: ignore[call-overload]
    except tarfile.ReadError as exc:
        if reader.count == 0:
            return
        raise UntarError(f"tar reading error: {exc}") from exc

    with archive:
        try:
            for member in archive:
                target = _target(directory, member.name)
                if member.isreg():
                    _extract_file(archive, member, target)
                elif member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, mode=0o755, exist_ok=True)
                else:
                    logger.warning(
                        "tar file entry %s contained unsupported file type %r",
                        member.name,
                        member.type,
                    )
        except tarfile.TarError as exc:
            raise UntarError(f"tar reading error: {exc}") from exc

    # drain trailing padding so the writer is not left blocked
    while reader.read(_CHUNK):
        pass