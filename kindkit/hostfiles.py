"""Creation of files on the host for collected node data."""

from __future__ import annotations

import os
from typing import BinaryIO


def file_on_host(path: str) -> BinaryIO:
    """Create (or truncate) the file at path, creating missing parent directories.

    The file is returned open for reading and writing in binary mode.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, mode=0o777, exist_ok=True)
    return open(path, "w+b")