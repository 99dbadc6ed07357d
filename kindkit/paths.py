"""Location of kubeconfig files, following the rules kubectl uses."""

from __future__ import annotations

import os
import posixpath
import stat
import sys
from collections.abc import Callable, Iterable

KUBECONFIG_ENV = "KUBECONFIG"

GetEnv = Callable[[str], "str | None"]


def _env_reader(getenv: GetEnv | None) -> Callable[[str], str]:
    source = getenv if getenv is not None else os.environ.get
    return lambda key: source(key) or ""


def _current_goos() -> str:
    return "windows" if sys.platform.startswith("win") else sys.platform


def paths(explicit_path: str, getenv: GetEnv | None = None) -> list[str]:
    """Return the kubeconfig paths to consider.

    An explicit path wins; otherwise the $KUBECONFIG list is used, and
    failing that $HOME/.kube/config.
    """
    env = _env_reader(getenv)
    if explicit_path:
        return [explicit_path]

    raw = env(KUBECONFIG_ENV)
    found = discard_empty_and_duplicates(raw.split(os.pathsep) if raw else [])
    if found:
        return found

    return [posixpath.join(home_dir(_current_goos(), env), ".kube", "config")]


def path_for_merge(explicit_path: str, getenv: GetEnv | None = None) -> str:
    """Return the file kubectl would merge into."""
    candidates = paths(explicit_path, getenv)
    if len(candidates) == 1:
        return candidates[0]
    return next((name for name in candidates if file_exists(name)), candidates[-1])


def file_exists(filename: str) -> bool:
    """Return whether filename exists and is not a directory."""
    try:
        info = os.stat(filename)
    except FileNotFoundError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def discard_empty_and_duplicates(candidates: Iterable[str]) -> list[str]:
    """Drop empty entries and repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(p for p in candidates if p))


def home_dir(goos: str, getenv: GetEnv | None = None) -> str:
    """Return the home directory for the current user.

    On Windows the candidates %HOME%, %HOMEDRIVE%%HOMEPATH% and %USERPROFILE%
    are checked, preferring one that holds a .kube/config file, then one that
    is a writable directory, then one that exists, then one that is set.
    """
    env = _env_reader(getenv)
    if goos != "windows":
        return env("HOME")

    home = env("HOME")
    home_drive, home_path = env("HOMEDRIVE"), env("HOMEPATH")
    home_drive_home_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = env("USERPROFILE")

    for candidate in (home, home_drive_home_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, home_drive_home_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        try:
            info = os.stat(candidate)
        except OSError:
            continue
        first_existing = first_existing or candidate
        if stat.S_ISDIR(info.st_mode) and info.st_mode & stat.S_IWUSR:
            return candidate

    return first_existing or first_set