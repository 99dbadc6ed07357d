"""Waiting for a node's init system to reach a cgroups-safe state."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable


class LogMatchError(Exception):
    """Raised when no log line matches the awaited pattern."""


@functools.cache
def node_reached_cgroups_ready_regexp() -> re.Pattern[str]:
    """Return the pattern marking that exec into a node is safe for cgroups.

    It matches the cgroup v1 notice from the node entrypoint or systemd
    reaching the multi-user target under cgroup v2.
    """
    return re.compile("Reached target .*Multi-User System.*|detected cgroup v1")


def wait_until_log_regexp_matches(lines: Iterable[str], pattern: re.Pattern[str] | str) -> None:
    """Consume log lines until one matches pattern.

    Reading stops at the first matching line. If the lines run out first,
    LogMatchError is raised; an error while reading is chained to it, and a
    timeout gives the plain no-match error.
    """
    regexp = re.compile(pattern) if isinstance(pattern, str) else pattern
    not_found = f'could not find a log line that matches "{regexp.pattern}"'
    try:
        for line in lines:
            if regexp.search(line.rstrip("\n").rstrip("\r")):
                return
    except TimeoutError as exc:
        raise LogMatchError(not_found) from exc
    except Exception as exc:
        raise LogMatchError(f"failed to read logs: {exc}") from exc
    raise LogMatchError(not_found)