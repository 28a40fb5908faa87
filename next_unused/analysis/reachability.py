"""Reachability analyzer: which files can be loaded starting from the entry points."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from next_unused.errors import ConfigurationError


def find_reachable(
    forward: Mapping[Path, Sequence[Path]],
    entry_points: Iterable[Path],
) -> set[Path]:
    """BFS over ``forward`` from every entry point.

    Cycles are harmless: a visited file is never enqueued again. Targets
    missing from ``forward`` count as reachable leaves.
    """
    entries = list(entry_points)
    if not entries:
        raise ConfigurationError("No entry points given; cannot determine unused files.")

    reachable: set[Path] = set()
    queue = deque(entries)
    while queue:
        current = queue.popleft()
        if current in reachable:
            continue
        reachable.add(current)
        for target in forward.get(current, ()):
            if target not in reachable:
                queue.append(target)
    return reachable


def find_unused(files: Iterable[Path], reachable: set[Path]) -> list[Path]:
    """Files not in ``reachable``, keeping the order of ``files``."""
    return [f for f in files if f not in reachable]
