"""Data models for the file dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from next_unused.models import FileFailure, ReferenceKind


@dataclass(frozen=True)
class ResolvedEdge:
    source: Path
    target: Path
    specifier: str
    kind: ReferenceKind


@dataclass
class DependencyGraph:
    files: list[Path] = field(default_factory=list)  # discovered order
    forward: dict[Path, list[Path]] = field(default_factory=dict)  # source -> [targets], source order
    edges: list[ResolvedEdge] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
