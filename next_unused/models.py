"""Data models for the next-unused pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

ProgressCallback = Callable[[str, int, int], None]

# Matched against directory paths relative to the scan root: a bare name
# only prunes a top-level directory, a "*/" prefix prunes it at any depth
DEFAULT_SKIP_DIRS = [
    "node_modules", "*/node_modules", ".next", "build", ".git", "dist", "out", "coverage",
]


class ReferenceKind(enum.Enum):
    IMPORT = "import"
    EXPORT_FROM = "export_from"
    DYNAMIC_IMPORT = "dynamic_import"
    REQUIRE = "require"


class RouterType(enum.Enum):
    APP = "app"
    PAGES = "pages"


@dataclass(frozen=True)
class ModuleReference:
    """Result from the extractor stage."""
    specifier: str
    kind: ReferenceKind
    line: int = 0


@dataclass(frozen=True)
class FileFailure:
    """A file that could not be read or parsed."""
    path: Path
    kind: str  # "read" | "parse"
    message: str


@dataclass
class AliasConfig:
    """Path aliases taken from tsconfig.json / jsconfig.json."""
    base_url: Path | None = None
    paths: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.base_url is None and not self.paths


@dataclass
class AnalysisConfig:
    """Configuration for an analysis run."""
    project_root: Path = field(default_factory=lambda: Path("."))
    router: RouterType = RouterType.APP
    use_src: bool = False
    config_file: str = "tsconfig.json"
    max_workers: int = 8
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))

    @property
    def router_dir(self) -> Path:
        if self.use_src:
            return self.project_root / "src" / self.router.value
        return self.project_root / self.router.value


@dataclass
class AnalysisResult:
    """Result from the reachability stage."""
    project_root: Path
    files: list[Path]
    entry_points: list[Path]
    reachable: set[Path]
    unused: list[Path]
    failures: list[FileFailure] = field(default_factory=list)
