"""Dependency graph builder: extracts and resolves every file's imports concurrently."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from next_unused.analysis.graph_models import DependencyGraph, ResolvedEdge
from next_unused.errors import FileError, ParseError
from next_unused.extractor import ReferenceExtractor
from next_unused.models import AliasConfig, FileFailure, ProgressCallback
from next_unused.resolver import ModuleResolver

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a file-level dependency graph for a project."""

    def __init__(
        self,
        project_root: Path,
        alias_config: AliasConfig | None = None,
        max_workers: int = 8,
        extractor: ReferenceExtractor | None = None,
    ):
        self.project_root = project_root.resolve()
        self.resolver = ModuleResolver(self.project_root, alias_config)
        self.extractor = extractor or ReferenceExtractor()
        self.max_workers = max(1, max_workers)

    def build(
        self,
        files: list[Path],
        progress: ProgressCallback | None = None,
    ) -> DependencyGraph:
        known = set(files)
        results: dict[Path, list[ResolvedEdge]] = {}
        failures: dict[Path, FileFailure] = {}
        total = len(files)

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {pool.submit(self._process_file, path, known): path for path in files}
            for done, future in enumerate(as_completed(futures), start=1):
                path = futures[future]
                try:
                    results[path] = future.result()
                except FileError as e:
                    kind = "parse" if isinstance(e, ParseError) else "read"
                    logger.warning("skipping %s (%s error): %s", path, kind, e.message)
                    failures[path] = FileFailure(path=path, kind=kind, message=e.message)
                    results[path] = []
                if progress:
                    progress("Building graph", done, total)

        # Assemble in discovered order; each key written exactly once
        graph = DependencyGraph(files=list(files))
        for path in files:
            edges = results.get(path, [])
            graph.forward[path] = [edge.target for edge in edges]
            graph.edges.extend(edges)
            if path in failures:
                graph.failures.append(failures[path])
        return graph

    def _process_file(self, path: Path, known: set[Path]) -> list[ResolvedEdge]:
        edges: list[ResolvedEdge] = []
        for ref in self.extractor.extract_file(path):
            target = self.resolver.resolve(ref.specifier, path)
            if target is None or target not in known:
                continue
            edges.append(ResolvedEdge(
                source=path,
                target=target,
                specifier=ref.specifier,
                kind=ref.kind,
            ))
        return edges

