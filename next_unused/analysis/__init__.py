"""Graph construction and reachability."""

from __future__ import annotations

from next_unused.analysis.dependency_graph import DependencyGraphBuilder
from next_unused.analysis.graph_models import DependencyGraph, ResolvedEdge
from next_unused.analysis.reachability import find_reachable, find_unused

__all__ = [
    "DependencyGraph",
    "DependencyGraphBuilder",
    "ResolvedEdge",
    "find_reachable",
    "find_unused",
]
