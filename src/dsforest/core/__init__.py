"""Core modules for the disjoint-set forest.

This package provides:
- UnionFind forest with component volumes and redundant-edge counts
- Edge list loading from CSV
- Replay of edge lists and component summaries
"""

from dsforest.core.edge_list import EdgeListLoader, EdgeListResult
from dsforest.core.replay import (
    ComponentSummary,
    ReplayStats,
    build_forest,
    replay_edges,
    summarize_components,
)
from dsforest.core.union_find import Element, UnionFind

__all__ = [
    "UnionFind",
    "Element",
    "EdgeListLoader",
    "EdgeListResult",
    "ReplayStats",
    "ComponentSummary",
    "build_forest",
    "replay_edges",
    "summarize_components",
]
