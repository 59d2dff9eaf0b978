"""Replay edge lists into a forest and summarise the resulting components."""

from dataclasses import dataclass
import logging
from typing import Iterable

from dsforest.core.edge_list import EdgeListResult
from dsforest.core.union_find import UnionFind

logger = logging.getLogger(__name__)


@dataclass
class ReplayStats:
    """Outcome of replaying an edge list.

    Attributes:
        merges: Unions that joined two components
        redundant: Unions between already connected elements
    """

    merges: int = 0
    redundant: int = 0


@dataclass
class ComponentSummary:
    """Statistics of one component, read from its root."""

    root: int
    volume: int
    rank: int
    edge_count: int


def replay_edges(forest: UnionFind, edges: Iterable[tuple[int, int]]) -> ReplayStats:
    """Apply every edge to the forest in order.

    Args:
        forest: Forest to mutate
        edges: (source, target) index pairs

    Returns:
        ReplayStats counting merges and redundant edges

    Raises:
        OutOfRangeError: If an edge references an index outside the forest.
            Edges applied before it stay applied.
    """
    stats = ReplayStats()
    for source, target in edges:
        if forest.union(source, target):
            stats.merges += 1
        else:
            stats.redundant += 1
            logger.debug(f"Redundant edge {source}-{target}")

    logger.info(
        f"Replayed {stats.merges + stats.redundant} edges: "
        f"{stats.merges} merges, {stats.redundant} redundant"
    )
    return stats


def build_forest(result: EdgeListResult, size: int | None = None) -> tuple[UnionFind, ReplayStats]:
    """Create a forest and replay a loaded edge list into it.

    Args:
        result: Loaded edge list
        size: Number of elements; defaults to the size inferred from the edges

    Returns:
        The populated forest and its replay statistics
    """
    forest = UnionFind(result.inferred_size if size is None else size)
    stats = replay_edges(forest, result.edges)
    return forest, stats


def summarize_components(forest: UnionFind) -> list[ComponentSummary]:
    """Summarise every component, largest first.

    Returns:
        One ComponentSummary per root, sorted by volume (descending)
        and root index (ascending).
    """
    summaries = []
    for root in forest.roots():
        element = forest.find(root)
        summaries.append(
            ComponentSummary(
                root=element.id,
                volume=element.volume,
                rank=element.rank,
                edge_count=element.edge_count,
            )
        )
    return sorted(summaries, key=lambda s: (-s.volume, s.root))
