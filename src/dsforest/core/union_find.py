"""UnionFind (Disjoint Set Union) forest over a fixed range of integer indices.

Elements are identified by their index in ``0..n-1``. Parent links, ranks,
volumes and redundant-edge counters are kept in parallel lists owned by the
forest, so a root is simply an index whose parent is itself.
"""

from dataclasses import dataclass
import operator

from dsforest.error.forest import OutOfRangeError


@dataclass(frozen=True)
class Element:
    """Snapshot of one element of a forest.

    Attributes:
        id: Index of the element.
        parent: Index of its parent (equal to ``id`` for a root).
        rank: Upper bound on the depth of the subtree below it.
        volume: Number of elements in its component (meaningful for roots only).
        edge_count: Redundant unions recorded in its component (roots only).
    """

    id: int
    parent: int
    rank: int
    volume: int
    edge_count: int

    @property
    def is_root(self) -> bool:
        return self.parent == self.id


class UnionFind:
    """Union-Find (Disjoint Set Union) with path compression and union by rank.

    Besides connectivity, each root tracks the size of its component
    ("volume") and how many times ``union`` was called for two elements
    that were already connected ("edge count").

    Attributes:
        parent: Parent index of every element.
        rank: Rank of every element; only read at roots.
        volume: Component size; only read at roots.
        edges: Redundant-union counter; only read at roots.
    """

    def __init__(self, n: int) -> None:
        """Create ``n`` singleton components.

        Args:
            n: Number of elements, must be non-negative.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"forest size must be non-negative, got {n}")
        self.parent: list[int] = list(range(n))
        self.rank: list[int] = [0] * n
        self.volume: list[int] = [1] * n
        self.edges: list[int] = [0] * n
        self._components = n

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"UnionFind(n={len(self)}, components={self._components})"

    def _check(self, k: int) -> int:
        if isinstance(k, bool):
            raise TypeError("forest indices must be integers, not bool")
        try:
            index = operator.index(k)
        except TypeError:
            raise TypeError(
                f"forest indices must be integers, not {type(k).__name__}"
            ) from None
        if not 0 <= index < len(self.parent):
            raise OutOfRangeError(k, len(self.parent))
        return index

    def _find_root(self, k: int) -> int:
        root = k
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[k] != root:
            self.parent[k], k = root, self.parent[k]
        return root

    def _element(self, k: int) -> Element:
        return Element(
            id=k,
            parent=self.parent[k],
            rank=self.rank[k],
            volume=self.volume[k],
            edge_count=self.edges[k],
        )

    def find(self, k: int) -> Element:
        """Find the root of element k with path compression.

        Every element on the path from k to the root is re-linked directly
        to the root, so later lookups in the same component are cheap.

        Args:
            k: Element index.

        Returns:
            Snapshot of the root element of the component containing k.

        Raises:
            OutOfRangeError: If k is outside the forest.
            TypeError: If k is not an integer.
        """
        k = self._check(k)
        return self._element(self._find_root(k))

    root = find

    def union(self, k1: int, k2: int) -> bool:
        """Union the components containing k1 and k2.

        If both are already in the same component the root's edge count is
        incremented instead. Otherwise the root with the larger rank absorbs
        the other; on a tie the root of k1 survives and its rank grows by one.

        Args:
            k1: First element index.
            k2: Second element index.

        Returns:
            True if two components were merged, False if k1 and k2 were
            already connected.

        Raises:
            OutOfRangeError: If either index is invalid. Nothing is modified.
        """
        k1 = self._check(k1)
        k2 = self._check(k2)
        r1 = self._find_root(k1)
        r2 = self._find_root(k2)
        if r1 == r2:
            self.edges[r1] += 1
            return False

        if self.rank[r1] < self.rank[r2]:
            r1, r2 = r2, r1
        elif self.rank[r1] == self.rank[r2]:
            self.rank[r1] += 1

        self.parent[r2] = r1
        self.volume[r1] += self.volume[r2]
        self.edges[r1] += self.edges[r2]
        self._components -= 1
        return True

    merge = union

    def size(self, k: int) -> int:
        """Get the number of elements in the component containing k."""
        return self.find(k).volume

    def same(self, k1: int, k2: int) -> bool:
        """Check if k1 and k2 are in the same component.

        Raises:
            OutOfRangeError: If either index is invalid.
        """
        k1 = self._check(k1)
        k2 = self._check(k2)
        return self._find_root(k1) == self._find_root(k2)

    is_same = same

    def edge_count(self, k: int) -> int:
        """Get the number of redundant unions recorded in k's component."""
        return self.find(k).edge_count

    def roots(self) -> list[int]:
        """Get the root index of every component, in ascending order."""
        return [k for k, p in enumerate(self.parent) if k == p]

    @property
    def component_count(self) -> int:
        """Number of distinct components."""
        return self._components
