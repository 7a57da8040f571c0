"""Union-Find data structure for grouping word forms.

Ids are the dense vocabulary ids, so parents and sizes live in plain lists.
"""

from __future__ import annotations


class UnionFind:
    """Union-Find (disjoint set) with path compression and union by size.

    Built once by the equivalence builder, then only queried by the
    scorer and reporter.
    """

    __slots__ = ("_parent", "_size")

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Find root, then point every node on the path straight at it."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, a: int, b: int) -> bool:
        """Merge the sets containing a and b.

        The smaller tree goes under the larger; on a tie the root of
        ``a`` survives.

        Returns:
            True if two distinct sets were merged
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True

    def size_of(self, x: int) -> int:
        """Number of members in the set containing x."""
        return self._size[self.find(x)]

    def groups(self) -> dict[int, list[int]]:
        """Return all groups as root -> member indices."""
        result: dict[int, list[int]] = {}
        for i in range(len(self._parent)):
            root = self.find(i)
            result.setdefault(root, []).append(i)
        return result
