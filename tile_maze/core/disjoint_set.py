from array import array
from typing import List


class DisjointSet:
    """
    Union-find over the integers [0, size) with path compression and
    union by rank.

    Parent links and ranks live in two dense arrays indexed by element, so a
    root is simply an element whose parent is itself.
    """

    __slots__ = ('parent', 'rank')

    def __init__(self, size: int):
        self.parent = array('i', range(size))
        self.rank = array('i', [0] * size)

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        parent = self.parent

        walked: List[int] = []
        while parent[x] != x:
            walked.append(x)
            x = parent[x]

        # Path compression: re-link every node on the walk to the root
        for node in walked:
            parent[node] = x

        return x

    def union(self, a: int, b: int) -> bool:
        """
        Merges the sets holding a and b.
        Returns False when they were already one set (the edge would close a cycle).
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
