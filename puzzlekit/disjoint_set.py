"""Disjoint-set forest whose representative is always the smallest member."""


class DisjointSet:
    """Union-find over the integers ``0 .. n-1`` with path compression.

    When two sets are merged, the root with the smaller value becomes the
    root of the merged set, so ``find`` always returns the minimum element
    of a component.
    """

    def __init__(self, n):
        self._parent = list(range(n))

    def __len__(self):
        return len(self._parent)

    def find(self, node):
        """Return the representative (smallest member) of ``node``'s set."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u, v):
        """Merge the sets holding ``u`` and ``v``."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if root_u < root_v:
            self._parent[root_v] = root_u
        else:
            self._parent[root_u] = root_v