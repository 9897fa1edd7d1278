'''
Undirected graph, stored as adjacency sets.
'''
from collections import deque


class Graph(object):
    """Undirected graph over hashable nodes.

    A node can be present without having any edges. There are no edge
    weights, self-loops or parallel edges.
    """

    __slots__ = ('_adjacency',)

    def __init__(self, nodes=()):
        self._adjacency = {}
        for node in nodes:
            self.add_node(node)

    def __contains__(self, node):
        return node in self._adjacency

    def __len__(self):
        return len(self._adjacency)

    def __iter__(self):
        return iter(self._adjacency)

    def __str__(self):
        return "Graph with {0} nodes and {1} edges".format(
            len(self._adjacency), self.edge_count())

    def add_node(self, node):
        if node not in self._adjacency:
            self._adjacency[node] = set()

    def remove_node(self, node):
        """Removes node and all edges incident to it"""
        for neighbour in self._adjacency.pop(node, ()):
            self._adjacency[neighbour].discard(node)

    def add_edge(self, a, b):
        """Adds edge between a and b, nodes are added when not present"""
        if a == b:
            raise ValueError("No self-loops allowed ({})".format(a))
        self.add_node(a)
        self.add_node(b)
        self._adjacency[a].add(b)
        self._adjacency[b].add(a)

    def remove_edge(self, a, b):
        """Removes edge between a and b, if it is there"""
        if a in self._adjacency:
            self._adjacency[a].discard(b)
        if b in self._adjacency:
            self._adjacency[b].discard(a)

    def neighbours(self, node):
        """Set of nodes adjacent to node (the live set: do not modify)"""
        return self._adjacency[node]

    def nodes(self):
        return self._adjacency.keys()

    def has_edge(self, a, b):
        neighbours = self._adjacency.get(a)
        return neighbours is not None and b in neighbours

    def edges(self):
        """Iterate over all edges as 2-tuples, every edge only once"""
        done = set()
        for node, neighbours in self._adjacency.items():
            for neighbour in neighbours:
                if neighbour not in done:
                    yield (node, neighbour)
            done.add(node)

    def edge_count(self):
        return sum(len(n) for n in self._adjacency.values()) // 2

    def clear(self):
        self._adjacency.clear()


def breadth_first_edges(graph, start=None):
    """Iterate over all edges of graph in breadth-first order, every edge
    only once.

    The scan starts at *start* and restarts at any node not reached yet,
    so that all components are visited.
    """
    roots = [start] if start is not None else []
    roots.extend(graph.nodes())
    seen = set()
    done = set()
    for root in roots:
        if root in seen or root not in graph:
            continue
        seen.add(root)
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in graph.neighbours(node):
                if neighbour in done:
                    continue
                yield (node, neighbour)
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
            done.add(node)
