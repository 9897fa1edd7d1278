'''
Iterators over the triangles and edges of a triangulation.
'''
from proxtri.delaunay.tds import Line


class TriangleIterator(object):
    """Iterator over all triangles that are in the triangulation.
    The finite_only parameter determines whether only the triangles between
    sites are iterated over, or whether also triangles touching the
    bounding triangle its corners are considered.

    The triangles are visited by walking over their adjacency, starting at
    the most recently made triangle.
    """

    def __init__(self, triangulation, finite_only=False):
        self.triangulation = triangulation
        self.finite_only = finite_only
        self.visited = set()
        self.to_visit_stack = [self.triangulation.most_recent]

    def __iter__(self):
        return self

    def __next__(self):
        while self.to_visit_stack:
            triangle = self.to_visit_stack.pop()
            if triangle in self.visited:
                continue
            self.visited.add(triangle)
            for neighbour in self.triangulation.neighbours(triangle):
                if neighbour not in self.visited:
                    self.to_visit_stack.append(neighbour)
            if not self.finite_only or triangle.is_finite:
                return triangle
        raise StopIteration()


class FiniteEdgeIterator(object):
    """Iterator over the edges of the triangulation, every edge is output
    only once, as a Line.

    With finite_only set, edges touching a corner of the bounding triangle
    are skipped.
    """

    def __init__(self, triangulation, finite_only=True):
        self.triangles = iter(triangulation)
        self.finite_only = finite_only
        self.done = set()
        self.pending = []

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            while self.pending:
                facet = self.pending.pop()
                if facet in self.done:
                    continue
                self.done.add(facet)
                line = Line(*facet)
                if self.finite_only and not line.is_finite:
                    continue
                return line
            # raises StopIteration when all triangles were seen
            triangle = next(self.triangles)
            self.pending.extend(triangle.facets())


class GraphEdgeIterator(object):
    """Iterator over the edges of a point graph (Gabriel, RNG, EMST),
    as Lines"""

    def __init__(self, graph, finite_only=False):
        self.edges = graph.edges()
        self.finite_only = finite_only

    def __iter__(self):
        return self

    def __next__(self):
        for a, b in self.edges:
            if self.finite_only and not (a.is_finite and b.is_finite):
                continue
            return Line(a, b)
        raise StopIteration()
