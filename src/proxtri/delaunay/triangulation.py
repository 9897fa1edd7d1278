'''
The triangulation engine.

A Triangulation is a set of triangles, that is changed by adding and
removing sites. Next to the Delaunay triangulation it keeps the Gabriel
graph, the Relative Neighbourhood Graph (RNG) and the Euclidean Minimum
Spanning Tree (EMST) of all its points up to date.
'''

import logging
import time
from itertools import combinations

from proxtri.delaunay.graph import Graph
from proxtri.delaunay.helpers import DisjointSet, bounding_triangle, kdsort
from proxtri.delaunay.insert_bw import CavityInserter, gabriel_empty, \
    rng_empty
from proxtri.delaunay.iter import FiniteEdgeIterator, GraphEdgeIterator
from proxtri.delaunay.preds import FLOAT
from proxtri.delaunay.tds import InfiniteVertex, Line, Triangle, as_vertex


class Triangulation(object):
    """A 2D Delaunay triangulation with incremental site insertion.

    All sites must fall strictly inside the bounding triangle given at
    construction. The corners of the bounding triangle are points of the
    triangulation as well (but not sites: their ``is_finite`` is False).

    The structure is not thread-safe: one writer at a time, and readers
    should not interleave with a mutation.
    """

    def __init__(self, bounding, predicates=None):
        if predicates is None:
            predicates = FLOAT
        self.predicates = predicates
        if not isinstance(bounding, Triangle) or \
                any(v.is_finite for v in bounding.vertices):
            corners = [InfiniteVertex(pt[0], pt[1]) for pt in bounding]
            if len(corners) != 3:
                raise ValueError("Bounding triangle needs 3 corners")
            bounding = Triangle(corners[0], corners[1], corners[2],
                                predicates)
        a, b, c = bounding.vertices
        if predicates.orient2d(a, b, c) == 0:
            raise ValueError("Bounding triangle is degenerate")
        self.bounding = bounding
        self.inserter = CavityInserter(self)
        self.clear()

    # -- the triangles

    def __iter__(self):
        return iter(self.triangle_graph)

    def __len__(self):
        return len(self.triangle_graph)

    def __contains__(self, triangle):
        """True iff triangle is a member of this triangulation"""
        return triangle in self.triangle_graph

    def __str__(self):
        return "Triangulation with {} triangles".format(len(self))

    def contains(self, triangle):
        return triangle in self.triangle_graph

    def neighbours(self, triangle):
        """Return the set of triangles adjacent to triangle"""
        return frozenset(self.triangle_graph.neighbours(triangle))

    def neighbour_opposite(self, site, triangle):
        """Report neighbour opposite the given vertex of triangle.

        Returns None if there is no such neighbour (the facet lies on the
        boundary of the bounding triangle).
        Raises ValueError if site is not in this triangle.
        """
        if site not in triangle:
            raise ValueError("Bad vertex; {} not in triangle".format(site))
        for neighbour in self.triangle_graph.neighbours(triangle):
            if site not in neighbour:
                return neighbour
        return None

    def surrounding_triangles(self, site, triangle):
        """Report triangles surrounding site in order (cw or ccw).

        *triangle* is a 'starting' triangle that has site as a vertex.
        For a corner of the bounding triangle the triangles do not close
        around site, the fan is then returned from one side of the boundary
        to the other.
        """
        site = as_vertex(site)
        if site not in triangle:
            raise ValueError("Site {} not in triangle".format(site))
        guide = triangle.vertex_excluding(site)
        fan, closed = self._fan(site, triangle, guide)
        if not closed:
            other = triangle.vertex_excluding(site, guide)
            back, _ = self._fan(site, triangle, other)
            back.reverse()
            fan = back[:-1] + fan
        return fan

    def _fan(self, site, start, guide):
        """Walk around site, starting with the neighbour opposite guide"""
        fan = []
        triangle = start
        while True:
            fan.append(triangle)
            previous = triangle
            triangle = self.neighbour_opposite(guide, triangle)
            guide = previous.vertex_excluding(site, guide)
            if triangle is start:
                return fan, True
            if triangle is None:
                return fan, False

    # -- the points

    @property
    def points(self):
        """All points, the corners of the bounding triangle included"""
        return list(self._points)

    @property
    def sites(self):
        """All points, that are not a corner of the bounding triangle"""
        return [pt for pt in self._points if pt.is_finite]

    def has_point(self, point):
        return point in self._points

    def add_point(self, point):
        self._points[point] = None
        self.gabriel.add_node(point)
        self.rng.add_node(point)

    # -- queries

    def locate(self, point):
        """Locate the triangle with point inside it or on its boundary.

        Returns None if no triangle holds the point.
        """
        point = as_vertex(point)
        triangle = self.most_recent
        if triangle not in self.triangle_graph:
            triangle = None
        # directed walk
        visited = set()
        while triangle is not None:
            if triangle in visited:
                logging.warning("Caught in a locate loop for {}".format(point))
                break
            visited.add(triangle)
            # corner opposite point
            corner = point.is_outside(triangle.vertices, self.predicates)
            if corner is None:
                return triangle
            triangle = self.neighbour_opposite(corner, triangle)
        # no luck; try brute force
        logging.warning("Checking all triangles for {}".format(point))
        for triangle in self.triangle_graph:
            if point.is_outside(triangle.vertices, self.predicates) is None:
                return triangle
        logging.warning("No triangle holds {}".format(point))
        return None

    def find_nearest(self, query):
        """Point closest to the query location, among the three corners of
        the triangle that holds the query.

        Note, this is a local approximation and not a true nearest neighbour
        search over all points.
        """
        query = as_vertex(query)
        triangle = self.locate(query)
        if triangle is None:
            raise ValueError("No triangle holds {}".format(query))
        return min(triangle.vertices, key=query.distance)

    def has_gabriel_edge(self, site1, site2):
        """Returns true iff the Gabriel graph has an edge between site1 and
        site2"""
        return self.gabriel.has_edge(as_vertex(site1), as_vertex(site2))

    def has_rng_edge(self, site1, site2):
        """Returns true iff the RNG has an edge between site1 and site2"""
        return self.rng.has_edge(as_vertex(site1), as_vertex(site2))

    def has_emst_edge(self, site1, site2):
        """Returns true iff the EMST has an edge between site1 and site2"""
        return self.emst.has_edge(as_vertex(site1), as_vertex(site2))

    def delaunay_edges(self, finite_only=False):
        return FiniteEdgeIterator(self, finite_only)

    def gabriel_edges(self, finite_only=False):
        return GraphEdgeIterator(self.gabriel, finite_only)

    def rng_edges(self, finite_only=False):
        return GraphEdgeIterator(self.rng, finite_only)

    def emst_edges(self, finite_only=False):
        return GraphEdgeIterator(self.emst, finite_only)

    def emst_length(self, finite_only=False):
        """Total length of the edges in the EMST"""
        return sum(line.length() for line in self.emst_edges(finite_only))

    # -- mutation

    def insert(self, site):
        """Place a new site into the triangulation.

        Nothing happens if the site matches an existing vertex.
        Raises ValueError if site does not lie inside the bounding triangle.
        """
        return self.inserter.insert(as_vertex(site))

    def remove(self, site):
        """Removes a site from the triangulation.

        All other sites are inserted again into a cleared triangulation.
        Nothing happens (but a warning is logged) if the site is not there,
        or if it is a corner of the bounding triangle.
        """
        site = as_vertex(site)
        if site not in self._points:
            logging.warning(
                "Tried to remove point that wasn't there: {}".format(site))
            return False
        if site in self.bounding:
            logging.warning(
                "Corner {} of bounding triangle is not removed".format(site))
            return False
        keep = [pt for pt in self._points if pt.is_finite and pt != site]
        self.clear()
        for pt in keep:
            self.insert(pt)
        return True

    def clear(self):
        """Clears this triangulation.

        Uses the same initial 'bounding' triangle. All other points
        and graphs are cleared.
        """
        corners = self.bounding.vertices
        self.triangle_graph = Graph([self.bounding])
        self.most_recent = self.bounding
        self._points = dict.fromkeys(corners)
        self.gabriel = Graph(corners)
        self.rng = Graph(corners)
        self.candidates = set()
        for a, b in combinations(corners, 2):
            if gabriel_empty(a, b, corners):
                self.gabriel.add_edge(a, b)
                self.candidates.add(Line(a, b))
                if rng_empty(a, b, corners):
                    self.rng.add_edge(a, b)
        self.compute_emst()

    def compute_emst(self):
        """Computes the Euclidean minimum spanning tree (Kruskal), with the
        Gabriel edges as candidates.
        """
        emst = Graph(self._points)
        needed = len(self._points) - 1
        components = DisjointSet()
        count = 0
        for line in sorted(self.candidates):
            if count == needed:
                break
            if components.add(line.a, line.b):
                emst.add_edge(line.a, line.b)
                count += 1
        logging.debug("EMST: {} of {} edges, out of {} candidates".format(
            count, needed, len(self.candidates)))
        if count < needed:  # should never happen
            logging.warning("EMST: missing {} edges".format(needed - count))
        self.emst = emst
        return emst


def triangulate(points, margin=50.0, predicates=None):
    """Triangulate a set of points.

    The points are inserted in kD-tree order, inside a bounding triangle
    made around their box.
    """
    if len(points) == 0:
        raise ValueError("we cannot triangulate empty point list")
    start = time.perf_counter()
    ordered = kdsort([as_vertex(pt) for pt in points])
    end = time.perf_counter()
    logging.debug("Sorting points: " + str(end - start) + " secs")

    start = time.perf_counter()
    dt = Triangulation(bounding_triangle(points, margin), predicates)
    for pt in ordered:
        dt.insert(pt)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(dt)))
    logging.debug("{} points".format(len(dt.points)))
    inserter = dt.inserter
    if inserter.inserts > 0:
        logging.debug(str(float(inserter.replaced) / inserter.inserts) +
                      " triangles replaced per insert")
    return dt
