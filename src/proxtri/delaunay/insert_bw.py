'''
Incremental point insertion by cavity replacement (Bowyer-Watson), with
the proximity graphs patched along.

  Bowyer, A. (1981). Computing Dirichlet tessellations.
  The Computer Journal, 24(2), 162-166.

  Watson, D. F. (1981). Computing the n-dimensional Delaunay tessellation
  with application to Voronoi polytopes.
  The Computer Journal, 24(2), 167-172.
'''

import logging
from collections import deque
from itertools import chain

from proxtri.delaunay.graph import breadth_first_edges
from proxtri.delaunay.preds import INSIDE
from proxtri.delaunay.tds import Line, Triangle


def gabriel_obstructed(r, p, q):
    """True if r lies inside or on the circle with diameter pq
    (the angle p-r-q is not acute)
    """
    return (p.x - r.x) * (q.x - r.x) + (p.y - r.y) * (q.y - r.y) <= 0


def rng_obstructed(r, p, q):
    """True if r lies strictly inside the lune of p and q
    (the intersection of the two circles with radius |pq| around p and q)
    """
    d = p.distance(q)
    return r.inside_circle(p, d) and r.inside_circle(q, d)


def gabriel_empty(p, q, points):
    """True if none of the points (other than p and q) obstructs pq"""
    for r in points:
        if r == p or r == q:
            continue
        if gabriel_obstructed(r, p, q):
            return False
    return True


def rng_empty(p, q, points):
    """True if none of the points (other than p and q) lies in the lune
    of p and q"""
    d = p.distance(q)
    for r in points:
        if r == p or r == q:
            continue
        if r.inside_circle(p, d) and r.inside_circle(q, d):
            return False
    return True


class CavityInserter(object):
    """Class to insert points into a Triangulation.

    All triangles whose circumcircle holds the new point form a cavity.
    The cavity is cut out and filled with a fan of triangles around the new
    point. The Gabriel graph and the Relative Neighbourhood Graph are
    patched: edges obstructed by the new point are removed and edges
    from the new point to the rim of the cavity are added when they qualify.
    """

    __slots__ = ('triangulation', 'inserts', 'replaced')

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.inserts = 0
        self.replaced = 0

    def insert(self, site):
        """Place a new site into the triangulation.

        Returns one of the new triangles, or None if the site was there
        already (or could not be placed, which is logged).
        Raises ValueError if the site is not strictly inside the bounding
        triangle.
        """
        dt = self.triangulation
        preds = dt.predicates
        if dt.has_point(site):
            logging.debug(" - skipping {}, already present".format(site))
            return None
        relation = site.relation_to(dt.bounding.vertices, preds)
        if max(relation) > 0:
            raise ValueError(
                "{} lies outside the bounding triangle".format(site))
        if 0 in relation:
            raise ValueError(
                "{} lies on the boundary of the bounding triangle".format(site))
        triangle = dt.locate(site)
        if triangle is None:
            raise ValueError("No containing triangle for {}".format(site))
        if site in triangle:
            return None
        logging.debug(" - inserting {}".format(site))
        cavity = self.cavity(site, triangle)
        if not cavity:
            # round-off: not even the triangle holding site is in conflict
            logging.warning("Empty cavity for {}, not inserted".format(site))
            return None
        new_triangles = self.update(site, cavity)
        self.inserts += 1
        self.replaced += len(cavity)
        dt.compute_emst()
        dt.most_recent = new_triangles[0]
        return dt.most_recent

    def cavity(self, site, triangle):
        """Determine the cavity caused by site: all triangles connected to
        the triangle that holds site, that have site strictly in their
        circumcircle
        """
        dt = self.triangulation
        encroached = set()
        marked = set([triangle])
        to_check = deque([triangle])
        while to_check:
            triangle = to_check.popleft()
            if site.relative_to_circumcircle(triangle.vertices,
                                             dt.predicates) != INSIDE:
                continue
            encroached.add(triangle)
            for neighbour in dt.triangle_graph.neighbours(triangle):
                if neighbour not in marked:
                    marked.add(neighbour)
                    to_check.append(neighbour)
        return encroached

    def update(self, site, cavity):
        """Remove the cavity triangles and fill the cavity with new
        triangles, patching the proximity graphs on the way.

        Returns the list of new triangles.
        """
        dt = self.triangulation
        graph = dt.triangle_graph
        boundary = set()
        internal = []
        around = set()
        # -- facets shared by 2 cavity triangles are inside the cavity,
        # the others form its rim
        for triangle in cavity:
            around.update(graph.neighbours(triangle))
            for facet in triangle.facets():
                if facet in boundary:
                    boundary.remove(facet)
                    internal.append(facet)
                else:
                    boundary.add(facet)
        around.difference_update(cavity)
        # -- edges inside the cavity are not Delaunay anymore
        for facet in internal:
            a, b = facet
            logging.debug("   removing edge {}, {}".format(a, b))
            dt.gabriel.remove_edge(a, b)
            dt.rng.remove_edge(a, b)
            dt.candidates.discard(Line(a, b))
        for triangle in cavity:
            graph.remove_node(triangle)
        self.remove_obstructed(site)
        # -- fan of new triangles
        new_triangles = []
        rim = set()
        for facet in boundary:
            a, b = facet
            rim.add(a)
            rim.add(b)
            triangle = Triangle(a, b, site, dt.predicates)
            graph.add_node(triangle)
            new_triangles.append(triangle)
        self.add_qualifying(site, rim)
        # -- link new triangles to each other and to the triangles around
        owner = {}
        for triangle in chain(around, new_triangles):
            for facet in triangle.facets():
                other = owner.pop(facet, None)
                if other is None:
                    owner[facet] = triangle
                else:
                    graph.add_edge(other, triangle)
        logging.debug("   cavity of {} replaced by {} triangles".format(
            len(cavity), len(new_triangles)))
        return new_triangles

    def remove_obstructed(self, site):
        """Remove Gabriel and RNG edges that site obstructs"""
        dt = self.triangulation
        start = dt.bounding.vertices[0]
        for name, graph, obstructed in (("Gabriel", dt.gabriel,
                                         gabriel_obstructed),
                                        ("RNG", dt.rng,
                                         rng_obstructed)):
            blocked = [(p, q)
                       for p, q in breadth_first_edges(graph, start)
                       if obstructed(site, p, q)]
            for p, q in blocked:
                logging.debug("   {}: removing {}, {}".format(name, p, q))
                graph.remove_edge(p, q)
                if graph is dt.gabriel:
                    dt.candidates.discard(Line(p, q))

    def add_qualifying(self, site, rim):
        """Add site to the point set and connect it in the Gabriel graph and
        RNG to the vertices on the rim of the cavity, if they qualify
        """
        dt = self.triangulation
        dt.add_point(site)
        points = dt.points
        for vertex in rim:
            # RNG is a subgraph of the Gabriel graph
            if not gabriel_empty(vertex, site, points):
                continue
            logging.debug("   Gabriel: adding {}, {}".format(site, vertex))
            dt.gabriel.add_edge(site, vertex)
            dt.candidates.add(Line(site, vertex))
            if rng_empty(vertex, site, points):
                logging.debug("   RNG: adding {}, {}".format(site, vertex))
                dt.rng.add_edge(site, vertex)
