'''
Voronoi diagram, derived from the Delaunay triangulation.
'''
from proxtri.delaunay.tds import as_vertex, ccw


def voronoi_cell(dt, site, triangle=None):
    """Returns the Voronoi cell of site as closed ring of circumcenters.

    If triangle is given it should have site as vertex, otherwise the
    triangle is located.
    """
    site = as_vertex(site)
    if triangle is None:
        triangle = dt.locate(site)
    if triangle is None or site not in triangle:
        raise ValueError("{} is not a vertex of the triangulation".format(
            site))
    ring = [t.circumcenter() for t in dt.surrounding_triangles(site, triangle)]
    ring.append(ring[0])
    return ring


class VoronoiTransformer(object):
    """Class to transform a Delaunay triangulation into a Voronoi diagram

    The class generates a series of segments, together with information how
    these should be glued together to the Voronoi diagram
    (start node id, end node id, left site, right site),
    and for every site its cell.
    """

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.centers = {}
        self.segments = []
        self.cells = {}

    def transform(self):
        """Calculate center of circumscribed circles for all triangles
        and generate a line segment from one triangle to its neighbours
        (this happens only once for every pair).
        """
        self._transform_centers()
        self._transform_segments()
        self._transform_cells()

    def _transform_centers(self):
        self.centers = {}
        for t in self.triangulation:
            self.centers[t.key] = t.circumcenter()

    def _transform_segments(self):
        segments = []
        for t in self.triangulation:
            for n in self.triangulation.neighbours(t):
                if t.key < n.key:
                    start, end = t.key, n.key
                    # the vertex of t opposite the shared facet
                    side = t.vertices.index(t.vertex_excluding(*n.vertices))
                    # dependent on whether this is a finite or infinite vertex
                    # we set the left / right site
                    left_vertex = t.vertices[ccw(ccw(side))]
                    if left_vertex.is_finite:
                        left = left_vertex
                    else:
                        left = None
                    right_vertex = t.vertices[ccw(side)]
                    if right_vertex.is_finite:
                        right = right_vertex
                    else:
                        right = None
                    segments.append((start, end, left, right))
        self.segments = segments

    def _transform_cells(self):
        """Cells of all sites (the corners of the bounding triangle are
        skipped, their cells are not closed)"""
        cells = {}
        done = set()
        for t in self.triangulation:
            for site in t.vertices:
                if not site.is_finite or site in done:
                    continue
                done.add(site)
                star = self.triangulation.surrounding_triangles(site, t)
                ring = [self.centers[triangle.key] for triangle in star]
                cells[site] = ring + [ring[0]]
        self.cells = cells
        return cells
