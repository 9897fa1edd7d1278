"""proxtri.delaunay - Delaunay triangulation and the proximity graphs
derived from it
"""

import logging

from proxtri.delaunay.triangulation import Triangulation, triangulate
from proxtri.delaunay.tds import Vertex, InfiniteVertex, Line, Triangle
from proxtri.delaunay.graph import Graph
from proxtri.delaunay.helpers import bounding_triangle
from proxtri.delaunay.iter import TriangleIterator, FiniteEdgeIterator, \
    GraphEdgeIterator
from proxtri.delaunay.inout import output_vertices, output_triangles, \
    output_edges
from proxtri.delaunay.preds import FloatPredicates, RobustPredicates, \
    INSIDE, ON, OUTSIDE


__all__ = ("triangulate", "Triangulation",
           "Vertex", "InfiniteVertex", "Line", "Triangle", "Graph",
           "bounding_triangle",
           "TriangleIterator", "FiniteEdgeIterator", "GraphEdgeIterator",
           "output_vertices", "output_triangles", "output_edges",
           "FloatPredicates", "RobustPredicates", "INSIDE", "ON", "OUTSIDE")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    from proxtri.delaunay.helpers import random_circle_vertices
    pts = random_circle_vertices(1500)
    triangulate(pts)
