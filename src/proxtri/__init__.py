"""proxtri - Incremental Delaunay triangulation with Gabriel graph,
Relative Neighbourhood Graph and Euclidean Minimum Spanning Tree
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from proxtri.delaunay import triangulate, Triangulation, Vertex

__all__ = ["triangulate", "Triangulation", "Vertex"]
