'''
Triangulation data structure: vertices, lines and triangles.
'''
from itertools import count
from math import hypot, atan2, pi

from proxtri.delaunay.preds import FLOAT, INSIDE, ON, OUTSIDE, sign


def ccw(i):
    """Get index (0, 1 or 2) increased with one (ccw)"""
    return (i + 1) % 3


def cw(i):
    """Get index (0, 1 or 2) decreased with one (cw)"""
    return (i - 1) % 3


class Vertex(object):
    """A site in the triangulation.

    Vertices are compared and hashed on their coordinates, two vertices with
    the same coordinates are the same site.
    Can carry extra information via its info property.
    """
    __slots__ = ('_x', '_y', 'info')

    def __init__(self, x, y, info=None):
        self._x = float(x)
        self._y = float(y)
        self.info = info

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __str__(self):
        return "{0} {1}".format(self._x, self._y)

    def __repr__(self):
        return "{0}({1}, {2})".format(type(self).__name__, self._x, self._y)

    def __getitem__(self, i):
        if i == 0:
            return self._x
        elif i == 1:
            return self._y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._x, self._y))

    @property
    def is_finite(self):
        return True

    def coordinate(self, axis):
        """Ordinate along *axis* (0 for x, 1 for y)"""
        return self[axis]

    def distance(self, other):
        """Cartesian distance to other point """
        return hypot(self._x - other[0], self._y - other[1])

    def distance2(self, other):
        """Cartesian distance *squared* to other point """
        return pow(self._x - other[0], 2) + pow(self._y - other[1], 2)

    def midpoint(self, other):
        return Vertex((self._x + other[0]) * 0.5, (self._y + other[1]) * 0.5)

    def subtract(self, other):
        """Vector from other to this point"""
        return Vertex(self._x - other[0], self._y - other[1])

    def magnitude(self):
        """Length of this point, when taken as a vector"""
        return hypot(self._x, self._y)

    def angle(self, other, normalized=False):
        """Angle between this point and other, both taken as vectors.

        Returned in radians [0, pi], or in [0, 1] when normalized.
        """
        cross = self._x * other[1] - self._y * other[0]
        dot = self._x * other[0] + self._y * other[1]
        result = abs(atan2(cross, dot))
        if normalized:
            result /= pi
        return result

    def relation_to(self, simplex, preds=FLOAT):
        """Relation of this point to the three facets of *simplex*.

        For each vertex of the simplex the sign tells on which side of the
        opposite facet this point lies:

        -1: same side as the vertex
         0: on the line through the facet
        +1: opposite side (outside over that facet)
        """
        result = []
        for i in range(3):
            vertex = simplex[i]
            a, b = simplex[ccw(i)], simplex[cw(i)]
            here = sign(preds.orient2d(a, b, self))
            if here == 0:
                result.append(0)
            elif here == sign(preds.orient2d(a, b, vertex)):
                result.append(-1)
            else:
                result.append(1)
        return result

    def is_outside(self, simplex, preds=FLOAT):
        """Returns the vertex of *simplex* whose opposite facet separates it
        from this point, None if the point is inside or on the boundary.
        """
        for vertex, relation in zip(simplex, self.relation_to(simplex, preds)):
            if relation > 0:
                return vertex
        return None

    def relative_to_circumcircle(self, simplex, preds=FLOAT):
        """Tells whether this point is INSIDE, ON or OUTSIDE the circle
        through the three points of simplex
        """
        a, b, c = simplex[0], simplex[1], simplex[2]
        det = sign(preds.incircle(a, b, c, self))
        det *= sign(preds.orient2d(a, b, c))
        if det > 0:
            return INSIDE
        elif det < 0:
            return OUTSIDE
        return ON

    def inside_circle(self, center, radius):
        """True if this point is strictly inside the circle"""
        return self.distance(center) < radius


def as_vertex(point):
    """Wraps a 2-tuple as Vertex, vertices are returned as is"""
    if isinstance(point, Vertex):
        return point
    return Vertex(point[0], point[1])


class InfiniteVertex(Vertex):
    """Corner of the bounding triangle.

    It has a geometric embedding, but is not a site the user inserted.
    """
    __slots__ = ()

    @property
    def is_finite(self):
        return False


class Line(object):
    """Unordered pair of points, used as a candidate edge.

    Lines sort on length first, ties are broken on the coordinates of the
    endpoints, so that different lines of the same length can co-exist in
    a sorted collection.
    """
    __slots__ = ('a', 'b', '_key')

    def __init__(self, a, b):
        if (b[0], b[1]) < (a[0], a[1]):
            a, b = b, a
        self.a = a
        self.b = b
        self._key = (a.distance(b), a[0], a[1], b[0], b[1])

    def length(self):
        return self._key[0]

    @property
    def key(self):
        return self._key

    @property
    def is_finite(self):
        return self.a.is_finite and self.b.is_finite

    def __iter__(self):
        return iter((self.a, self.b))

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.a, self.b))

    def __lt__(self, other):
        return self._key < other._key

    def __gt__(self, other):
        return self._key > other._key

    def __str__(self):
        """Conversion to WKT string."""
        return "LINESTRING({0}, {1})".format(self.a, self.b)

    def __repr__(self):
        return "Line({0!r}, {1!r})".format(self.a, self.b)


class Triangle(object):
    """Triangle for which its vertices are stored in CCW order.

    Triangles are never changed once made: the triangulation makes new ones
    when it is locally rebuilt. Two triangles are the same triangle only
    if they are the same object, the serial key gives a stable order.
    """

    __slots__ = ('vertices', 'key', '_circumcenter')

    _keys = count()

    def __init__(self, a, b, c, preds=FLOAT):
        if preds.orient2d(a, b, c) < 0:
            b, c = c, b
        self.vertices = (a, b, c)  # ccw
        self.key = next(Triangle._keys)
        self._circumcenter = None

    def __str__(self):
        """Conversion to WKT string."""
        vertices = [str(v) for v in self.vertices]
        vertices.append(vertices[0])
        return "POLYGON(({0}))".format(", ".join(vertices))

    def __repr__(self):
        return "Triangle({0!r}, {1!r}, {2!r})".format(*self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __len__(self):
        return 3

    def __getitem__(self, i):
        return self.vertices[i]

    def __contains__(self, point):
        return point in self.vertices

    def contains(self, point):
        return point in self.vertices

    def contains_any(self, points):
        """True if any of the given points is a vertex of this triangle"""
        return any(point in self.vertices for point in points)

    @property
    def is_finite(self):
        return all(v.is_finite for v in self.vertices)

    def is_ccw(self, preds=FLOAT):
        a, b, c = self.vertices
        return preds.orient2d(a, b, c) > 0.

    def vertex_excluding(self, *points):
        """Returns the first vertex that is not one of the given points.

        Raises ValueError when all vertices are excluded.
        """
        for vertex in self.vertices:
            if vertex not in points:
                return vertex
        raise ValueError("No vertex left after excluding {}".format(
            ", ".join(str(pt) for pt in points)))

    def facet_opposite(self, vertex):
        """Returns the edge (2 points) that does not touch vertex"""
        if vertex not in self.vertices:
            raise ValueError("Bad vertex; {} not in triangle".format(vertex))
        return frozenset(v for v in self.vertices if v != vertex)

    def facets(self):
        """The three edges of this triangle, as frozensets of 2 points"""
        a, b, c = self.vertices
        return (frozenset((b, c)), frozenset((c, a)), frozenset((a, b)))

    def is_neighbour(self, other):
        """True if the two triangles share exactly one facet"""
        shared = 0
        for vertex in self.vertices:
            if vertex in other.vertices:
                shared += 1
        return shared == 2

    def circumcenter(self):
        """Returns the center of the circumscribed circle (memoized)
        """
        if self._circumcenter is None:
            p0, p1, p2, = self.vertices
            ax, ay, bx, by, cx, cy = p0.x, p0.y, p1.x, p1.y, p2.x, p2.y
            bx -= ax
            by -= ay
            cx -= ax
            cy -= ay

            bl = bx * bx + by * by
            cl = cx * cx + cy * cy

            d = bx * cy - by * cx

            x = (cy * bl - by * cl) * 0.5 / d
            y = (bx * cl - cx * bl) * 0.5 / d

            self._circumcenter = Vertex(ax + x, ay + y)
        return self._circumcenter

    def circumradius(self):
        return self.circumcenter().distance(self.vertices[0])
