'''
Helpers: bounding geometry, spatial ordering, disjoint sets and
randomized point sets (for testing purposes).
'''
import operator
from math import sqrt, pi, cos, sin
from random import randint, random

from proxtri.delaunay.tds import InfiniteVertex, Triangle


# ------------------------------------------------------------------------------
# Bounding geometry
#

def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


def largest_axis(aabb):
    """Given an axis-aligned bounding box as two 2-tuples, what is the
    largest axis of this box
    """
    dx = aabb[1][0] - aabb[0][0]
    dy = aabb[1][1] - aabb[0][1]
    if dx > dy:
        return 0
    else:
        return 1


def bounding_triangle(points, margin=50.0):
    """Large triangle around the box of the points, that can serve as
    initial triangle of a Triangulation.

    The margin is expressed in the largest side of the box and should be
    at least 1, so that the box lies well inside the triangle.
    """
    if not points:
        raise ValueError("we cannot make a bounding triangle for no points")
    if margin < 1.0:
        raise ValueError("margin {} too small, use at least 1".format(margin))
    (xmin, ymin), (xmax, ymax) = box(points)
    width = abs(xmax - xmin)
    height = abs(ymax - ymin)
    if height > width:
        width = height
    if width == 0:
        width = 1.
    corners = [InfiniteVertex(xmin - margin * width,
                              ymin - 0.8 * margin * width),
               InfiniteVertex(xmax + margin * width,
                              ymin - 0.8 * margin * width),
               InfiniteVertex(0.5 * (xmin + xmax),
                              ymax + 1.2 * margin * width)]
    return Triangle(corners[0], corners[1], corners[2])


# ------------------------------------------------------------------------------
# Spatial ordering
#

def kdsort(points):
    """Sorts a list of tuples based on first two elements along kD-tree order.

    Consecutive points in the result lie close to each other, so that a
    walk starting at the triangle of the previous insertion is short.
    """
    if not points:
        return []
    stack = []
    result = []
    stack.append((list(points), box(points)))
    while stack:
        points, aabb = stack.pop()
        axis = largest_axis(aabb)
        points.sort(key=operator.itemgetter(axis))
        halfway = len(points) // 2
        pivot = points[halfway]
        result.append(pivot)
        # determine the next halves
        (xmid, ymid) = pivot[0], pivot[1]
        (left, bottom) = aabb[0]
        (right, top) = aabb[1]
        leftpts = points[:halfway]
        rightpts = points[halfway+1:]
        # stack right half
        if rightpts:
            if axis == 0:
                half_aabb = [(xmid, bottom), (right, top)]
            else:
                half_aabb = [(left, ymid), (right, top)]
            stack.append((rightpts, half_aabb))
        # stack left half
        if leftpts:
            if axis == 0:
                half_aabb = [(left, bottom), (xmid, top)]
            else:
                half_aabb = [(left, bottom), (right, ymid)]
            stack.append((leftpts, half_aabb))
    return result


# ------------------------------------------------------------------------------
# Disjoint sets
#

class DisjointSet(object):
    """
    Taken from: https://stackoverflow.com/a/3067672
    """

    def __init__(self):
        self.leader = {}  # maps a member to the group's leader
        self.group = {}  # maps a group leader to the group (which is a set)

    def find(self, a):
        """Leader of the group of a (a itself, when not yet grouped)"""
        return self.leader.get(a, a)

    def add(self, a, b):
        """Puts a and b in the same group.

        Returns False if they were in the same group already.
        """
        leadera = self.leader.get(a)
        leaderb = self.leader.get(b)
        if leadera is not None:
            if leaderb is not None:
                if leadera == leaderb:
                    return False  # nothing to do
                groupa = self.group[leadera]
                groupb = self.group[leaderb]
                if len(groupa) < len(groupb):
                    # swap, add to largest group
                    a, leadera, groupa, b, leaderb, groupb = \
                        b, leaderb, groupb, a, leadera, groupa
                groupa |= groupb
                del self.group[leaderb]
                for k in groupb:
                    self.leader[k] = leadera
            else:
                self.group[leadera].add(b)
                self.leader[b] = leadera
        else:
            if leaderb is not None:
                self.group[leaderb].add(a)
                self.leader[a] = leaderb
            else:
                self.leader[a] = self.leader[b] = a
                self.group[a] = set([a, b])
        return True


# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#

def random_sorted_vertices(n=10):
    """Returns a list with n random vertices (duplicates removed)
    """
    W = n
    vertices = []
    for _ in range(n):
        x = randint(0, W)
        y = randint(0, W)
        x /= float(W)
        y /= float(W)
        vertices.append((x, y))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def random_circle_vertices(n=10, cx=0, cy=0):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = []
    for _ in range(n):
        r = sqrt(random())
        t = 2 * pi * random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x+cx, y+cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices
