import unittest

from proxtri.delaunay.helpers import box, largest_axis, kdsort, \
    bounding_triangle, DisjointSet, random_sorted_vertices, \
    random_circle_vertices
from proxtri.delaunay.tds import Vertex


class TestBox(unittest.TestCase):

    def test_box(self):
        pts = [(0, 5), (3, -1), (-2, 2)]
        self.assertEqual(box(pts), ((-2, -1), (3, 5)))

    def test_largest_axis(self):
        self.assertEqual(largest_axis(((0, 0), (10, 1))), 0)
        self.assertEqual(largest_axis(((0, 0), (1, 10))), 1)


class TestBoundingTriangle(unittest.TestCase):

    def test_points_strictly_inside(self):
        pts = [(0, 0), (10, 0), (10, 10), (0, 10), (3, 7)]
        triangle = bounding_triangle(pts)
        assert not triangle.is_finite
        for v in triangle:
            assert not v.is_finite
        for pt in pts:
            relation = Vertex(pt[0], pt[1]).relation_to(triangle.vertices)
            self.assertEqual(relation, [-1, -1, -1])

    def test_single_point(self):
        triangle = bounding_triangle([(4, 4)], margin=1)
        relation = Vertex(4, 4).relation_to(triangle.vertices)
        self.assertEqual(relation, [-1, -1, -1])

    def test_bad_input(self):
        with self.assertRaises(ValueError):
            bounding_triangle([])
        with self.assertRaises(ValueError):
            bounding_triangle([(0, 0)], margin=0.5)


class TestKdSort(unittest.TestCase):

    def test_permutation(self):
        pts = [(x * 0.7 % 3, x * 1.3 % 5) for x in range(40)]
        result = kdsort(pts)
        self.assertEqual(len(result), len(pts))
        self.assertEqual(sorted(result), sorted(pts))

    def test_median_first(self):
        pts = [(x, 0) for x in range(9)]
        result = kdsort(pts)
        self.assertEqual(result[0], (4, 0))

    def test_empty(self):
        self.assertEqual(kdsort([]), [])


class TestDisjointSet(unittest.TestCase):

    def test_groups(self):
        ds = DisjointSet()
        assert ds.add(1, 2)
        assert ds.add(3, 4)
        self.assertEqual(ds.find(5), 5)
        assert ds.find(1) == ds.find(2)
        assert ds.find(1) != ds.find(3)
        assert ds.add(2, 3)
        assert ds.find(1) == ds.find(4)
        # already grouped
        assert not ds.add(4, 1)
        self.assertEqual(len(ds.group), 1)

    def test_join_single(self):
        ds = DisjointSet()
        ds.add(1, 2)
        assert ds.add(7, 1)
        assert ds.add(2, 8)
        self.assertEqual(ds.group[ds.find(7)], set([1, 2, 7, 8]))


class TestRandom(unittest.TestCase):

    def test_sorted(self):
        pts = random_sorted_vertices(25)
        assert 0 < len(pts) <= 25
        self.assertEqual(pts, sorted(set(pts)))
        for x, y in pts:
            assert 0 <= x <= 1 and 0 <= y <= 1

    def test_circle(self):
        pts = random_circle_vertices(25, cx=10, cy=-10)
        assert 0 < len(pts) <= 25
        for x, y in pts:
            assert (x - 10) ** 2 + (y + 10) ** 2 <= 1.0 + 1e-9


if __name__ == "__main__":
    unittest.main()
