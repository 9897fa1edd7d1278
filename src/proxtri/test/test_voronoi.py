import random
import unittest

from proxtri.delaunay.preds import orient2d
from proxtri.delaunay.tds import Vertex
from proxtri.delaunay.triangulation import Triangulation
from proxtri.voronoi import voronoi_cell, VoronoiTransformer


def rounded(points):
    return set((round(pt.x, 9), round(pt.y, 9)) for pt in points)


class TestVoronoi(unittest.TestCase):

    def setUp(self):
        self.dt = Triangulation([(-100, -100), (100, -100), (0, 100)])
        for pt in [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)]:
            self.dt.insert(pt)

    def test_cell(self):
        ring = voronoi_cell(self.dt, (1, 1))
        self.assertEqual(len(ring), 5)
        self.assertEqual(ring[0], ring[-1])
        self.assertEqual(rounded(ring[:-1]),
                         set([(1., 0.), (2., 1.), (1., 2.), (0., 1.)]))

    def test_cell_with_triangle(self):
        site = Vertex(1, 1)
        triangle = [t for t in self.dt if site in t][0]
        ring = voronoi_cell(self.dt, site, triangle)
        self.assertEqual(rounded(ring), rounded(voronoi_cell(self.dt, site)))

    def test_no_cell(self):
        with self.assertRaises(ValueError):
            voronoi_cell(self.dt, (0.5, 0.3))

    def test_transform(self):
        dt = self.dt
        transformer = VoronoiTransformer(dt)
        transformer.transform()
        self.assertEqual(len(transformer.centers), len(dt))
        shared = sum(len(dt.neighbours(t)) for t in dt) // 2
        self.assertEqual(len(transformer.segments), shared)
        for start, end, left, right in transformer.segments:
            assert start < end
            assert start in transformer.centers
            assert end in transformer.centers
            for site in (left, right):
                assert site is None or site.is_finite
        self.assertEqual(set(transformer.cells), set(dt.sites))
        for site, ring in transformer.cells.items():
            self.assertEqual(ring[0], ring[-1])
            self.assertEqual(rounded(ring),
                             rounded(voronoi_cell(dt, site)))
        self.assertEqual(rounded(transformer.cells[Vertex(1, 1)]),
                         set([(1., 0.), (2., 1.), (1., 2.), (0., 1.)]))

    def test_segment_sides(self):
        rnd = random.Random(12)
        dt = Triangulation([(-1000, -1000), (1000, -1000), (0, 1000)])
        for _ in range(30):
            dt.insert((rnd.uniform(-50, 50), rnd.uniform(-50, 50)))
        transformer = VoronoiTransformer(dt)
        transformer.transform()
        centers = transformer.centers
        checked = 0
        for start, end, left, right in transformer.segments:
            a, b = centers[start], centers[end]
            if left is not None:
                assert orient2d(a, b, left) > 0
                checked += 1
            if right is not None:
                assert orient2d(a, b, right) < 0
                checked += 1
        assert checked > 0


if __name__ == "__main__":
    unittest.main()
