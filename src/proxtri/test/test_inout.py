import io
import unittest

from proxtri.delaunay.inout import output_vertices, output_triangles, \
    output_edges
from proxtri.delaunay.triangulation import Triangulation


class TestOutput(unittest.TestCase):

    def setUp(self):
        self.dt = Triangulation([(-100, -100), (100, -100), (0, 100)])
        for pt in [(0, 0), (10, 0), (0, 10), (7, 7)]:
            self.dt.insert(pt)

    def test_vertices(self):
        fh = io.StringIO()
        output_vertices(self.dt.points, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;finite;info")
        self.assertEqual(len(lines), 1 + 7)
        assert ";POINT(0.0 0.0);True;None" in fh.getvalue()
        assert ";POINT(-100.0 -100.0);False;None" in fh.getvalue()

    def test_triangles(self):
        fh = io.StringIO()
        output_triangles(list(self.dt) + [None], self.dt, fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;neighbours;finite;circumradius")
        self.assertEqual(len(lines), 1 + len(self.dt))
        for line in lines[1:]:
            key, wkt, neighbours, finite, radius = line.split(";")
            assert wkt.startswith("POLYGON((")
            assert finite in ("True", "False")
            assert float(radius) > 0
            keys = [int(k) for k in neighbours.split(",")]
            self.assertEqual(keys, sorted(keys))
            if finite == "True":
                self.assertEqual(len(keys), 3)

    def test_edges(self):
        fh = io.StringIO()
        output_edges(self.dt.delaunay_edges(finite_only=True), fh)
        lines = fh.getvalue().splitlines()
        self.assertEqual(lines[0], "id;wkt;length")
        # (0, 0) (10, 0) (7, 7) (0, 10) is convex: 4 sides, 1 diagonal
        self.assertEqual(len(lines), 1 + 5)
        self.assertEqual(lines[1].split(";")[0], "1")
        for line in lines[1:]:
            assert line.split(";")[1].startswith("LINESTRING(")


if __name__ == "__main__":
    unittest.main()
