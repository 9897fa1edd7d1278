import unittest

from proxtri.delaunay.preds import orient2d, incircle, sign, \
    FloatPredicates, RobustPredicates


class TestFloatPredicates(unittest.TestCase):

    def test_orient2d(self):
        assert orient2d((0, 0), (1, 0), (0, 1)) > 0
        assert orient2d((0, 0), (0, 1), (1, 0)) < 0
        assert orient2d((0, 0), (1, 1), (2, 2)) == 0
        # twice the signed area
        self.assertEqual(orient2d((0, 0), (2, 0), (0, 2)), 4)

    def test_incircle(self):
        a, b, c = (0, 0), (1, 0), (0, 1)
        assert incircle(a, b, c, (0.5, 0.5)) > 0
        assert incircle(a, b, c, (2, 2)) < 0
        self.assertEqual(incircle(a, b, c, (1, 1)), 0)

    def test_sign(self):
        self.assertEqual(sign(-0.5), -1)
        self.assertEqual(sign(0.), 0)
        self.assertEqual(sign(12), 1)

    def test_object_matches_functions(self):
        preds = FloatPredicates()
        pts = [(0.3, 0.1), (4.5, -2.0), (1.25, 3.5), (2.0, 1.0)]
        self.assertEqual(preds.orient2d(*pts[:3]), orient2d(*pts[:3]))
        self.assertEqual(preds.incircle(*pts), incircle(*pts))


class TestRobustPredicates(unittest.TestCase):

    def test_signs_agree(self):
        robust = RobustPredicates()
        assert robust.orient2d((0, 0), (1, 0), (0, 1)) > 0
        assert robust.orient2d((0, 0), (0, 1), (1, 0)) < 0
        self.assertEqual(robust.orient2d((0, 0), (1, 1), (2, 2)), 0)
        assert robust.incircle((0, 0), (1, 0), (0, 1), (0.5, 0.5)) > 0
        assert robust.incircle((0, 0), (1, 0), (0, 1), (2, 2)) < 0


if __name__ == "__main__":
    unittest.main()
