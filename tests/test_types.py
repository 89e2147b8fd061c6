import unittest

import numpy as np

from quadmap.core.errors import ShapeError
from quadmap.core.types import Mat3, Point, Quad, Vec3, as_point, as_quad


class TypeTests(unittest.TestCase):
    def test_as_point_accepts_pairs_and_arrays(self):
        self.assertEqual(as_point((1, 2)), Point(1.0, 2.0))
        self.assertEqual(as_point(np.array([3.5, 4.5])), Point(3.5, 4.5))
        self.assertIsInstance(as_point([1, 2]).x, float)

    def test_as_point_rejects_wrong_length(self):
        with self.assertRaises(ShapeError):
            as_point((1, 2, 3))

    def test_as_quad(self):
        quad = as_quad([(0, 0), (1, 0), (1, 1), (0, 1)])
        self.assertIsInstance(quad, Quad)
        self.assertEqual(quad.p2, Point(1.0, 1.0))
        self.assertIs(as_quad(quad), quad)

    def test_as_quad_rejects_wrong_count(self):
        with self.assertRaises(ShapeError):
            as_quad([(0, 0), (1, 0), (1, 1)])
        with self.assertRaises(ShapeError):
            as_quad([(0, 0)] * 5)

    def test_points_are_immutable(self):
        p = Point(1.0, 2.0)
        with self.assertRaises(AttributeError):
            p.x = 5.0

    def test_apply_vec3(self):
        m = Mat3(1, 2, 3, 4, 5, 6, 7, 8, 9)
        self.assertEqual(m.apply_vec3(Vec3(1, 0, 1)), Vec3(4, 10, 16))


if __name__ == "__main__":
    unittest.main()
