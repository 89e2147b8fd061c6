import unittest

from quadmap.core import quad_editor
from quadmap.core.errors import ShapeError
from quadmap.core.rect_space import RectSpace
from quadmap.core.types import Point, Quad

BOX = [(0, 0), (200, 0), (200, 100), (0, 100)]
IMAGE_QUAD = [(200, 150), (500, 130), (520, 340), (190, 300)]


class QuadEditorTestCase(unittest.TestCase):
    def assert_quad(self, got, expected, places=7):
        self.assertIsInstance(got, Quad)
        for g, e in zip(got, expected):
            self.assertAlmostEqual(g[0], e[0], places=places, msg=f"{got} != {expected}")
            self.assertAlmostEqual(g[1], e[1], places=places, msg=f"{got} != {expected}")


class BoxEditTests(QuadEditorTestCase):
    """On an axis-aligned box rect deltas are plain scaled offsets"""

    def test_pan(self):
        self.assert_quad(
            quad_editor.pan(BOX, 0.1, 0.0),
            [(20, 0), (220, 0), (220, 100), (20, 100)]
        )

    def test_scale_keeps_corner_zero(self):
        self.assert_quad(
            quad_editor.scale(BOX, 0.5),
            [(0, 0), (300, 0), (300, 150), (0, 150)]
        )

    def test_drag_top_edge_ignores_du(self):
        self.assert_quad(
            quad_editor.drag_edge(BOX, 0, 0.3, 0.1),
            [(0, 10), (200, 10), (200, 100), (0, 100)]
        )

    def test_drag_right_edge_ignores_dv(self):
        self.assert_quad(
            quad_editor.drag_edge(BOX, 1, 0.25, 0.9),
            [(0, 0), (250, 0), (250, 100), (0, 100)]
        )

    def test_drag_left_edge(self):
        self.assert_quad(
            quad_editor.drag_edge(BOX, 3, -0.1, 0.5),
            [(-20, 0), (200, 0), (200, 100), (-20, 100)]
        )

    def test_drag_top_left_corner(self):
        self.assert_quad(
            quad_editor.drag_corner(BOX, 0, 0.1, 0.2),
            [(20, 20), (200, 20), (200, 100), (20, 100)]
        )

    def test_drag_bottom_right_corner(self):
        self.assert_quad(
            quad_editor.drag_corner(BOX, 2, 0.5, 0.5),
            [(0, 0), (300, 0), (300, 150), (0, 150)]
        )

    def test_apply_rect_changes_uses_rect_dimensions(self):
        self.assert_quad(
            quad_editor.apply_rect_changes(BOX, [(2, 2.0, 1.0)], rect_width=20, rect_height=10),
            [(0, 0), (200, 0), (220, 110), (0, 100)]
        )

    def test_invalid_indexes(self):
        with self.assertRaises(ShapeError):
            quad_editor.apply_rect_changes(BOX, [(4, 0.1, 0.1)])
        with self.assertRaises(ShapeError):
            quad_editor.drag_edge(BOX, -1, 0.1, 0.1)
        with self.assertRaises(ShapeError):
            quad_editor.drag_corner(BOX, 7, 0.1, 0.1)


class PerspectiveEditTests(QuadEditorTestCase):
    def setUp(self):
        self.space = RectSpace(IMAGE_QUAD)

    def test_pan_is_uniform_in_rect_space(self):
        moved = quad_editor.pan(IMAGE_QUAD, 0.1, -0.05)
        for corner, rect_corner in zip(moved, self.space.rect_corners):
            u, v = self.space.to_rect(corner)
            self.assertAlmostEqual(u, rect_corner.x + 0.1, places=9)
            self.assertAlmostEqual(v, rect_corner.y - 0.05, places=9)

    def test_pan_is_not_a_pixel_offset(self):
        moved = quad_editor.pan(IMAGE_QUAD, 0.1, 0.0)
        offsets = {round(m[0] - p[0], 6) for m, p in zip(moved, IMAGE_QUAD)}
        self.assertGreater(len(offsets), 1)

    def test_zero_edit_returns_same_corners(self):
        self.assert_quad(quad_editor.drag_corner(IMAGE_QUAD, 1, 0.0, 0.0), IMAGE_QUAD)

    def test_move_in_rect(self):
        p = quad_editor.move_in_rect(self.space, (200, 150), 1.0, 1.0)
        self.assertAlmostEqual(p.x, 520.0, places=9)
        self.assertAlmostEqual(p.y, 340.0, places=9)

    def test_rect_delta(self):
        du, dv = quad_editor.rect_delta(self.space, (200, 150), (500, 130))
        self.assertAlmostEqual(du, 1.0, places=9)
        self.assertAlmostEqual(dv, 0.0, places=9)

    def test_input_quad_untouched(self):
        quad = [list(p) for p in IMAGE_QUAD]
        quad_editor.scale(quad, 0.2)
        self.assertEqual(quad, [list(p) for p in IMAGE_QUAD])


class EdgeMidpointTests(unittest.TestCase):
    def test_midpoints(self):
        self.assertEqual(
            quad_editor.edge_midpoints(BOX),
            (Point(100, 0), Point(200, 50), Point(100, 100), Point(0, 50))
        )


if __name__ == "__main__":
    unittest.main()
