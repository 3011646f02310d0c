import unittest

from pagewise.core.adjustment import compute_scale, rotated, zoom_scale
from pagewise.core.constants import AdjustMode, RotateDirection, ZoomAction
from pagewise.core.geometry import Layout


class ComputeScaleTests(unittest.TestCase):
    def test_width_single_column(self):
        layout = Layout([(100, 200)] * 3, padding=1)
        self.assertEqual(compute_scale(AdjustMode.WIDTH, 400, 300, layout), 4.0)

    def test_width_multiple_columns_subtracts_padding(self):
        layout = Layout([(100, 200)] * 4, pages_per_row=2, padding=10)
        self.assertAlmostEqual(compute_scale(AdjustMode.WIDTH, 400, 300, layout), 1.95)

    def test_width_ignores_current_scale(self):
        layout = Layout([(100, 200)] * 3, scale=3.0)
        self.assertEqual(compute_scale(AdjustMode.WIDTH, 400, 300, layout), 4.0)

    def test_bestfit_fits_height_for_wide_viewport(self):
        layout = Layout([(100, 200)] * 3)
        self.assertEqual(compute_scale(AdjustMode.BESTFIT, 400, 300, layout), 1.5)

    def test_bestfit_fits_width_for_tall_viewport(self):
        layout = Layout([(100, 200)] * 3)
        self.assertEqual(compute_scale(AdjustMode.BESTFIT, 100, 1000, layout), 1.0)

    def test_bestfit_uses_rotated_cells_for_the_ratio(self):
        layout = Layout([(100, 200)] * 3, rotation=90)
        self.assertEqual(compute_scale(AdjustMode.BESTFIT, 400, 300, layout), 2.0)

    def test_scrollbar_is_subtracted_once_when_canvas_overflows(self):
        layout = Layout([(100, 200)] * 10)
        self.assertEqual(
            compute_scale(AdjustMode.WIDTH, 400, 300, layout, scrollbar_width=20), 3.8
        )

    def test_scrollbar_ignored_when_canvas_fits(self):
        layout = Layout([(100, 50)])
        self.assertEqual(
            compute_scale(AdjustMode.WIDTH, 400, 300, layout, scrollbar_width=20), 4.0
        )

    def test_nothing_to_compute(self):
        layout = Layout([(100, 200)])
        self.assertIsNone(compute_scale(AdjustMode.NONE, 400, 300, layout))
        self.assertIsNone(compute_scale(AdjustMode.INPUTBAR, 400, 300, layout))
        self.assertIsNone(compute_scale(AdjustMode.WIDTH, 0, 300, layout))
        self.assertIsNone(compute_scale(AdjustMode.WIDTH, 400, -1, layout))
        self.assertIsNone(compute_scale(AdjustMode.WIDTH, 400, 300, Layout([])))


class ZoomTests(unittest.TestCase):
    def test_zoom_in_and_out(self):
        self.assertAlmostEqual(zoom_scale(ZoomAction.IN, 1.0, 0, step_percent=25), 1.25)
        self.assertAlmostEqual(zoom_scale(ZoomAction.OUT, 1.0, 3, step_percent=10), 0.7)

    def test_specific_and_default(self):
        self.assertEqual(zoom_scale(ZoomAction.SPECIFIC, 2.0, 150), 1.5)
        self.assertEqual(zoom_scale(ZoomAction.SPECIFIC, 2.0, 0), 1.0)
        self.assertEqual(zoom_scale(ZoomAction.DEFAULT, 2.0, 7), 1.0)

    def test_limits(self):
        self.assertEqual(zoom_scale(ZoomAction.SPECIFIC, 1.0, 5000, max_percent=400), 4.0)
        self.assertEqual(zoom_scale(ZoomAction.OUT, 0.2, 5, min_percent=10), 0.1)


class RotateTests(unittest.TestCase):
    def test_rotation_wraps(self):
        self.assertEqual(rotated(0, RotateDirection.CLOCKWISE), 90)
        self.assertEqual(rotated(90, RotateDirection.COUNTER_CLOCKWISE), 0)
        self.assertEqual(rotated(180, RotateDirection.CLOCKWISE, 3), 90)


if __name__ == "__main__":
    unittest.main()
