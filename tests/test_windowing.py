from __future__ import annotations

from pathlib import Path
import unittest
import sys

import numpy as np


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from parametric_curves.errors import ConfigurationError  # noqa: E402
from parametric_curves.matrix_form import MatrixFormSpline  # noqa: E402
from parametric_curves.windowing import LastSharedWindow, ThreeSharedWindow  # noqa: E402


def _points(count: int) -> np.ndarray:
    rng = np.random.default_rng(count)
    return rng.normal(size=(count, 3))


class LastSharedWindowTest(unittest.TestCase):
    def test_segment_count(self) -> None:
        window = LastSharedWindow()
        self.assertEqual(window.segment_count(4), 1)
        self.assertEqual(window.segment_count(7), 2)
        self.assertEqual(window.segment_count(10), 3)

    def test_rejects_invalid_lengths(self) -> None:
        window = LastSharedWindow()
        for length in (0, 3, 5, 6, 8):
            with self.assertRaises(ConfigurationError, msg=f"length={length}"):
                window.segment_count(length)

    def test_segments_share_boundary_row(self) -> None:
        pts = _points(7)
        segments = LastSharedWindow().split(pts)
        self.assertEqual(segments.shape, (2, 4, 3))
        np.testing.assert_array_equal(segments[0], pts[0:4])
        np.testing.assert_array_equal(segments[1], pts[3:7])

    def test_round_trip_through_spline(self) -> None:
        for length in (4, 7, 10):
            pts = _points(length)
            spline = MatrixFormSpline.bezier(pts)
            np.testing.assert_array_equal(spline.get_geometry(), pts)
            hermite = MatrixFormSpline.hermite(pts)
            np.testing.assert_array_equal(hermite.get_geometry(), pts)


class ThreeSharedWindowTest(unittest.TestCase):
    def test_segment_count(self) -> None:
        window = ThreeSharedWindow()
        self.assertEqual(window.segment_count(4), 1)
        self.assertEqual(window.segment_count(6), 3)
        with self.assertRaises(ConfigurationError):
            window.segment_count(3)

    def test_window_slides_by_one(self) -> None:
        pts = _points(6)
        segments = ThreeSharedWindow().split(pts)
        self.assertEqual(segments.shape, (3, 4, 3))
        for k in range(3):
            np.testing.assert_array_equal(segments[k], pts[k : k + 4])

    def test_round_trip_through_spline(self) -> None:
        for length in (4, 5, 6):
            pts = _points(length)
            spline = MatrixFormSpline.uniform_bspline(pts)
            np.testing.assert_array_equal(spline.get_geometry(), pts)
            catmull = MatrixFormSpline.catmull_rom(pts)
            np.testing.assert_array_equal(catmull.get_geometry(), pts)

    def test_join_rejects_bad_shape(self) -> None:
        with self.assertRaises(ConfigurationError):
            ThreeSharedWindow().join(np.zeros((2, 3, 3)))
        with self.assertRaises(ConfigurationError):
            LastSharedWindow().join(np.zeros((0, 4, 3)))


if __name__ == "__main__":
    unittest.main()
