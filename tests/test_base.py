from __future__ import annotations

from pathlib import Path
import unittest
import sys

import numpy as np


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from parametric_curves.base import sample  # noqa: E402
from parametric_curves.bezier import GeneralBezierCurve  # noqa: E402
from parametric_curves.bspline import NonUniformBSplineCurve  # noqa: E402
from parametric_curves.errors import ConfigurationError  # noqa: E402
from parametric_curves.matrix_form import MatrixFormSpline  # noqa: E402


POINTS = np.array(
    [
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [2.0, 1.0, 0.0],
        [3.0, 1.0, 0.0],
        [4.0, 0.0, 2.0],
    ]
)


class SampleTest(unittest.TestCase):
    def test_samples_span_whole_domain(self) -> None:
        spline = MatrixFormSpline.catmull_rom(POINTS)
        sampled = sample(spline, 21)
        self.assertEqual(sampled.shape, (21, 3))
        np.testing.assert_allclose(sampled[0], POINTS[1], atol=1e-12)
        np.testing.assert_allclose(sampled[-1], POINTS[3], atol=1e-12)

    def test_every_family_supports_sampling(self) -> None:
        splines = [
            MatrixFormSpline.uniform_bspline(POINTS),
            GeneralBezierCurve(4, POINTS),
            NonUniformBSplineCurve(POINTS, 3, centripetal=True),
        ]
        for spline in splines:
            sampled = sample(spline, 16)
            self.assertEqual(sampled.shape, (16, 3))
            self.assertTrue(np.all(np.isfinite(sampled)))

    def test_zero_samples_returns_empty_array(self) -> None:
        sampled = sample(GeneralBezierCurve(4, POINTS), 0)
        self.assertEqual(sampled.shape, (0, 3))

    def test_rejects_negative_sample_count(self) -> None:
        with self.assertRaises(ConfigurationError):
            sample(GeneralBezierCurve(4, POINTS), -1)


if __name__ == "__main__":
    unittest.main()
