from __future__ import annotations

from pathlib import Path
import unittest
import sys

import numpy as np


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from parametric_curves.bernstein import BernsteinPolynomial, create_bernstein  # noqa: E402
from parametric_curves.errors import ConfigurationError  # noqa: E402
from parametric_curves.numeric import binomial, factorial, is_close  # noqa: E402


class BernsteinTest(unittest.TestCase):
    def test_endpoint_values(self) -> None:
        for n in range(0, 6):
            for i in range(0, n + 1):
                b = create_bernstein(n, i)
                self.assertEqual(b(0.0), 1.0 if i == 0 else 0.0, msg=f"n={n}, i={i}")
                self.assertEqual(b(1.0), 1.0 if i == n else 0.0, msg=f"n={n}, i={i}")

    def test_partition_of_unity(self) -> None:
        for n in (1, 2, 3, 5, 8):
            polys = [create_bernstein(n, i) for i in range(n + 1)]
            for t in np.linspace(0.0, 1.0, 17):
                self.assertAlmostEqual(sum(b(float(t)) for b in polys), 1.0, places=12)

    def test_known_value(self) -> None:
        b = create_bernstein(3, 1)
        self.assertIsInstance(b, BernsteinPolynomial)
        self.assertEqual(b.coefficient, 3.0)
        self.assertAlmostEqual(b(0.5), 0.375)

    def test_accepts_arrays(self) -> None:
        b = create_bernstein(2, 1)
        np.testing.assert_allclose(b(np.array([0.0, 0.5, 1.0])), [0.0, 0.5, 0.0])

    def test_index_above_degree_is_zero(self) -> None:
        b = create_bernstein(2, 3)
        self.assertEqual(b(0.3), 0.0)
        np.testing.assert_array_equal(b(np.array([0.0, 1.0])), [0.0, 0.0])

    def test_rejects_negative_arguments(self) -> None:
        with self.assertRaises(ConfigurationError):
            create_bernstein(-1, 0)
        with self.assertRaises(ConfigurationError):
            create_bernstein(3, -1)


class NumericHelpersTest(unittest.TestCase):
    def test_factorial(self) -> None:
        self.assertEqual(factorial(0), 1)
        self.assertEqual(factorial(5), 120)
        with self.assertRaises(ConfigurationError):
            factorial(-1)

    def test_binomial(self) -> None:
        self.assertEqual(binomial(5, 2), 10)
        self.assertEqual(binomial(4, 0), 1)
        self.assertEqual(binomial(3, 4), 0)
        self.assertEqual(binomial(3, -1), 0)

    def test_is_close(self) -> None:
        self.assertTrue(is_close(0.1 + 0.2, 0.3))
        self.assertFalse(is_close(1.0, 1.0 + 1e-6))


if __name__ == "__main__":
    unittest.main()
