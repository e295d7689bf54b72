"""Bernstein basis polynomials used by general-degree Bezier curves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

import numpy as np

from .errors import ConfigurationError
from .numeric import binomial


Scalar = Union[float, np.ndarray]


@dataclass(frozen=True)
class BernsteinPolynomial:
    """B_{n,i}(t) = C(n, i) * t**i * (1 - t)**(n - i)."""

    degree: int
    index: int
    coefficient: float

    def __call__(self, t: Scalar) -> Scalar:
        t = np.asarray(t, dtype=float)
        value = self.coefficient * np.power(t, self.index) * np.power(1.0 - t, self.degree - self.index)
        if value.ndim == 0:
            return float(value)
        return value


def _zero(t: Scalar) -> Scalar:
    t = np.asarray(t, dtype=float)
    if t.ndim == 0:
        return 0.0
    return np.zeros_like(t)


def create_bernstein(n: int, i: int) -> Callable[[Scalar], Scalar]:
    """
    Build the degree-`n`, index-`i` Bernstein polynomial.

    Indices above `n` yield the identically-zero function.
    """
    if n < 0 or i < 0:
        raise ConfigurationError(f"Bernstein degree and index must be >= 0; got n={n}, i={i}.")
    if i > n:
        return _zero
    return BernsteinPolynomial(degree=int(n), index=int(i), coefficient=float(binomial(n, i)))
