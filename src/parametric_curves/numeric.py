"""Small numeric helpers: tolerance comparison, combinatorics, point arrays."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .errors import ConfigurationError


EPSILON = 1e-9


def is_close(a: float, b: float, tol: float = EPSILON) -> bool:
    """Absolute-tolerance equivalence used for knot arithmetic."""
    return abs(float(a) - float(b)) <= tol


def factorial(n: int) -> int:
    if n < 0:
        raise ConfigurationError(f"Factorial is undefined for negative integers; got {n}.")
    return math.factorial(int(n))


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k); zero when k lies outside [0, n]."""
    if k < 0 or k > n:
        return 0
    return factorial(n) // (factorial(k) * factorial(n - k))


def as_point_array(points: Any, name: str = "points", min_count: int = 1) -> np.ndarray:
    """
    Coerce `points` into a finite float array of shape (N, D).

    The returned array is always a fresh copy.
    """
    try:
        pts = np.array(points, dtype=float, copy=True)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"`{name}` must be numeric; {exc}") from exc
    if pts.ndim != 2:
        raise ConfigurationError(f"`{name}` must be a 2D array of shape (N, D); got ndim={pts.ndim}.")
    if pts.shape[1] < 1:
        raise ConfigurationError(f"`{name}` must have at least one coordinate column; got shape={pts.shape}.")
    if pts.shape[0] < min_count:
        raise ConfigurationError(
            f"`{name}` needs at least {min_count} point(s); got {pts.shape[0]}."
        )
    if not np.all(np.isfinite(pts)):
        raise ConfigurationError(f"`{name}` contains non-finite values (NaN/Inf).")
    return pts


def as_parameter(value: Any) -> float:
    """Return `value` as a float, or NaN when it cannot be converted."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")
