"""Cox-de Boor recursion for B-spline basis functions.

Family `i` at degree 0 covers the logical span `[knot(i - 1), knot(i))`, so
family `i` corresponds to the textbook basis function N_{i-1, degree}.
Knot lookups outside the logical range are undefined and contribute a zero
term, as do tolerance-zero denominators.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .errors import ConfigurationError
from .knots import KnotVector
from .numeric import is_close


def _knot(knots: KnotVector, position: int) -> Optional[float]:
    if position < 0 or position >= knots.knot_count:
        return None
    return knots.logical_knot(position)


def _basis(
    knots: KnotVector,
    degree: int,
    family: int,
    t: float,
    memo: dict[tuple[int, int], float],
) -> float:
    key = (degree, family)
    cached = memo.get(key)
    if cached is not None:
        return cached

    current = _knot(knots, family)
    before = _knot(knots, family - 1)

    if degree == 0:
        value = 0.0
        if before is not None and current is not None:
            if before <= t < current:
                value = 1.0
            elif before < current and t == current == float(knots.values[-1]):
                # Close the final non-empty span on the right.
                value = 1.0
        memo[key] = value
        return value

    term1 = 0.0
    mid = _knot(knots, family + degree - 1)
    if before is not None and mid is not None and not is_close(mid - before, 0.0):
        term1 = (t - before) / (mid - before) * _basis(knots, degree - 1, family, t, memo)

    term2 = 0.0
    after = _knot(knots, family + degree)
    if after is not None and current is not None and not is_close(after - current, 0.0):
        term2 = (after - t) / (after - current) * _basis(knots, degree - 1, family + 1, t, memo)

    value = term1 + term2
    memo[key] = value
    return value


def basis(knots: KnotVector, degree: int, family: int, t: float) -> float:
    """Evaluate the degree-`degree` basis function of `family` at `t`."""
    if degree < 0:
        raise ConfigurationError(f"Basis degree must be >= 0; got {degree}.")
    return _basis(knots, int(degree), int(family), float(t), {})


def basis_values(
    knots: KnotVector,
    degree: int,
    t: float,
    families: Iterable[int],
) -> np.ndarray:
    """Evaluate several families at one parameter, sharing the recursion memo."""
    if degree < 0:
        raise ConfigurationError(f"Basis degree must be >= 0; got {degree}.")
    memo: dict[tuple[int, int], float] = {}
    return np.array(
        [_basis(knots, int(degree), int(f), float(t), memo) for f in families],
        dtype=float,
    )
