"""Non-uniform B-spline curves evaluated directly through Cox-de Boor."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

import numpy as np

from .basis import basis_values
from .errors import ConfigurationError, DomainError, KnotIndexError
from .knots import SUPPORTED_PARAMETERIZATIONS, KnotVector
from .numeric import as_parameter, as_point_array


logger = logging.getLogger(__name__)


def _resolve_strategy(
    knots: Optional[KnotVector],
    uniform: bool,
    chord_length: bool,
    centripetal: bool,
) -> str:
    requested = []
    if knots is not None:
        requested.append("explicit")
    for name, flag in zip(SUPPORTED_PARAMETERIZATIONS, (uniform, chord_length, centripetal)):
        if flag:
            requested.append(name)
    if len(requested) != 1:
        raise ConfigurationError(
            "Exactly one knot source is required (explicit knots, uniform, chord_length, "
            f"centripetal); got {requested or 'none'}."
        )
    return requested[0]


class NonUniformBSplineCurve:
    """
    B-spline curve of arbitrary degree over an explicit or derived knot vector.

    Only the `degree + 1` control points whose basis functions are non-zero
    on the owning knot span take part in an evaluation.
    """

    def __init__(
        self,
        control_points: Any,
        degree: int = 3,
        knots: Optional[KnotVector] = None,
        *,
        uniform: bool = False,
        chord_length: bool = False,
        centripetal: bool = False,
    ):
        if int(degree) != degree or degree < 0:
            raise ConfigurationError(f"B-spline degree must be a non-negative integer; got {degree!r}.")
        if knots is not None and not isinstance(knots, KnotVector):
            raise ConfigurationError(f"`knots` must be a KnotVector; got {type(knots).__name__}.")
        self._degree = int(degree)
        self._strategy = _resolve_strategy(knots, uniform, chord_length, centripetal)
        self._points, self._knots = self._prepare(control_points, knots)

    def _prepare(self, control_points: Any, knots: Optional[KnotVector]) -> tuple[np.ndarray, KnotVector]:
        points = as_point_array(control_points, name="control_points")
        if self._strategy != "explicit":
            knots = KnotVector.from_strategy(self._strategy, points, self._degree)
        knots.require_count(len(points), self._degree)
        lo, hi = knots.domain(self._degree)
        if hi <= lo:
            raise ConfigurationError(
                f"Knot vector {knots!r} yields an empty domain for degree {self._degree}."
            )
        return points, knots

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def knots(self) -> KnotVector:
        return self._knots

    @property
    def knot_strategy(self) -> str:
        return self._strategy

    @property
    def min_parameter(self) -> float:
        return self._knots.logical_knot(self._degree)

    @property
    def max_parameter(self) -> float:
        return self._knots.logical_knot(self._knots.knot_count - self._degree - 1)

    def control_point(self, i: int) -> np.ndarray:
        if i < 0 or i >= len(self._points):
            raise KnotIndexError(f"Control point index {i} out of range [0, {len(self._points)}).")
        return self._points[i].copy()

    def get_geometry(self) -> np.ndarray:
        return self._points.copy()

    def set_geometry(self, points: Any) -> None:
        """Replace all control points; derived knot vectors are rebuilt to match."""
        explicit = self._knots if self._strategy == "explicit" else None
        self._points, self._knots = self._prepare(points, explicit)
        logger.debug(
            "B-spline geometry replaced: %d point(s), %d knot(s).",
            len(self._points),
            self._knots.knot_count,
        )

    def evaluate(self, parameter: float) -> np.ndarray:
        p = as_parameter(parameter)
        lo, hi = self.min_parameter, self.max_parameter
        if not math.isfinite(p) or p < lo or p > hi:
            raise DomainError(f"Parameter {parameter!r} outside [{lo}, {hi}].")

        span = self._knots.find_interval(p)
        last = self._knots.last_logical_index(span)
        first_cp = max(last - self._degree, 0)
        last_cp = min(last, len(self._points) - 1)
        if first_cp > last_cp:
            return np.zeros(self._points.shape[1], dtype=float)

        # Control point c pairs with basis family c + 1.
        indices = range(first_cp, last_cp + 1)
        weights = basis_values(self._knots, self._degree, p, [c + 1 for c in indices])
        return weights @ self._points[first_cp : last_cp + 1]

    def __repr__(self) -> str:
        return (
            f"NonUniformBSplineCurve(degree={self._degree}, points={len(self._points)}, "
            f"knots={self._knots!r})"
        )
