"""Arbitrary-degree Bezier curves driven by cached Bernstein polynomials."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

import numpy as np

from .bernstein import create_bernstein
from .errors import ConfigurationError, DomainError, KnotIndexError
from .numeric import as_parameter, as_point_array


logger = logging.getLogger(__name__)


class GeneralBezierCurve:
    """
    Bezier curve of any positive degree on the parameter range [0, 1].

    Holds exactly `degree + 1` control points. Changing the degree rebuilds
    the Bernstein cache, so do it before sharing the curve across threads.
    """

    def __init__(self, degree: int, control_points: Any):
        degree = self._check_degree(degree)
        points = self._check_points(control_points, degree)
        self._degree = degree
        self._points = points
        self._bernstein = self._build_cache(degree)

    @staticmethod
    def _check_degree(degree: int) -> int:
        if int(degree) != degree or degree < 1:
            raise ConfigurationError(f"Bezier degree must be a positive integer; got {degree!r}.")
        return int(degree)

    @staticmethod
    def _check_points(control_points: Any, degree: int) -> np.ndarray:
        points = as_point_array(control_points, name="control_points")
        if len(points) != degree + 1:
            raise ConfigurationError(
                f"Degree-{degree} Bezier curve needs {degree + 1} control points; got {len(points)}."
            )
        return points

    @staticmethod
    def _build_cache(degree: int) -> list[Callable]:
        logger.debug("Building Bernstein cache for degree %d.", degree)
        return [create_bernstein(degree, i) for i in range(degree + 1)]

    @property
    def degree(self) -> int:
        return self._degree

    @degree.setter
    def degree(self, value: int) -> None:
        degree = self._check_degree(value)
        if len(self._points) != degree + 1:
            raise ConfigurationError(
                f"Cannot set degree {degree}: curve holds {len(self._points)} control points; "
                "replace the geometry with `set_degree_and_geometry`."
            )
        self._bernstein = self._build_cache(degree)
        self._degree = degree

    def set_degree_and_geometry(self, degree: int, control_points: Any) -> None:
        """Change degree and control points together."""
        degree = self._check_degree(degree)
        points = self._check_points(control_points, degree)
        cache = self._build_cache(degree)
        self._degree, self._points, self._bernstein = degree, points, cache

    @property
    def min_parameter(self) -> float:
        return 0.0

    @property
    def max_parameter(self) -> float:
        return 1.0

    def control_point(self, i: int) -> np.ndarray:
        if i < 0 or i >= len(self._points):
            raise KnotIndexError(f"Control point index {i} out of range [0, {len(self._points)}).")
        return self._points[i].copy()

    def get_geometry(self) -> np.ndarray:
        return self._points.copy()

    def set_geometry(self, points: Any) -> None:
        self._points = self._check_points(points, self._degree)

    def evaluate(self, parameter: float) -> np.ndarray:
        t = as_parameter(parameter)
        if not math.isfinite(t) or t < 0.0 or t > 1.0:
            raise DomainError(f"Bezier parameter must lie in [0, 1]; got {parameter!r}.")
        weights = np.array([b(t) for b in self._bernstein])
        return weights @ self._points

    def __repr__(self) -> str:
        return f"GeneralBezierCurve(degree={self._degree})"
