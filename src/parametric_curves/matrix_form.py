"""Cubic splines evaluated as [t^3, t^2, t, 1] @ M @ G per segment."""

from __future__ import annotations

from enum import Enum
import logging
import math
from typing import Any, Optional, Union

import numpy as np

from .errors import ConfigurationError, DomainError
from .numeric import as_parameter
from .windowing import LastSharedWindow, ThreeSharedWindow


logger = logging.getLogger(__name__)

Windowing = Union[LastSharedWindow, ThreeSharedWindow]


class SplineKind(Enum):
    HERMITE = "hermite"
    BEZIER = "bezier"
    UNIFORM_BSPLINE = "uniform_bspline"
    CATMULL_ROM = "catmull_rom"

    @property
    def basis_matrix(self) -> np.ndarray:
        return _BASIS_MATRICES[self]

    @property
    def windowing(self) -> Windowing:
        return _WINDOWING[self]


def _frozen(rows: list[list[float]], scale: float = 1.0) -> np.ndarray:
    matrix = np.array(rows, dtype=float) * scale
    matrix.setflags(write=False)
    return matrix


# Rows multiply (t^3, t^2, t, 1); columns follow the segment's row order.
_BASIS_MATRICES: dict[SplineKind, np.ndarray] = {
    # Segment rows: P1, tangent out of P1, tangent into P2, P2.
    SplineKind.HERMITE: _frozen(
        [
            [2.0, 1.0, 1.0, -2.0],
            [-3.0, -2.0, -1.0, 3.0],
            [0.0, 1.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
        ]
    ),
    SplineKind.BEZIER: _frozen(
        [
            [-1.0, 3.0, -3.0, 1.0],
            [3.0, -6.0, 3.0, 0.0],
            [-3.0, 3.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
        ]
    ),
    SplineKind.UNIFORM_BSPLINE: _frozen(
        [
            [-1.0, 3.0, -3.0, 1.0],
            [3.0, -6.0, 3.0, 0.0],
            [-3.0, 0.0, 3.0, 0.0],
            [1.0, 4.0, 1.0, 0.0],
        ],
        scale=1.0 / 6.0,
    ),
    SplineKind.CATMULL_ROM: _frozen(
        [
            [-1.0, 3.0, -3.0, 1.0],
            [2.0, -5.0, 4.0, -1.0],
            [-1.0, 0.0, 1.0, 0.0],
            [0.0, 2.0, 0.0, 0.0],
        ],
        scale=0.5,
    ),
}

_WINDOWING: dict[SplineKind, Windowing] = {
    SplineKind.HERMITE: LastSharedWindow(),
    SplineKind.BEZIER: LastSharedWindow(),
    SplineKind.UNIFORM_BSPLINE: ThreeSharedWindow(),
    SplineKind.CATMULL_ROM: ThreeSharedWindow(),
}


class MatrixFormSpline:
    """
    Piecewise cubic spline driven by a fixed basis matrix and a windowing strategy.

    The parameter domain is [0, segment_count]; segment k covers [k, k + 1].
    """

    def __init__(self, kind: Union[SplineKind, str], geometry: Optional[Any] = None):
        try:
            self.kind = SplineKind(kind)
        except ValueError as exc:
            allowed = ", ".join(k.value for k in SplineKind)
            raise ConfigurationError(
                f"Unknown matrix-form spline kind: {kind!r}. Allowed values: {allowed}."
            ) from exc
        self._segments: Optional[np.ndarray] = None
        if geometry is not None:
            self.set_geometry(geometry)

    @classmethod
    def hermite(cls, geometry: Any) -> "MatrixFormSpline":
        """Geometry layout: P1, out1, in2, P2, out2, in3, P3, ..."""
        return cls(SplineKind.HERMITE, geometry)

    @classmethod
    def bezier(cls, geometry: Any) -> "MatrixFormSpline":
        return cls(SplineKind.BEZIER, geometry)

    @classmethod
    def uniform_bspline(cls, geometry: Any) -> "MatrixFormSpline":
        return cls(SplineKind.UNIFORM_BSPLINE, geometry)

    @classmethod
    def catmull_rom(cls, geometry: Any) -> "MatrixFormSpline":
        return cls(SplineKind.CATMULL_ROM, geometry)

    @property
    def basis_matrix(self) -> np.ndarray:
        return self.kind.basis_matrix

    @property
    def segment_count(self) -> int:
        if self._segments is None:
            return 0
        return int(self._segments.shape[0])

    @property
    def min_parameter(self) -> float:
        return 0.0

    @property
    def max_parameter(self) -> float:
        return float(self.segment_count)

    def set_geometry(self, points: Any) -> None:
        segments = self.kind.windowing.split(points)
        segments.setflags(write=False)
        self._segments = segments
        logger.debug(
            "%s spline geometry set: %d segment(s).", self.kind.value, self.segment_count
        )

    def get_geometry(self) -> np.ndarray:
        if self._segments is None:
            raise DomainError(f"No geometry set on {self.kind.value} spline.")
        return self.kind.windowing.join(self._segments)

    def _locate(self, parameter: float) -> tuple[int, float]:
        if self._segments is None:
            raise DomainError(f"Cannot evaluate {self.kind.value} spline before geometry is set.")
        p = as_parameter(parameter)
        if not math.isfinite(p):
            raise DomainError(f"Parameter must be finite; got {parameter!r}.")
        k = math.floor(p)
        t = p - k
        if k == self.segment_count and t == 0.0:
            k, t = k - 1, 1.0
        if k < 0 or k >= self.segment_count:
            raise DomainError(
                f"Parameter {p} outside [{self.min_parameter}, {self.max_parameter}]."
            )
        return k, t

    def evaluate(self, parameter: float) -> np.ndarray:
        k, t = self._locate(parameter)
        powers = np.array([t**3, t**2, t, 1.0])
        return powers @ self.basis_matrix @ self._segments[k]

    def coefficient_matrix(self) -> np.ndarray:
        """
        Polynomial coefficients per segment, shape (S, 4, D).

        Rows hold the cubic, quadratic, linear and constant coefficients of
        each coordinate axis.
        """
        if self._segments is None:
            raise DomainError(f"No geometry set on {self.kind.value} spline.")
        return np.einsum("ij,sjd->sid", self.basis_matrix, self._segments)

    def __repr__(self) -> str:
        return f"MatrixFormSpline(kind={self.kind.value!r}, segments={self.segment_count})"
