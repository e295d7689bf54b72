"""Public construction API: build spline instances from configs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from .base import Spline
from .bezier import GeneralBezierCurve
from .bspline import NonUniformBSplineCurve
from .config import MATRIX_FORM_KINDS, SplineConfig
from .errors import ConfigurationError
from .knots import KnotVector
from .matrix_form import MatrixFormSpline


logger = logging.getLogger(__name__)

Builder = Callable[[SplineConfig], Spline]


def _build_matrix_form(config: SplineConfig) -> Spline:
    return MatrixFormSpline(config.kind, config.control_points)


def _build_general_bezier(config: SplineConfig) -> Spline:
    return GeneralBezierCurve(config.degree, config.control_points)


def _build_nonuniform_bspline(config: SplineConfig) -> Spline:
    strategy = config.knot_strategy
    if strategy == "explicit":
        knots = KnotVector(config.knot_values or [], config.knot_multiplicities or [])
        return NonUniformBSplineCurve(config.control_points, config.degree, knots)
    return NonUniformBSplineCurve(
        config.control_points,
        config.degree,
        uniform=strategy == "uniform",
        chord_length=strategy == "chord_length",
        centripetal=strategy == "centripetal",
    )


BUILDERS: dict[str, Builder] = {
    **{kind: _build_matrix_form for kind in MATRIX_FORM_KINDS},
    "general_bezier": _build_general_bezier,
    "nonuniform_bspline": _build_nonuniform_bspline,
}


def register_builder(kind: str, builder: Builder) -> None:
    """Register or override the builder used for a curve kind."""
    BUILDERS[kind] = builder


def build_spline(config: SplineConfig) -> Spline:
    """Build an immutable-by-convention spline instance from a config."""
    builder = BUILDERS.get(config.kind)
    if builder is None:
        allowed = ", ".join(sorted(BUILDERS))
        raise ConfigurationError(f"Unknown spline kind: {config.kind!r}. Allowed values: {allowed}.")
    spline = builder(config)
    logger.debug("Built %s spline with %d control row(s).", config.kind, len(config.control_points))
    return spline


def build_spline_from_dict(payload: dict[str, Any]) -> Spline:
    return build_spline(SplineConfig.from_dict(payload))


def build_spline_from_json(input_path: Path) -> Spline:
    return build_spline(SplineConfig.from_json(input_path))
