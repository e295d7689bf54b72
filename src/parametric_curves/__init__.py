"""Parametric curve and spline evaluation: Hermite, Bezier, B-spline, Catmull-Rom."""

from .api import build_spline, build_spline_from_dict, build_spline_from_json, register_builder
from .base import Spline, sample
from .basis import basis, basis_values
from .bernstein import BernsteinPolynomial, create_bernstein
from .bezier import GeneralBezierCurve
from .bspline import NonUniformBSplineCurve
from .config import SplineConfig
from .errors import ConfigurationError, DomainError, KnotIndexError, SplineError
from .knots import KnotVector
from .matrix_form import MatrixFormSpline, SplineKind
from .numeric import binomial, factorial, is_close
from .windowing import LastSharedWindow, ThreeSharedWindow

__all__ = [
    "basis",
    "basis_values",
    "BernsteinPolynomial",
    "binomial",
    "build_spline",
    "build_spline_from_dict",
    "build_spline_from_json",
    "ConfigurationError",
    "create_bernstein",
    "DomainError",
    "factorial",
    "GeneralBezierCurve",
    "is_close",
    "KnotIndexError",
    "KnotVector",
    "LastSharedWindow",
    "MatrixFormSpline",
    "NonUniformBSplineCurve",
    "register_builder",
    "sample",
    "Spline",
    "SplineConfig",
    "SplineError",
    "SplineKind",
    "ThreeSharedWindow",
]
