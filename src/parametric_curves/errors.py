"""Error taxonomy shared by knot vectors, basis evaluators and splines."""

from __future__ import annotations


class SplineError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SplineError, ValueError):
    """Invalid construction arguments (degree, knots, geometry, strategy)."""


class DomainError(SplineError, ValueError):
    """Evaluation outside the parameter domain or before geometry is set."""


class KnotIndexError(SplineError, IndexError):
    """Out-of-range logical knot or control-point index."""
