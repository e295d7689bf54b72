"""Common spline contract and helpers shared by every curve family."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np

from .errors import ConfigurationError


class Spline(Protocol):
    """Capability set shared by matrix-form, Bezier and B-spline curves."""

    @property
    def min_parameter(self) -> float:
        ...

    @property
    def max_parameter(self) -> float:
        ...

    def evaluate(self, parameter: float) -> np.ndarray:
        ...

    def get_geometry(self) -> np.ndarray:
        ...

    def set_geometry(self, points: Any) -> None:
        ...


def sample(spline: Spline, num_samples: int) -> np.ndarray:
    """Evaluate `spline` at `num_samples` uniform parameter steps over its domain."""
    if num_samples < 0:
        raise ConfigurationError(f"`num_samples` must be >= 0; got {num_samples}.")
    dim = spline.get_geometry().shape[1]
    if num_samples == 0:
        return np.empty((0, dim), dtype=float)

    params = np.linspace(spline.min_parameter, spline.max_parameter, num_samples)
    result = np.zeros((num_samples, dim), dtype=float)
    for i, p in enumerate(params):
        result[i] = spline.evaluate(float(p))
    return result
