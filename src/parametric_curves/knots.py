"""Knot vectors: distinct ascending values paired with multiplicities."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

import numpy as np

from .errors import ConfigurationError, DomainError, KnotIndexError
from .numeric import EPSILON, as_point_array, is_close


logger = logging.getLogger(__name__)

SUPPORTED_PARAMETERIZATIONS = ("uniform", "chord_length", "centripetal")


def _check_degree(degree: int) -> int:
    if int(degree) != degree or degree < 0:
        raise ConfigurationError(f"`degree` must be a non-negative integer; got {degree!r}.")
    return int(degree)


class KnotVector:
    """
    Immutable knot vector.

    The logical knot sequence repeats `values[j]` `multiplicities[j]` times.
    Values are strictly increasing and every multiplicity is at least one.
    """

    def __init__(self, values: Iterable[float], multiplicities: Iterable[int]):
        vals = np.array(list(values), dtype=float)
        mults = tuple(int(m) for m in multiplicities)
        if vals.ndim != 1:
            raise ConfigurationError(f"Knot values must be one-dimensional; got ndim={vals.ndim}.")
        if len(vals) != len(mults):
            raise ConfigurationError(
                f"Knot values and multiplicities differ in length: {len(vals)} != {len(mults)}."
            )
        if len(vals) == 0:
            raise ConfigurationError("A knot vector needs at least one value.")
        if not np.all(np.isfinite(vals)):
            raise ConfigurationError("Knot values contain non-finite values (NaN/Inf).")
        if any(m < 1 for m in mults):
            raise ConfigurationError(f"Knot multiplicities must be >= 1; got {list(mults)}.")
        if np.any(np.diff(vals) <= 0.0):
            raise ConfigurationError(f"Knot values must be strictly increasing; got {vals.tolist()}.")

        vals.setflags(write=False)
        self._values = vals
        self._multiplicities = mults
        cumulative = np.cumsum(mults)
        cumulative.setflags(write=False)
        self._cumulative = cumulative

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def multiplicities(self) -> tuple[int, ...]:
        return self._multiplicities

    @property
    def knot_count(self) -> int:
        """Total number of logical knots."""
        return int(self._cumulative[-1])

    def logical_knot(self, i: int, offset: int = 0) -> float:
        """Return the value at logical position `i + offset`."""
        position = int(i) + int(offset)
        if position < 0 or position >= self.knot_count:
            raise KnotIndexError(
                f"Logical knot index {position} out of range [0, {self.knot_count})."
            )
        # First cumulative total exceeding `position` owns that logical slot.
        j = int(np.searchsorted(self._cumulative, position, side="right"))
        return float(self._values[j])

    def logical_knots(self) -> np.ndarray:
        return np.repeat(self._values, self._multiplicities)

    def last_logical_index(self, j: int) -> int:
        """Logical position of the last copy of `values[j]`."""
        if j < 0 or j >= len(self._values):
            raise KnotIndexError(f"Distinct knot index {j} out of range [0, {len(self._values)}).")
        return int(self._cumulative[j]) - 1

    def find_interval(self, v: float) -> int:
        """
        Binary search for `j` with `values[j] <= v < values[j + 1]`.

        The last knot value belongs to the final interval.
        """
        v = float(v)
        if len(self._values) < 2:
            raise DomainError("A knot vector with a single distinct value has no intervals.")
        if not np.isfinite(v) or v < self._values[0] or v > self._values[-1]:
            raise DomainError(
                f"Value {v} outside knot range [{self._values[0]}, {self._values[-1]}]."
            )
        lo, hi = 0, len(self._values) - 1
        if v >= self._values[hi]:
            return hi - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self._values[mid] <= v:
                lo = mid
            else:
                hi = mid
        return lo

    def domain(self, degree: int) -> tuple[float, float]:
        """Parameter range of a degree-`degree` curve, excluding phantom knots."""
        degree = _check_degree(degree)
        return (
            self.logical_knot(degree),
            self.logical_knot(self.knot_count - degree - 1),
        )

    def require_count(self, point_count: int, degree: int) -> None:
        required = int(point_count) + int(degree) + 1
        if self.knot_count < required:
            raise ConfigurationError(
                f"Insufficient knots: {point_count} control point(s) of degree {degree} "
                f"need >= {required} logical knots; got {self.knot_count}."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KnotVector):
            return NotImplemented
        return (
            self._multiplicities == other._multiplicities
            and len(self._values) == len(other._values)
            and all(is_close(a, b) for a, b in zip(self._values, other._values))
        )

    def __hash__(self) -> int:
        return hash(self._multiplicities)

    def __repr__(self) -> str:
        return (
            f"KnotVector(values={self._values.tolist()}, "
            f"multiplicities={list(self._multiplicities)})"
        )

    @classmethod
    def from_sequence(cls, knots: Sequence[float], tol: float = EPSILON) -> "KnotVector":
        """Group a non-decreasing logical knot sequence into values and multiplicities."""
        seq = [float(k) for k in knots]
        if not seq:
            raise ConfigurationError("A knot vector needs at least one value.")
        values: list[float] = [seq[0]]
        multiplicities: list[int] = [1]
        for knot in seq[1:]:
            if knot < values[-1] - tol:
                raise ConfigurationError(f"Knot sequence must be non-decreasing; got {seq}.")
            if is_close(knot, values[-1], tol):
                multiplicities[-1] += 1
            else:
                values.append(knot)
                multiplicities.append(1)
        return cls(values, multiplicities)

    @classmethod
    def uniform(cls, point_count: int, degree: int) -> "KnotVector":
        """Distinct integer knots `-degree .. point_count`, multiplicity one."""
        degree = _check_degree(degree)
        if point_count < 1:
            raise ConfigurationError(f"`point_count` must be >= 1; got {point_count}.")
        values = np.arange(-degree, point_count + 1, dtype=float)
        knots = cls(values, [1] * len(values))
        knots.require_count(point_count, degree)
        logger.debug("Built uniform knot vector for %d point(s), degree %d.", point_count, degree)
        return knots

    @classmethod
    def chord_length(cls, points: Any, degree: int) -> "KnotVector":
        """Clamped knots spaced by Euclidean distance between control points."""
        return cls._from_chords(points, degree, exponent=1.0, label="chord-length")

    @classmethod
    def centripetal(cls, points: Any, degree: int) -> "KnotVector":
        """Clamped knots spaced by the square root of the control-point distances."""
        return cls._from_chords(points, degree, exponent=0.5, label="centripetal")

    @classmethod
    def _from_chords(cls, points: Any, degree: int, exponent: float, label: str) -> "KnotVector":
        degree = _check_degree(degree)
        if degree < 1:
            raise ConfigurationError(f"{label} knots require degree >= 1; got {degree}.")
        pts = as_point_array(points, name="points")
        point_count = len(pts)
        if point_count < degree + 1:
            raise ConfigurationError(
                f"{label} knots of degree {degree} need >= {degree + 1} control points; "
                f"got {point_count}."
            )

        chords = np.linalg.norm(np.diff(pts, axis=0), axis=1) ** exponent
        total = float(np.sum(chords))
        if total <= EPSILON:
            raise ConfigurationError(f"{label} knots need control points that are not all coincident.")
        zero_chords = int(np.count_nonzero(chords <= EPSILON))
        if zero_chords:
            logger.warning(
                "%d coincident consecutive control point(s); %s knots will repeat values.",
                zero_chords,
                label,
            )

        params = np.zeros(point_count)
        params[1:] = np.cumsum(chords)
        params[-1] = total

        # Averaged open knots: ends repeated degree + 1 times, interior knots
        # average `degree` consecutive parameters.
        interior = [
            float(np.mean(params[j : j + degree]))
            for j in range(1, point_count - degree)
        ]
        sequence = [0.0] * (degree + 1) + interior + [total] * (degree + 1)
        knots = cls.from_sequence(sequence)
        knots.require_count(point_count, degree)
        logger.debug(
            "Built %s knot vector for %d point(s), degree %d, total parameter length %.6g.",
            label,
            point_count,
            degree,
            total,
        )
        return knots

    @classmethod
    def from_control_points(
        cls,
        points: Any,
        degree: int,
        *,
        uniform: bool = False,
        chord_length: bool = False,
        centripetal: bool = False,
    ) -> "KnotVector":
        """Build knots with exactly one of the uniform/chord-length/centripetal strategies."""
        requested = [
            name
            for name, flag in zip(SUPPORTED_PARAMETERIZATIONS, (uniform, chord_length, centripetal))
            if flag
        ]
        if len(requested) != 1:
            allowed = ", ".join(SUPPORTED_PARAMETERIZATIONS)
            raise ConfigurationError(
                f"Exactly one knot parameterization must be requested ({allowed}); got {requested or 'none'}."
            )
        return cls.from_strategy(requested[0], points, degree)

    @classmethod
    def from_strategy(cls, strategy: str, points: Any, degree: int) -> "KnotVector":
        if strategy == "uniform":
            pts = as_point_array(points, name="points")
            return cls.uniform(len(pts), degree)
        if strategy == "chord_length":
            return cls.chord_length(points, degree)
        if strategy == "centripetal":
            return cls.centripetal(points, degree)
        allowed = ", ".join(SUPPORTED_PARAMETERIZATIONS)
        raise ConfigurationError(f"Unknown knot parameterization: {strategy!r}. Allowed values: {allowed}.")
