"""Strategies that cut flat control geometry into 4-row segments."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import ConfigurationError
from .numeric import as_point_array


class LastSharedWindow:
    """
    Consecutive segments share only their boundary row.

    Layout: P1 [out in] P2 [out in] P3 ... Pn, i.e. segment k holds input rows
    3k .. 3k+3. Used by Hermite (points and tangents) and cubic Bezier curves.
    """

    name = "last_shared"
    new_rows = slice(1, 4)

    def segment_count(self, length: int) -> int:
        if length < 4 or (length - 4) % 3 != 0:
            raise ConfigurationError(
                f"Last-shared geometry needs 4 + 3k rows; got {length}."
            )
        return 1 + (length - 4) // 3

    def split(self, points: Any) -> np.ndarray:
        pts = as_point_array(points, name="geometry")
        count = self.segment_count(len(pts))
        return np.stack([pts[3 * k : 3 * k + 4] for k in range(count)])

    def join(self, segments: np.ndarray) -> np.ndarray:
        return _join(segments, self.new_rows)


class ThreeSharedWindow:
    """
    Consecutive segments share three rows; the window slides by one point.

    Used by uniform B-spline and Catmull-Rom curves.
    """

    name = "three_shared"
    new_rows = slice(3, 4)

    def segment_count(self, length: int) -> int:
        if length < 4:
            raise ConfigurationError(f"Three-shared geometry needs >= 4 rows; got {length}.")
        return length - 3

    def split(self, points: Any) -> np.ndarray:
        pts = as_point_array(points, name="geometry")
        count = self.segment_count(len(pts))
        return np.stack([pts[k : k + 4] for k in range(count)])

    def join(self, segments: np.ndarray) -> np.ndarray:
        return _join(segments, self.new_rows)


def _join(segments: np.ndarray, new_rows: slice) -> np.ndarray:
    segments = np.asarray(segments, dtype=float)
    if segments.ndim != 3 or segments.shape[0] == 0 or segments.shape[1] != 4:
        raise ConfigurationError(f"Segments must have shape (S, 4, D); got {segments.shape}.")
    rows = [segments[0]]
    for segment in segments[1:]:
        rows.append(segment[new_rows])
    return np.concatenate(rows, axis=0)
