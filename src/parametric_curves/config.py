"""Configuration model describing how to build a spline instance."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigurationError


MATRIX_FORM_KINDS = ("hermite", "bezier", "uniform_bspline", "catmull_rom")
SUPPORTED_KINDS = MATRIX_FORM_KINDS + ("general_bezier", "nonuniform_bspline")
SUPPORTED_KNOT_STRATEGIES = ("explicit", "uniform", "chord_length", "centripetal")


def _validate_choice(field_name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        allowed_str = ", ".join(allowed)
        raise ConfigurationError(f"Invalid `{field_name}`: {value!r}. Allowed values: {allowed_str}.")


def _float_rows(rows: Any) -> list[list[float]]:
    try:
        return [[float(v) for v in row] for row in rows]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"`control_points` must be a list of numeric rows; {exc}") from exc


@dataclass
class SplineConfig:
    """Curve kind, control geometry and knot selection for one spline."""

    kind: str
    control_points: list[list[float]] = field(default_factory=list)
    degree: int = 3  # general_bezier / nonuniform_bspline only.
    knot_strategy: Optional[str] = None  # explicit | uniform | chord_length | centripetal.
    knot_values: Optional[list[float]] = None
    knot_multiplicities: Optional[list[int]] = None

    def __post_init__(self) -> None:
        _validate_choice("kind", self.kind, SUPPORTED_KINDS)
        self.control_points = _float_rows(self.control_points)
        if not self.control_points:
            raise ConfigurationError("`control_points` must not be empty.")
        if self.degree < 0:
            raise ConfigurationError("`degree` must be >= 0.")

        if self.kind == "nonuniform_bspline":
            if self.knot_strategy is None:
                raise ConfigurationError("`knot_strategy` is required for nonuniform_bspline.")
            _validate_choice("knot_strategy", self.knot_strategy, SUPPORTED_KNOT_STRATEGIES)
        elif self.knot_strategy is not None:
            raise ConfigurationError(f"`knot_strategy` only applies to nonuniform_bspline, not {self.kind}.")

        has_knots = self.knot_values is not None or self.knot_multiplicities is not None
        if self.knot_strategy == "explicit":
            if self.knot_values is None or self.knot_multiplicities is None:
                raise ConfigurationError(
                    "`knot_values` and `knot_multiplicities` are required for explicit knots."
                )
            self.knot_values = [float(v) for v in self.knot_values]
            self.knot_multiplicities = [int(m) for m in self.knot_multiplicities]
        elif has_knots:
            raise ConfigurationError("Knot lists are only accepted with `knot_strategy='explicit'`.")

    @classmethod
    def bezier(cls, control_points: list[list[float]]) -> "SplineConfig":
        """Preset for a general-degree Bezier curve; degree follows the point count."""
        return cls(
            kind="general_bezier",
            control_points=control_points,
            degree=len(control_points) - 1,
        )

    @classmethod
    def nonuniform_bspline(
        cls,
        control_points: list[list[float]],
        degree: int = 3,
        knot_strategy: str = "uniform",
        knot_values: Optional[list[float]] = None,
        knot_multiplicities: Optional[list[int]] = None,
    ) -> "SplineConfig":
        return cls(
            kind="nonuniform_bspline",
            control_points=control_points,
            degree=degree,
            knot_strategy=knot_strategy,
            knot_values=knot_values,
            knot_multiplicities=knot_multiplicities,
        )

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        return {k: v for k, v in payload.items() if v is not None}

    def to_json(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SplineConfig":
        if "kind" not in payload:
            raise ConfigurationError("Spline config payload is missing `kind`.")
        known = {"kind", "control_points", "degree", "knot_strategy", "knot_values", "knot_multiplicities"}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigurationError(f"Unknown spline config field(s): {', '.join(unknown)}.")
        return cls(**payload)

    @classmethod
    def from_json(cls, input_path: Path) -> "SplineConfig":
        payload = json.loads(Path(input_path).read_text())
        return cls.from_dict(payload)
