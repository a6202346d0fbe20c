"""
Threshold bands for the posture measurements.

Every cutoff the classifier compares against lives here so it can be tuned
from system_config.json without touching the control flow. The visibility
threshold and side-switch margin are fixed design constants and are not
configurable.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Tuple

from ..core.constants import Constants


@dataclass(frozen=True)
class Band:
    """Closed acceptable range [low, high]; values outside fall below or above."""

    low: float
    high: float

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"Band low {self.low} is above high {self.high}")

    def classify(self, value: float, below: str, above: str, inside: str = "good") -> str:
        if value < self.low:
            return below
        if value > self.high:
            return above
        return inside

    @classmethod
    def of(cls, bounds: Tuple[float, float]) -> "Band":
        low, high = bounds
        return cls(float(low), float(high))


@dataclass(frozen=True)
class PostureThresholds:
    """All tunable cutoffs, defaults taken from Constants."""

    back: Band = field(default_factory=lambda: Band.of(Constants.BACK_ANGLE_RANGE))
    knee: Band = field(default_factory=lambda: Band.of(Constants.KNEE_ANGLE_RANGE))
    hip: Band = field(default_factory=lambda: Band.of(Constants.HIP_ANGLE_RANGE))
    elbow: Band = field(default_factory=lambda: Band.of(Constants.ELBOW_ANGLE_RANGE))
    eye_level: Band = field(default_factory=lambda: Band.of(Constants.EYE_LEVEL_RANGE))
    arm: Band = field(default_factory=lambda: Band.of(Constants.ARM_ANGLE_RANGE))
    hip_above_knee_margin: float = Constants.HIP_ABOVE_KNEE_MARGIN
    head_clearance_y: float = Constants.HEAD_CLEARANCE_Y

    # Fixed design constants, not read by from_mapping()
    min_visibility: float = Constants.MIN_VISIBILITY
    side_switch_margin: float = Constants.SIDE_SWITCH_MARGIN

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PostureThresholds":
        """
        Build thresholds from a plain mapping such as
        {"back": [5, 30], "head_clearance_y": 0.1}.

        Raises:
            ValueError: unknown key, fixed design constant, or malformed band
        """
        tunable = {f.name: f for f in fields(cls)}
        tunable.pop("min_visibility")
        tunable.pop("side_switch_margin")

        updates: Dict[str, Any] = {}
        for key, value in values.items():
            if key not in tunable:
                raise ValueError(f"Unknown or fixed posture threshold: {key}")
            if tunable[key].type in (Band, "Band"):
                try:
                    updates[key] = Band.of(tuple(value))
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Threshold {key} must be a [low, high] pair: {value!r}") from e
            else:
                try:
                    updates[key] = float(value)
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Threshold {key} must be a number: {value!r}") from e
        return replace(cls(), **updates)

    @classmethod
    def from_config(cls, config) -> "PostureThresholds":
        """Build thresholds from the `ergonomics.thresholds` section of a SystemConfig."""
        ergonomics = config.get("ergonomics")
        section = ergonomics.get("thresholds") if ergonomics is not None else None
        if section is None:
            return cls()
        return cls.from_mapping(section.to_dict())
