"""
Body landmark input contract.

Landmarks arrive as an indexable sequence in MediaPipe Pose order (33 points,
normalized coordinates, origin top-left, y growing downward). Both view modes
read the same index table; only the subset they read differs.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from numbers import Real
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np


class PoseLandmark(IntEnum):
    """MediaPipe Pose indices referenced by the posture classifier."""

    NOSE = 0
    LEFT_EYE = 2
    RIGHT_EYE = 5
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28


# Highest referenced index + 1
REQUIRED_LANDMARK_COUNT = max(PoseLandmark) + 1


class LandmarkContractError(ValueError):
    """Landmark input does not have the shape the classifier needs."""


@dataclass(frozen=True)
class Landmark:
    """A single 2D landmark in normalized frame coordinates."""

    x: float
    y: float
    visibility: float = 0.0
    z: Optional[float] = None  # carried through, never read


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _number(value: Any, name: str, index: Optional[int], finite: bool = True) -> float:
    where = f" at index {index}" if index is not None else ""
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        raise LandmarkContractError(f"Landmark{where} has non-numeric {name}: {value!r}")
    if finite and not np.isfinite(value):
        raise LandmarkContractError(f"Landmark{where} has non-finite {name}: {value!r}")
    return float(value)


def coerce_landmark(obj: Any, index: Optional[int] = None) -> Optional[Landmark]:
    """
    Normalize one landmark-like value.

    Accepts Landmark instances, attribute objects (MediaPipe NormalizedLandmark)
    and mappings with x/y/visibility keys. None stays None (absent point).
    A missing visibility is read as 0.0, i.e. not visible.

    Raises:
        LandmarkContractError: x or y missing, not numeric or not finite
    """
    if obj is None:
        return None

    x = _number(_field(obj, "x"), "x", index)
    y = _number(_field(obj, "y"), "y", index)
    visibility = _field(obj, "visibility")
    visibility = 0.0 if visibility is None else _number(visibility, "visibility", index, finite=False)
    z = _field(obj, "z")
    z = None if z is None else _number(z, "z", index)
    return Landmark(x=x, y=y, visibility=visibility, z=z)


def coerce_landmarks(landmarks: Sequence[Any]) -> List[Optional[Landmark]]:
    """
    Validate and normalize a landmark sequence.

    Raises:
        LandmarkContractError: the sequence is too short to hold every
            referenced index, or an element is malformed
    """
    try:
        count = len(landmarks)
    except TypeError as e:
        raise LandmarkContractError(
            f"Landmarks must be an indexable sequence, got {type(landmarks).__name__}"
        ) from e

    if count < REQUIRED_LANDMARK_COUNT:
        raise LandmarkContractError(
            f"Expected at least {REQUIRED_LANDMARK_COUNT} landmarks, got {count}"
        )

    return [coerce_landmark(landmarks[i], i) for i in range(count)]


def is_visible(landmark: Optional[Landmark], threshold: float) -> bool:
    """True when the landmark exists and its visibility is strictly above threshold."""
    return landmark is not None and landmark.visibility > threshold


def from_mediapipe(results: Any) -> Optional[List[Landmark]]:
    """
    Convert a MediaPipe Pose `process()` result into a landmark list.

    Returns None when no pose was detected in the frame.
    """
    pose_landmarks = getattr(results, "pose_landmarks", None) if results is not None else None
    if not pose_landmarks:
        return None

    points = getattr(pose_landmarks, "landmark", pose_landmarks)
    return [coerce_landmark(p, i) for i, p in enumerate(points)]
