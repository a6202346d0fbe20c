"""
Driver seat posture classification.

Turns one frame of body landmarks into seat adjustment advice. Two camera
perspectives are supported:

- side: profile view of the driver (back recline, knee bend, hip angle,
  elbow bend, seat height / head clearance)
- front: dashboard-facing view (eye level, arm distance to the wheel)

Every call is independent: no smoothing, no history, no shared state. The
only side effect is reading the wall clock for the result timestamp.
"""
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..core.constants import Constants
from ..core.logger import logger
from .feedback import FEEDBACK_TEXT, feedback_for
from .geometry import angle_between, round_angle, vertical_tilt
from .landmarks import Landmark, PoseLandmark, coerce_landmarks, is_visible
from .thresholds import PostureThresholds


class ViewMode(str, Enum):
    FRONT = "front"
    SIDE = "side"

    @classmethod
    def parse(cls, value: Union["ViewMode", str]) -> "ViewMode":
        """
        Strict conversion; anything but "front"/"side" is an integration error.

        Raises:
            ValueError: unrecognized mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown view mode {value!r}, expected one of {[m.value for m in cls]}"
            ) from None


class Status(str, Enum):
    GOOD = "good"
    TOO_UPRIGHT = "too_upright"
    TOO_RECLINED = "too_reclined"
    TOO_BENT = "too_bent"
    TOO_STRAIGHT = "too_straight"
    TOO_CLOSED = "too_closed"
    TOO_OPEN = "too_open"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    TOO_HIGH_HEAD = "too_high_head"
    TOO_CLOSE = "too_close"
    TOO_FAR = "too_far"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Measurement:
    """
    One classified quantity.

    value is the unrounded number the status was decided on (degrees, or a
    normalized distance for positional checks). angle is the rounded display
    value for angle measurements and None for positional ones. Unknown
    measurements carry value 0.0 / angle 0.
    """

    status: Status
    feedback: str
    value: float = 0.0
    angle: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"status": self.status.value, "feedback": self.feedback}
        if self.angle is not None:
            out["angle"] = self.angle
        return out


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SideAnalysis:
    back: Measurement
    knee: Optional[Measurement]  # None when knee scoring is switched off
    hip: Measurement
    elbow: Measurement
    height: Measurement
    is_right_side: bool
    timestamp: int = field(default_factory=_now_ms)
    mode: ViewMode = ViewMode.SIDE

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"mode": self.mode.value, "back": self.back.to_dict()}
        if self.knee is not None:
            out["knee"] = self.knee.to_dict()
        out.update({
            "hip": self.hip.to_dict(),
            "elbow": self.elbow.to_dict(),
            "height": self.height.to_dict(),
            "isRightSide": self.is_right_side,
            "timestamp": self.timestamp,
        })
        return out


@dataclass(frozen=True)
class FrontAnalysis:
    height: Measurement
    distance: Measurement
    timestamp: int = field(default_factory=_now_ms)
    mode: ViewMode = ViewMode.FRONT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "height": self.height.to_dict(),
            "distance": self.distance.to_dict(),
            "timestamp": self.timestamp,
        }


AnalysisResult = Union[SideAnalysis, FrontAnalysis]
Landmarks = Sequence[Optional[Landmark]]
FeedbackMapping = Mapping[str, Mapping[str, str]]


def _measure(name: str, status: Status, feedback: FeedbackMapping,
             value: float = 0.0, is_angle: bool = True) -> Measurement:
    return Measurement(
        status=status,
        feedback=feedback_for(name, status.value, feedback),
        value=float(value),
        angle=round_angle(value) if is_angle else None,
    )


def _unknown(name: str, feedback: FeedbackMapping) -> Measurement:
    return _measure(name, Status.UNKNOWN, feedback)


# ============================================================================
# Side view
# ============================================================================

def select_side(landmarks: Landmarks, margin: float = Constants.SIDE_SWITCH_MARGIN) -> bool:
    """
    Pick the body side facing the camera. True means the right side.

    Right is the default (camera in the passenger seat of a left-hand-drive
    car sees the driver's right profile); switch to left only when the left
    hip is tracked with clearly higher confidence.
    """
    left_hip = landmarks[PoseLandmark.LEFT_HIP]
    right_hip = landmarks[PoseLandmark.RIGHT_HIP]
    left_vis = left_hip.visibility if left_hip is not None else 0.0
    right_vis = right_hip.visibility if right_hip is not None else 0.0
    return not left_vis > right_vis + margin


def analyze_side(landmarks: Landmarks,
                 thresholds: PostureThresholds,
                 feedback: FeedbackMapping,
                 include_knee: bool = True) -> Optional[SideAnalysis]:
    """
    Classify a profile view. Returns None when shoulder, hip or knee of the
    selected side is not visible enough to analyze.
    """
    is_right = select_side(landmarks, thresholds.side_switch_margin)
    if is_right:
        shoulder = landmarks[PoseLandmark.RIGHT_SHOULDER]
        elbow = landmarks[PoseLandmark.RIGHT_ELBOW]
        wrist = landmarks[PoseLandmark.RIGHT_WRIST]
        hip = landmarks[PoseLandmark.RIGHT_HIP]
        knee = landmarks[PoseLandmark.RIGHT_KNEE]
        ankle = landmarks[PoseLandmark.RIGHT_ANKLE]
    else:
        shoulder = landmarks[PoseLandmark.LEFT_SHOULDER]
        elbow = landmarks[PoseLandmark.LEFT_ELBOW]
        wrist = landmarks[PoseLandmark.LEFT_WRIST]
        hip = landmarks[PoseLandmark.LEFT_HIP]
        knee = landmarks[PoseLandmark.LEFT_KNEE]
        ankle = landmarks[PoseLandmark.LEFT_ANKLE]
    nose = landmarks[PoseLandmark.NOSE]

    min_vis = thresholds.min_visibility
    if not (is_visible(shoulder, min_vis) and is_visible(hip, min_vis) and is_visible(knee, min_vis)):
        logger.debug("Side view skipped: %s shoulder/hip/knee not visible enough",
                     "right" if is_right else "left")
        return None

    # 1. Torso recline against vertical
    back_angle = vertical_tilt(shoulder, hip)
    back_status = Status(thresholds.back.classify(
        back_angle, Status.TOO_UPRIGHT.value, Status.TOO_RECLINED.value))
    back = _measure("back", back_status, feedback, back_angle)

    # 2. Knee bend, optional
    knee_m: Optional[Measurement] = None
    if include_knee:
        if is_visible(ankle, min_vis):
            knee_angle = angle_between(hip, knee, ankle)
            knee_status = Status(thresholds.knee.classify(
                knee_angle, Status.TOO_BENT.value, Status.TOO_STRAIGHT.value))
            knee_m = _measure("knee", knee_status, feedback, knee_angle)
        else:
            knee_m = _unknown("knee", feedback)

    # 3. Torso vs thigh
    hip_angle = angle_between(shoulder, hip, knee)
    hip_status = Status(thresholds.hip.classify(
        hip_angle, Status.TOO_CLOSED.value, Status.TOO_OPEN.value))
    hip_m = _measure("hip", hip_status, feedback, hip_angle)

    # 4. Elbow bend (reach to the wheel)
    if is_visible(elbow, min_vis) and is_visible(wrist, min_vis):
        elbow_angle = angle_between(shoulder, elbow, wrist)
        elbow_status = Status(thresholds.elbow.classify(
            elbow_angle, Status.TOO_BENT.value, Status.TOO_STRAIGHT.value))
        elbow_m = _measure("elbow", elbow_status, feedback, elbow_angle)
    else:
        elbow_m = _unknown("elbow", feedback)

    # 5. Seat height: positive diff means hip sits lower than knee
    height_diff = hip.y - knee.y
    height_status = Status.TOO_HIGH if height_diff < thresholds.hip_above_knee_margin else Status.GOOD
    height_value = height_diff
    if is_visible(nose, min_vis) and nose.y < thresholds.head_clearance_y:
        height_status = Status.TOO_HIGH_HEAD
        height_value = nose.y
    height = _measure("height", height_status, feedback, height_value, is_angle=False)

    logger.debug("Side view (%s): back=%.1f hip=%.1f height=%s",
                 "right" if is_right else "left", back_angle, hip_angle, height_status.value)

    return SideAnalysis(
        back=back,
        knee=knee_m,
        hip=hip_m,
        elbow=elbow_m,
        height=height,
        is_right_side=is_right,
    )


# ============================================================================
# Front view
# ============================================================================

def _arm_angles(landmarks: Landmarks, min_vis: float) -> List[float]:
    arms = (
        (PoseLandmark.LEFT_SHOULDER, PoseLandmark.LEFT_ELBOW, PoseLandmark.LEFT_WRIST),
        (PoseLandmark.RIGHT_SHOULDER, PoseLandmark.RIGHT_ELBOW, PoseLandmark.RIGHT_WRIST),
    )
    angles = []
    for shoulder_idx, elbow_idx, wrist_idx in arms:
        shoulder, elbow, wrist = landmarks[shoulder_idx], landmarks[elbow_idx], landmarks[wrist_idx]
        if all(is_visible(p, min_vis) for p in (shoulder, elbow, wrist)):
            angles.append(angle_between(shoulder, elbow, wrist))
    return angles


def analyze_front(landmarks: Landmarks,
                  thresholds: PostureThresholds,
                  feedback: FeedbackMapping) -> Optional[FrontAnalysis]:
    """
    Classify a dashboard-facing view. Returns None when neither eye nor any
    arm is visible enough, i.e. nobody usable is in frame.
    """
    min_vis = thresholds.min_visibility
    eyes = [p for p in (landmarks[PoseLandmark.LEFT_EYE], landmarks[PoseLandmark.RIGHT_EYE])
            if is_visible(p, min_vis)]
    arm_angles = _arm_angles(landmarks, min_vis)

    if not eyes and not arm_angles:
        logger.debug("Front view skipped: no eye or arm visible enough")
        return None

    # Eye level: y grows downward, so a large y means the driver sits low
    if eyes:
        eye_y = sum(p.y for p in eyes) / len(eyes)
        height_status = Status(thresholds.eye_level.classify(
            eye_y, Status.TOO_HIGH.value, Status.TOO_LOW.value))
        height = _measure("eye_level", height_status, feedback, eye_y, is_angle=False)
    else:
        height = _measure("eye_level", Status.UNKNOWN, feedback, is_angle=False)

    if arm_angles:
        arm_angle = sum(arm_angles) / len(arm_angles)
        distance_status = Status(thresholds.arm.classify(
            arm_angle, Status.TOO_CLOSE.value, Status.TOO_FAR.value))
        distance = _measure("distance", distance_status, feedback, arm_angle)
    else:
        distance = _unknown("distance", feedback)

    logger.debug("Front view: eye_level=%s distance=%s (%d arm(s))",
                 height.status.value, distance.status.value, len(arm_angles))

    return FrontAnalysis(height=height, distance=distance)


# ============================================================================
# Entry point
# ============================================================================

def analyze_pose(landmarks: Optional[Sequence[Any]],
                 mode: Union[ViewMode, str] = Constants.DEFAULT_VIEW_MODE,
                 thresholds: Optional[PostureThresholds] = None,
                 feedback: Optional[FeedbackMapping] = None,
                 include_knee: bool = True) -> Optional[AnalysisResult]:
    """
    Analyze one frame of driver landmarks.

    Args:
        landmarks: MediaPipe-ordered landmark sequence (at least 29 entries),
            or None when the pose model found nobody
        mode: "side" (default) or "front"
        thresholds: Cutoffs to classify with (default PostureThresholds())
        feedback: (measurement, status) -> text table (default FEEDBACK_TEXT)
        include_knee: Score knee bend in side view. Knee advice is still under
            product review; pass False to leave it out of the result.

    Returns:
        SideAnalysis or FrontAnalysis, or None when the frame cannot be analyzed

    Raises:
        ValueError: unknown view mode
        LandmarkContractError: landmark sequence too short or malformed
    """
    view = ViewMode.parse(mode)
    if landmarks is None:
        return None

    points = coerce_landmarks(landmarks)
    thresholds = thresholds if thresholds is not None else PostureThresholds()
    feedback = feedback if feedback is not None else FEEDBACK_TEXT

    if view is ViewMode.FRONT:
        return analyze_front(points, thresholds, feedback)
    return analyze_side(points, thresholds, feedback, include_knee=include_knee)
