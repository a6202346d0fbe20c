"""
Driver Posture Module

Features:
- Landmark input contract (MediaPipe Pose index order, visibility gating)
- Planar angle helpers (three-point angle, tilt from vertical)
- Seat posture classification for side (profile) and front (dashboard) views
- Swappable feedback text and tunable threshold bands
"""
from .landmarks import (
    Landmark,
    LandmarkContractError,
    PoseLandmark,
    REQUIRED_LANDMARK_COUNT,
    coerce_landmarks,
    from_mediapipe,
)
from .geometry import angle_between, vertical_tilt
from .feedback import FEEDBACK_TEXT, feedback_for, feedback_from_config, merge_feedback_table
from .thresholds import Band, PostureThresholds
from .ergonomics import (
    AnalysisResult,
    FrontAnalysis,
    Measurement,
    SideAnalysis,
    Status,
    ViewMode,
    analyze_front,
    analyze_pose,
    analyze_side,
    select_side,
)

__all__ = [
    "Landmark",
    "LandmarkContractError",
    "PoseLandmark",
    "REQUIRED_LANDMARK_COUNT",
    "coerce_landmarks",
    "from_mediapipe",
    "angle_between",
    "vertical_tilt",
    "FEEDBACK_TEXT",
    "feedback_for",
    "feedback_from_config",
    "merge_feedback_table",
    "Band",
    "PostureThresholds",
    "AnalysisResult",
    "FrontAnalysis",
    "Measurement",
    "SideAnalysis",
    "Status",
    "ViewMode",
    "analyze_front",
    "analyze_pose",
    "analyze_side",
    "select_side",
]
