"""
Driver seat posture analysis from 2D body landmarks.
"""
from .pose import (
    AnalysisResult,
    FrontAnalysis,
    LandmarkContractError,
    Measurement,
    PostureThresholds,
    SideAnalysis,
    Status,
    ViewMode,
    analyze_pose,
    angle_between,
    vertical_tilt,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "FrontAnalysis",
    "LandmarkContractError",
    "Measurement",
    "PostureThresholds",
    "SideAnalysis",
    "Status",
    "ViewMode",
    "analyze_pose",
    "angle_between",
    "vertical_tilt",
]
