"""
Shared landmark builders.
"""
from typing import Dict, Tuple

import pytest

from driveposture.core import config_loader
from driveposture.pose import PoseLandmark

Point = Tuple[float, float, float]


def make_landmarks(points: Dict[int, Point], count: int = 33):
    """33 MediaPipe-style dicts, invisible except for the given (x, y, visibility) points."""
    landmarks = [{"x": 0.5, "y": 0.5, "visibility": 0.0} for _ in range(count)]
    for index, (x, y, visibility) in points.items():
        landmarks[int(index)] = {"x": x, "y": y, "visibility": visibility}
    return landmarks


def right_profile(**overrides: Point):
    """
    Right-side profile: torso vertical, thigh forward, shin down, arm reaching.
    Override any point by lower-case landmark name.
    """
    points = {
        "nose": (0.5, 0.15, 1.0),
        "right_shoulder": (0.5, 0.2, 1.0),
        "right_elbow": (0.6, 0.4, 1.0),
        "right_wrist": (0.8, 0.4, 1.0),
        "right_hip": (0.5, 0.5, 1.0),
        "right_knee": (0.8, 0.5, 1.0),
        "right_ankle": (0.8, 0.8, 1.0),
        "left_hip": (0.5, 0.5, 0.4),
    }
    points.update(overrides)
    return make_landmarks({PoseLandmark[name.upper()]: p for name, p in points.items()})


@pytest.fixture
def fresh_config(monkeypatch):
    """Isolate the config singleton and environment from other tests."""
    monkeypatch.setattr(config_loader, "_config_instance", None)
    monkeypatch.delenv("DRIVEPOSTURE_CONFIG", raising=False)
    monkeypatch.delenv("DRIVEPOSTURE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DRIVEPOSTURE_VIEW_MODE", raising=False)
    return config_loader
